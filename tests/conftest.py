from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from skills.resend.client.resend_client import ResendClient
from skills.resend.config import ResendConfig
from skills.resend.types import SendEmailResponse


@pytest.fixture()
def config() -> ResendConfig:
  return ResendConfig(
    api_key="re_test_key",
    sender_email="noreply@x.com",
    reply_to_emails=("support@x.com",),
  )


@pytest.fixture()
def config_without_sender() -> ResendConfig:
  return ResendConfig(api_key="re_test_key")


@pytest.fixture()
def client() -> AsyncMock:
  mock = AsyncMock(spec=ResendClient)
  mock.send_email.return_value = SendEmailResponse(data={"id": "email_123"})
  return mock
