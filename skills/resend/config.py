"""
Process-wide configuration, read once at startup.

Environment:
  RESEND_API_KEY   required
  SENDER_EMAIL     optional default sender; without it every call must pass `from`
  REPLY_TO_EMAILS  optional comma-separated default reply-to list
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from .helpers import ErrorCategory, SkillError

if TYPE_CHECKING:
  from collections.abc import Mapping


class ConfigError(SkillError):
  category = ErrorCategory.CONFIG


def parse_address_list(raw: str | None) -> tuple[str, ...]:
  """Split a comma-separated address list, trimming entries and dropping blanks."""
  if not raw:
    return ()
  return tuple(part.strip() for part in raw.split(",") if part.strip())


def _clean(value: str | None) -> str | None:
  if value is None:
    return None
  value = value.strip()
  return value or None


class ResendConfig(BaseModel):
  model_config = ConfigDict(frozen=True)

  api_key: str
  sender_email: str | None = None
  reply_to_emails: tuple[str, ...] = ()

  @classmethod
  def from_env(
    cls,
    environ: Mapping[str, str] | None = None,
    *,
    api_key: str | None = None,
    sender_email: str | None = None,
    reply_to: str | None = None,
  ) -> ResendConfig:
    """Build the config from the environment. Explicit arguments win over env values."""
    env = os.environ if environ is None else environ

    key = _clean(api_key) or _clean(env.get("RESEND_API_KEY"))
    if not key:
      raise ConfigError("RESEND_API_KEY environment variable is required")

    sender = _clean(sender_email) or _clean(env.get("SENDER_EMAIL"))
    reply_raw = reply_to if reply_to is not None else env.get("REPLY_TO_EMAILS")

    return cls(
      api_key=key,
      sender_email=sender,
      reply_to_emails=parse_address_list(reply_raw),
    )
