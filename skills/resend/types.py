"""
Typed shapes for the send_email tool.

Wire names (camelCase, `from`) are kept as pydantic aliases so the
models can be built straight from tool arguments.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Attachment(BaseModel):
  """An attachment as requested by the caller. Exactly one source is set."""

  model_config = ConfigDict(frozen=True, populate_by_name=True)

  filename: str
  local_path: str | None = Field(default=None, alias="localPath")
  remote_url: str | None = Field(default=None, alias="remoteUrl")


class ResolvedAttachment(BaseModel):
  """An attachment ready for the provider: inline base64 `content` or a remote `path`."""

  model_config = ConfigDict(frozen=True)

  filename: str
  content: str | None = None
  path: str | None = None

  def to_payload(self) -> dict[str, str]:
    return self.model_dump(exclude_none=True)


class SendEmailArgs(BaseModel):
  model_config = ConfigDict(frozen=True, populate_by_name=True)

  to: str
  subject: str
  content: str
  from_: str | None = Field(default=None, alias="from")
  reply_to: list[str] | None = Field(default=None, alias="replyTo")
  scheduled_at: str | None = Field(default=None, alias="scheduledAt")
  attachments: list[Attachment] | None = None


class SendEmailResponse(BaseModel):
  """Outcome of a provider send: either `data` or `error` is populated."""

  data: Any = None
  error: dict[str, Any] | None = None
