"""
Attachment resolution: local files are read and base64-encoded,
remote URLs are handed to the provider untouched.
"""

from __future__ import annotations

import asyncio
import base64
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .helpers import ErrorCategory, SkillError
from .types import ResolvedAttachment

if TYPE_CHECKING:
  from collections.abc import Sequence

  from .types import Attachment

log = logging.getLogger("skill.resend.attachments")


class AttachmentNotFoundError(SkillError):
  category = ErrorCategory.ATTACHMENT_NOT_FOUND


class AttachmentReadError(SkillError):
  category = ErrorCategory.ATTACHMENT_READ


def read_local_attachment(filename: str, local_path: str) -> ResolvedAttachment:
  path = Path(local_path)
  try:
    if not path.exists():
      raise AttachmentNotFoundError(f"Attachment file not found: {local_path}")
    data = path.read_bytes()
  except OSError as e:
    raise AttachmentReadError(f"Failed to read attachment file {local_path}: {e}") from e
  log.debug("Read attachment %s (%d bytes)", filename, len(data))
  return ResolvedAttachment(filename=filename, content=base64.b64encode(data).decode("ascii"))


async def resolve_attachment(attachment: Attachment) -> ResolvedAttachment:
  if attachment.local_path is not None:
    return await asyncio.to_thread(read_local_attachment, attachment.filename, attachment.local_path)
  return ResolvedAttachment(filename=attachment.filename, path=attachment.remote_url)


async def resolve_attachments(attachments: Sequence[Attachment]) -> list[ResolvedAttachment]:
  """Resolve all attachments concurrently. Output order matches input order."""
  if not attachments:
    return []
  return list(await asyncio.gather(*(resolve_attachment(a) for a in attachments)))
