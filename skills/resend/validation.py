"""
Input validation for send_email tool arguments.

The predicates never raise; `parse_send_email_args` raises a single
uniform ValidationError when any structural check fails.
"""

from __future__ import annotations

from typing import Any

from .helpers import ErrorCategory, SkillError
from .types import Attachment, SendEmailArgs

INVALID_ARGS_MESSAGE = "Invalid arguments for send_email tool."


class ValidationError(SkillError):
  category = ErrorCategory.VALIDATION


def is_attachment(value: Any) -> bool:
  """True when `value` has a string filename and exactly one of localPath/remoteUrl."""
  if not isinstance(value, dict):
    return False
  if not isinstance(value.get("filename"), str):
    return False
  has_local = isinstance(value.get("localPath"), str)
  has_remote = isinstance(value.get("remoteUrl"), str)
  return has_local != has_remote


def is_email_args(value: Any) -> bool:
  """True when `value` carries the required string fields and well-formed attachments."""
  if not isinstance(value, dict):
    return False
  for key in ("to", "subject", "content"):
    if not isinstance(value.get(key), str):
      return False
  if "attachments" in value:
    attachments = value["attachments"]
    if not isinstance(attachments, list):
      return False
    if not all(is_attachment(a) for a in attachments):
      return False
  return True


def opt_string(args: dict[str, Any], key: str) -> str | None:
  """Read an optional string from args."""
  v = args.get(key)
  return v if isinstance(v, str) else None


def opt_string_list(args: dict[str, Any], key: str) -> list[str] | None:
  """Read an optional list of strings from args."""
  v = args.get(key)
  if isinstance(v, list) and all(isinstance(item, str) for item in v):
    return list(v)
  return None


def parse_send_email_args(args: Any) -> SendEmailArgs:
  """Narrow untyped tool arguments into SendEmailArgs."""
  if not is_email_args(args):
    raise ValidationError(INVALID_ARGS_MESSAGE)

  attachments = None
  if "attachments" in args:
    attachments = [
      Attachment(
        filename=a["filename"],
        local_path=opt_string(a, "localPath"),
        remote_url=opt_string(a, "remoteUrl"),
      )
      for a in args["attachments"]
    ]

  return SendEmailArgs(
    to=args["to"],
    subject=args["subject"],
    content=args["content"],
    from_=opt_string(args, "from"),
    reply_to=opt_string_list(args, "replyTo"),
    scheduled_at=opt_string(args, "scheduledAt"),
    attachments=attachments,
  )
