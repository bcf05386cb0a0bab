"""
send_email tool handler.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..attachments import resolve_attachments
from ..helpers import MissingSenderError, ProviderError, ToolResult, log_and_format_error, to_json
from ..validation import parse_send_email_args

if TYPE_CHECKING:
  from ..client.resend_client import ResendClient
  from ..config import ResendConfig
  from ..types import ResolvedAttachment, SendEmailArgs

log = logging.getLogger("skill.resend.handlers.send")


def resolve_sender(args: SendEmailArgs, config: ResendConfig) -> str:
  sender = args.from_ or config.sender_email
  if not sender:
    raise MissingSenderError(
      "Sender email must be provided either via args or SENDER_EMAIL environment variable"
    )
  return sender


def build_payload(
  args: SendEmailArgs,
  sender: str,
  config: ResendConfig,
  attachments: list[ResolvedAttachment],
) -> dict[str, Any]:
  """Build the Resend /emails request body from validated args and config defaults."""
  reply_to = args.reply_to if args.reply_to is not None else list(config.reply_to_emails)

  payload: dict[str, Any] = {
    "to": args.to,
    "from": sender,
    "subject": args.subject,
    "text": args.content,
    "reply_to": reply_to,
  }
  if args.scheduled_at is not None:
    payload["scheduled_at"] = args.scheduled_at
  if attachments:
    payload["attachments"] = [a.to_payload() for a in attachments]
  return payload


async def send_email(args: dict[str, Any], config: ResendConfig, client: ResendClient) -> ToolResult:
  try:
    email_args = parse_send_email_args(args)
    sender = resolve_sender(email_args, config)
    attachments = await resolve_attachments(email_args.attachments or [])
    payload = build_payload(email_args, sender, config, attachments)

    log.info(
      "Sending email to %s (%d attachment(s)%s)",
      email_args.to,
      len(attachments),
      ", scheduled" if email_args.scheduled_at else "",
    )
    response = await client.send_email(payload)

    if response.error is not None:
      raise ProviderError(f"Failed to send email: {to_json(response.error)}")

    return ToolResult(content=f"Email sent successfully! {to_json(response.data)}")
  except Exception as e:
    return log_and_format_error("send_email", e)
