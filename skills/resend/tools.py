"""
Resend tool definitions (1 tool).
"""

from __future__ import annotations

from mcp.types import Tool

SEND_EMAIL_TOOL = Tool(
  name="send_email",
  description=(
    "Sends an email using the Resend API. "
    "Supports plain text content, attachments and optional scheduling. "
    "Can specify custom sender and reply-to addresses if not configured via environment variables."
  ),
  inputSchema={
    "type": "object",
    "properties": {
      "to": {
        "type": "string",
        "format": "email",
        "description": "Recipient email address",
      },
      "subject": {"type": "string", "description": "Email subject line"},
      "content": {"type": "string", "description": "Plain text email content"},
      "from": {
        "type": "string",
        "format": "email",
        "description": "Sender email address (required if SENDER_EMAIL not set)",
      },
      "replyTo": {
        "type": "array",
        "items": {"type": "string", "format": "email"},
        "description": "Reply-to email addresses (optional if REPLY_TO_EMAILS not set)",
      },
      "scheduledAt": {
        "type": "string",
        "description": (
          "Optional parameter to schedule the email. This uses natural language. "
          "Examples would be 'tomorrow at 10am' or 'in 2 hours' or 'next day at 9am PST' "
          "or 'Friday at 3pm ET'."
        ),
      },
      "attachments": {
        "type": "array",
        "description": "Files to attach. Each needs a filename and exactly one of localPath or remoteUrl.",
        "items": {
          "type": "object",
          "properties": {
            "filename": {"type": "string", "description": "Name shown for the attachment"},
            "localPath": {
              "type": "string",
              "description": "Absolute path of a local file to attach",
            },
            "remoteUrl": {
              "type": "string",
              "description": "URL of a file the provider should fetch and attach",
            },
          },
          "required": ["filename"],
        },
      },
    },
    "required": ["to", "subject", "content"],
  },
)

ALL_TOOLS: list[Tool] = [SEND_EMAIL_TOOL]
