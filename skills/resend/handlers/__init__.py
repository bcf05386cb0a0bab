"""
Tool handler dispatcher.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..helpers import ToolResult, log_and_format_error, unknown_tool
from .send import send_email

if TYPE_CHECKING:
  from ..client.resend_client import ResendClient
  from ..config import ResendConfig

HANDLERS: dict[str, Any] = {
  "send_email": send_email,
}


async def dispatch_tool(
  tool_name: str,
  args: dict[str, Any],
  config: ResendConfig,
  client: ResendClient,
) -> ToolResult:
  """Dispatch a tool call to the appropriate handler."""
  handler = HANDLERS.get(tool_name)
  if not handler:
    return unknown_tool(tool_name)
  try:
    result: ToolResult = await handler(args, config, client)
    return result
  except Exception as e:
    return log_and_format_error(tool_name, e)
