"""
MCP server for the Resend skill.

Uses the official `mcp` Python SDK. Handles tools/list and tools/call
over stdio.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, TextContent, Tool

from . import __version__
from .client.resend_client import ResendClient
from .handlers import dispatch_tool
from .tools import ALL_TOOLS

if TYPE_CHECKING:
  from .config import ResendConfig

log = logging.getLogger("skill.resend.server")


def create_mcp_server(config: ResendConfig, client: ResendClient) -> Server:
  """Create and configure the MCP server with all tool handlers."""
  server = Server("resend-mcp", version=__version__)

  @server.list_tools()
  async def list_tools() -> list[Tool]:
    return ALL_TOOLS

  # Arguments are checked by the handlers so failures keep a uniform message.
  @server.call_tool(validate_input=False)
  async def call_tool(name: str, arguments: dict[str, Any] | None) -> CallToolResult:
    args = arguments or {}
    result = await dispatch_tool(name, args, config, client)
    return CallToolResult(
      content=[TextContent(type="text", text=result.content)],
      isError=result.is_error,
    )

  return server


async def run_server(config: ResendConfig) -> None:
  """Run the MCP server on stdio."""
  async with ResendClient(config.api_key) as client:
    server = create_mcp_server(config, client)
    async with stdio_server() as (read_stream, write_stream):
      log.info("Resend MCP Server running on stdio")
      await server.run(read_stream, write_stream, server.create_initialization_options())
