"""
Tool result type and the error-to-result mapping shared by all handlers.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

log = logging.getLogger("skill.resend.helpers")


# ---------------------------------------------------------------------------
# Tool result
# ---------------------------------------------------------------------------


@dataclass
class ToolResult:
  content: str
  is_error: bool = False


def to_json(value: Any) -> str:
  return json.dumps(value, default=str)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------


class ErrorCategory(str, Enum):
  CONFIG = "CONFIG"
  VALIDATION = "VALIDATION"
  MISSING_SENDER = "MISSING_SENDER"
  ATTACHMENT_NOT_FOUND = "ATTACHMENT_NOT_FOUND"
  ATTACHMENT_READ = "ATTACHMENT_READ"
  PROVIDER = "PROVIDER"
  UNKNOWN_TOOL = "UNKNOWN_TOOL"


class SkillError(Exception):
  """Base class for failures reported back to the caller as tool errors."""

  category: ErrorCategory | None = None


class MissingSenderError(SkillError):
  category = ErrorCategory.MISSING_SENDER


class ProviderError(SkillError):
  category = ErrorCategory.PROVIDER


def error_code(function_name: str, category: str | ErrorCategory | None) -> str:
  prefix = category.value if isinstance(category, ErrorCategory) else (category or "GEN")
  hash_val = sum(ord(c) for c in function_name) % 1000
  return f"{prefix}-ERR-{hash_val:03d}"


def log_and_format_error(
  function_name: str,
  error: Exception,
  category: str | ErrorCategory | None = None,
) -> ToolResult:
  if category is None and isinstance(error, SkillError):
    category = error.category
  code = error_code(function_name, category)

  if isinstance(error, SkillError):
    log.error("[MCP] Error in %s - Code: %s - %s", function_name, code, error)
  else:
    log.exception("[MCP] Unexpected error in %s - Code: %s", function_name, code)

  return ToolResult(content=f"Error: {error}", is_error=True)


def unknown_tool(name: str) -> ToolResult:
  code = error_code(name, ErrorCategory.UNKNOWN_TOOL)
  log.warning("[MCP] Unknown tool requested - Code: %s - %s", code, name)
  return ToolResult(content=f"Unknown tool: {name}", is_error=True)
