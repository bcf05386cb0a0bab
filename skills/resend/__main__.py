"""
Entry point for the Resend skill subprocess.

Run with: python -m skills.resend [--key KEY] [--sender ADDR] [--reply-to A,B]
          resend-mcp                 (installed console script)

Command-line values override RESEND_API_KEY, SENDER_EMAIL and REPLY_TO_EMAILS.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

logging.basicConfig(
  level=logging.INFO,
  format="[%(name)s] %(levelname)s: %(message)s",
  stream=sys.stderr,
)

log = logging.getLogger("skill.resend")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
  parser = argparse.ArgumentParser(prog="resend-mcp", description="Resend email MCP server (stdio)")
  parser.add_argument("--key", help="Resend API key (overrides RESEND_API_KEY)")
  parser.add_argument("--sender", help="Default sender address (overrides SENDER_EMAIL)")
  parser.add_argument(
    "--reply-to",
    dest="reply_to",
    help="Comma-separated default reply-to addresses (overrides REPLY_TO_EMAILS)",
  )
  return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
  from .config import ConfigError, ResendConfig
  from .server import run_server

  opts = parse_args(argv)
  try:
    config = ResendConfig.from_env(
      api_key=opts.key,
      sender_email=opts.sender,
      reply_to=opts.reply_to,
    )
  except ConfigError as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)

  if not config.sender_email:
    log.info("SENDER_EMAIL not set; every send_email call must provide 'from'")

  try:
    asyncio.run(run_server(config))
  except KeyboardInterrupt:
    pass
  except Exception:
    log.exception("Fatal error running server")
    sys.exit(1)


if __name__ == "__main__":
  main()
