"""
Async HTTP client for the Resend API.

Uses aiohttp with bearer token auth. One request per send, no retries.
HTTP error responses come back as `SendEmailResponse.error` rather
than being raised, so callers can surface the provider's own payload.
"""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from .. import __version__
from ..types import SendEmailResponse

log = logging.getLogger("skill.resend.client")

BASE_URL = "https://api.resend.com"


class ResendApiError(Exception):
  """Transport-level failure talking to the Resend API."""

  def __init__(self, status: int, message: str):
    self.status = status
    super().__init__(f"Resend API error {status}: {message}")


class ResendClient:
  """Async HTTP client for the Resend API."""

  def __init__(self, api_key: str, base_url: str = BASE_URL) -> None:
    self._api_key = api_key
    self._base_url = base_url
    self._session: aiohttp.ClientSession | None = None

  @property
  def is_connected(self) -> bool:
    return self._session is not None and not self._session.closed

  async def connect(self) -> None:
    """Create the aiohttp session."""
    if self._session and not self._session.closed:
      return
    self._session = aiohttp.ClientSession(
      base_url=self._base_url,
      headers={
        "Authorization": f"Bearer {self._api_key}",
        "Content-Type": "application/json",
        "User-Agent": f"resend-mcp-skill/{__version__}",
      },
    )

  async def close(self) -> None:
    """Close the aiohttp session."""
    if self._session and not self._session.closed:
      await self._session.close()
      self._session = None

  async def __aenter__(self) -> ResendClient:
    await self.connect()
    return self

  async def __aexit__(self, *exc: object) -> None:
    await self.close()

  async def _read_body(self, resp: aiohttp.ClientResponse) -> Any:
    if resp.content_type == "application/json":
      return await resp.json()
    return await resp.text()

  # ------------------------------------------------------------------
  # API methods
  # ------------------------------------------------------------------

  async def send_email(self, payload: dict[str, Any]) -> SendEmailResponse:
    """POST /emails. Returns `data` on 2xx and `error` otherwise."""
    if not self._session:
      raise ResendApiError(0, "Client not connected. Call connect() first.")

    async with self._session.post("/emails", json=payload) as resp:
      body = await self._read_body(resp)

      if resp.status >= 400:
        if isinstance(body, dict):
          error = body
        else:
          error = {"statusCode": resp.status, "message": body or resp.reason or ""}
        log.warning("Resend rejected send (%d): %s", resp.status, error.get("message", ""))
        return SendEmailResponse(error=error)

      if isinstance(body, str):
        body = {"text": body}
      return SendEmailResponse(data=body)
