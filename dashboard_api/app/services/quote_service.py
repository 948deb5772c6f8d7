"""
Quote of the day.

Makes a single request to the quotes API.  Any failure (network
error, non‑success status, unexpected payload) is logged and the
fixed fallback quote is returned instead; callers never see an error.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from dashboard_api.app.schemas.integrations import QuoteRead


logger = logging.getLogger(__name__)

FALLBACK_QUOTE = QuoteRead(
    text="The present moment is the only time over which we have dominion.",
    author="Thich Nhat Hanh",
)


class QuoteService:
    """Fetches a random motivational quote."""

    def __init__(
        self,
        url: str,
        timeout: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    async def fetch(self) -> QuoteRead:
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.get(self._url)
                resp.raise_for_status()
                data = resp.json()
            return QuoteRead(text=data["content"], author=data["author"])
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Quote API error: %s", exc)
            return FALLBACK_QUOTE
