"""HTTP GET with a bounded, fixed-delay retry on transient failures."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import httpx
import structlog

logger = structlog.get_logger()

MAX_RETRIES = 3
RETRY_DELAY_SECONDS = 1.0
DEFAULT_TIMEOUT = 15.0

# Upstream rate limiting is the only status worth retrying
RATE_LIMITED = 429


class RetryingFetcher:
    """Perform one logical GET, retrying on 429 responses and transport errors.

    A retries-remaining counter starts at ``max_retries``, so a request is
    attempted at most ``max_retries + 1`` times. Any other non-2xx status
    raises ``httpx.HTTPStatusError`` straight away. When the budget runs out
    the last failure propagates: ``HTTPStatusError`` for a final 429, or the
    original ``httpx.TransportError``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_DELAY_SECONDS,
        timeout: float = DEFAULT_TIMEOUT,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self._client = client
        self.max_retries = max(0, max_retries)
        self.retry_delay = retry_delay
        self.timeout = timeout
        self._sleep = sleep

    async def get(self, url: str, **options: Any) -> httpx.Response:
        """GET ``url``; ``options`` are passed through to ``AsyncClient.get``."""
        retries_remaining = self.max_retries
        attempt = 0

        while True:
            attempt += 1
            try:
                resp = await self._send(url, options)
            except httpx.TransportError as e:
                if retries_remaining <= 0:
                    raise
                reason = f"{type(e).__name__}: {e}"
            else:
                if resp.is_success:
                    return resp
                if resp.status_code != RATE_LIMITED or retries_remaining <= 0:
                    resp.raise_for_status()
                reason = f"HTTP {resp.status_code}"

            retries_remaining -= 1
            logger.warning(
                "weather_fetch_retry",
                url=url,
                attempt=attempt,
                reason=reason,
                retries_remaining=retries_remaining,
                delay=self.retry_delay,
            )
            await self._sleep(self.retry_delay)

    async def _send(self, url: str, options: dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url, **options)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url, **options)
