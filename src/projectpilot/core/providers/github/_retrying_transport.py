"""httpx async transport wrapper with retry, backoff, and rate-limit handling."""

from __future__ import annotations

import asyncio
import logging
import random
import time

import httpx

_LOG = logging.getLogger(__name__)

_SERVER_ERROR_CODES = frozenset({500, 502, 503, 504})
_IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


def is_rate_limited(response: httpx.Response) -> bool:
    """True for primary (429 / exhausted quota) and secondary (403 + Retry-After) limits."""
    if response.status_code == 429:
        return True
    if response.status_code != 403:
        return False
    return response.headers.get("x-ratelimit-remaining") == "0" or "retry-after" in response.headers


def retry_after_seconds(response: httpx.Response, *, default: float = 1.0) -> float:
    raw = response.headers.get("retry-after")
    if raw is not None:
        try:
            return max(0.0, float(raw))
        except ValueError:
            return default
    reset = response.headers.get("x-ratelimit-reset")
    if reset is not None:
        try:
            return max(0.0, float(reset) - time.time())
        except ValueError:
            return default
    return default


class RetryingTransport(httpx.AsyncBaseTransport):
    """Retries requests that GitHub did not act on, or that are safe to repeat.

    - Rate limits (429, or 403 with exhausted quota) pause **all** concurrent
      requests until ``Retry-After`` / ``x-ratelimit-reset`` and are retried
      regardless of method, since GitHub rejected them before processing.
    - Connection failures (request never sent) are retried for every method.
    - 5xx responses and read timeouts are retried only for idempotent
      methods; a failed ``POST`` surfaces to the caller, which classifies it
      as transient.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        max_retries: int = 3,
        max_backoff: float = 8.0,
    ) -> None:
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._max_retries = max_retries
        self._max_backoff = max_backoff

        self._pause_lock = asyncio.Lock()
        self._resume = asyncio.Event()
        self._resume.set()
        self._paused_until = 0.0

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        idempotent = request.method in _IDEMPOTENT_METHODS
        attempt = 0
        while True:
            await self._resume.wait()
            last_attempt = attempt >= self._max_retries

            try:
                response = await self._transport.handle_async_request(request)
            except (httpx.ConnectError, httpx.ConnectTimeout, httpx.PoolTimeout):
                if last_attempt:
                    raise
                await self._sleep_backoff(attempt, request)
                attempt += 1
                continue
            except httpx.TransportError:
                if last_attempt or not idempotent:
                    raise
                await self._sleep_backoff(attempt, request)
                attempt += 1
                continue

            if is_rate_limited(response):
                if last_attempt:
                    return response
                await response.aclose()
                await self._pause_all(retry_after_seconds(response))
                attempt += 1
                continue

            if response.status_code in _SERVER_ERROR_CODES and idempotent and not last_attempt:
                await response.aclose()
                await self._sleep_backoff(attempt, request)
                attempt += 1
                continue

            return response

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def _pause_all(self, seconds: float) -> None:
        async with self._pause_lock:
            until = time.monotonic() + seconds
            if until > self._paused_until:
                self._paused_until = until
                self._resume.clear()
                _LOG.warning("GitHub rate limit hit; pausing requests for %.1fs", seconds)

        await asyncio.sleep(max(0.0, self._paused_until - time.monotonic()))

        async with self._pause_lock:
            if time.monotonic() >= self._paused_until:
                self._resume.set()

    async def _sleep_backoff(self, attempt: int, request: httpx.Request) -> None:
        seconds = min(self._max_backoff, float(2**attempt)) + random.uniform(0.0, 0.25)
        _LOG.warning("Retrying %s %s (attempt %d)", request.method, request.url.path, attempt + 1)
        await asyncio.sleep(seconds)
