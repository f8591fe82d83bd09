"""Throttled HTTP client with a retrying transport underneath."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from aiolimiter import AsyncLimiter
from httpx_retries import RetryTransport

from netgenealogy.config.http_resilience import RateLimit, ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from types import TracebackType


def build_limiter(ratelimit: RateLimit | None) -> AsyncLimiter | None:
    if ratelimit is None:
        return None
    return AsyncLimiter(ratelimit.max_calls, ratelimit.per_seconds)


class ResilientClient:
    """Wrap an ``httpx.AsyncClient`` so calls are throttled and transient failures retried.

    A call takes one limiter slot; retries happen inside the transport and do
    not take another. Pass ``limiter`` to share one budget across clients;
    otherwise one is built from ``config.ratelimit``. ``transport`` replaces
    the network layer beneath the retries (tests pass an ``httpx.MockTransport``).
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        limiter: AsyncLimiter | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self.limiter = limiter if limiter is not None else build_limiter(config.ratelimit)
        self._client = httpx.AsyncClient(
            base_url=config.base_url or "",
            timeout=config.timeout_seconds,
            headers=dict(config.default_headers),
            transport=RetryTransport(transport=transport, retry=config.retry.build()),
        )

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def post_json(self, url: str, payload: object) -> httpx.Response:
        """POST ``payload`` as a JSON body once a rate-limit slot is free."""

        if self.limiter is None:
            return await self._client.post(url, json=payload)
        async with self.limiter:
            return await self._client.post(url, json=payload)


__all__ = [
    "RateLimit",
    "ResilienceConfig",
    "ResilientClient",
    "RetryPolicy",
    "build_limiter",
]
