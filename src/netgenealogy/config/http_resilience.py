"""Retry, rate-limit and timeout settings for the chain's JSON-RPC transport."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

import httpx
from httpx_retries import Retry

if TYPE_CHECKING:
    from collections.abc import Mapping

TRANSIENT_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})
TRANSIENT_ERRORS: Final[tuple[type[httpx.HTTPError], ...]] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """How often, and how patiently, a failed RPC call is repeated.

    Every call under this policy is a read, so POST is retried.
    """

    attempts: int = 4
    backoff_factor: float = 0.5
    max_backoff_wait: float = 30.0
    backoff_jitter: float = 1.0
    status_codes: frozenset[int] = TRANSIENT_STATUS_CODES
    errors: tuple[type[httpx.HTTPError], ...] = TRANSIENT_ERRORS

    def build(self) -> Retry:
        return Retry(
            total=self.attempts,
            allowed_methods=("POST",),
            status_forcelist=tuple(self.status_codes),
            retry_on_exceptions=self.errors,
            backoff_factor=self.backoff_factor,
            backoff_jitter=self.backoff_jitter,
            max_backoff_wait=self.max_backoff_wait,
            respect_retry_after_header=True,
        )


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    base_url: str | None = None
    timeout_seconds: float = 30.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    ratelimit: RateLimit | None = None
    default_headers: Mapping[str, str] = field(default_factory=dict)
