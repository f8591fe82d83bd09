"""Connected-chain (JSON-RPC) configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import require_env_var
from .http_resilience import RateLimit, ResilienceConfig

CHAIN_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class ChainConfig:
    """Holds the RPC endpoint of the chain the artifacts were deployed to."""

    rpc_url: str
    resilience: ResilienceConfig


def get_chain_config(
    *,
    rpc_url: str | None = None,
    resilience: ResilienceConfig | None = None,
) -> ChainConfig:
    url = rpc_url or require_env_var("CHAIN_RPC_URL")
    return ChainConfig(
        rpc_url=url,
        resilience=resilience
        or ResilienceConfig(
            name="chain",
            base_url=url,
            timeout_seconds=CHAIN_TIMEOUT_SECONDS,
            ratelimit=RateLimit(max_calls=20, per_seconds=1.0),
            default_headers={"Content-Type": "application/json"},
        ),
    )
