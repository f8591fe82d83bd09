"""JSON-RPC client for reading blocks from the connected chain."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from itertools import count
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from netgenealogy.adapters.http_resilience import ResilientClient, build_limiter
from netgenealogy.config.chain import get_chain_config
from netgenealogy.domain.errors import ChainLookupError
from netgenealogy.domain.model import Block

from .schema import BlockResponse

if TYPE_CHECKING:
    from collections.abc import Callable

    from aiolimiter import AsyncLimiter

    from netgenealogy.config.chain import ChainConfig
    from netgenealogy.config.http_resilience import ResilienceConfig

log = getLogger(__name__)


type ClientFactory = Callable[[ResilienceConfig, AsyncLimiter | None], ResilientClient]


def _default_client_factory(
    config: ResilienceConfig, limiter: AsyncLimiter | None
) -> ResilientClient:
    return ResilientClient(config, limiter=limiter)


@dataclass(slots=True)
class JsonRpcChainClient:
    """``ChainClient`` backed by an Ethereum-style JSON-RPC endpoint.

    Each lookup opens its own HTTP client, but all of them draw from
    ``limiter``, so the configured rate limit holds across lookups.
    """

    config: ChainConfig = field(default_factory=get_chain_config)
    client_factory: ClientFactory = field(default=_default_client_factory)
    limiter: AsyncLimiter | None = field(init=False, repr=False)
    _request_ids: count[int] = field(default_factory=lambda: count(1), init=False, repr=False)

    def __post_init__(self) -> None:
        self.limiter = build_limiter(self.config.resilience.ratelimit)

    def get_block_by_number(
        self, height: int, *, full_transactions: bool = False
    ) -> Block | None:
        return asyncio.run(
            self.get_block_by_number_async(height, full_transactions=full_transactions)
        )

    async def get_block_by_number_async(
        self, height: int, *, full_transactions: bool = False
    ) -> Block | None:
        if height < 0:
            raise ValueError("block height must be non-negative")

        async with self.client_factory(self.config.resilience, self.limiter) as client:
            response = await self._call(
                client,
                "eth_getBlockByNumber",
                [hex(height), full_transactions],
                height=height,
            )

        if response.error is not None:
            raise ChainLookupError(
                f"eth_getBlockByNumber failed ({response.error.code}): {response.error.message}",
                height=height,
            )
        payload = response.result
        if payload is None or payload.hash is None:
            log.debug("Block %s unknown to connected chain", height)
            return None
        number = payload.number if payload.number is not None else height
        return Block(hash=payload.hash, height=number)

    async def _call(
        self,
        client: ResilientClient,
        method: str,
        params: list[object],
        *,
        height: int,
    ) -> BlockResponse:
        body = {
            "jsonrpc": "2.0",
            "id": next(self._request_ids),
            "method": method,
            "params": params,
        }
        try:
            response = await client.post_json("", body)
            response.raise_for_status()
            return BlockResponse.model_validate(response.json())
        except httpx.HTTPError as exc:
            raise ChainLookupError(f"{method} request failed: {exc}", height=height) from exc
        except (ValidationError, json.JSONDecodeError) as exc:
            raise ChainLookupError(
                f"{method} returned a malformed payload: {exc}", height=height
            ) from exc
