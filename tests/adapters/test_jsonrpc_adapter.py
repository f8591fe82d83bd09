from __future__ import annotations

import json
from collections.abc import Callable  # noqa: TC003
from dataclasses import replace

import httpx
import pytest
from aiolimiter import AsyncLimiter  # noqa: TC002

from netgenealogy.adapters.http_resilience import ResilienceConfig, ResilientClient, RetryPolicy
from netgenealogy.adapters.jsonrpc import JsonRpcChainClient
from netgenealogy.config.chain import get_chain_config
from netgenealogy.domain.errors import ChainLookupError
from netgenealogy.domain.model import Block

RPC_URL = "http://chain.test:8545"


def _make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
    retry: RetryPolicy,
    limiters: list[AsyncLimiter | None] | None = None,
) -> Callable[[ResilienceConfig, AsyncLimiter | None], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig, limiter: AsyncLimiter | None) -> ResilientClient:
        client = ResilientClient(
            replace(resilience, retry=retry),
            limiter=limiter,
            transport=httpx.MockTransport(async_handler),
        )
        if limiters is not None:
            limiters.append(client.limiter)
        return client

    return factory


def _client(
    handler: Callable[[httpx.Request], httpx.Response],
    retry: RetryPolicy | None = None,
    limiters: list[AsyncLimiter | None] | None = None,
) -> JsonRpcChainClient:
    return JsonRpcChainClient(
        config=get_chain_config(rpc_url=RPC_URL),
        client_factory=_make_client_factory(
            handler, retry or RetryPolicy(attempts=0), limiters
        ),
    )


def test_get_block_by_number_returns_block() -> None:
    requests: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        requests.append(body)
        return httpx.Response(
            200,
            json={
                "jsonrpc": "2.0",
                "id": body["id"],
                "result": {"hash": "0xabc", "number": "0xa"},
            },
        )

    block = _client(handler).get_block_by_number(10)

    assert block == Block(hash="0xabc", height=10)
    assert requests[0]["method"] == "eth_getBlockByNumber"
    assert requests[0]["params"] == ["0xa", False]
    assert requests[0]["jsonrpc"] == "2.0"


def test_get_block_by_number_uses_increasing_request_ids() -> None:
    ids: list[int] = []

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        ids.append(body["id"])
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": None})

    client = _client(handler)
    client.get_block_by_number(1)
    client.get_block_by_number(2)

    assert ids == [1, 2]


def test_get_block_by_number_returns_none_for_unknown_height() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        _ = request
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": 1, "result": None})

    assert _client(handler).get_block_by_number(123456) is None


def test_get_block_by_number_raises_on_rpc_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        _ = request
        return httpx.Response(
            200,
            json={
                "jsonrpc": "2.0",
                "id": 1,
                "error": {"code": -32000, "message": "header not found"},
            },
        )

    with pytest.raises(ChainLookupError, match="header not found") as exc:
        _client(handler).get_block_by_number(7)

    assert exc.value.height == 7


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, text="upstream failure"),
        httpx.Response(200, text="not json"),
        httpx.Response(200, json={"jsonrpc": "1.0", "id": 1}),
    ],
)
def test_get_block_by_number_wraps_transport_and_payload_errors(
    response: httpx.Response,
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        _ = request
        return response

    with pytest.raises(ChainLookupError):
        _client(handler).get_block_by_number(1)


def test_get_block_by_number_rejects_negative_heights() -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover
        raise AssertionError(request)

    with pytest.raises(ValueError, match="non-negative"):
        _client(handler).get_block_by_number(-1)


def test_get_block_by_number_retries_transient_status() -> None:
    statuses = iter([503, 200])
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        status = next(statuses)
        if status != 200:
            return httpx.Response(status)
        return httpx.Response(
            200, json={"jsonrpc": "2.0", "id": 1, "result": {"hash": "0x01", "number": "0x3"}}
        )

    retry = RetryPolicy(attempts=1, backoff_factor=0.0, backoff_jitter=0.0)
    block = _client(handler, retry).get_block_by_number(3)

    assert block == Block(hash="0x01", height=3)
    assert len(seen) == 2


def test_consecutive_lookups_share_one_rate_limiter() -> None:
    limiters: list[AsyncLimiter | None] = []

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": body["id"], "result": None})

    client = _client(handler, limiters=limiters)
    for height in (1, 2, 3):
        client.get_block_by_number(height)

    assert client.limiter is not None
    assert client.limiter.max_rate == 20
    assert len(limiters) == 3
    assert all(limiter is client.limiter for limiter in limiters)
