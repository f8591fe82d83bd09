"""Public interface for the JSON-RPC chain adapter."""

from __future__ import annotations

from .client import JsonRpcChainClient
from .schema import BlockPayload, BlockResponse, JsonRpcError

__all__ = [
    "BlockPayload",
    "BlockResponse",
    "JsonRpcChainClient",
    "JsonRpcError",
]
