"""Pydantic models describing the Ethereum JSON-RPC payloads we consume."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator


def _hex_quantity_to_int(value: object) -> object:
    if isinstance(value, str) and value.startswith(("0x", "0X")):
        return int(value, 16)
    return value


class JsonRpcBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class JsonRpcError(JsonRpcBaseModel):
    code: int
    message: str
    data: object | None = None


class BlockPayload(JsonRpcBaseModel):
    # pending blocks carry neither hash nor number
    hash: str | None = None
    number: int | None = None

    _parse_number = field_validator("number", mode="before")(_hex_quantity_to_int)


class BlockResponse(JsonRpcBaseModel):
    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str | None = None
    result: BlockPayload | None = None
    error: JsonRpcError | None = None
