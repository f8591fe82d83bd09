"""Pydantic models describing the parts of build artifacts we read."""

from __future__ import annotations

from uuid import UUID  # noqa: TC003 # needed at runtime by pydantic

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, field_validator


def _hex_quantity_to_int(value: object) -> object:
    if isinstance(value, str) and value.startswith(("0x", "0X")):
        return int(value, 16)
    return value


class ArtifactBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class BlockEntry(ArtifactBaseModel):
    height: NonNegativeInt
    hash: str | None = None

    _parse_height = field_validator("height", mode="before")(_hex_quantity_to_int)


class IdEntry(ArtifactBaseModel):
    id: UUID


class NetworkDbEntry(ArtifactBaseModel):
    network: IdEntry | None = None


class NetworkEntry(ArtifactBaseModel):
    address: str | None = None
    transaction_hash: str | None = Field(default=None, alias="transactionHash")
    block: BlockEntry | None = None
    db: NetworkDbEntry | None = None


class ArtifactPayload(ArtifactBaseModel):
    contract_name: str = Field(alias="contractName")
    networks: dict[str, NetworkEntry | None] = Field(default_factory=dict)
