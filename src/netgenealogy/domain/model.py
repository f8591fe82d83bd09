"""Domain model for networks, their historic blocks and genealogy links."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import StrEnum
from typing import TYPE_CHECKING
from uuid import UUID, uuid4  # noqa: TC003 # UUID is needed at runtime (SQLAlchemy)

if TYPE_CHECKING:
    from collections.abc import Mapping

# Opaque chain-level aliases (PEP 695) so we can upgrade to value objects later.
type BlockHash = str
type ChainId = str


def new_id() -> UUID:
    return uuid4()


class Relation(StrEnum):
    """Direction of a genealogy search relative to an anchor network."""

    ANCESTOR = "ancestor"
    DESCENDANT = "descendant"


@dataclass(frozen=True)
class HistoricBlock:
    """A block recorded at the time a network was observed."""

    hash: BlockHash
    height: int

    def __post_init__(self) -> None:
        if self.height < 0:
            raise ValueError("block height must be non-negative")

    def __composite_values__(self) -> tuple[BlockHash, int]:
        """For SQLAlchemy composite columns (adapter-side convenience)."""
        return (self.hash, self.height)


@dataclass(frozen=True)
class Block:
    """Chain-side answer to a block lookup."""

    hash: BlockHash
    height: int


@dataclass(frozen=True)
class NetworkRef:
    """Reference to a persisted network by id."""

    id: UUID


@dataclass(eq=False, kw_only=True)
class Network:
    """One recorded point on a chain's history."""

    id: UUID = field(default_factory=new_id)
    name: str
    network_id: ChainId
    historic_block: HistoricBlock

    @property
    def ref(self) -> NetworkRef:
        return NetworkRef(self.id)


@dataclass(eq=False, kw_only=True)
class NetworkGenealogy:
    """Persisted ancestor -> descendant relationship between two networks."""

    id: UUID = field(default_factory=new_id)
    ancestor_id: UUID
    descendant_id: UUID


@dataclass(frozen=True)
class GenealogyLink:
    """Input for a genealogy record: ``ancestor`` precedes ``descendant``."""

    ancestor: NetworkRef
    descendant: NetworkRef

    def __post_init__(self) -> None:
        if self.ancestor == self.descendant:
            raise ValueError("a network cannot be its own ancestor")

    def to_record(self) -> NetworkGenealogy:
        return NetworkGenealogy(ancestor_id=self.ancestor.id, descendant_id=self.descendant.id)


@dataclass(frozen=True)
class ObservedBlock:
    """Block information an artifact recorded for a deployment.

    Artifacts always know the height; the hash is optional and gets filled in
    from the chain when a network is registered.
    """

    height: int
    hash: BlockHash | None = None


@dataclass(frozen=True)
class ArtifactNetwork:
    """Per-artifact observation of a deployment on one chain."""

    block: ObservedBlock | None = None
    network: NetworkRef | None = None
    address: str | None = None
    transaction_hash: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.block is not None and self.network is not None

    def with_network(self, network: NetworkRef) -> ArtifactNetwork:
        return replace(self, network=network)


@dataclass(frozen=True)
class Artifact:
    """Build artifact reduced to what genealogy resolution needs."""

    contract_name: str
    networks: Mapping[ChainId, ArtifactNetwork | None] = field(default_factory=dict)

    def network_for(self, network_id: ChainId) -> ArtifactNetwork | None:
        return self.networks.get(network_id)


@dataclass(frozen=True)
class CandidateSearchResult:
    """One batch of possibly related networks plus the grown exclusion set."""

    networks: tuple[Network, ...] = ()
    already_tried: tuple[UUID, ...] = ()


__all__ = [
    "Artifact",
    "ArtifactNetwork",
    "Block",
    "BlockHash",
    "CandidateSearchResult",
    "ChainId",
    "GenealogyLink",
    "HistoricBlock",
    "Network",
    "NetworkGenealogy",
    "NetworkRef",
    "ObservedBlock",
    "Relation",
    "new_id",
]
