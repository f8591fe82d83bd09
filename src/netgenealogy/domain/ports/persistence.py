"""Ports for persisting networks and their genealogies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from netgenealogy.domain.model import Network, NetworkGenealogy

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from netgenealogy.domain.model import (
        CandidateSearchResult,
        ChainId,
        HistoricBlock,
        NetworkRef,
        Relation,
    )


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class NetworkRepository(Repository[Network], Protocol):
    """Persistence contract for networks."""

    def add_many(self, networks: Sequence[Network]) -> list[UUID]: ...

    def find_recorded(
        self, network_id: ChainId, historic_block: HistoricBlock
    ) -> Network | None: ...

    def get(self, network_id: UUID) -> Network | None: ...

    def possible_relations(
        self,
        relation: Relation,
        network: NetworkRef,
        already_tried: Sequence[UUID] = (),
        *,
        limit: int = 5,
    ) -> CandidateSearchResult: ...


@runtime_checkable
class NetworkGenealogyRepository(Repository[NetworkGenealogy], Protocol):
    """Persistence contract for genealogy records."""

    def add_many(self, genealogies: Sequence[NetworkGenealogy]) -> list[UUID]: ...
