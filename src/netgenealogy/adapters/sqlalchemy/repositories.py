"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from netgenealogy.adapters.sqlalchemy.mappings import network_table
from netgenealogy.domain.errors import StorePersistError, StoreQueryError
from netgenealogy.domain.model import CandidateSearchResult, Network, NetworkGenealogy, Relation

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from sqlalchemy.orm import Session

    from netgenealogy.domain.model import ChainId, HistoricBlock, NetworkRef


class SqlAlchemyNetworkRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Network) -> None:
        self.session.add(entity)

    def add_many(self, networks: Sequence[Network]) -> list[UUID]:
        """Persist ``networks`` and return their ids in input order.

        A network already recorded for the same chain and historic block is not
        added again; its existing id is returned instead.
        """

        ids: list[UUID] = []
        try:
            for network in networks:
                recorded = self.find_recorded(network.network_id, network.historic_block)
                if recorded is None:
                    self.session.add(network)
                    ids.append(network.id)
                else:
                    ids.append(recorded.id)
            self.session.flush()
        except SQLAlchemyError as exc:
            raise StorePersistError(f"Could not persist networks: {exc}") from exc
        return ids

    def find_recorded(self, network_id: ChainId, historic_block: HistoricBlock) -> Network | None:
        stmt = (
            select(Network)
            .where(network_table.c.network_id == network_id)
            .where(network_table.c.historic_block_hash == historic_block.hash)
            .where(network_table.c.historic_block_height == historic_block.height)
        )
        return self.session.execute(stmt).scalars().first()

    def get(self, network_id: UUID) -> Network | None:
        return self.session.get(Network, network_id)

    def possible_relations(
        self,
        relation: Relation,
        network: NetworkRef,
        already_tried: Sequence[UUID] = (),
        *,
        limit: int = 5,
    ) -> CandidateSearchResult:
        """Return the closest untried networks of the same chain in ``relation`` direction.

        Ancestors are networks recorded at a lower block height, closest first;
        descendants at a higher one, closest first.
        """

        try:
            anchor = self.get(network.id)
            if anchor is None:
                raise StoreQueryError(f"Unknown network: {network.id}")

            height = network_table.c.historic_block_height
            anchor_height = anchor.historic_block.height
            stmt = (
                select(Network)
                .where(network_table.c.network_id == anchor.network_id)
                .where(network_table.c.id != anchor.id)
            )
            if already_tried:
                stmt = stmt.where(network_table.c.id.not_in(list(already_tried)))
            if relation is Relation.ANCESTOR:
                stmt = stmt.where(height < anchor_height).order_by(height.desc())
            else:
                stmt = stmt.where(height > anchor_height).order_by(height.asc())
            stmt = stmt.order_by(network_table.c.id).limit(limit)

            networks = tuple(self.session.execute(stmt).scalars())
        except SQLAlchemyError as exc:
            raise StoreQueryError(f"Possible {relation} query failed: {exc}") from exc

        tried = dict.fromkeys(already_tried)
        tried.update(dict.fromkeys(candidate.id for candidate in networks))
        return CandidateSearchResult(networks=networks, already_tried=tuple(tried))


class SqlAlchemyNetworkGenealogyRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: NetworkGenealogy) -> None:
        self.session.add(entity)

    def add_many(self, genealogies: Sequence[NetworkGenealogy]) -> list[UUID]:
        try:
            self.session.add_all(genealogies)
            self.session.flush()
        except SQLAlchemyError as exc:
            raise StorePersistError(f"Could not persist network genealogies: {exc}") from exc
        return [genealogy.id for genealogy in genealogies]
