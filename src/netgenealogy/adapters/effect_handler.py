"""Effect handler executing resolution effects against the store and the chain."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from netgenealogy.config.genealogy import DEFAULT_CANDIDATE_LIMIT
from netgenealogy.domain.model import NetworkRef

if TYPE_CHECKING:
    from uuid import UUID

    from netgenealogy.domain.model import (
        Block,
        CandidateSearchResult,
        GenealogyLink,
        Network,
        Relation,
    )
    from netgenealogy.domain.ports import ChainClient, GenealogyRepositories

log = getLogger(__name__)


@dataclass(slots=True)
class StoreEffectHandler:
    """Answer store effects from repositories and chain effects from a chain client."""

    repositories: GenealogyRepositories
    chain: ChainClient
    candidate_limit: int = DEFAULT_CANDIDATE_LIMIT

    def query_possible_relations(
        self,
        relation: Relation,
        network: NetworkRef,
        already_tried: tuple[UUID, ...],
    ) -> CandidateSearchResult:
        return self.repositories.networks.possible_relations(
            relation, network, already_tried, limit=self.candidate_limit
        )

    def load_genealogies(self, links: tuple[GenealogyLink, ...]) -> list[UUID]:
        log.debug("Loading %d network genealogies", len(links))
        return self.repositories.genealogies.add_many([link.to_record() for link in links])

    def load_networks(self, networks: tuple[Network, ...]) -> list[NetworkRef]:
        log.debug("Loading %d networks", len(networks))
        network_ids = self.repositories.networks.add_many(networks)
        return [NetworkRef(network_id) for network_id in network_ids]

    def get_block_by_number(
        self, height: int, *, full_transactions: bool = False
    ) -> Block | None:
        return self.chain.get_block_by_number(height, full_transactions=full_transactions)


if TYPE_CHECKING:
    from netgenealogy.domain.genealogy.effects import EffectHandler

    _handler_check: type[EffectHandler] = StoreEffectHandler
