"""Search previously recorded networks for the closest chain-verified relation."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from netgenealogy.domain.errors import ChainLookupError, StoreQueryError

from .effects import get_block_by_number, query_possible_relations

if TYPE_CHECKING:
    from collections.abc import Iterable
    from uuid import UUID

    from netgenealogy.domain.model import (
        CandidateSearchResult,
        Network,
        NetworkRef,
        Relation,
    )

    from .effects import Process

log = getLogger(__name__)


def find_relation(relation: Relation, network: NetworkRef) -> Process[NetworkRef | None]:
    """Find the closest known ``relation`` of ``network`` that the chain confirms.

    The store is asked for candidates batch by batch; every batch is verified
    against the chain before the next one is requested. ``already_tried`` only
    ever grows, and the search ends when a candidate is confirmed or the store
    runs out of candidates.
    """

    already_tried: tuple[UUID, ...] = ()

    while True:
        result = yield from query_next_possibly_related_networks(
            relation, network, already_tried
        )
        already_tried = result.already_tried

        matching = yield from find_matching_candidate_on_chain(result.networks)
        if matching is not None:
            log.debug("Found %s %s of network %s", relation, matching.id, network.id)
            return matching

        if not result.networks:
            log.debug("No %s found for network %s", relation, network.id)
            return None


def query_next_possibly_related_networks(
    relation: Relation,
    network: NetworkRef,
    already_tried: tuple[UUID, ...],
) -> Process[CandidateSearchResult]:
    """Request the next candidate batch, excluding everything already tried.

    A failed query ends the whole search: it is logged and re-raised.
    """

    log.debug("Finding possible %ss of network %s", relation, network.id)
    try:
        result = yield from query_possible_relations(relation, network, already_tried)
    except StoreQueryError:
        log.exception("Possible %s query failed for network %s", relation, network.id)
        raise

    log.debug("Candidate networks %s", [candidate.id for candidate in result.networks])
    return result


def find_matching_candidate_on_chain(
    candidates: Iterable[Network],
) -> Process[NetworkRef | None]:
    """Return the first candidate whose historic block is on the connected chain.

    Candidates are checked one at a time in the given order; later ones are
    not looked up once a match is found.
    """

    for candidate in candidates:
        historic_block = candidate.historic_block
        try:
            block = yield from get_block_by_number(historic_block.height)
        except ChainLookupError as exc:
            log.warning(
                "Block lookup at height %s failed for candidate %s: %s",
                historic_block.height,
                candidate.id,
                exc,
            )
            continue

        if block is not None and block.hash == historic_block.hash:
            return candidate.ref

        log.debug("Candidate %s not on connected chain", candidate.id)

    return None
