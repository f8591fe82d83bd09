"""Effect descriptors and the driver that executes them.

Resolution routines are plain generators. Whenever a routine needs the outside
world it yields one of the effect descriptors below and is resumed with the
result (or has the handler's exception thrown back in at the same point). The
routines never perform I/O themselves, so composing them with ``yield from``
keeps their suspension points strictly ordered.
"""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from netgenealogy.domain.errors import ResolutionAborted

if TYPE_CHECKING:
    from uuid import UUID

    from netgenealogy.domain.model import (
        Block,
        CandidateSearchResult,
        GenealogyLink,
        Network,
        NetworkRef,
        Relation,
    )

log = getLogger(__name__)


@dataclass(frozen=True)
class QueryPossibleRelations:
    """Ask the store for candidates related to ``network`` in ``relation`` direction."""

    relation: Relation
    network: NetworkRef
    already_tried: tuple[UUID, ...] = ()


@dataclass(frozen=True)
class LoadGenealogies:
    """Persist genealogy links; resumes with the assigned ids in input order."""

    links: tuple[GenealogyLink, ...]


@dataclass(frozen=True)
class LoadNetworks:
    """Persist networks; resumes with their references in input order."""

    networks: tuple[Network, ...]


@dataclass(frozen=True)
class GetBlockByNumber:
    """Ask the connected chain for the block at ``height``."""

    height: int
    full_transactions: bool = False


type Effect = QueryPossibleRelations | LoadGenealogies | LoadNetworks | GetBlockByNumber

type Process[T] = Generator[Effect, Any, T]


@runtime_checkable
class EffectHandler(Protocol):
    """Port executed by the driver for every effect a routine yields."""

    def query_possible_relations(
        self,
        relation: Relation,
        network: NetworkRef,
        already_tried: tuple[UUID, ...],
    ) -> CandidateSearchResult: ...

    def load_genealogies(self, links: tuple[GenealogyLink, ...]) -> list[UUID]: ...

    def load_networks(self, networks: tuple[Network, ...]) -> list[NetworkRef]: ...

    def get_block_by_number(
        self, height: int, *, full_transactions: bool = False
    ) -> Block | None: ...


# Typed single-effect routines ------------------------------------------------


def query_possible_relations(
    relation: Relation,
    network: NetworkRef,
    already_tried: tuple[UUID, ...],
) -> Process[CandidateSearchResult]:
    return (yield QueryPossibleRelations(relation, network, already_tried))


def load_genealogies(links: tuple[GenealogyLink, ...]) -> Process[list[UUID]]:
    return (yield LoadGenealogies(links))


def load_networks(networks: tuple[Network, ...]) -> Process[list[NetworkRef]]:
    return (yield LoadNetworks(networks))


def get_block_by_number(height: int) -> Process[Block | None]:
    return (yield GetBlockByNumber(height, full_transactions=False))


# Driver ----------------------------------------------------------------------


def perform(effect: Effect, handler: EffectHandler) -> object:
    """Execute a single effect against ``handler``."""

    if isinstance(effect, QueryPossibleRelations):
        return handler.query_possible_relations(
            effect.relation, effect.network, effect.already_tried
        )
    if isinstance(effect, LoadGenealogies):
        return handler.load_genealogies(effect.links)
    if isinstance(effect, LoadNetworks):
        return handler.load_networks(effect.networks)
    if isinstance(effect, GetBlockByNumber):
        return handler.get_block_by_number(
            effect.height, full_transactions=effect.full_transactions
        )
    raise TypeError(f"Unsupported effect: {type(effect).__name__}")


def drive[T](process: Process[T], handler: EffectHandler) -> T:
    """Run ``process`` to completion, executing each yielded effect in turn.

    Exceptions raised by the handler are thrown back into the routine at its
    suspension point. ``ResolutionAborted`` is the exception: the routine is
    closed without being resumed and the abort propagates to the caller.
    """

    try:
        effect = next(process)
    except StopIteration as stop:
        return stop.value

    while True:
        log.debug("Performing %s", type(effect).__name__)
        try:
            result = perform(effect, handler)
        except ResolutionAborted:
            process.close()
            raise
        except Exception as exc:  # noqa: BLE001
            try:
                effect = process.throw(exc)
            except StopIteration as stop:
                return stop.value
            continue

        try:
            effect = process.send(result)
        except StopIteration as stop:
            return stop.value


__all__ = [
    "Effect",
    "EffectHandler",
    "GetBlockByNumber",
    "LoadGenealogies",
    "LoadNetworks",
    "Process",
    "QueryPossibleRelations",
    "drive",
    "get_block_by_number",
    "load_genealogies",
    "load_networks",
    "perform",
    "query_possible_relations",
]
