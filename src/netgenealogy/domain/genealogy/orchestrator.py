"""Resolve and load the genealogy of one chain across a batch of artifacts."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from netgenealogy.domain.model import GenealogyLink, Relation

from .collector import collect_artifact_networks
from .effects import load_genealogies
from .relations import find_relation

if TYPE_CHECKING:
    from collections.abc import Iterable
    from uuid import UUID

    from netgenealogy.domain.model import Artifact, ArtifactNetwork, ChainId

    from .effects import Process

log = getLogger(__name__)


def artifact_networks_for(
    artifacts: Iterable[Artifact], network_id: ChainId
) -> list[ArtifactNetwork]:
    """Return the observations the artifacts hold for ``network_id``."""

    observations: list[ArtifactNetwork] = []
    for artifact in artifacts:
        observation = artifact.network_for(network_id)
        if observation is not None:
            observations.append(observation)
    return observations


def generate_network_genealogies_load(
    *,
    network_id: ChainId,
    artifacts: Iterable[Artifact],
) -> Process[list[UUID]]:
    """Link the artifacts' networks to each other and to known relatives.

    All observations for ``network_id`` are taken to lie on one chain history;
    this is not checked. The chain built from them is extended with the
    closest verified ancestor of its earliest network and the closest verified
    descendant of its latest network, then loaded in a single request. The
    returned genealogy ids can usually be discarded.
    """

    collected = collect_artifact_networks(artifact_networks_for(artifacts, network_id))
    if collected is None:
        log.debug("No artifact networks for network id %s", network_id)
        return []

    links = list(collected.links)
    log.debug("Collected genealogy links %s", links)

    ancestor_ancestor = yield from find_relation(Relation.ANCESTOR, collected.ancestor)
    log.debug("Ancestor of earliest network: %s", ancestor_ancestor)
    if ancestor_ancestor is not None:
        links.append(GenealogyLink(ancestor=ancestor_ancestor, descendant=collected.ancestor))

    descendant_descendant = yield from find_relation(Relation.DESCENDANT, collected.descendant)
    log.debug("Descendant of latest network: %s", descendant_descendant)
    if descendant_descendant is not None:
        links.append(
            GenealogyLink(ancestor=collected.descendant, descendant=descendant_descendant)
        )

    return (yield from load_genealogies(tuple(links)))
