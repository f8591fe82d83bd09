"""Turn sparse artifact network observations into a linear genealogy chain."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise
from typing import TYPE_CHECKING

from netgenealogy.domain.model import GenealogyLink

if TYPE_CHECKING:
    from collections.abc import Iterable

    from netgenealogy.domain.model import ArtifactNetwork, NetworkRef


@dataclass(frozen=True)
class CollectedNetworks:
    """Earliest/latest network of a batch plus the links between them.

    ``ancestor`` and ``descendant`` are the same reference when the batch holds a
    single observation.
    """

    ancestor: NetworkRef
    descendant: NetworkRef
    links: tuple[GenealogyLink, ...] = field(default_factory=tuple)


def collect_artifact_networks(
    artifact_networks: Iterable[ArtifactNetwork | None],
) -> CollectedNetworks | None:
    """Order observations by block height and link each adjacent pair.

    All observations are assumed to come from the same chain, so a later block
    descends from an earlier one. Observations missing a block or a network
    reference are skipped; ``None`` is returned when nothing usable remains.
    Sorting is stable, so observations at the same height keep input order.
    """

    observed = [
        observation
        for observation in artifact_networks
        if observation is not None and observation.is_valid
    ]
    # is_valid guarantees block and network below
    observed.sort(key=lambda observation: observation.block.height)  # type: ignore[union-attr]
    # several artifacts usually share one network; keep its first position
    networks: list[NetworkRef] = list(
        dict.fromkeys(observation.network for observation in observed)  # type: ignore[misc]
    )

    if not networks:
        return None

    links = tuple(
        GenealogyLink(ancestor=ancestor, descendant=descendant)
        for ancestor, descendant in pairwise(networks)
    )
    return CollectedNetworks(ancestor=networks[0], descendant=networks[-1], links=links)
