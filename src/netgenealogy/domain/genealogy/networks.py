"""Register networks for artifact observations that lack a network reference."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from logging import getLogger
from typing import TYPE_CHECKING

from netgenealogy.domain.model import HistoricBlock, Network

from .effects import get_block_by_number, load_networks

if TYPE_CHECKING:
    from collections.abc import Sequence

    from netgenealogy.domain.model import Artifact, ChainId, NetworkRef

    from .effects import Process

log = getLogger(__name__)


@dataclass(frozen=True)
class NetworksLoad:
    """Artifacts with network references attached, plus the networks registered or matched."""

    artifacts: list[Artifact]
    networks: list[NetworkRef] = field(default_factory=list)


def generate_networks_load(
    *,
    network_id: ChainId,
    network_name: str,
    artifacts: Sequence[Artifact],
) -> Process[NetworksLoad]:
    """Create a network per distinct historic block and attach it to the artifacts.

    Observations that already reference a network are left alone. Missing
    block hashes are read from the connected chain; an observation whose
    height the chain does not know is skipped and stays unreferenced. The
    store answers with the existing reference for a block it already holds.
    """

    blocks: dict[int, HistoricBlock] = {}
    unknown: set[int] = set()
    for artifact in artifacts:
        observation = artifact.network_for(network_id)
        if observation is None or observation.block is None or observation.network is not None:
            continue
        height = observation.block.height
        if height in blocks or height in unknown:
            continue

        block_hash = observation.block.hash
        if block_hash is None:
            block = yield from get_block_by_number(height)
            if block is None:
                log.warning(
                    "Block %s of %s unknown to connected chain; skipping",
                    height,
                    artifact.contract_name,
                )
                unknown.add(height)
                continue
            block_hash = block.hash
        blocks[height] = HistoricBlock(hash=block_hash, height=height)

    if not blocks:
        return NetworksLoad(artifacts=list(artifacts))

    networks = tuple(
        Network(name=network_name, network_id=network_id, historic_block=historic_block)
        for historic_block in blocks.values()
    )
    refs = yield from load_networks(networks)
    ref_by_height: dict[int, NetworkRef] = dict(zip(blocks, refs, strict=True))
    log.debug("Registered %d networks for network id %s", len(networks), network_id)

    updated: list[Artifact] = []
    for artifact in artifacts:
        observation = artifact.network_for(network_id)
        if (
            observation is None
            or observation.block is None
            or observation.network is not None
            or observation.block.height not in ref_by_height
        ):
            updated.append(artifact)
            continue
        ref = ref_by_height[observation.block.height]
        networks_by_id = {**artifact.networks, network_id: observation.with_network(ref)}
        updated.append(replace(artifact, networks=networks_by_id))
    return NetworksLoad(artifacts=updated, networks=list(refs))
