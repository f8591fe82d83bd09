"""Network genealogy resolution.

The routines in this package are generators that yield effect descriptors
(see :mod:`.effects`) instead of talking to the store or the chain directly.
Run them with :func:`.effects.drive` and an :class:`.effects.EffectHandler`.
"""

from __future__ import annotations

from .collector import CollectedNetworks, collect_artifact_networks
from .effects import (
    Effect,
    EffectHandler,
    GetBlockByNumber,
    LoadGenealogies,
    LoadNetworks,
    Process,
    QueryPossibleRelations,
    drive,
)
from .networks import NetworksLoad, generate_networks_load
from .orchestrator import artifact_networks_for, generate_network_genealogies_load
from .relations import (
    find_matching_candidate_on_chain,
    find_relation,
    query_next_possibly_related_networks,
)

__all__ = [
    "CollectedNetworks",
    "Effect",
    "EffectHandler",
    "GetBlockByNumber",
    "LoadGenealogies",
    "LoadNetworks",
    "NetworksLoad",
    "Process",
    "QueryPossibleRelations",
    "artifact_networks_for",
    "collect_artifact_networks",
    "drive",
    "find_matching_candidate_on_chain",
    "find_relation",
    "generate_network_genealogies_load",
    "generate_networks_load",
    "query_next_possibly_related_networks",
]
