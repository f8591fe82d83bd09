"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from netgenealogy.adapters.artifacts import read_artifacts
from netgenealogy.adapters.effect_handler import StoreEffectHandler
from netgenealogy.adapters.jsonrpc import JsonRpcChainClient
from netgenealogy.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyGenealogyUnitOfWork,
    is_started,
    startup,
)
from netgenealogy.config.genealogy import get_genealogy_config
from netgenealogy.domain.genealogy import (
    drive,
    generate_network_genealogies_load,
    generate_networks_load,
)
from netgenealogy.domain.ports.unit_of_work import GenealogyUnitOfWork

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path
    from uuid import UUID

    from netgenealogy.config.genealogy import GenealogyConfig
    from netgenealogy.domain.model import ChainId, NetworkRef
    from netgenealogy.domain.ports.chain import ChainClient

UnitOfWorkFactory = Callable[[], GenealogyUnitOfWork]


log = getLogger(__name__)


@dataclass(slots=True)
class GenealogyLoadResult:
    """Outcome of loading the genealogy of one chain from a batch of artifacts."""

    artifacts: int
    networks: list[NetworkRef] = field(default_factory=list)
    genealogy_ids: list[UUID] = field(default_factory=list)


def load_network_genealogies(
    artifact_paths: Iterable[str | Path],
    *,
    network_id: ChainId,
    network_name: str | None = None,
    chain_client: ChainClient | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    config: GenealogyConfig | None = None,
) -> GenealogyLoadResult:
    """Register the artifacts' networks and link them into the known genealogy."""

    effective_config = config or get_genealogy_config()
    if unit_of_work_factory is None and not is_started():
        startup()
    effective_uow = unit_of_work_factory or SqlAlchemyGenealogyUnitOfWork
    effective_chain = chain_client or JsonRpcChainClient()
    effective_name = network_name or effective_config.network_name

    artifacts = read_artifacts(artifact_paths)
    log.info(
        "Starting genealogy load: artifacts=%s, network_id=%s, network_name=%s",
        len(artifacts),
        network_id,
        effective_name,
    )

    with effective_uow() as uow:
        handler = StoreEffectHandler(
            repositories=uow.repositories,
            chain=effective_chain,
            candidate_limit=effective_config.candidate_limit,
        )
        registered = drive(
            generate_networks_load(
                network_id=network_id,
                network_name=effective_name,
                artifacts=artifacts,
            ),
            handler,
        )
        genealogy_ids = drive(
            generate_network_genealogies_load(
                network_id=network_id,
                artifacts=registered.artifacts,
            ),
            handler,
        )
        uow.commit()

    log.info(
        f"Finished genealogy load: networks={len(registered.networks)}, "
        f"genealogies={len(genealogy_ids)}"
    )

    return GenealogyLoadResult(
        artifacts=len(artifacts),
        networks=registered.networks,
        genealogy_ids=genealogy_ids,
    )
