"""Read build artifacts from disk into domain ``Artifact`` objects."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from netgenealogy.domain.model import Artifact, ArtifactNetwork, NetworkRef, ObservedBlock

from .schema import ArtifactPayload, NetworkEntry

if TYPE_CHECKING:
    from collections.abc import Iterable

log = getLogger(__name__)


class ArtifactError(ValueError):
    """Raised when an artifact file cannot be read or does not match the schema."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


def _to_artifact_network(entry: NetworkEntry | None) -> ArtifactNetwork | None:
    if entry is None:
        return None
    block = (
        ObservedBlock(height=entry.block.height, hash=entry.block.hash)
        if entry.block is not None
        else None
    )
    network = (
        NetworkRef(entry.db.network.id)
        if entry.db is not None and entry.db.network is not None
        else None
    )
    return ArtifactNetwork(
        block=block,
        network=network,
        address=entry.address,
        transaction_hash=entry.transaction_hash,
    )


def parse_artifact(payload: ArtifactPayload) -> Artifact:
    return Artifact(
        contract_name=payload.contract_name,
        networks={
            network_id: _to_artifact_network(entry)
            for network_id, entry in payload.networks.items()
        },
    )


def read_artifact(path: str | Path) -> Artifact:
    artifact_path = Path(path)
    try:
        raw = artifact_path.read_bytes()
    except OSError as exc:
        raise ArtifactError(str(exc), path=artifact_path) from exc
    try:
        payload = ArtifactPayload.model_validate_json(raw)
    except ValidationError as exc:
        raise ArtifactError(f"invalid artifact: {exc}", path=artifact_path) from exc
    return parse_artifact(payload)


def read_artifacts(paths: Iterable[str | Path]) -> list[Artifact]:
    """Read every artifact in ``paths``; directories contribute their ``*.json`` files."""

    artifacts: list[Artifact] = []
    for path in paths:
        candidate = Path(path)
        files = sorted(candidate.glob("*.json")) if candidate.is_dir() else [candidate]
        for file in files:
            artifacts.append(read_artifact(file))
    log.debug("Read %d artifacts", len(artifacts))
    return artifacts
