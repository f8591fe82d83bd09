"""Public interface for the build-artifact adapter."""

from __future__ import annotations

from .reader import ArtifactError, parse_artifact, read_artifact, read_artifacts
from .schema import ArtifactPayload, BlockEntry, NetworkEntry

__all__ = [
    "ArtifactError",
    "ArtifactPayload",
    "BlockEntry",
    "NetworkEntry",
    "parse_artifact",
    "read_artifact",
    "read_artifacts",
]
