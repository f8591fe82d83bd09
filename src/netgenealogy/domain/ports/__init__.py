"""Domain port definitions for adapters."""

from __future__ import annotations

from .chain import ChainClient
from .persistence import NetworkGenealogyRepository, NetworkRepository, Repository
from .unit_of_work import (
    GenealogyRepositories,
    GenealogyUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "ChainClient",
    "GenealogyRepositories",
    "GenealogyUnitOfWork",
    "NetworkGenealogyRepository",
    "NetworkRepository",
    "Repository",
    "RepositoryCollection",
    "UnitOfWork",
]
