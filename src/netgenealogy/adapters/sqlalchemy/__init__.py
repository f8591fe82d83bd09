"""SQLAlchemy adapter package for netgenealogy."""

from __future__ import annotations

from .mappings import (
    create_all_tables,
    mapper_registry,
    network_genealogy_table,
    network_table,
    start_mappers,
)
from .repositories import SqlAlchemyNetworkGenealogyRepository, SqlAlchemyNetworkRepository
from .unit_of_work import SqlAlchemyGenealogyUnitOfWork, StartupError, shutdown, startup

__all__ = [
    "SqlAlchemyGenealogyUnitOfWork",
    "SqlAlchemyNetworkGenealogyRepository",
    "SqlAlchemyNetworkRepository",
    "StartupError",
    "create_all_tables",
    "mapper_registry",
    "network_genealogy_table",
    "network_table",
    "shutdown",
    "start_mappers",
    "startup",
]
