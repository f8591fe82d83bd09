"""SQLAlchemy mapping metadata for networks and network genealogies."""

from __future__ import annotations

import logging
import uuid
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    UniqueConstraint,
    Uuid,
    orm,
)
from sqlalchemy.orm import composite, configure_mappers

from netgenealogy.domain.model import HistoricBlock, Network, NetworkGenealogy

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

network_table = Table(
    "network",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False),
    Column("network_id", String, nullable=False),
    Column("historic_block_hash", String, nullable=False),
    Column("historic_block_height", Integer, nullable=False),
    CheckConstraint("historic_block_height >= 0", name="historic_block_height_non_negative"),
    UniqueConstraint(
        "network_id",
        "historic_block_hash",
        "historic_block_height",
        name="uq_network_historic_block",
    ),
    Index("ix_network_network_id_height", "network_id", "historic_block_height"),
)

network_genealogy_table = Table(
    "network_genealogy",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("ancestor_id", UUIDColumnType, ForeignKey("network.id"), nullable=False),
    Column("descendant_id", UUIDColumnType, ForeignKey("network.id"), nullable=False),
    CheckConstraint("ancestor_id != descendant_id", name="no_self_genealogy"),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(
        Network,
        network_table,
        properties={
            "historic_block": composite(
                HistoricBlock,
                network_table.c.historic_block_hash,
                network_table.c.historic_block_height,
            ),
        },
    )

    mapper_registry.map_imperatively(
        NetworkGenealogy,
        network_genealogy_table,
    )

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
