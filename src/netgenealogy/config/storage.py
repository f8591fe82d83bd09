"""Where netgenealogy keeps its database."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

DATA_DIR_ENV: Final[str] = "NETGENEALOGY_DATA_DIR"
DATABASE_URI_ENV: Final[str] = "DATABASE_URI"
DATABASE_FILENAME: Final[str] = "netgenealogy.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Directory holding the SQLite database when no ``DATABASE_URI`` is set."""

    data_dir: Path

    def resolve_data_dir(self) -> Path:
        return self.data_dir.expanduser().resolve()

    def sqlite_uri(self) -> str:
        """URI of the database file; the data directory is created if missing."""

        data_dir = self.resolve_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite+pysqlite:///{data_dir / DATABASE_FILENAME}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def platform_data_home() -> Path:
    """Per-user data directory: ``%LOCALAPPDATA%`` on Windows, the XDG data home elsewhere."""

    if os.name == "nt":
        override, fallback = os.getenv("LOCALAPPDATA"), Path.home() / "AppData" / "Local"
    else:
        override, fallback = os.getenv("XDG_DATA_HOME"), Path.home() / ".local" / "share"
    return Path(override) if override else fallback


def get_storage_config() -> StorageConfig:
    data_dir = os.getenv(DATA_DIR_ENV)
    if data_dir:
        return StorageConfig(data_dir=Path(data_dir))
    return StorageConfig(data_dir=platform_data_home() / "netgenealogy")


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    uri = os.getenv(DATABASE_URI_ENV)
    if not uri:
        uri = (storage or get_storage_config()).sqlite_uri()
    return DatabaseConfig(uri=uri)
