"""SQLAlchemy-backed unit of work for genealogy resolution.

``startup`` binds the adapter to one engine for the whole process. Every unit
of work then opens its own session on that engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from netgenealogy.adapters.sqlalchemy.mappings import create_all_tables, start_mappers
from netgenealogy.adapters.sqlalchemy.repositories import (
    SqlAlchemyNetworkGenealogyRepository,
    SqlAlchemyNetworkRepository,
)
from netgenealogy.config.storage import get_database_config
from netgenealogy.domain.ports.unit_of_work import GenealogyRepositories

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when storage is used before ``startup`` or started twice."""


@dataclass(slots=True)
class _Binding:
    engine: Engine
    sessions: sessionmaker[Session]


@dataclass(slots=True)
class _AdapterState:
    binding: _Binding | None = None

    def require(self) -> _Binding:
        if self.binding is None:
            raise StartupError(
                "Storage not started. Call netgenealogy.adapters.sqlalchemy.startup() "
                "before opening a unit of work."
            )
        return self.binding


_STATE = _AdapterState()


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> Engine:
    """Bind the adapter to ``engine`` (or a new one for the configured URI) and create tables."""

    if _STATE.binding is not None and not force:
        raise StartupError("Storage already started. Pass force=True to rebind.")

    resolved = engine or create_engine(database_uri or get_database_config().uri, future=True)
    start_mappers()
    create_all_tables(resolved)
    _STATE.binding = _Binding(
        engine=resolved,
        sessions=sessionmaker(bind=resolved, expire_on_commit=False),
    )
    log.info("Storage bound to %s", resolved.url.render_as_string(hide_password=True))
    return resolved


def is_started() -> bool:
    return _STATE.binding is not None


def shutdown() -> None:
    """Dispose the bound engine, if any, and forget it."""

    if _STATE.binding is not None:
        _STATE.binding.engine.dispose()
    _STATE.binding = None


class SqlAlchemyGenealogyUnitOfWork:
    """One session's worth of network and genealogy writes.

    Leaving the ``with`` block closes the session; an exception rolls back
    whatever was not committed.
    """

    def __init__(self) -> None:
        self._sessions = _STATE.require().sessions
        self._session: Session | None = None
        self._repositories: GenealogyRepositories | None = None

    def __enter__(self) -> SqlAlchemyGenealogyUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work already open")
        self._session = self._sessions()
        self._repositories = GenealogyRepositories(
            networks=SqlAlchemyNetworkRepository(self._session),
            genealogies=SqlAlchemyNetworkGenealogyRepository(self._session),
        )
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        if exc_type is not None:
            session.rollback()
        session.close()
        self._session = None
        self._repositories = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work is not open")
        return self._session

    @property
    def repositories(self) -> GenealogyRepositories:
        if self._repositories is None:
            raise StartupError("Unit of work is not open")
        return self._repositories

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


if TYPE_CHECKING:
    from netgenealogy.domain.ports.unit_of_work import GenealogyUnitOfWork

    _uow_check: GenealogyUnitOfWork = SqlAlchemyGenealogyUnitOfWork()
