from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from netgenealogy.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyGenealogyUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)
from tests.helpers.genealogy import make_network

if TYPE_CHECKING:
    from collections.abc import Callable


def test_unit_of_work_commits_networks(
    sqlite_unit_of_work: Callable[[], SqlAlchemyGenealogyUnitOfWork],
) -> None:
    network = make_network(8)

    with sqlite_unit_of_work() as uow:
        uow.repositories.networks.add(network)
        uow.commit()

    with sqlite_unit_of_work() as uow:
        assert uow.repositories.networks.get(network.id) is not None


def test_unit_of_work_rolls_back_on_error(
    sqlite_unit_of_work: Callable[[], SqlAlchemyGenealogyUnitOfWork],
) -> None:
    network = make_network(8)

    with pytest.raises(RuntimeError, match="boom"), sqlite_unit_of_work() as uow:
        uow.repositories.networks.add(network)
        raise RuntimeError("boom")

    with sqlite_unit_of_work() as uow:
        assert uow.repositories.networks.get(network.id) is None


def test_repositories_require_an_open_unit_of_work(
    sqlite_unit_of_work: Callable[[], SqlAlchemyGenealogyUnitOfWork],
) -> None:
    uow = sqlite_unit_of_work()

    with pytest.raises(StartupError):
        _ = uow.repositories


def test_startup_refuses_to_reinitialise(
    sqlite_unit_of_work: Callable[[], SqlAlchemyGenealogyUnitOfWork],
) -> None:
    _ = sqlite_unit_of_work
    assert is_started()

    with pytest.raises(StartupError, match="already started"):
        startup()


def test_unit_of_work_requires_startup() -> None:
    shutdown()
    assert not is_started()

    with pytest.raises(StartupError, match="not started"):
        SqlAlchemyGenealogyUnitOfWork()
