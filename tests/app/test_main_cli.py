from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from netgenealogy import main as cli
from netgenealogy.app import GenealogyLoadResult

if TYPE_CHECKING:
    from netgenealogy.adapters.jsonrpc import JsonRpcChainClient


def test_main_requires_rpc_url(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv("CHAIN_RPC_URL", raising=False)

    with pytest.raises(SystemExit) as exc:
        cli.main(["--network-id", "5777", "build/contracts"])

    assert exc.value.code == 2
    assert "CHAIN_RPC_URL" in capsys.readouterr().err


def test_main_runs_load_with_parsed_arguments(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    captured: dict[str, object] = {}

    def fake_load(
        artifact_paths: list[str],
        *,
        network_id: str,
        network_name: str,
        chain_client: JsonRpcChainClient,
    ) -> GenealogyLoadResult:
        captured.update(
            paths=artifact_paths,
            network_id=network_id,
            network_name=network_name,
            rpc_url=chain_client.config.rpc_url,
        )
        return GenealogyLoadResult(artifacts=2)

    monkeypatch.setattr(cli, "load_network_genealogies", fake_load)
    monkeypatch.setattr(cli, "configure_logging", lambda **_: None)

    cli.main(
        [
            "--network-id",
            "5777",
            "--network-name",
            "ganache",
            "--rpc-url",
            "http://127.0.0.1:8545",
            "a.json",
            "b.json",
        ]
    )

    assert captured == {
        "paths": ["a.json", "b.json"],
        "network_id": "5777",
        "network_name": "ganache",
        "rpc_url": "http://127.0.0.1:8545",
    }
    assert "Loaded 0 genealogies across 0 networks from 2 artifacts" in capsys.readouterr().out


def test_main_reports_runtime_errors(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def failing_load(*_: object, **__: object) -> GenealogyLoadResult:
        raise RuntimeError("store unavailable")

    monkeypatch.setenv("CHAIN_RPC_URL", "http://127.0.0.1:8545")
    monkeypatch.setattr(cli, "load_network_genealogies", failing_load)
    monkeypatch.setattr(cli, "configure_logging", lambda **_: None)

    with pytest.raises(SystemExit) as exc:
        cli.main(["--network-id", "1", "a.json"])

    assert exc.value.code == 1
    assert "store unavailable" in capsys.readouterr().err
