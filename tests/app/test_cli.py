from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine, insert

from fedsync.adapters.sqlalchemy import create_all_tables, local_resource_table
from fedsync.ui import cli as cli_module
from tests.helpers.resources import MIRROR_ROWS

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, document: object) -> Path:
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def remote_snapshot(tmp_path: Path) -> Path:
    return _write(
        tmp_path / "remote.json",
        [
            {"id": "s1", "updatedAt": 150},
            {"id": "s2", "updatedAt": 50},
            {"id": "s4", "updatedAt": 10},
        ],
    )


def test_delta_between_snapshot_files(
    tmp_path: Path,
    remote_snapshot: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    local = _write(tmp_path / "local.json", [{"id": "s1"}, {"id": "s2"}, {"id": "s3"}])

    cli_module.main(
        ["delta", "--remote", str(remote_snapshot), "--local", str(local), "--last-sync", "100"]
    )

    report = json.loads(capsys.readouterr().out)
    assert report == {
        "federationId": "default",
        "toInsert": ["s4"],
        "toUpdate": ["s1"],
        "toDelete": ["s3"],
    }


def test_delta_against_mirror_database(
    tmp_path: Path,
    remote_snapshot: Path,
    capsys: pytest.CaptureFixture[str],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    uri = f"sqlite+pysqlite:///{tmp_path / 'mirror.db'}"
    engine = create_engine(uri, future=True)
    create_all_tables(engine)
    with engine.begin() as connection:
        connection.execute(insert(local_resource_table), [dict(row) for row in MIRROR_ROWS])
    engine.dispose()
    monkeypatch.setenv("DATABASE_URI", uri)

    cli_module.main(["delta", "--remote", str(remote_snapshot), "--federation-id", "fed-a"])

    report = json.loads(capsys.readouterr().out)
    assert report == {
        "federationId": "fed-a",
        "toInsert": ["s4"],
        "toUpdate": ["s1", "s2"],
        "toDelete": ["s3"],
    }


def test_last_sync_accepts_iso_timestamps(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured: dict[str, object] = {}

    def fake_plan(**kwargs: object) -> object:
        captured.update(kwargs)
        raise SystemExit(0)

    monkeypatch.setattr(cli_module, "plan_snapshot_sync", fake_plan)

    with pytest.raises(SystemExit):
        cli_module.main(
            [
                "delta",
                "--remote",
                str(tmp_path / "remote.json"),
                "--local",
                str(tmp_path / "local.json"),
                "--last-sync",
                "2025-01-01T03:00:00+03:00",
            ]
        )

    assert captured["last_sync_time"] == datetime(2025, 1, 1, 0, 0, tzinfo=UTC)
    assert captured["federation_id"] == "default"


def test_database_uri_flag_is_forwarded(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured: dict[str, object] = {}

    def fake_plan(**kwargs: object) -> object:
        captured.update(kwargs)
        raise SystemExit(0)

    monkeypatch.setattr(cli_module, "plan_database_sync", fake_plan)

    with pytest.raises(SystemExit):
        cli_module.main(
            [
                "delta",
                "--remote",
                str(tmp_path / "remote.json"),
                "--database-uri",
                "sqlite+pysqlite:///:memory:",
                "--last-sync",
                "60",
            ]
        )

    assert captured["database_uri"] == "sqlite+pysqlite:///:memory:"
    assert captured["last_sync_time"] == datetime(1970, 1, 1, 0, 0, 0, 60_000, tzinfo=UTC)


def test_invalid_last_sync_exits_with_usage_error(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(
            ["delta", "--remote", str(tmp_path / "r.json"), "--last-sync", "not-a-date"]
        )

    assert excinfo.value.code == 2


def test_local_and_database_sources_are_mutually_exclusive(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(
            [
                "delta",
                "--remote",
                str(tmp_path / "r.json"),
                "--local",
                str(tmp_path / "l.json"),
                "--database-uri",
                "sqlite://",
            ]
        )

    assert excinfo.value.code == 2


def test_unreadable_snapshot_is_fatal(tmp_path: Path) -> None:
    local = _write(tmp_path / "local.json", [])

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["delta", "--remote", str(tmp_path / "absent.json"), "--local", str(local)])

    assert excinfo.value.code == 1


def test_missing_database_configuration_is_fatal(
    remote_snapshot: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.delenv("DATABASE_URI", raising=False)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["delta", "--remote", str(remote_snapshot)])

    assert excinfo.value.code == 1


def test_unknown_log_level_exits_with_usage_error(
    remote_snapshot: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("FEDSYNC_LOG_LEVEL", "chatty")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(
            ["delta", "--remote", str(remote_snapshot), "--local", str(remote_snapshot)]
        )

    assert excinfo.value.code == 2


def test_verbose_flag_requests_debug_logging(
    tmp_path: Path,
    remote_snapshot: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    levels: list[int | None] = []

    def fake_configure_logging(*, level: int | None = None, force: bool = False) -> None:
        levels.append(level)

    monkeypatch.setattr(cli_module, "configure_logging", fake_configure_logging)
    local = _write(tmp_path / "local.json", [])

    cli_module.main(["-v", "delta", "--remote", str(remote_snapshot), "--local", str(local)])

    assert levels == [logging.DEBUG]
