"""Tests for snapshot/model JSON I/O and the CLI."""

import json

import pytest
from typer.testing import CliRunner

from catalog2model.cli.app import app
from catalog2model.utils.model_io import (
    load_result_from_json,
    load_snapshot_from_json,
    save_result_to_json,
)
from catalog2model.introspection.pipeline import introspect_snapshot
from catalog2model.config.logging import setup_logging
from catalog2model.config.settings import Settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging():
    # CLI commands bind the log handler to the runner's captured stderr
    yield
    setup_logging()

SNAPSHOT = {
    "tables": [{"TABLE_NAME": "ORDERS"}, {"TABLE_NAME": "CUSTOMERS"}],
    "columns": [
        {"TABLE_NAME": "ORDERS", "COLUMN_NAME": "ID", "DATA_TYPE": "NUMBER", "NULLABLE": "N"},
        {"TABLE_NAME": "ORDERS", "COLUMN_NAME": "CUSTOMER_ID", "DATA_TYPE": "NUMBER"},
        {"TABLE_NAME": "CUSTOMERS", "COLUMN_NAME": "ID", "DATA_TYPE": "NUMBER", "NULLABLE": "N"},
    ],
    "indexes": [
        {"TABLE_NAME": "ORDERS", "INDEX_NAME": "PK_ORDERS", "COLUMN_NAME": "ID",
         "UNIQUENESS": "UNIQUE", "ISPRIMARYKEY": 1},
    ],
    "foreign_keys": [
        {"OWNER_TABLE_NAME": "ORDERS", "OWNER_POSITION": 1, "OWNER_COLUMN_NAME": "CUSTOMER_ID",
         "CHILD_TABLE_NAME": "CUSTOMERS", "CHILD_COLUMN_NAME": "ID",
         "DELETE_RULE": "CASCADE", "CONSTRAINT_NAME": "FK_ORDERS_CUSTOMER"},
    ],
}


def _write_snapshot(tmp_path, data=SNAPSHOT):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_snapshot(tmp_path):
    """Test loading a snapshot keyed by catalog labels."""
    snapshot = load_snapshot_from_json(_write_snapshot(tmp_path))
    assert [t.name for t in snapshot.tables] == ["ORDERS", "CUSTOMERS"]
    assert snapshot.foreign_keys[0].delete_rule == "CASCADE"


def test_load_snapshot_errors(tmp_path):
    """Test missing, empty and invalid snapshot files."""
    with pytest.raises(FileNotFoundError):
        load_snapshot_from_json(tmp_path / "missing.json")

    empty = tmp_path / "empty.json"
    empty.write_text("  ", encoding="utf-8")
    with pytest.raises(ValueError, match="empty"):
        load_snapshot_from_json(empty)

    bad = tmp_path / "bad.json"
    bad.write_text('{"tables": [{"nope": 1}]}', encoding="utf-8")
    with pytest.raises(ValueError, match="Failed to load snapshot"):
        load_snapshot_from_json(bad)


def test_save_and_load_result(tmp_path):
    """Test a saved result loads back unchanged."""
    result = introspect_snapshot(load_snapshot_from_json(_write_snapshot(tmp_path)), settings=Settings())
    out = tmp_path / "nested" / "model.json"
    save_result_to_json(result, out)
    assert load_result_from_json(out) == result


def test_cli_introspect_and_check(tmp_path):
    """Test the introspect and check commands."""
    out = tmp_path / "model.json"
    res = runner.invoke(app, ["introspect", str(_write_snapshot(tmp_path)), str(out)])
    assert res.exit_code == 0
    assert "2 entities, 1 relations" in res.output

    data = json.loads(out.read_text(encoding="utf-8"))
    customers = next(e for e in data["entities"] if e["name"] == "CUSTOMERS")
    assert [c["name"] for c in customers["columns"]] == ["ID", "orders"]

    res = runner.invoke(app, ["check", str(out)])
    assert res.exit_code == 0


def test_cli_strict_fails_on_warnings(tmp_path):
    """Test --strict exits 1 when columns were dropped."""
    data = json.loads(json.dumps(SNAPSHOT))
    data["columns"].append({"TABLE_NAME": "ORDERS", "COLUMN_NAME": "GEOM", "DATA_TYPE": "SDO_GEOMETRY"})
    snapshot = _write_snapshot(tmp_path, data)
    out = tmp_path / "model.json"

    assert runner.invoke(app, ["introspect", str(snapshot), str(out)]).exit_code == 0
    assert runner.invoke(app, ["introspect", str(snapshot), str(out), "--strict"]).exit_code == 1


def test_cli_missing_snapshot(tmp_path):
    """Test a missing snapshot file exits 1."""
    res = runner.invoke(app, ["introspect", str(tmp_path / "nope.json"), str(tmp_path / "out.json")])
    assert res.exit_code == 1


def test_cli_stdout_holds_only_summary(tmp_path):
    """Test progress and log records go to stderr, the summary to stdout."""
    out = tmp_path / "model.json"
    res = runner.invoke(
        app, ["introspect", str(_write_snapshot(tmp_path)), str(out), "--log-level", "DEBUG"]
    )
    assert res.exit_code == 0
    assert res.stdout.strip() == "✓ Complete! 2 entities, 1 relations"
    assert "Loading snapshot from" in res.stderr
    assert "Introspection finished" in res.stderr
    assert "DEBUG catalog2model." in res.stderr


def test_cli_rejects_unknown_log_level(tmp_path):
    """Test an unknown --log-level exits 2."""
    res = runner.invoke(
        app,
        ["introspect", str(_write_snapshot(tmp_path)), str(tmp_path / "out.json"), "--log-level", "chatty"],
    )
    assert res.exit_code == 2
    assert "Unknown log level" in res.stderr
    assert not (tmp_path / "out.json").exists()
