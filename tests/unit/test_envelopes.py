"""Tests for --json command envelopes."""

import time
from pathlib import Path

from migrant.drivers import lookup
from migrant.envelopes import CommandEnvelope, build_envelope
from migrant.errors import InvalidDriverError, MissingFieldError


def test_success_envelope_shape() -> None:
    envelope = build_envelope("drivers", time.perf_counter(), data=["postgres"])

    assert envelope["schemaVersion"] == "1"
    assert envelope["command"] == "drivers"
    assert envelope["status"] == "success"
    assert envelope["data"] == ["postgres"]
    assert envelope["errors"] == []
    assert envelope["meta"]["exitCode"] == 0
    assert envelope["meta"]["durationMs"] >= 0


def test_error_envelope_carries_code_and_details() -> None:
    error = MissingFieldError("db.dsn", Path("db/config/test.toml"))

    envelope = build_envelope("config", time.perf_counter(), error=error)

    assert envelope["status"] == "error"
    assert envelope["data"] is None
    assert envelope["meta"]["exitCode"] == 1
    assert envelope["errors"] == [
        {
            "code": "missing_field",
            "message": error.message,
            "details": {"field": "db.dsn", "path": str(Path("db/config/test.toml"))},
        }
    ]


def test_error_without_dsn_in_details() -> None:
    error = InvalidDriverError(lookup("oracle", "scott/tiger@orcl"))

    entry = build_envelope("config", time.perf_counter(), error=error)["errors"][0]

    assert entry["code"] == "invalid_driver"
    assert "dsn" not in entry["details"]
    assert "tiger" not in entry["message"]


def test_exit_code_follows_error() -> None:
    error = MissingFieldError("db.driver", Path("x.toml"))

    assert CommandEnvelope(command="config").exit_code == 0
    assert CommandEnvelope(command="config", error=error).exit_code == 1
