"""Tests for the driver registry and dialect lookup."""

import pytest

from migrant.dialects import SqlDialect, dialect_by_name
from migrant.drivers import DriverInfo, known_drivers, lookup


@pytest.mark.parametrize("name", ["postgres", "mysql", "mymysql"])
def test_known_driver_is_valid(name: str) -> None:
    info = lookup(name)

    assert info.name == name
    assert info.import_path
    assert info.dialect is not None
    assert info.is_valid()


def test_mysql_family_shares_dialect() -> None:
    assert lookup("mysql").dialect is SqlDialect.MYSQL
    assert lookup("mymysql").dialect is SqlDialect.MYSQL
    assert lookup("mysql").import_path != lookup("mymysql").import_path


def test_postgres_driver_metadata() -> None:
    info = lookup("postgres", "dbname=app")

    assert info.import_path == "github.com/lib/pq"
    assert info.dialect is SqlDialect.POSTGRES
    assert info.dsn == "dbname=app"


@pytest.mark.parametrize("name", ["oracle", "", "Postgres", "sqlite3"])
def test_unknown_driver_is_invalid(name: str) -> None:
    info = lookup(name)

    assert info.name == name
    assert info.import_path == ""
    assert info.dialect is None
    assert not info.is_valid()


def test_lookup_returns_fresh_instances() -> None:
    first = lookup("postgres")
    first.import_path = "example.com/other"

    second = lookup("postgres")

    assert second.import_path == "github.com/lib/pq"
    assert first is not second


def test_lookup_is_idempotent() -> None:
    assert lookup("mysql", "root@/app") == lookup("mysql", "root@/app")


def test_is_valid_requires_both_import_and_dialect() -> None:
    assert not DriverInfo(name="x", import_path="example.com/x").is_valid()
    assert not DriverInfo(name="x", dialect=SqlDialect.MYSQL).is_valid()
    assert DriverInfo(name="x", import_path="example.com/x", dialect=SqlDialect.MYSQL).is_valid()


def test_known_drivers_sorted() -> None:
    assert known_drivers() == ["mymysql", "mysql", "postgres"]


class TestDialectByName:
    """Tests for dialect_by_name."""

    def test_known_names(self) -> None:
        assert dialect_by_name("postgres") is SqlDialect.POSTGRES
        assert dialect_by_name("mysql") is SqlDialect.MYSQL

    def test_unknown_name_returns_none(self) -> None:
        assert dialect_by_name("oracle") is None
        assert dialect_by_name("") is None
        assert dialect_by_name("mymysql") is None
