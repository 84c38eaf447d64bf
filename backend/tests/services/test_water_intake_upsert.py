"""Upsert statement: one INSERT with a conflict clause per dialect, no SELECT."""

import datetime

import pytest
from sqlalchemy.dialects import mysql, postgresql, sqlite

from daily_tracker.services.water_intake import build_upsert

DAY = datetime.date(2025, 3, 21)


def _sql(dialect_name, dialect):
    return " ".join(str(build_upsert(dialect_name, DAY, 5).compile(dialect=dialect)).split())


@pytest.mark.parametrize("name", ["mysql", "mariadb"])
def test_mysql_uses_on_duplicate_key_update(name):
    sql = _sql(name, mysql.dialect())
    assert sql.startswith("INSERT INTO water_intake (date, count) VALUES")
    assert sql.endswith("ON DUPLICATE KEY UPDATE count = VALUES(count)")
    assert "SELECT" not in sql


def test_postgresql_uses_on_conflict_on_date():
    sql = _sql("postgresql", postgresql.dialect())
    assert sql.startswith("INSERT INTO water_intake (date, count) VALUES")
    assert "ON CONFLICT (date) DO UPDATE SET count = excluded.count" in sql


def test_sqlite_uses_on_conflict_on_date():
    sql = _sql("sqlite", sqlite.dialect())
    assert "ON CONFLICT (date) DO UPDATE SET count = excluded.count" in sql


def test_unknown_dialect_is_rejected():
    with pytest.raises(ValueError):
        build_upsert("oracle", DAY, 5)
