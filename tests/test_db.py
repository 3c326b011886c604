"""
Tests for the connection helper, schema creation and repository factory.
"""
import logging

import psycopg2
import pytest

import db.connection as connection
from db.exceptions import DatabaseError, wrap_driver_error
from db.init_db import SCHEMA_SQL, create_tables
from repositories import factory
from repositories.department_repo import DepartmentRepository
from repositories.seller_repo import SellerRepository
from tests.fakes import FakeConnection


@pytest.fixture(autouse=True)
def reset_shared_connection(monkeypatch):
    monkeypatch.setattr(connection, "_conn", None)


def test_get_connection_opens_once(monkeypatch):
    opened = []

    def fake_connect(dsn):
        opened.append(dsn)
        return FakeConnection()

    monkeypatch.setattr(connection.psycopg2, "connect", fake_connect)

    first = connection.get_connection("postgresql://u:p@h:5432/d")
    second = connection.get_connection("postgresql://u:p@h:5432/d")

    assert first is second
    assert opened == ["postgresql://u:p@h:5432/d"]


def test_get_connection_wraps_driver_error(monkeypatch):
    def refuse(dsn):
        raise psycopg2.OperationalError("could not connect to server: Connection refused")

    monkeypatch.setattr(connection.psycopg2, "connect", refuse)

    with pytest.raises(DatabaseError, match="Connection refused"):
        connection.get_connection("postgresql://u:p@h:5432/d")


def test_close_connection(monkeypatch):
    conn = FakeConnection()
    monkeypatch.setattr(connection, "_conn", conn)

    connection.close_connection()
    connection.close_connection()

    assert conn.closed
    assert connection._conn is None


def test_create_tables_executes_schema_and_commits():
    conn = FakeConnection()

    create_tables(conn)

    assert conn.executed == [(SCHEMA_SQL, None)]
    assert conn.commits == 1
    assert "CREATE TABLE IF NOT EXISTS seller" in SCHEMA_SQL
    assert "REFERENCES department(Id)" in SCHEMA_SQL


def test_seller_data_columns_are_nullable():
    assert "BaseSalary      DOUBLE PRECISION,\n" in SCHEMA_SQL
    assert "DepartmentId    INTEGER NOT NULL REFERENCES department(Id)" in SCHEMA_SQL


def test_create_tables_wraps_failure():
    conn = FakeConnection()
    conn.queue_error(psycopg2.ProgrammingError("permission denied for schema public"))

    with pytest.raises(DatabaseError, match="permission denied"):
        create_tables(conn)
    assert conn.rollbacks == 1


def test_factory_uses_given_connection():
    conn = FakeConnection()

    sellers = factory.create_seller_repository(conn)
    departments = factory.create_department_repository(conn)

    assert isinstance(sellers, SellerRepository) and sellers.conn is conn
    assert isinstance(departments, DepartmentRepository) and departments.conn is conn


def test_factory_falls_back_to_shared_connection(monkeypatch):
    shared = FakeConnection()
    monkeypatch.setattr(factory, "get_connection", lambda: shared)

    assert factory.create_seller_repository().conn is shared
    assert factory.create_department_repository().conn is shared


def test_shared_connection_is_autocommit(monkeypatch):
    monkeypatch.setattr(connection.psycopg2, "connect", lambda dsn: FakeConnection())

    conn = connection.get_connection("postgresql://u:p@h:5432/d")

    assert conn.autocommit is True


def test_injected_connection_keeps_its_transaction_mode():
    conn = FakeConnection()

    factory.create_seller_repository(conn)

    assert conn.autocommit is False


def test_wrap_driver_error_rolls_back_and_logs(caplog):
    conn = FakeConnection()
    original = psycopg2.OperationalError("connection reset by peer")

    with caplog.at_level(logging.ERROR, logger="tests.wrap"):
        wrapped = wrap_driver_error(conn, "list sellers", original, logging.getLogger("tests.wrap"))

    assert isinstance(wrapped, DatabaseError)
    assert str(wrapped) == "connection reset by peer"
    assert conn.rollbacks == 1
    assert "Failed to list sellers: connection reset by peer" in caplog.text


def test_wrap_driver_error_survives_failed_rollback(monkeypatch, caplog):
    conn = FakeConnection()

    def broken_rollback():
        raise psycopg2.InterfaceError("connection already closed")

    monkeypatch.setattr(conn, "rollback", broken_rollback)

    with caplog.at_level(logging.WARNING, logger="tests.wrap"):
        wrapped = wrap_driver_error(
            conn, "delete seller #1", psycopg2.OperationalError("terminating connection"),
            logging.getLogger("tests.wrap"),
        )

    assert str(wrapped) == "terminating connection"
    assert "Rollback after failed delete seller #1 also failed" in caplog.text
