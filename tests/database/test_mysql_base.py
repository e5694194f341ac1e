import mysql.connector
import pytest

from src.class_journal.class_journal.core.exceptions import StorageError
from src.class_journal.class_journal.database.mysql_base import db_cursor, ping

from tests.fakes import FakeConnectionFactory


def test_commits_and_releases_on_success():
    factory = FakeConnectionFactory()

    with db_cursor(factory) as (_, cur):
        cur.execute("SELECT 1")

    assert (factory.commits, factory.rollbacks, factory.released) == (1, 0, 1)


def test_domain_errors_roll_back_and_propagate_unchanged():
    factory = FakeConnectionFactory()

    with pytest.raises(KeyError):
        with db_cursor(factory) as (_, cur):
            cur.execute("SELECT 1")
            raise KeyError("boom")

    assert (factory.commits, factory.rollbacks, factory.released) == (0, 1, 1)


def test_connection_failure_is_a_storage_error():
    factory = FakeConnectionFactory(connect_error=mysql.connector.errors.PoolError("pool exhausted"))

    with pytest.raises(StorageError) as exc:
        with db_cursor(factory):
            pass

    assert isinstance(exc.value.__cause__, mysql.connector.Error)


def test_ping_raises_storage_error_when_queries_fail():
    ping(FakeConnectionFactory())

    with pytest.raises(StorageError):
        ping(FakeConnectionFactory(fail_with=mysql.connector.errors.OperationalError("gone away")))
