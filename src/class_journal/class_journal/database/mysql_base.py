from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StorageError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One transaction: commit on normal exit, rollback on any error.

    Driver errors are re-raised as ``StorageError``; the connection goes back
    to the pool on every exit path.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        raise StorageError(f"Database unavailable: {e}") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        _rollback_quietly(conn)
        raise StorageError(str(e)) from e
    except Exception:
        _rollback_quietly(conn)
        raise
    finally:
        conn_factory.release(conn)


def _rollback_quietly(conn) -> None:
    try:
        conn.rollback()
    except mysql.connector.Error:
        # Connection already gone; the server discards the transaction.
        pass


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def ping(conn_factory: DatabaseConnection) -> None:
    """Round-trip ``SELECT 1``; raises ``StorageError`` when unreachable."""
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SELECT 1")
        cur.fetchall()
