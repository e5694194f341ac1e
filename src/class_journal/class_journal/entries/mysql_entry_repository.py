from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Entry
from .repository import EntryRepository

_COLUMNS = "id, name, date, note, updated_at"


def _to_entry(r: dict[str, Any]) -> Entry:
    return Entry(
        entry_id=int(r["id"]),
        name=r["name"],
        date=r.get("date"),
        note=r.get("note"),
        updated_at=r.get("updated_at"),
    )


class MySQLEntryRepository(EntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Entry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM entries ORDER BY id DESC")
            return [_to_entry(r) for r in fetchall(cur)]

    def create(self, *, name: str, date: Optional[str], note: Optional[str], updated_at: str) -> Entry:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO entries(name, date, note, updated_at) VALUES(%s,%s,%s,%s)",
                (name, date, note, updated_at),
            )
            return Entry(entry_id=int(cur.lastrowid), name=name, date=date, note=note, updated_at=updated_at)

    def update(
        self,
        *,
        entry_id: int,
        name: str,
        date: Optional[str],
        note: Optional[str],
        updated_at: str,
    ) -> Optional[Entry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE entries SET name=%s, date=%s, note=%s, updated_at=%s WHERE id=%s",
                (name, date, note, updated_at, int(entry_id)),
            )
            # rowcount is 0 for an unchanged row too; look the row up instead.
            cur.execute(f"SELECT {_COLUMNS} FROM entries WHERE id=%s", (int(entry_id),))
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def delete(self, entry_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM entries WHERE id=%s", (int(entry_id),))
            return cur.rowcount > 0
