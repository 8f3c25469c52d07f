from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .kv_store import KeyValueStore


class MySQLKeyValueStore(KeyValueStore):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_item(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT v FROM kv_store WHERE k=%s", (key,))
            row = fetchone(cur)
            if not row:
                return None
            return str(row["v"])

    def set_item(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store(k, v) VALUES(%s, %s)
                ON DUPLICATE KEY UPDATE v=VALUES(v)
                """,
                (key, value),
            )

    def remove_item(self, key: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM kv_store WHERE k=%s", (key,))
