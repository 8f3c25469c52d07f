from __future__ import annotations

from src.hr_portal.hr_portal.storage.mysql_kv_store import MySQLKeyValueStore


class FakeCursor:
    def __init__(self, table):
        self._table = table
        self._row = None

    def execute(self, sql, params=()):
        stmt = " ".join(sql.split())
        if stmt.startswith("SELECT"):
            key = params[0]
            self._row = {"v": self._table[key]} if key in self._table else None
        elif stmt.startswith("INSERT"):
            self._table[params[0]] = params[1]
        elif stmt.startswith("DELETE"):
            self._table.pop(params[0], None)

    def fetchone(self):
        return self._row

    def close(self):
        pass


class FakeConnection:
    def __init__(self, table, log):
        self._table = table
        self._log = log

    def cursor(self, dictionary=True):
        return FakeCursor(self._table)

    def commit(self):
        self._log.append("commit")

    def rollback(self):
        self._log.append("rollback")

    def close(self):
        self._log.append("close")


class FakeConnFactory:
    def __init__(self):
        self.table: dict[str, str] = {}
        self.log: list[str] = []

    def connect(self):
        return FakeConnection(self.table, self.log)


def test_roundtrip_through_kv_table():
    factory = FakeConnFactory()
    store = MySQLKeyValueStore(factory)

    assert store.get_item("ipt_demo_v1") is None
    store.set_item("ipt_demo_v1", '{"accounts": []}')
    store.set_item("ipt_demo_v1", '{"accounts": [1]}')
    assert store.get_item("ipt_demo_v1") == '{"accounts": [1]}'

    store.remove_item("ipt_demo_v1")
    assert store.get_item("ipt_demo_v1") is None


def test_each_operation_commits_and_closes():
    factory = FakeConnFactory()
    MySQLKeyValueStore(factory).set_item("k", "v")

    assert factory.log == ["commit", "close"]
