from __future__ import annotations

import pytest

from src.hr_portal.hr_portal.container import build_container, build_kv_store
from src.hr_portal.hr_portal.storage.json_file_store import JsonFileKeyValueStore


def test_file_backend_is_default(tmp_path):
    kv = build_kv_store(backend="", storage_path=tmp_path / "kv.json")

    assert isinstance(kv, JsonFileKeyValueStore)
    assert kv.path == tmp_path / "kv.json"


def test_unknown_backend_is_rejected():
    with pytest.raises(ValueError):
        build_kv_store(backend="redis")


def test_container_over_file_store_persists_between_builds(tmp_path):
    kv = build_kv_store(backend="file", storage_path=tmp_path / "kv.json")
    first = build_container(kv=kv)
    first.auth_service.register(first_name="A", last_name="B", email="a@b.c", password="pw1234")

    second = build_container(kv=build_kv_store(backend="file", storage_path=tmp_path / "kv.json"))

    assert second.store.state.find_account("a@b.c") is not None
