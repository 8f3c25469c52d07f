from __future__ import annotations

from datetime import date

import pytest

from src.hr_portal.hr_portal.common import datetime_utils
from src.hr_portal.hr_portal.container import build_container
from src.hr_portal.hr_portal.storage.seed import SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD


class InMemoryKeyValueStore:
    def __init__(self, data=None):
        self.data: dict[str, str] = dict(data or {})
        self.writes: list[str] = []

    def get_item(self, key):
        return self.data.get(key)

    def set_item(self, key, value):
        self.data[key] = value
        self.writes.append(key)

    def remove_item(self, key):
        self.data.pop(key, None)


@pytest.fixture
def kv():
    return InMemoryKeyValueStore()


@pytest.fixture
def container(kv):
    return build_container(kv=kv)


@pytest.fixture
def as_admin(container):
    container.session.login(SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD)
    return container


@pytest.fixture
def add_user(container):
    """Register + verify a plain user account directly through the services."""

    def _add(email="jane@example.com", password="secret1", first_name="Jane", last_name="Doe", verified=True):
        container.auth_service.register(first_name=first_name, last_name=last_name, email=email, password=password)
        if verified:
            container.auth_service.verify()
        return container.store.state.find_account(email)

    return _add


@pytest.fixture
def fixed_today(monkeypatch):
    today = date(2026, 3, 14)
    monkeypatch.setattr(datetime_utils, "today_local", lambda: today)
    return today


@pytest.fixture
def app(monkeypatch, kv):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.hr_portal.hr_portal.main import create_app

    flask_app = create_app(kv=kv)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
