from __future__ import annotations

import json

from src.hr_portal.hr_portal.accounts.model import Account
from src.hr_portal.hr_portal.core.constants import AUTH_TOKEN_KEY, STORAGE_KEY
from src.hr_portal.hr_portal.core.enums import RequestStatus, Role
from src.hr_portal.hr_portal.employees.model import Employee
from src.hr_portal.hr_portal.requests.model import RequestItem, ResourceRequest
from src.hr_portal.hr_portal.storage.adapter import PersistentStoreAdapter
from src.hr_portal.hr_portal.storage.seed import seed_state


def test_first_load_seeds_and_persists_defaults(kv):
    state = PersistentStoreAdapter(kv).load()

    assert [a.email for a in state.accounts] == ["admin@example.com"]
    admin = state.accounts[0]
    assert admin.role == Role.ADMIN and admin.verified and admin.password == "Password123!"
    assert [(d.dept_id, d.name) for d in state.departments] == [(1, "Engineering"), (2, "HR")]
    assert state.employees == () and state.requests == ()

    blob = json.loads(kv.data[STORAGE_KEY])
    assert list(blob) == ["accounts", "departments", "employees", "requests"]
    assert blob["accounts"][0] == {
        "firstName": "Admin",
        "lastName": "User",
        "email": "admin@example.com",
        "password": "Password123!",
        "role": "admin",
        "verified": True,
    }


def test_existing_blob_is_loaded_without_reseeding(kv):
    blob = {"accounts": [], "departments": [{"id": 7, "name": "Ops", "description": "x"}], "employees": [], "requests": []}
    kv.data[STORAGE_KEY] = json.dumps(blob)

    state = PersistentStoreAdapter(kv).load()

    assert state.accounts == ()
    assert state.departments[0].dept_id == 7
    assert kv.writes == []


def _rich_state():
    state = seed_state()
    return (
        state.with_accounts(
            state.accounts
            + (Account(first_name="Jane", last_name="Doe", email="jane@example.com", password="pw", role=Role.USER),)
        )
        .with_employees([Employee(employee_id="E-1", user_email="jane@example.com", position="Dev", dept_id=1, hire_date="2026-01-02")])
        .with_requests(
            [
                ResourceRequest(
                    request_type="Equipment",
                    items=(RequestItem("Laptop", 2), RequestItem("Mouse", 1)),
                    status=RequestStatus.PENDING,
                    date="2026-03-14",
                    employee_email="jane@example.com",
                )
            ]
        )
    )


def test_saving_twice_without_changes_writes_identical_content(kv):
    adapter = PersistentStoreAdapter(kv)
    state = _rich_state()

    adapter.save(state)
    first = kv.data[STORAGE_KEY]
    adapter.save(state)

    assert kv.data[STORAGE_KEY] == first


def test_load_after_save_returns_equal_state(kv):
    adapter = PersistentStoreAdapter(kv)
    state = _rich_state()

    adapter.save(state)

    assert PersistentStoreAdapter(kv).load() == state


def test_request_items_use_qty_field(kv):
    PersistentStoreAdapter(kv).save(_rich_state())

    stored = json.loads(kv.data[STORAGE_KEY])["requests"][0]
    assert stored["items"] == [{"name": "Laptop", "qty": 2}, {"name": "Mouse", "qty": 1}]
    assert stored["status"] == "Pending"
    assert stored["employeeEmail"] == "jane@example.com"


def test_remembered_token_is_a_separate_key(kv):
    adapter = PersistentStoreAdapter(kv)

    adapter.remember("admin@example.com")
    assert kv.data[AUTH_TOKEN_KEY] == "admin@example.com"
    assert adapter.remembered_token() == "admin@example.com"

    adapter.forget()
    assert adapter.remembered_token() is None
