from __future__ import annotations

import json

import pytest

from src.hr_portal.hr_portal.core.constants import STORAGE_KEY
from src.hr_portal.hr_portal.core.enums import RequestStatus
from src.hr_portal.hr_portal.core.exceptions import ValidationError
from src.hr_portal.hr_portal.requests.model import RequestItem
from src.hr_portal.hr_portal.requests.service import NewItem, RequestDraft, collect_items, parse_qty


def test_empty_named_items_are_dropped(as_admin, kv, fixed_today):
    req = as_admin.request_service.submit(
        request_type="Equipment",
        items=[NewItem("Laptop", 2), NewItem("", 1)],
    )

    assert req.items == (RequestItem("Laptop", 2),)
    assert req.status == RequestStatus.PENDING
    assert req.date == fixed_today.isoformat()
    assert req.employee_email == "admin@example.com"

    stored = json.loads(kv.data[STORAGE_KEY])["requests"]
    assert stored == [
        {
            "type": "Equipment",
            "items": [{"name": "Laptop", "qty": 2}],
            "status": "Pending",
            "date": "2026-03-14",
            "employeeEmail": "admin@example.com",
        }
    ]


def test_no_surviving_items_is_rejected(as_admin, kv):
    blob = kv.data[STORAGE_KEY]

    with pytest.raises(ValidationError) as exc:
        as_admin.request_service.submit(request_type="Equipment", items=[NewItem("  ", 3), NewItem(None)])

    assert str(exc.value) == "Please add at least one item"
    assert kv.data[STORAGE_KEY] == blob


@pytest.mark.parametrize(
    "raw,expected",
    [("3", 3), (4, 4), ("", 1), ("abc", 1), (None, 1), ("0", 1), ("-2", 1), ("5x", 5)],
)
def test_parse_qty(raw, expected):
    assert parse_qty(raw) == expected


def test_collect_items_strips_names():
    assert collect_items([NewItem(" Mouse ", "1"), NewItem("Desk", "")]) == (
        RequestItem("Mouse", 1),
        RequestItem("Desk", 1),
    )


def test_render_shows_only_own_requests(container, add_user, fixed_today):
    add_user(email="jane@example.com", password="secret1")

    container.session.login("admin@example.com", "Password123!")
    container.request_service.submit(request_type="Equipment", items=[NewItem("Monitor", 1)])
    container.session.logout()

    container.session.login("jane@example.com", "secret1")
    assert container.request_service.render() == {"rows": [], "is_empty": True}

    container.request_service.submit(request_type="Resources", items=[NewItem("Laptop", 2), NewItem("Mouse", 1)])
    view = container.request_service.render()

    assert view["is_empty"] is False
    assert view["rows"] == [
        {
            "type": "Resources",
            "items_display": "Laptop (2), Mouse (1)",
            "date": "2026-03-14",
            "status": "Pending",
            "badge": "bg-warning",
        }
    ]


def test_submit_requires_session(container):
    with pytest.raises(ValidationError):
        container.request_service.submit(request_type="Equipment", items=[NewItem("Laptop", 1)])


def test_draft_starts_with_one_blank_row():
    draft = RequestDraft()

    assert draft.request_type == ""
    assert draft.items == (NewItem("", 1),)


def test_draft_keeps_typed_rows_when_adding_one():
    draft = RequestDraft.from_form("Leave", ["Laptop", "Mouse"], ["3", "1"]).with_row_added()

    assert draft.request_type == "Leave"
    assert [(i.name, i.qty) for i in draft.items] == [("Laptop", "3"), ("Mouse", "1"), ("", 1)]


def test_draft_removes_the_chosen_row():
    draft = RequestDraft.from_form("Equipment", ["Laptop", "Mouse", "Desk"], ["1", "2", "3"])

    assert [i.name for i in draft.with_row_removed(1).items] == ["Laptop", "Desk"]

    with pytest.raises(ValidationError) as exc:
        draft.with_row_removed(3)
    assert str(exc.value) == "Item row not found"


def test_draft_keeps_at_least_one_row():
    with pytest.raises(ValidationError) as exc:
        RequestDraft().with_row_removed(0)
    assert str(exc.value) == "At least one item is required"


def test_draft_survives_the_session_cookie():
    draft = RequestDraft.from_form("Resources", ["Chair"], ["abc"])

    restored = RequestDraft.from_dict(json.loads(json.dumps(draft.to_dict())))

    assert restored == draft
    assert RequestDraft.from_dict(None) == RequestDraft()
