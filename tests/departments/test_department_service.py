from __future__ import annotations

import pytest

from src.hr_portal.hr_portal.core.constants import STORAGE_KEY
from src.hr_portal.hr_portal.core.exceptions import NotSupportedError


def test_render_seeded_departments(container):
    assert container.department_service.render() == [
        {"id": 1, "name": "Engineering", "description": "Software development team"},
        {"id": 2, "name": "HR", "description": "Human resources team"},
    ]


def test_options_for_employee_form(container):
    assert container.department_service.options() == [
        {"value": 1, "label": "Engineering"},
        {"value": 2, "label": "HR"},
    ]


@pytest.mark.parametrize(
    "call",
    [
        lambda svc: svc.add(name="Ops", description="x"),
        lambda svc: svc.edit(1, name="Eng"),
        lambda svc: svc.delete(2),
    ],
)
def test_changes_are_not_supported(container, kv, call):
    blob = kv.data[STORAGE_KEY]

    with pytest.raises(NotSupportedError) as exc:
        call(container.department_service)

    assert str(exc.value) == "Not implemented"
    assert kv.data[STORAGE_KEY] == blob
    assert len(container.store.state.departments) == 2
