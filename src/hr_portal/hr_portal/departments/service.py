from __future__ import annotations

from typing import List, Optional

from ..core.exceptions import NotSupportedError
from ..state.store import StateStore


class DepartmentService:
    """Departments are seeded once and are read-only in the portal."""

    def __init__(self, store: StateStore):
        self._store = store

    def render(self) -> List[dict]:
        return [{"id": d.dept_id, "name": d.name, "description": d.description} for d in self._store.state.departments]

    def options(self) -> List[dict]:
        return [{"value": d.dept_id, "label": d.name} for d in self._store.state.departments]

    def add(self, **_fields) -> None:
        raise NotSupportedError("Not implemented")

    def edit(self, dept_id: Optional[int], **_fields) -> None:
        raise NotSupportedError("Not implemented")

    def delete(self, dept_id: Optional[int]) -> None:
        raise NotSupportedError("Not implemented")
