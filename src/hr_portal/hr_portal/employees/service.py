from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..common.collections import index_of, remove_at, replace_at
from ..common.validators import parse_int_prefix, require_fields
from ..core.constants import EMPTY_CELL
from ..core.exceptions import ReferenceNotFoundError, ValidationError
from ..state.store import StateStore
from .model import Employee

REQUIRED_MESSAGE = "Please fill in all required fields"


@dataclass(frozen=True)
class EmployeeForm:
    title: str
    employee_id: str = ""
    user_email: str = ""
    position: str = ""
    dept_id: str = ""
    hire_date: str = ""
    editing_id: Optional[str] = None
    editing_row: Optional[int] = None


class EmployeeService:
    """Use case: admin-managed employee records.

    Ids are caller supplied and may repeat. Actions coming from the table
    carry the row position as well, checked against the id; without one
    the first employee with that id is used.
    """

    def __init__(self, store: StateStore):
        self._store = store

    def _index(self, employee_id: str, row: Optional[int] = None) -> int:
        employees = self._store.state.employees
        if row is not None:
            if 0 <= row < len(employees) and employees[row].employee_id == employee_id:
                return row
            raise ValidationError("Employee not found")
        idx = index_of(employees, lambda e: e.employee_id == employee_id)
        if idx is None:
            raise ValidationError("Employee not found")
        return idx

    def render(self) -> List[dict]:
        state = self._store.state
        rows: list[dict] = []
        for i, e in enumerate(state.employees):
            user = state.find_account(e.user_email)
            dept = state.find_department(e.dept_id)
            rows.append(
                {
                    "row": i,
                    "id": e.employee_id,
                    "user_email": user.email if user else EMPTY_CELL,
                    "position": e.position,
                    "department": dept.name if dept else EMPTY_CELL,
                    "hire_date": e.hire_date,
                }
            )
        return rows

    def show_form(self, employee_id: Optional[str] = None, row: Optional[int] = None) -> EmployeeForm:
        if employee_id is None:
            return EmployeeForm(title="Add Employee")

        idx = self._index(employee_id, row)
        emp = self._store.state.employees[idx]
        return EmployeeForm(
            title="Edit Employee",
            employee_id=emp.employee_id,
            user_email=emp.user_email,
            position=emp.position,
            dept_id=str(emp.dept_id),
            hire_date=emp.hire_date or "",
            editing_id=emp.employee_id,
            editing_row=idx,
        )

    def save(
        self,
        *,
        employee_id: str,
        user_email: str,
        position: str,
        dept_id: str,
        hire_date: str = "",
        editing_id: Optional[str] = None,
        editing_row: Optional[int] = None,
    ) -> Employee:
        require_fields(REQUIRED_MESSAGE, employee_id, user_email, position)
        dept = parse_int_prefix(dept_id)
        if not dept:
            raise ValidationError(REQUIRED_MESSAGE)

        user_email = user_email.strip()
        state = self._store.state
        if state.find_account(user_email) is None:
            raise ReferenceNotFoundError("User email not found in accounts")

        emp = Employee(
            employee_id=employee_id.strip(),
            user_email=user_email,
            position=position.strip(),
            dept_id=dept,
            hire_date=(hire_date or "").strip(),
        )

        if editing_id is not None:
            idx = self._index(editing_id, editing_row)
            self._store.commit(
                state.with_employees(replace_at(state.employees, idx, emp)),
                reason=f"employee updated {editing_id}",
            )
        else:
            self._store.commit(state.with_employees(state.employees + (emp,)), reason=f"employee added {emp.employee_id}")
        return emp

    def delete(self, employee_id: str, *, confirmed: bool = True, row: Optional[int] = None) -> bool:
        idx = self._index(employee_id, row)
        if not confirmed:
            return False

        state = self._store.state
        self._store.commit(state.with_employees(remove_at(state.employees, idx)), reason=f"employee deleted {employee_id}")
        return True
