from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    `user_email` points at Account.email and `dept_id` at Department.dept_id;
    neither reference is kept consistent after save.
    """

    employee_id: str
    user_email: str
    position: str
    dept_id: int
    hire_date: str = ""
