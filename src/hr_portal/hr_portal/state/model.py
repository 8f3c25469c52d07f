from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from ..accounts.model import Account
from ..departments.model import Department
from ..employees.model import Employee
from ..requests.model import ResourceRequest


@dataclass(frozen=True)
class DomainState:
    """Snapshot of every collection the app knows about.

    Snapshots are never mutated; services build a new one and hand it to
    StateStore.commit().
    """

    accounts: Tuple[Account, ...] = field(default_factory=tuple)
    departments: Tuple[Department, ...] = field(default_factory=tuple)
    employees: Tuple[Employee, ...] = field(default_factory=tuple)
    requests: Tuple[ResourceRequest, ...] = field(default_factory=tuple)

    def find_account(self, email: str) -> Optional[Account]:
        return next((a for a in self.accounts if a.email == email), None)

    def find_department(self, dept_id: int) -> Optional[Department]:
        return next((d for d in self.departments if d.dept_id == dept_id), None)

    def find_employee(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self.employees if e.employee_id == employee_id), None)

    def with_accounts(self, accounts) -> "DomainState":
        return replace(self, accounts=tuple(accounts))

    def with_employees(self, employees) -> "DomainState":
        return replace(self, employees=tuple(employees))

    def with_requests(self, requests) -> "DomainState":
        return replace(self, requests=tuple(requests))
