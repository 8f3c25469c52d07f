"""Persistent Store Adapter.

Owns the serialized shape of the state blob:

    {"accounts": [...], "departments": [...], "employees": [...], "requests": [...]}

The blob lives under one fixed key; the remembered session token lives under a
second key of the same KeyValueStore.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from ..accounts.model import Account
from ..core.constants import AUTH_TOKEN_KEY, STORAGE_KEY
from ..core.enums import RequestStatus, Role
from ..departments.model import Department
from ..employees.model import Employee
from ..requests.model import RequestItem, ResourceRequest
from ..state.model import DomainState
from .kv_store import KeyValueStore
from .seed import seed_state

logger = logging.getLogger(__name__)


def account_to_dict(a: Account) -> Dict[str, Any]:
    return {
        "firstName": a.first_name,
        "lastName": a.last_name,
        "email": a.email,
        "password": a.password,
        "role": a.role.value,
        "verified": a.verified,
    }


def account_from_dict(d: Dict[str, Any]) -> Account:
    return Account(
        first_name=d.get("firstName", ""),
        last_name=d.get("lastName", ""),
        email=d.get("email", ""),
        password=d.get("password", ""),
        role=Role(d.get("role", Role.USER.value)),
        verified=bool(d.get("verified", False)),
    )


def department_to_dict(d: Department) -> Dict[str, Any]:
    return {"id": d.dept_id, "name": d.name, "description": d.description}


def department_from_dict(d: Dict[str, Any]) -> Department:
    return Department(dept_id=int(d["id"]), name=d.get("name", ""), description=d.get("description", ""))


def employee_to_dict(e: Employee) -> Dict[str, Any]:
    return {
        "id": e.employee_id,
        "userId": e.user_email,
        "position": e.position,
        "deptId": e.dept_id,
        "hireDate": e.hire_date,
    }


def employee_from_dict(d: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=str(d.get("id", "")),
        user_email=d.get("userId", ""),
        position=d.get("position", ""),
        dept_id=int(d.get("deptId") or 0),
        hire_date=d.get("hireDate") or "",
    )


def request_to_dict(r: ResourceRequest) -> Dict[str, Any]:
    return {
        "type": r.request_type,
        "items": [{"name": i.name, "qty": i.qty} for i in r.items],
        "status": r.status.value,
        "date": r.date,
        "employeeEmail": r.employee_email,
    }


def request_from_dict(d: Dict[str, Any]) -> ResourceRequest:
    return ResourceRequest(
        request_type=d.get("type", ""),
        items=tuple(RequestItem(name=i["name"], qty=int(i["qty"])) for i in d.get("items", [])),
        status=RequestStatus(d.get("status", RequestStatus.PENDING.value)),
        date=d.get("date", ""),
        employee_email=d.get("employeeEmail", ""),
    )


def state_to_dict(state: DomainState) -> Dict[str, Any]:
    return {
        "accounts": [account_to_dict(a) for a in state.accounts],
        "departments": [department_to_dict(d) for d in state.departments],
        "employees": [employee_to_dict(e) for e in state.employees],
        "requests": [request_to_dict(r) for r in state.requests],
    }


def state_from_dict(data: Dict[str, Any]) -> DomainState:
    return DomainState(
        accounts=tuple(account_from_dict(a) for a in data.get("accounts", [])),
        departments=tuple(department_from_dict(d) for d in data.get("departments", [])),
        employees=tuple(employee_from_dict(e) for e in data.get("employees", [])),
        requests=tuple(request_from_dict(r) for r in data.get("requests", [])),
    )


class PersistentStoreAdapter:
    def __init__(self, kv: KeyValueStore, *, key: str = STORAGE_KEY, token_key: str = AUTH_TOKEN_KEY):
        self._kv = kv
        self._key = key
        self._token_key = token_key

    def load(self) -> DomainState:
        """Return the persisted state, seeding (and persisting) it on first run."""
        raw = self._kv.get_item(self._key)
        if raw:
            return state_from_dict(json.loads(raw))

        state = seed_state()
        self.save(state)
        logger.info("no stored state under %r, seeded defaults", self._key)
        return state

    def save(self, state: DomainState) -> None:
        self._kv.set_item(self._key, json.dumps(state_to_dict(state), ensure_ascii=False))

    def remembered_token(self) -> Optional[str]:
        return self._kv.get_item(self._token_key)

    def remember(self, email: str) -> None:
        self._kv.set_item(self._token_key, email)

    def forget(self) -> None:
        self._kv.remove_item(self._token_key)
