from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .accounts.service import AccountService
from .auth.service import AuthService
from .auth.session import Session
from .database.bootstrap import ensure_database_exists, ensure_kv_table
from .database.connection import DBConfig, DatabaseConnection
from .departments.service import DepartmentService
from .employees.service import EmployeeService
from .requests.service import RequestService
from .routing.pages import build_pages
from .routing.router import Router
from .state.store import StateStore
from .storage.adapter import PersistentStoreAdapter
from .storage.json_file_store import JsonFileKeyValueStore
from .storage.kv_store import KeyValueStore
from .storage.mysql_kv_store import MySQLKeyValueStore


@dataclass(frozen=True)
class Container:
    kv: KeyValueStore
    store: StateStore
    session: Session

    auth_service: AuthService
    account_service: AccountService
    department_service: DepartmentService
    employee_service: EmployeeService
    request_service: RequestService

    router: Router


def build_kv_store(
    *,
    backend: str,
    storage_path: str | Path = "",
    db_config: dict | None = None,
    auto_init_db: bool = False,
) -> KeyValueStore:
    backend = (backend or "file").lower()
    if backend == "file":
        return JsonFileKeyValueStore(storage_path or "instance/hr_portal.json")

    if backend == "mysql":
        config = DBConfig.from_dict(db_config or {})
        conn = DatabaseConnection.get_instance(config)
        if auto_init_db:
            ensure_database_exists(config)
            ensure_kv_table(conn)
        return MySQLKeyValueStore(conn)

    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r}")


def build_container(*, kv: KeyValueStore) -> Container:
    """Load state, restore the remembered session and wire every service."""
    store = StateStore(PersistentStoreAdapter(kv))
    session = Session(store)
    session.restore()

    auth_service = AuthService(store, session)
    account_service = AccountService(store, session)
    department_service = DepartmentService(store)
    employee_service = EmployeeService(store)
    request_service = RequestService(store, session)

    router = Router(
        session,
        build_pages(
            auth_service=auth_service,
            account_service=account_service,
            department_service=department_service,
            employee_service=employee_service,
            request_service=request_service,
        ),
    )

    return Container(
        kv=kv,
        store=store,
        session=session,
        auth_service=auth_service,
        account_service=account_service,
        department_service=department_service,
        employee_service=employee_service,
        request_service=request_service,
        router=router,
    )


def kv_store_from_settings(settings) -> KeyValueStore:
    return build_kv_store(
        backend=getattr(settings, "STORAGE_BACKEND", "file"),
        storage_path=getattr(settings, "STORAGE_PATH", ""),
        db_config=getattr(settings, "DB_CONFIG", None),
        auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
    )
