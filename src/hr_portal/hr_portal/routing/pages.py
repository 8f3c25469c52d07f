from __future__ import annotations

from typing import List

from ..accounts.service import AccountService
from ..auth.service import AuthService
from ..core.enums import Page
from ..departments.service import DepartmentService
from ..employees.service import EmployeeService
from ..requests.service import RequestService
from .router import PageSpec


def build_pages(
    *,
    auth_service: AuthService,
    account_service: AccountService,
    department_service: DepartmentService,
    employee_service: EmployeeService,
    request_service: RequestService,
) -> List[PageSpec]:
    return [
        PageSpec(Page.HOME.value),
        PageSpec(Page.LOGIN.value),
        PageSpec(Page.REGISTER.value),
        PageSpec(Page.VERIFY.value),
        PageSpec(Page.PROFILE.value, requires_auth=True, render=auth_service.profile_view),
        PageSpec(Page.ACCOUNTS.value, requires_auth=True, admin_only=True, render=account_service.render),
        PageSpec(Page.DEPARTMENT.value, requires_auth=True, admin_only=True, render=department_service.render),
        PageSpec(Page.EMPLOYEE.value, requires_auth=True, admin_only=True, render=employee_service.render),
        PageSpec(Page.REQUESTS.value, requires_auth=True, render=request_service.render),
    ]
