from __future__ import annotations

from ..accounts.model import Account
from ..core.enums import Role
from ..departments.model import Department
from ..state.model import DomainState

SEED_ADMIN_EMAIL = "admin@example.com"
SEED_ADMIN_PASSWORD = "Password123!"


def seed_state() -> DomainState:
    """First-run data: one verified admin and two departments."""
    return DomainState(
        accounts=(
            Account(
                first_name="Admin",
                last_name="User",
                email=SEED_ADMIN_EMAIL,
                password=SEED_ADMIN_PASSWORD,
                role=Role.ADMIN,
                verified=True,
            ),
        ),
        departments=(
            Department(dept_id=1, name="Engineering", description="Software development team"),
            Department(dept_id=2, name="HR", description="Human resources team"),
        ),
        employees=(),
        requests=(),
    )
