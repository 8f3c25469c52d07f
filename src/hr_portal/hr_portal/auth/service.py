from __future__ import annotations

from dataclasses import dataclass, replace

from ..accounts.model import Account
from ..common.collections import index_of, replace_at
from ..common.validators import require_fields
from ..core.enums import Role
from ..core.exceptions import ConflictError, ValidationError
from ..state.store import StateStore
from .session import Session


@dataclass(frozen=True)
class ProfileView:
    full_name: str
    email: str
    role: str


class AuthService:
    """Use cases: register, verify, login/logout, own profile."""

    def __init__(self, store: StateStore, session: Session):
        self._store = store
        self._session = session

    def register(self, *, first_name: str, last_name: str, email: str, password: str) -> Account:
        require_fields("Please fill in all fields", first_name, last_name, email, password)
        email = email.strip()

        state = self._store.state
        if state.find_account(email):
            raise ConflictError("Email already registered")

        account = Account(
            first_name=first_name.strip(),
            last_name=last_name.strip(),
            email=email,
            password=password,
            role=Role.USER,
            verified=False,
        )
        self._store.commit(state.with_accounts(state.accounts + (account,)), reason=f"registered {email}")
        return account

    def verify(self) -> Account:
        """Mark the most recently registered account as verified.

        There is no verification code; the last account in the collection is
        the one that just went through registration.
        """
        state = self._store.state
        if not state.accounts:
            raise ValidationError("No account awaiting verification")

        verified = replace(state.accounts[-1], verified=True)
        self._store.commit(state.with_accounts(state.accounts[:-1] + (verified,)), reason=f"verified {verified.email}")
        return verified

    def login(self, email: str, password: str) -> Account:
        return self._session.login(email, password)

    def logout(self) -> None:
        self._session.logout()

    def profile_view(self) -> ProfileView:
        user = self._session.require_user()
        return ProfileView(
            full_name=user.full_name,
            email=user.email,
            role=user.role.value.capitalize(),
        )

    def profile_form(self) -> dict:
        user = self._session.require_user()
        return {"first_name": user.first_name, "last_name": user.last_name, "email": user.email}

    def update_profile(self, *, first_name: str, last_name: str) -> Account:
        user = self._session.require_user()
        require_fields("First Name and Last Name are required", first_name, last_name)

        updated = replace(user, first_name=first_name.strip(), last_name=last_name.strip())
        state = self._store.state
        idx = index_of(state.accounts, lambda a: a.email == user.email)
        self._store.commit(state.with_accounts(replace_at(state.accounts, idx, updated)), reason=f"profile updated {user.email}")
        return updated
