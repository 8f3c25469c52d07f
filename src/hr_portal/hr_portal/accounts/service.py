from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional

from ..auth.session import Session
from ..common.collections import index_of, remove_at, replace_at
from ..common.validators import require_fields, require_min_length
from ..core.constants import EMPTY_CELL, MIN_RESET_PASSWORD_LENGTH
from ..core.enums import Role
from ..core.exceptions import ConflictError, PolicyError, ValidationError
from ..state.store import StateStore
from .model import Account


@dataclass(frozen=True)
class AccountForm:
    """Values shown in (or submitted from) the add/edit account form."""

    title: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    role: str = Role.USER.value
    verified: bool = False
    editing_email: Optional[str] = None
    editing_row: Optional[int] = None


class AccountService:
    """Use case: admin-managed accounts.

    Rows are addressed by email plus, when the page supplied one, the row
    position it was rendered at. Emails may repeat after an admin edit, so
    the position picks the row and the email guards against a stale page.
    """

    def __init__(self, store: StateStore, session: Session):
        self._store = store
        self._session = session

    def _index(self, email: str, row: Optional[int] = None) -> int:
        accounts = self._store.state.accounts
        if row is not None:
            if 0 <= row < len(accounts) and accounts[row].email == email:
                return row
            raise ValidationError("Account not found")
        idx = index_of(accounts, lambda a: a.email == email)
        if idx is None:
            raise ValidationError("Account not found")
        return idx

    def render(self) -> List[dict]:
        return [
            {
                "row": i,
                "name": a.full_name,
                "email": a.email,
                "role": a.role.value,
                "verified": "✅" if a.verified else EMPTY_CELL,
            }
            for i, a in enumerate(self._store.state.accounts)
        ]

    def show_form(self, email: Optional[str] = None, row: Optional[int] = None) -> AccountForm:
        if email is None:
            return AccountForm(title="Add Account")

        idx = self._index(email, row)
        account = self._store.state.accounts[idx]
        return AccountForm(
            title="Edit Account",
            first_name=account.first_name,
            last_name=account.last_name,
            email=account.email,
            password="",
            role=account.role.value,
            verified=account.verified,
            editing_email=account.email,
            editing_row=idx,
        )

    def save(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        password: str,
        role: str,
        verified: bool,
        editing_email: Optional[str] = None,
        editing_row: Optional[int] = None,
    ) -> Account:
        require_fields("Please fill in all required fields", first_name, last_name, email, role)
        try:
            role_v = Role(role)
        except ValueError:
            raise ValidationError("Invalid role")

        first_name, last_name, email = first_name.strip(), last_name.strip(), email.strip()
        state = self._store.state

        if editing_email is not None:
            idx = self._index(editing_email, editing_row)
            current = state.accounts[idx]
            was_current = self._session.user is current
            updated = replace(
                current,
                first_name=first_name,
                last_name=last_name,
                email=email,
                role=role_v,
                verified=bool(verified),
                password=password if password else current.password,
            )
            self._store.commit(
                state.with_accounts(replace_at(state.accounts, idx, updated)),
                reason=f"account updated {editing_email}",
            )
            if was_current:
                self._session.follow_email_change(editing_email, email)
            return updated

        if not password:
            raise ValidationError("Password is required for new accounts")
        if state.find_account(email):
            raise ConflictError("Email already exists")

        account = Account(
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=password,
            role=role_v,
            verified=bool(verified),
        )
        self._store.commit(state.with_accounts(state.accounts + (account,)), reason=f"account added {email}")
        return account

    def reset_password(self, email: str, new_password: Optional[str], row: Optional[int] = None) -> bool:
        """Return False when the prompt was cancelled (nothing changes)."""
        if new_password is None:
            return False

        idx = self._index(email, row)
        require_min_length(
            new_password,
            MIN_RESET_PASSWORD_LENGTH,
            f"Password must be at least {MIN_RESET_PASSWORD_LENGTH} characters",
        )

        state = self._store.state
        updated = replace(state.accounts[idx], password=new_password)
        self._store.commit(state.with_accounts(replace_at(state.accounts, idx, updated)), reason=f"password reset {email}")
        return True

    def delete_prompt(self, email: str) -> str:
        return f'Delete account "{email}"?'

    def delete(self, email: str, *, confirmed: bool = True, row: Optional[int] = None) -> bool:
        idx = self._index(email, row)
        state = self._store.state
        if self._session.user is state.accounts[idx]:
            raise PolicyError("You cannot delete your own account!")
        if not confirmed:
            return False

        self._store.commit(state.with_accounts(remove_at(state.accounts, idx)), reason=f"account deleted {email}")
        return True
