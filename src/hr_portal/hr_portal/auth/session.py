from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..accounts.model import Account
from ..common.validators import require_fields
from ..core.exceptions import AuthenticationError, ValidationError
from ..state.store import StateStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthFlags:
    """What the presentation layer needs to toggle nav/admin visibility."""

    is_authenticated: bool
    is_admin: bool
    nav_username: str


class Session:
    """The single active session of this process.

    Only the email is kept; the account itself is looked up in the current
    state on every access, so edits to it are always visible.
    """

    def __init__(self, store: StateStore):
        self._store = store
        self._email: Optional[str] = None

    @property
    def email(self) -> Optional[str]:
        return self._email

    @property
    def user(self) -> Optional[Account]:
        if self._email is None:
            return None
        return self._store.state.find_account(self._email)

    @property
    def flags(self) -> AuthFlags:
        user = self.user
        return AuthFlags(
            is_authenticated=user is not None,
            is_admin=bool(user and user.is_admin),
            nav_username=user.first_name if user else "",
        )

    def is_current(self, email: str) -> bool:
        return self._email is not None and self._email == email

    def login(self, email: str, password: str) -> Account:
        require_fields("Please enter email and password", email, password)
        email = email.strip()

        user = next(
            (
                a
                for a in self._store.state.accounts
                if a.email == email and a.password == password and a.verified
            ),
            None,
        )
        if user is None:
            logger.warning("login rejected for %s", email)
            raise AuthenticationError("Invalid email or password, or account not verified")

        self._store.adapter.remember(user.email)
        self._email = user.email
        logger.info("login %s (role=%s)", user.email, user.role.value)
        return user

    def logout(self) -> None:
        self._store.adapter.forget()
        if self._email:
            logger.info("logout %s", self._email)
        self._email = None

    def restore(self) -> Optional[Account]:
        """Re-establish the session from the remembered token, if it still matches an account."""
        token = self._store.adapter.remembered_token()
        if not token:
            return None
        user = self._store.state.find_account(token)
        if user is not None:
            self._email = user.email
            logger.info("session restored for %s", user.email)
        return user

    def follow_email_change(self, old_email: str, new_email: str) -> None:
        """Keep the session on the same account after its email was edited."""
        if not self.is_current(old_email) or old_email == new_email:
            return
        self._email = new_email
        self._store.adapter.remember(new_email)

    def require_user(self) -> Account:
        user = self.user
        if user is None:
            raise ValidationError("Please log in first")
        return user
