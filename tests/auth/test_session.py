from __future__ import annotations

import pytest

from src.hr_portal.hr_portal.container import build_container
from src.hr_portal.hr_portal.core.constants import AUTH_TOKEN_KEY
from src.hr_portal.hr_portal.core.enums import Role
from src.hr_portal.hr_portal.core.exceptions import AuthenticationError, ValidationError


def test_seed_admin_can_log_in(container, kv):
    user = container.session.login("admin@example.com", "Password123!")

    assert user.role == Role.ADMIN
    assert container.session.user.email == "admin@example.com"
    assert container.session.flags.is_authenticated
    assert container.session.flags.is_admin
    assert container.session.flags.nav_username == "Admin"
    assert kv.data[AUTH_TOKEN_KEY] == "admin@example.com"


@pytest.mark.parametrize(
    "email,password",
    [
        ("admin@example.com", "wrong"),
        ("nobody@example.com", "Password123!"),
        ("ADMIN@example.com", "Password123!"),
    ],
)
def test_any_credential_mismatch_fails_without_session(container, kv, email, password):
    with pytest.raises(AuthenticationError) as exc:
        container.session.login(email, password)

    assert str(exc.value) == "Invalid email or password, or account not verified"
    assert container.session.user is None
    assert AUTH_TOKEN_KEY not in kv.data


def test_email_is_trimmed_like_at_registration(container, add_user):
    add_user(email="  pad@example.com ", password="secret1")

    user = container.session.login(" pad@example.com  ", "secret1")

    assert user.email == "pad@example.com"
    assert container.session.email == "pad@example.com"


def test_unverified_account_cannot_log_in(container, add_user):
    add_user(email="new@example.com", password="secret1", verified=False)

    with pytest.raises(AuthenticationError):
        container.session.login("new@example.com", "secret1")
    assert not container.session.flags.is_authenticated


def test_empty_credentials_are_a_validation_error(container):
    with pytest.raises(ValidationError):
        container.session.login("", "x")
    with pytest.raises(ValidationError):
        container.session.login("admin@example.com", "")


def test_logout_clears_session_and_token(as_admin, kv):
    as_admin.session.logout()

    assert as_admin.session.user is None
    assert AUTH_TOKEN_KEY not in kv.data
    assert as_admin.session.flags.is_authenticated is False


def test_remembered_token_restores_session_on_next_start(as_admin, kv):
    restarted = build_container(kv=kv)

    assert restarted.session.email == "admin@example.com"
    assert restarted.session.flags.is_admin


def test_stale_token_does_not_restore(kv):
    kv.data[AUTH_TOKEN_KEY] = "gone@example.com"

    restarted = build_container(kv=kv)

    assert restarted.session.user is None
