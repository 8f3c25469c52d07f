from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role used for page gating."""

    ADMIN = "admin"
    USER = "user"


class RequestStatus(str, Enum):
    """Resource request status. Only PENDING is ever assigned."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class Page(str, Enum):
    HOME = "home"
    LOGIN = "login"
    REGISTER = "register"
    VERIFY = "verify"
    PROFILE = "profile"
    ACCOUNTS = "accounts"
    DEPARTMENT = "department"
    EMPLOYEE = "employee"
    REQUESTS = "requests"
