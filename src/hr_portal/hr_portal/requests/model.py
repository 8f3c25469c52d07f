from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.enums import RequestStatus


@dataclass(frozen=True)
class RequestItem:
    name: str
    qty: int


@dataclass(frozen=True)
class ResourceRequest:
    request_type: str
    items: Tuple[RequestItem, ...]
    status: RequestStatus
    date: str
    employee_email: str
