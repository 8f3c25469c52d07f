from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Tuple

from ..auth.session import Session
from ..common.collections import remove_at
from ..common.datetime_utils import today_iso
from ..common.validators import parse_int_prefix
from ..core.constants import DEFAULT_ITEM_QTY
from ..core.enums import RequestStatus
from ..core.exceptions import ValidationError
from ..state.store import StateStore
from .model import RequestItem, ResourceRequest

STATUS_BADGES = {
    RequestStatus.PENDING: "bg-warning",
    RequestStatus.APPROVED: "bg-success",
    RequestStatus.REJECTED: "bg-danger",
}


@dataclass(frozen=True)
class NewItem:
    """One raw row of the request form, before parsing."""

    name: Optional[str]
    qty: object = None


def parse_qty(value: object) -> int:
    qty = parse_int_prefix(value)
    if not qty or qty < 1:
        return DEFAULT_ITEM_QTY
    return qty


def collect_items(rows: Iterable[NewItem]) -> Tuple[RequestItem, ...]:
    """Keep rows with a name; quantities fall back to 1."""
    items: list[RequestItem] = []
    for row in rows:
        name = (row.name or "").strip()
        if name:
            items.append(RequestItem(name=name, qty=parse_qty(row.qty)))
    return tuple(items)


BLANK_ITEMS = (NewItem(name="", qty=DEFAULT_ITEM_QTY),)


@dataclass(frozen=True)
class RequestDraft:
    """The new-request form as the user left it, kept between round trips."""

    request_type: str = ""
    items: Tuple[NewItem, ...] = BLANK_ITEMS

    @classmethod
    def from_form(cls, request_type: Optional[str], names: Sequence[str], qtys: Sequence[str]) -> RequestDraft:
        rows = tuple(NewItem(name=n, qty=qtys[i] if i < len(qtys) else None) for i, n in enumerate(names))
        return cls(request_type=request_type or "", items=rows or BLANK_ITEMS)

    @classmethod
    def from_dict(cls, d: Optional[dict]) -> RequestDraft:
        if not d:
            return cls()
        rows = tuple(NewItem(name=i.get("name", ""), qty=i.get("qty")) for i in d.get("items", []))
        return cls(request_type=d.get("type", ""), items=rows or BLANK_ITEMS)

    def to_dict(self) -> dict:
        return {
            "type": self.request_type,
            "items": [{"name": i.name or "", "qty": "" if i.qty is None else str(i.qty)} for i in self.items],
        }

    def with_row_added(self) -> RequestDraft:
        return replace(self, items=self.items + BLANK_ITEMS)

    def with_row_removed(self, index: Optional[int]) -> RequestDraft:
        if len(self.items) <= 1:
            raise ValidationError("At least one item is required")
        if index is None or not 0 <= index < len(self.items):
            raise ValidationError("Item row not found")
        return replace(self, items=remove_at(self.items, index))


class RequestService:
    """Use case: resource requests filed by the logged-in user."""

    def __init__(self, store: StateStore, session: Session):
        self._store = store
        self._session = session

    def mine(self) -> List[ResourceRequest]:
        email = self._session.email
        if email is None:
            return []
        return [r for r in self._store.state.requests if r.employee_email == email]

    def render(self) -> dict:
        rows = [
            {
                "type": r.request_type,
                "items_display": ", ".join(f"{i.name} ({i.qty})" for i in r.items),
                "date": r.date,
                "status": r.status.value,
                "badge": STATUS_BADGES.get(r.status, "bg-secondary"),
            }
            for r in self.mine()
        ]
        return {"rows": rows, "is_empty": not rows}

    def submit(self, *, request_type: str, items: Sequence[NewItem]) -> ResourceRequest:
        user = self._session.require_user()

        kept = collect_items(items)
        if not kept:
            raise ValidationError("Please add at least one item")

        req = ResourceRequest(
            request_type=(request_type or "").strip(),
            items=kept,
            status=RequestStatus.PENDING,
            date=today_iso(),
            employee_email=user.email,
        )
        state = self._store.state
        self._store.commit(
            state.with_requests(state.requests + (req,)),
            reason=f"request submitted by {user.email} ({len(kept)} items)",
        )
        return req
