from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def require_fields(message: str, *values: Optional[str]) -> None:
    """Raise one ValidationError when any of the values is blank."""
    if any(is_blank(v) for v in values):
        raise ValidationError(message)


def require_min_length(value: Optional[str], min_len: int, message: str) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(message)
    return value


def parse_int_prefix(value: object) -> Optional[int]:
    """Read a leading integer the way HTML number inputs are usually parsed.

    "3" -> 3, " 12abc" -> 12, "abc" -> None, None -> None.
    """
    if value is None:
        return None
    if isinstance(value, int):
        return value
    m = _INT_PREFIX.match(str(value))
    return int(m.group(1)) if m else None
