from __future__ import annotations

from datetime import date


def today_local() -> date:
    """Current local calendar date.

    Note: Wrapped so tests can patch it.
    """
    return date.today()


def today_iso() -> str:
    return today_local().isoformat()
