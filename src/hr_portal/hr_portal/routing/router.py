from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional

from ..auth.session import Session
from ..core.constants import DEFAULT_PAGE
from ..core.enums import Page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageSpec:
    name: str
    requires_auth: bool = False
    admin_only: bool = False
    render: Optional[Callable[[], Any]] = None


@dataclass(frozen=True)
class Navigation:
    """Outcome of one navigation.

    `fragment` is what the address should read afterwards; when a gate
    redirected, it replaces the requested one instead of adding a history entry.
    """

    page: str
    fragment: str
    requested: str
    view: Any = None

    @property
    def redirected(self) -> bool:
        return self.fragment != self.requested


def fragment_for(page: str) -> str:
    return "#/" if page == DEFAULT_PAGE else f"#/{page}"


def page_name(fragment: Optional[str]) -> str:
    """Map "#/login" to "login"; an empty fragment maps to home."""
    name = (fragment or "").lstrip("#").strip("/")
    return name or DEFAULT_PAGE


class Router:
    """Maps an address fragment to exactly one visible page.

    Gates, in order:
    1. page needs a session and there is none -> login
    2. page is admin-only and the user is not admin -> home
    """

    def __init__(self, session: Session, pages: Iterable[PageSpec], *, default: str = DEFAULT_PAGE):
        self._session = session
        self._pages: Dict[str, PageSpec] = {p.name: p for p in pages}
        if default not in self._pages:
            raise ValueError(f"default page {default!r} is not registered")
        self._default = default
        self._fragment = fragment_for(default)
        self._visible: Optional[str] = None

    @property
    def visible_page(self) -> Optional[str]:
        return self._visible

    @property
    def fragment(self) -> str:
        return self._fragment

    def resolve(self, name: str) -> PageSpec:
        return self._pages.get(name) or self._pages[self._default]

    def gate(self, name: str) -> Optional[str]:
        """Return the page to redirect to, or None when `name` may be shown."""
        spec = self.resolve(name)
        flags = self._session.flags
        if spec.requires_auth and not flags.is_authenticated:
            return Page.LOGIN.value
        if spec.admin_only and not flags.is_admin:
            return self._default
        return None

    def navigate(self, fragment: Optional[str]) -> Navigation:
        requested = fragment if fragment else fragment_for(self._default)
        current = requested

        for _ in range(len(self._pages) + 1):
            name = page_name(current)
            target = self.gate(name)
            if target is None:
                spec = self.resolve(name)
                self._fragment = current
                self._visible = spec.name
                view = spec.render() if spec.render else None
                return Navigation(page=spec.name, fragment=current, requested=requested, view=view)

            logger.info("route %s redirected to %s", name, target)
            current = fragment_for(target)

        raise RuntimeError(f"redirect loop while routing {requested!r}")
