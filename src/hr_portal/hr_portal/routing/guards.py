from __future__ import annotations

from functools import wraps

from flask import flash, redirect, url_for

from ..core.constants import DEFAULT_PAGE
from ..core.enums import Page
from .router import Router


def page_url(name: str, **args) -> str:
    if name == DEFAULT_PAGE:
        return url_for("home", **args)
    return url_for("page", name=name, **args)


def page_required(router: Router, page: Page):
    """Apply the router's gates for `page` to a form-handling view."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            target = router.gate(page.value)
            if target is not None:
                if target == Page.LOGIN.value:
                    flash("Please log in to continue", "warning")
                return redirect(page_url(target))
            return view(*args, **kwargs)

        return wrapper

    return decorator
