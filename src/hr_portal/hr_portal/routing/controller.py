from __future__ import annotations

from typing import Callable, Dict

from flask import Flask, redirect, render_template, request

from ..accounts.controller import page_context as accounts_context
from ..auth.controller import page_context as profile_context
from ..container import Container
from ..core.enums import Page
from ..employees.controller import page_context as employee_context
from ..requests.controller import page_context as requests_context
from .guards import page_url
from .router import fragment_for, page_name

PageContext = Callable[[Container, dict], dict]

PAGE_CONTEXTS: Dict[str, PageContext] = {
    Page.PROFILE.value: profile_context,
    Page.ACCOUNTS.value: accounts_context,
    Page.EMPLOYEE.value: employee_context,
    Page.REQUESTS.value: requests_context,
}


def register(app: Flask, container: Container) -> None:
    @app.context_processor
    def inject_auth():
        return {"auth": container.session.flags}

    def show(fragment: str):
        nav = container.router.navigate(fragment)
        if nav.redirected:
            return redirect(page_url(page_name(nav.fragment)))

        extra: dict = {}
        build_extra = PAGE_CONTEXTS.get(nav.page)
        if build_extra:
            extra = build_extra(container, request.args)

        return render_template(f"pages/{nav.page}.html", view=nav.view, active_page=nav.page, **extra)

    @app.route("/", methods=["GET"], endpoint="home")
    def home():
        return show(fragment_for(Page.HOME.value))

    @app.route("/<name>", methods=["GET"], endpoint="page")
    def page(name: str):
        return show(f"#/{name}")
