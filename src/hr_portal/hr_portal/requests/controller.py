from __future__ import annotations

import logging

from flask import Flask, flash, redirect, request, session

from ..common.validators import parse_int_prefix
from ..core.enums import Page
from ..core.exceptions import DomainError
from ..routing.guards import page_required, page_url
from .service import RequestDraft

logger = logging.getLogger(__name__)

REQUEST_TYPES = ("Equipment", "Leave", "Resources")
DRAFT_SESSION_KEY = "request_draft"


def _draft_from_form() -> RequestDraft:
    return RequestDraft.from_form(
        request.form.get("type"),
        request.form.getlist("item_name"),
        request.form.getlist("item_qty"),
    )


def _keep_draft(draft: RequestDraft):
    session[DRAFT_SESSION_KEY] = draft.to_dict()
    return redirect(page_url(Page.REQUESTS.value, new="1"))


def page_context(container, args) -> dict:
    composing = args.get("new") == "1"
    return {
        "composing": composing,
        "draft": RequestDraft.from_dict(session.get(DRAFT_SESSION_KEY)) if composing else None,
        "request_types": REQUEST_TYPES,
    }


def register(app: Flask, container) -> None:
    router = container.router

    @app.route("/requests/new", methods=["POST"], endpoint="request_new")
    @page_required(router, Page.REQUESTS)
    def request_new():
        session.pop(DRAFT_SESSION_KEY, None)
        return redirect(page_url(Page.REQUESTS.value, new="1"))

    @app.route("/requests/add-row", methods=["POST"], endpoint="request_add_row")
    @page_required(router, Page.REQUESTS)
    def request_add_row():
        return _keep_draft(_draft_from_form().with_row_added())

    @app.route("/requests/remove-row", methods=["POST"], endpoint="request_remove_row")
    @page_required(router, Page.REQUESTS)
    def request_remove_row():
        draft = _draft_from_form()
        try:
            draft = draft.with_row_removed(parse_int_prefix(request.form.get("remove")))
        except DomainError as e:
            flash(str(e), "danger")
        return _keep_draft(draft)

    @app.route("/requests/submit", methods=["POST"], endpoint="request_submit")
    @page_required(router, Page.REQUESTS)
    def request_submit():
        draft = _draft_from_form()
        try:
            container.request_service.submit(request_type=draft.request_type, items=draft.items)
            session.pop(DRAFT_SESSION_KEY, None)
            flash("Request submitted successfully!", "success")
            return redirect(page_url(Page.REQUESTS.value))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("submitting request failed unexpectedly")
            flash("System error while submitting request", "danger")
        return _keep_draft(draft)
