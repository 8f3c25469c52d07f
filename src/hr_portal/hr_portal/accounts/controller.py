from __future__ import annotations

import logging

from flask import Flask, flash, redirect, request

from ..common.validators import parse_int_prefix
from ..core.enums import Page
from ..core.exceptions import DomainError
from ..routing.guards import page_required, page_url

logger = logging.getLogger(__name__)


def page_context(container, args) -> dict:
    svc = container.account_service
    form = None
    try:
        if args.get("edit"):
            form = svc.show_form(args.get("edit"), row=parse_int_prefix(args.get("row")))
        elif args.get("add") == "1":
            form = svc.show_form()
    except DomainError as e:
        flash(str(e), "danger")

    return {
        "form": form,
        "delete_prompts": {row["email"]: svc.delete_prompt(row["email"]) for row in svc.render()},
    }


def register(app: Flask, container) -> None:
    router = container.router

    def back(**args):
        return redirect(page_url(Page.ACCOUNTS.value, **args))

    @app.route("/accounts/save", methods=["POST"], endpoint="account_save")
    @page_required(router, Page.ACCOUNTS)
    def account_save():
        editing_email = request.form.get("editing_email") or None
        editing_row = parse_int_prefix(request.form.get("editing_row"))
        try:
            container.account_service.save(
                first_name=request.form.get("first_name", ""),
                last_name=request.form.get("last_name", ""),
                email=request.form.get("email", ""),
                password=request.form.get("password", ""),
                role=request.form.get("role", ""),
                verified=request.form.get("verified") == "on",
                editing_email=editing_email,
                editing_row=editing_row,
            )
            flash("Account saved successfully!", "success")
            return back()
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("saving account failed unexpectedly")
            flash("System error while saving account", "danger")

        if editing_email:
            return back(edit=editing_email, row=editing_row)
        return back(add="1")

    @app.route("/accounts/reset-password", methods=["POST"], endpoint="account_reset_password")
    @page_required(router, Page.ACCOUNTS)
    def account_reset_password():
        try:
            changed = container.account_service.reset_password(
                request.form.get("email", ""),
                request.form.get("new_password"),
                row=parse_int_prefix(request.form.get("row")),
            )
            if changed:
                flash("Password reset successfully!", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("password reset failed unexpectedly")
            flash("System error while resetting password", "danger")
        return back()

    @app.route("/accounts/delete", methods=["POST"], endpoint="account_delete")
    @page_required(router, Page.ACCOUNTS)
    def account_delete():
        try:
            deleted = container.account_service.delete(
                request.form.get("email", ""),
                confirmed=request.form.get("confirmed") == "1",
                row=parse_int_prefix(request.form.get("row")),
            )
            if deleted:
                flash("Account deleted!", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("deleting account failed unexpectedly")
            flash("System error while deleting account", "danger")
        return back()
