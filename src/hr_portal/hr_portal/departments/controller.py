from __future__ import annotations

import logging

from flask import Flask, flash, redirect, request

from ..common.validators import parse_int_prefix
from ..core.enums import Page
from ..core.exceptions import DomainError, NotSupportedError
from ..routing.guards import page_required, page_url

logger = logging.getLogger(__name__)


def register(app: Flask, container) -> None:
    router = container.router
    svc = container.department_service

    def _run(what: str, action, *args) -> None:
        try:
            action(*args)
        except NotSupportedError as e:
            flash(str(e), "warning")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("%s department failed unexpectedly", what)
            flash(f"System error while trying to {what} department", "danger")

    @app.route("/department/add", methods=["POST"], endpoint="department_add")
    @page_required(router, Page.DEPARTMENT)
    def department_add():
        _run("add", svc.add)
        return redirect(page_url(Page.DEPARTMENT.value))

    @app.route("/department/edit", methods=["POST"], endpoint="department_edit")
    @page_required(router, Page.DEPARTMENT)
    def department_edit():
        _run("edit", svc.edit, parse_int_prefix(request.form.get("id")))
        return redirect(page_url(Page.DEPARTMENT.value))

    @app.route("/department/delete", methods=["POST"], endpoint="department_delete")
    @page_required(router, Page.DEPARTMENT)
    def department_delete():
        _run("delete", svc.delete, parse_int_prefix(request.form.get("id")))
        return redirect(page_url(Page.DEPARTMENT.value))
