from __future__ import annotations

import logging

from flask import Flask, flash, redirect, request

from ..common.validators import parse_int_prefix
from ..core.enums import Page
from ..core.exceptions import DomainError
from ..routing.guards import page_required, page_url

logger = logging.getLogger(__name__)


def page_context(container, args) -> dict:
    svc = container.employee_service
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
        "departments": container.department_service.options(),
    }


def register(app: Flask, container) -> None:
    router = container.router

    def back(**args):
        return redirect(page_url(Page.EMPLOYEE.value, **args))

    @app.route("/employee/save", methods=["POST"], endpoint="employee_save")
    @page_required(router, Page.EMPLOYEE)
    def employee_save():
        editing_id = request.form.get("editing_id") or None
        editing_row = parse_int_prefix(request.form.get("editing_row"))
        try:
            container.employee_service.save(
                employee_id=request.form.get("employee_id", ""),
                user_email=request.form.get("user_email", ""),
                position=request.form.get("position", ""),
                dept_id=request.form.get("dept_id", ""),
                hire_date=request.form.get("hire_date", ""),
                editing_id=editing_id,
                editing_row=editing_row,
            )
            flash("Employee saved successfully!", "success")
            return back()
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("saving employee failed unexpectedly")
            flash("System error while saving employee", "danger")

        if editing_id:
            return back(edit=editing_id, row=editing_row)
        return back(add="1")

    @app.route("/employee/delete", methods=["POST"], endpoint="employee_delete")
    @page_required(router, Page.EMPLOYEE)
    def employee_delete():
        try:
            container.employee_service.delete(
                request.form.get("employee_id", ""),
                confirmed=request.form.get("confirmed") == "1",
                row=parse_int_prefix(request.form.get("row")),
            )
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("deleting employee failed unexpectedly")
            flash("System error while deleting employee", "danger")
        return back()
