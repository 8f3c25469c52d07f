from __future__ import annotations

import logging

from flask import Flask, flash, redirect, request

from ..core.enums import Page
from ..core.exceptions import DomainError
from ..routing.guards import page_required, page_url

logger = logging.getLogger(__name__)


def page_context(container, args) -> dict:
    editing = args.get("edit") == "1"
    return {
        "editing": editing,
        "form": container.auth_service.profile_form() if editing else None,
    }


def register(app: Flask, container) -> None:
    router = container.router

    @app.route("/auth/login", methods=["POST"], endpoint="login_submit")
    def login_submit():
        email = request.form.get("email", "")
        password = request.form.get("password", "")
        try:
            user = container.auth_service.login(email, password)
            flash(f"Login successful! Welcome, {user.first_name}", "success")
            return redirect(page_url(Page.PROFILE.value))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("login failed unexpectedly")
            flash("System error while logging in", "danger")
        return redirect(page_url(Page.LOGIN.value))

    @app.route("/auth/register", methods=["POST"], endpoint="register_submit")
    def register_submit():
        try:
            container.auth_service.register(
                first_name=request.form.get("first_name", ""),
                last_name=request.form.get("last_name", ""),
                email=request.form.get("email", ""),
                password=request.form.get("password", ""),
            )
            flash("Registration successful! Please verify your email.", "success")
            return redirect(page_url(Page.VERIFY.value))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("registration failed unexpectedly")
            flash("System error while registering", "danger")
        return redirect(page_url(Page.REGISTER.value))

    @app.route("/auth/verify", methods=["POST"], endpoint="verify_submit")
    def verify_submit():
        try:
            container.auth_service.verify()
            flash("Email verified! You can now login.", "verified")
            return redirect(page_url(Page.LOGIN.value))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("verification failed unexpectedly")
            flash("System error while verifying", "danger")
        return redirect(page_url(Page.VERIFY.value))

    @app.route("/auth/logout", methods=["GET", "POST"], endpoint="logout")
    def logout():
        container.auth_service.logout()
        flash("You have been logged out", "info")
        return redirect(page_url(Page.HOME.value))

    @app.route("/profile/save", methods=["POST"], endpoint="profile_save")
    @page_required(router, Page.PROFILE)
    def profile_save():
        try:
            container.auth_service.update_profile(
                first_name=request.form.get("first_name", ""),
                last_name=request.form.get("last_name", ""),
            )
            flash("Profile updated successfully!", "success")
            return redirect(page_url(Page.PROFILE.value))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("profile update failed unexpectedly")
            flash("System error while saving profile", "danger")
        return redirect(page_url(Page.PROFILE.value, edit="1"))
