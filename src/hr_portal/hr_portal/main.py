from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .accounts.controller import register as register_accounts
from .auth.controller import register as register_auth
from .common.logging_config import setup_logging
from .container import build_container, kv_store_from_settings
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .requests.controller import register as register_requests
from .routing.controller import register as register_pages
from .storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


def create_app(*, kv: Optional[KeyValueStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    if kv is None:
        kv = kv_store_from_settings(settings)
        logger.info("settings=%s storage=%s", settings_module, getattr(settings, "STORAGE_BACKEND", "file"))

    container = build_container(kv=kv)
    app.extensions["hr_portal"] = container

    register_pages(app, container)
    register_auth(app, container)
    register_accounts(app, container)
    register_departments(app, container)
    register_employees(app, container)
    register_requests(app, container)

    return app
