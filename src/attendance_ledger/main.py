from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .ledger.controller import register as register_ledger
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {k: getattr(settings, k) for k in dir(settings) if k.isupper()}
    values.update(overrides or {})

    app.secret_key = values["SECRET_KEY"]
    app.config["DEBUG"] = bool(values.get("DEBUG", False))
    app.config["TESTING"] = bool(values.get("TESTING", False))
    app.config["IDENTITY_HEADER"] = values.get("IDENTITY_HEADER", "X-Caller-Identity")

    configure_logging(values.get("LOG_LEVEL", "INFO"), log_file=values.get("LOG_FILE"))
    logger.info("settings=%s backend=%s", settings_module, values.get("STORAGE_BACKEND", "memory"))

    container = build_container(
        admin_identity=values.get("ADMIN_IDENTITY", ""),
        storage_backend=values.get("STORAGE_BACKEND", "memory"),
        db_config=values.get("DB_CONFIG"),
        eviction_policy=values.get("EVICTION_POLICY", "retain"),
        allow_reregistration=bool(values.get("ALLOW_REREGISTRATION", True)),
        strict_override=bool(values.get("STRICT_OVERRIDE", False)),
    )

    if container.conn is not None and bool(values.get("AUTO_INIT_DB", False)):
        apply_schema(container.conn)
        logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    app.extensions["attendance_ledger"] = container
    register_ledger(app, container)

    return app
