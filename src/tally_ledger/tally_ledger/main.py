from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request

from config import get_settings_module

from .common.log_config import setup_logging
from .container import Container, build_container
from .core.constants import DEFAULT_TOKEN_MAX_AGE_DAYS
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig, DatabaseConnection
from .entries.controller import register as register_entries
from .extras.controller import register as register_extras
from .reports.controller import register as register_reports
from .shifts.controller import register as register_shifts
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SERVICE_NAME = "tally-ledger"


def create_app(container: Optional[Container] = None) -> Flask:
    """App factory. Pass a prebuilt ``container`` to skip MySQL wiring (tests, scripts)."""

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            conn = DatabaseConnection(DBConfig.from_mapping(db_config))
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(conn, schema_path=schema_path)
            logger.info("schema ready (tables=%d)", len(list_tables(conn)))

        container = build_container(
            db_config=db_config,
            secret_key=getattr(settings, "SECRET_KEY"),
            token_max_age_days=int(getattr(settings, "TOKEN_MAX_AGE_DAYS", DEFAULT_TOKEN_MAX_AGE_DAYS)),
        )

    app.extensions["tally_ledger"] = container

    @app.after_request
    def log_request(response):
        logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response

    @app.route("/", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"ok": True, "service": SERVICE_NAME})

    register_users(app, container)
    register_entries(app, container)
    register_extras(app, container)
    register_shifts(app, container)
    register_reports(app, container)

    return app
