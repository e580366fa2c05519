from __future__ import annotations

import importlib
import logging
from typing import Optional

import mysql.connector
from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .attendance.controller import register as register_attendance
from .common.http import fail, status_for
from .config import get_settings_module
from .container import Container, build_container
from .core.exceptions import DatabaseUnavailable, DomainError
from .dashboards.controller import register as register_dashboards
from .database.bootstrap import apply_schema, ensure_sample_data, list_tables
from .database.config import get_config
from .database.connection import DatabaseConnection, open_database
from .feedback.controller import register as register_feedback
from .logs.controller import register as register_logs
from .mock.fixtures import MockDataStore
from .subjects.controller import register as register_subjects
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def _connect(settings) -> Optional[DatabaseConnection]:
    if bool(getattr(settings, "USE_MOCK_DATA", False)):
        logger.info("Using mock data mode - database connection disabled")
        return None

    try:
        conn = open_database(get_config())
    except DatabaseUnavailable as e:
        logger.warning("Failed to initialize database: %s", e)
        logger.warning("Falling back to mock data mode")
        return None

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        try:
            apply_schema(conn)
            ensure_sample_data(conn)
            logger.info("Schema ready (tables=%d)", len(list_tables(conn)))
        except mysql.connector.Error as e:
            # Tables or rows may already exist in a different shape; keep serving.
            logger.warning("Database initialization incomplete: %s", e)
    return conn


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return fail(str(e), status_for(e))

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return fail(e.description or e.name, e.code or 500)
        logger.exception("Unhandled error")
        if bool(app.config.get("DEBUG", False)):
            return fail(f"Internal error: {e}", 500)
        return fail("Internal error", 500)


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    if container is None:
        store = MockDataStore()
        container = build_container(_connect(settings), store=store)
        if container.mock_mode:
            logger.info("\n%s", store.credentials_banner())

    logger.debug("settings=%s mode=%s", settings_module, "mock" if container.mock_mode else "database")

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"success": True, "mode": "mock" if container.mock_mode else "database"})

    register_users(app, container)
    register_dashboards(app, container)
    register_subjects(app, container)
    register_attendance(app, container)
    register_logs(app, container)
    register_feedback(app, container)
    _register_error_handlers(app)

    return app
