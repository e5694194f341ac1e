from __future__ import annotations

import atexit
import importlib
import logging
from pathlib import Path
from typing import Optional

import mysql.connector
from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import Container, build_container
from .core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT
from .database.bootstrap import apply_schema, ensure_default_users, list_tables
from .database.connection import DatabaseConnection
from .entries.controller import register as register_entries
from .health.controller import register as register_health
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    A prebuilt ``container`` skips all database setup (used by tests).
    """
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        container = _build_runtime_container(settings, settings_module)

    register_error_handlers(app)
    register_students(app, container)
    register_attendance(app, container)
    register_users(app, container)
    register_entries(app, container)
    register_health(app, container)

    return app


def _build_runtime_container(settings, settings_module: str) -> Container:
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
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        logger.info("schema ready (tables=%s)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        created = ensure_default_users(db_config)
        logger.info("default users ready (created=%s)", created)

    container = build_container(
        db_config=db_config,
        pool_size=int(getattr(settings, "DB_POOL_SIZE", DEFAULT_POOL_SIZE)),
        pool_timeout=float(getattr(settings, "DB_POOL_TIMEOUT", DEFAULT_POOL_TIMEOUT)),
    )
    atexit.register(close_pool, container.conn)
    return container


def close_pool(conn: DatabaseConnection) -> None:
    """Shutdown hook: drain the pool, logging instead of raising at exit."""
    try:
        conn.close()
    except mysql.connector.Error:
        logger.debug("connection pool drain failed", exc_info=True)
