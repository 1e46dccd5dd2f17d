from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from .common.auth import CONTAINER_KEY
from .common.errors import register_error_handlers
from .config import get_settings_module
from .container import build_container
from .core.logging import configure_logging
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import ensure_database_exists, init_schema, list_tables, seed_demo_data
from .database.extensions import db
from .leave.controller import register as register_leave
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None, overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    app.config.from_object(importlib.import_module(settings_module))
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    logger.info("Starting HR portal with settings=%s", settings_module)

    CORS(app, origins=[app.config.get("CORS_ORIGIN", "*")], supports_credentials=True)
    db.init_app(app)

    if app.config.get("AUTO_INIT_DB"):
        ensure_database_exists(app.config["SQLALCHEMY_DATABASE_URI"])
        with app.app_context():
            init_schema()
            logger.info("Schema ready (tables=%d)", len(list_tables()))
    if app.config.get("AUTO_SEED_DB"):
        with app.app_context():
            seed_demo_data()

    container = build_container(settings=app.config)
    app.extensions[CONTAINER_KEY] = container

    register_error_handlers(app)
    register_users(app, container)
    register_leave(app, container)
    register_dashboard(app, container)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "service": "hr-portal"})

    return app
