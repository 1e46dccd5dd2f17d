from __future__ import annotations

import logging

from flask import Flask, jsonify
from pydantic import ValidationError as SchemaError
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def _schema_message(exc: SchemaError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request body"


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        return jsonify({"error": exc.kind, "message": str(exc)}), exc.status_code

    @app.errorhandler(SchemaError)
    def handle_schema_error(exc: SchemaError):
        return jsonify({"error": "bad_request", "message": _schema_message(exc)}), 400

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            kind = (exc.name or "error").lower().replace(" ", "_")
            return jsonify({"error": kind, "message": exc.description}), exc.code
        logger.exception("Unhandled error")
        return jsonify({"error": "internal_error", "message": "Internal Server Error"}), 500
