from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.auth import bearer_required
from ..core.exceptions import ValidationError
from ..container import Container
from .presenters import user_json
from .schemas import LoginSchema


def register(app: Flask, container: Container) -> None:
    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")

        data = LoginSchema.model_validate(body)
        result = container.auth_service.authenticate(data.email, data.password)
        return jsonify({"accessToken": result.access_token, "user": user_json(result.user)})

    @app.route("/auth/me", methods=["GET"], endpoint="me")
    @bearer_required
    def me():
        return jsonify(user_json(g.current_user))
