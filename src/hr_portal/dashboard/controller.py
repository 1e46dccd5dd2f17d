from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.auth import bearer_required
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard/summary", methods=["GET"], endpoint="dashboard_summary")
    @bearer_required
    def dashboard_summary():
        year = request.args.get("year", type=int)
        if "year" in request.args and year is None:
            raise ValidationError("Invalid year")

        s = container.dashboard_service.summary(user=g.current_user, year=year)
        return jsonify(
            {
                "pendingRequests": s.pending_requests,
                "pendingApprovals": s.pending_approvals,
                "availableDays": s.available_days,
            }
        )
