from __future__ import annotations

from typing import Optional

from flask import Flask, g, jsonify, request

from ..common.auth import bearer_required, roles_required
from ..core.capabilities import APPROVER_ROLES
from ..core.enums import LeaveStatus
from ..core.exceptions import ValidationError
from ..container import Container
from .presenters import balance_json, leave_request_json, leave_type_json
from .schemas import CreateLeaveRequestSchema, LeaveDecisionSchema


def _json_object(*, required: bool) -> dict:
    body = request.get_json(silent=True)
    if body is None and not required:
        return {}
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def _parse_status(value: Optional[str]) -> Optional[LeaveStatus]:
    if not value:
        return None
    try:
        return LeaveStatus(value.strip().upper())
    except ValueError:
        raise ValidationError(f"Invalid status: {value}")


def _parse_year(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"Invalid year: {value}")


def register(app: Flask, container: Container) -> None:
    @app.route("/leave/request", methods=["POST"], endpoint="create_leave_request")
    @bearer_required
    def create_leave_request():
        data = CreateLeaveRequestSchema.model_validate(_json_object(required=True))
        created = container.leave_service.create_leave_request(
            user_id=g.current_user.user_id,
            new_request=data.to_new_request(),
        )
        return jsonify(leave_request_json(created)), 201

    @app.route("/leave/my-requests", methods=["GET"], endpoint="my_leave_requests")
    @bearer_required
    def my_leave_requests():
        items = container.leave_service.list_my_requests(
            user_id=g.current_user.user_id,
            status=_parse_status(request.args.get("status")),
        )
        return jsonify([leave_request_json(r) for r in items])

    @app.route("/leave/pending-approvals", methods=["GET"], endpoint="pending_leave_approvals")
    @bearer_required
    @roles_required(*APPROVER_ROLES)
    def pending_leave_approvals():
        items = container.leave_service.list_pending_approvals(manager_id=g.current_user.user_id)
        return jsonify([leave_request_json(r) for r in items])

    @app.route("/leave/<string:leave_id>/approve", methods=["PUT"], endpoint="approve_leave_request")
    @bearer_required
    @roles_required(*APPROVER_ROLES)
    def approve_leave_request(leave_id: str):
        data = LeaveDecisionSchema.model_validate(_json_object(required=False))
        updated = container.leave_service.approve_leave_request(
            request_id=leave_id,
            manager_id=g.current_user.user_id,
            comment=data.comment,
        )
        return jsonify(leave_request_json(updated))

    @app.route("/leave/<string:leave_id>/reject", methods=["PUT"], endpoint="reject_leave_request")
    @bearer_required
    @roles_required(*APPROVER_ROLES)
    def reject_leave_request(leave_id: str):
        data = LeaveDecisionSchema.model_validate(_json_object(required=False))
        updated = container.leave_service.reject_leave_request(
            request_id=leave_id,
            manager_id=g.current_user.user_id,
            comment=data.comment,
        )
        return jsonify(leave_request_json(updated))

    @app.route("/leave/<string:leave_id>", methods=["DELETE"], endpoint="cancel_leave_request")
    @bearer_required
    def cancel_leave_request(leave_id: str):
        container.leave_service.cancel_leave_request(request_id=leave_id, user_id=g.current_user.user_id)
        return jsonify({"message": "Leave request cancelled successfully"})

    @app.route("/leave/types", methods=["GET"], endpoint="leave_types")
    @bearer_required
    def leave_types():
        return jsonify([leave_type_json(t) for t in container.leave_service.list_leave_types()])

    @app.route("/leave/balance", methods=["GET"], endpoint="leave_balance")
    @bearer_required
    def leave_balance():
        balances = container.balance_reader.get_balance(
            user_id=g.current_user.user_id,
            year=_parse_year(request.args.get("year")),
        )
        return jsonify([balance_json(b) for b in balances])
