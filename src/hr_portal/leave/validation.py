from __future__ import annotations

from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from .model import NewLeaveRequest
from .repository import LeaveTypeRepository


class LeaveRequestValidator:
    def __init__(self, leave_types: LeaveTypeRepository):
        self._leave_types = leave_types

    def validate(self, new_request: NewLeaveRequest) -> NewLeaveRequest:
        leave_type_id = require_non_empty(new_request.leave_type_id, "Leave type")
        reason = require_non_empty(new_request.reason, "Reason")

        if new_request.start_date > new_request.end_date:
            raise ValidationError("Start date must be before or equal to end date")

        if not self._leave_types.get(leave_type_id):
            raise ValidationError("Unknown leave type")

        return NewLeaveRequest(
            leave_type_id=leave_type_id,
            start_date=new_request.start_date,
            end_date=new_request.end_date,
            reason=reason,
        )
