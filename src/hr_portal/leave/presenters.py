from __future__ import annotations

from datetime import datetime
from typing import Optional

from .model import LeaveBalance, LeaveRequest, LeaveType, PersonRef


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _person_json(person: Optional[PersonRef]) -> Optional[dict]:
    if person is None:
        return None
    data = {"id": person.user_id, "firstName": person.first_name, "lastName": person.last_name}
    if person.email is not None:
        data["email"] = person.email
    return data


def leave_type_json(leave_type: LeaveType) -> dict:
    return {
        "id": leave_type.type_id,
        "name": leave_type.name,
        "createdAt": _iso(leave_type.created_at),
        "updatedAt": _iso(leave_type.updated_at),
    }


def leave_request_json(req: LeaveRequest) -> dict:
    return {
        "id": req.request_id,
        "applicant": _person_json(req.applicant),
        "approver": _person_json(req.approver),
        "leaveType": {"id": req.leave_type.type_id, "name": req.leave_type.name},
        "startDate": req.start_date.isoformat(),
        "endDate": req.end_date.isoformat(),
        "reason": req.reason,
        "status": req.status.value,
        "workingDays": req.working_days,
        "comment": req.comment,
        "createdAt": _iso(req.created_at),
        "updatedAt": _iso(req.updated_at),
    }


def balance_json(balance: LeaveBalance) -> dict:
    return {
        "leaveTypeId": balance.leave_type.type_id,
        "leaveType": balance.leave_type.name,
        "year": balance.year,
        "totalDays": balance.total_days,
        "usedDays": balance.used_days,
        "availableDays": balance.available_days,
    }
