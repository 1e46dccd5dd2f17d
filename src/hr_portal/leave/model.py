from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class PersonRef:
    """Applicant/approver summary embedded in a leave request."""

    user_id: str
    first_name: str
    last_name: str
    email: Optional[str] = None


@dataclass(frozen=True)
class LeaveType:
    type_id: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class LeaveRequest:
    request_id: str
    applicant: PersonRef
    leave_type: LeaveType
    start_date: date
    end_date: date
    reason: str
    status: LeaveStatus
    working_days: Optional[int]
    created_at: datetime
    updated_at: datetime
    approver: Optional[PersonRef] = None
    comment: Optional[str] = None


@dataclass(frozen=True)
class NewLeaveRequest:
    """Submission input after parsing, before business validation."""

    leave_type_id: str
    start_date: date
    end_date: date
    reason: str


@dataclass(frozen=True)
class LeaveBalance:
    user_id: str
    leave_type: LeaveType
    year: int
    total_days: int
    used_days: int

    @property
    def available_days(self) -> int:
        return self.total_days - self.used_days

