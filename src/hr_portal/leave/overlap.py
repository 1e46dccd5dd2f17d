from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import LeaveStatus
from .repository import LeaveRequestRepository

BLOCKING_STATUSES = (LeaveStatus.PENDING, LeaveStatus.APPROVED)


class OverlapChecker:
    """Detects date-range conflicts with a user's pending or approved requests."""

    def __init__(self, leaves: LeaveRequestRepository):
        self._leaves = leaves

    def has_overlap(
        self,
        *,
        user_id: str,
        start_date: date,
        end_date: date,
        exclude_id: Optional[str] = None,
    ) -> bool:
        found = self._leaves.find_overlapping(
            applicant_id=user_id,
            start_date=start_date,
            end_date=end_date,
            statuses=BLOCKING_STATUSES,
            exclude_id=exclude_id,
        )
        return found is not None
