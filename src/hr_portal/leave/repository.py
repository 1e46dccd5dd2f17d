from __future__ import annotations

from datetime import date
from typing import AbstractSet, Collection, Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveBalance, LeaveRequest, LeaveType


class LeaveRequestRepository(Protocol):
    def create(
        self,
        *,
        applicant_id: str,
        leave_type_id: str,
        start_date: date,
        end_date: date,
        reason: str,
        working_days: int,
    ) -> str:
        raise NotImplementedError

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def find_overlapping(
        self,
        *,
        applicant_id: str,
        start_date: date,
        end_date: date,
        statuses: Collection[LeaveStatus],
        exclude_id: Optional[str] = None,
    ) -> Optional[str]:
        """Id of one request with start <= end_date and end >= start_date, or None."""

        raise NotImplementedError

    def list_requests(
        self,
        *,
        applicant_ids: Sequence[str],
        status: Optional[LeaveStatus] = None,
        newest_first: bool = True,
    ) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def count_requests(self, *, applicant_ids: Sequence[str], status: Optional[LeaveStatus] = None) -> int:
        raise NotImplementedError

    def decide(
        self,
        *,
        request_id: str,
        status: LeaveStatus,
        approver_id: str,
        comment: Optional[str] = None,
    ) -> bool:
        """Move a PENDING request to ``status``. False if it was no longer pending."""

        raise NotImplementedError

    def delete_pending(self, request_id: str) -> bool:
        raise NotImplementedError


class LeaveTypeRepository(Protocol):
    def get(self, type_id: str) -> Optional[LeaveType]:
        raise NotImplementedError

    def list_all(self) -> Sequence[LeaveType]:
        raise NotImplementedError


class LeaveBalanceRepository(Protocol):
    def list_for_user(self, *, user_id: str, year: int) -> Sequence[LeaveBalance]:
        raise NotImplementedError


class HolidayRepository(Protocol):
    def dates_between(self, start_date: date, end_date: date) -> AbstractSet[date]:
        raise NotImplementedError
