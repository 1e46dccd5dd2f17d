from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import optional_text
from ..core.enums import LeaveStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..users.repository import UserRepository
from .calendar import WorkingDayCalculator
from .model import LeaveRequest, LeaveType, NewLeaveRequest
from .overlap import OverlapChecker
from .repository import LeaveRequestRepository, LeaveTypeRepository
from .validation import LeaveRequestValidator

logger = logging.getLogger(__name__)


class LeaveService:
    """Leave request lifecycle: submit, approve, reject, cancel and list.

    Status only moves PENDING -> APPROVED or PENDING -> REJECTED. A pending
    request may also be deleted by its applicant.
    """

    def __init__(
        self,
        leaves: LeaveRequestRepository,
        leave_types: LeaveTypeRepository,
        users: UserRepository,
        *,
        validator: LeaveRequestValidator,
        overlap: OverlapChecker,
        calendar: WorkingDayCalculator,
    ):
        self._leaves = leaves
        self._leave_types = leave_types
        self._users = users
        self._validator = validator
        self._overlap = overlap
        self._calendar = calendar

    def create_leave_request(self, *, user_id: str, new_request: NewLeaveRequest) -> LeaveRequest:
        req = self._validator.validate(new_request)

        if self._overlap.has_overlap(user_id=user_id, start_date=req.start_date, end_date=req.end_date):
            logger.warning("Leave request from %s rejected: overlaps %s..%s", user_id, req.start_date, req.end_date)
            raise ValidationError("You have an overlapping leave request for this period")

        working_days = self._calendar.count(req.start_date, req.end_date)
        if working_days == 0:
            raise ValidationError("Leave request must include at least one working day")

        request_id = self._leaves.create(
            applicant_id=user_id,
            leave_type_id=req.leave_type_id,
            start_date=req.start_date,
            end_date=req.end_date,
            reason=req.reason,
            working_days=working_days,
        )
        logger.info("Leave request %s created by %s (%d working days)", request_id, user_id, working_days)
        return self._require(request_id)

    def approve_leave_request(self, *, request_id: str, manager_id: str, comment: Optional[str] = None) -> LeaveRequest:
        return self._decide(
            request_id=request_id,
            manager_id=manager_id,
            status=LeaveStatus.APPROVED,
            comment=comment,
            verb="approve",
        )

    def reject_leave_request(self, *, request_id: str, manager_id: str, comment: Optional[str] = None) -> LeaveRequest:
        return self._decide(
            request_id=request_id,
            manager_id=manager_id,
            status=LeaveStatus.REJECTED,
            comment=comment,
            verb="reject",
        )

    def cancel_leave_request(self, *, request_id: str, user_id: str) -> None:
        req = self._require(request_id)

        if req.applicant.user_id != user_id:
            logger.warning("User %s tried to cancel leave request %s of %s", user_id, request_id, req.applicant.user_id)
            raise AuthorizationError("You can only cancel your own leave requests")

        if req.status != LeaveStatus.PENDING:
            raise ValidationError("You can only cancel pending leave requests")

        if not self._leaves.delete_pending(request_id):
            raise ValidationError("You can only cancel pending leave requests")

        logger.info("Leave request %s cancelled by %s", request_id, user_id)

    def list_my_requests(self, *, user_id: str, status: Optional[LeaveStatus] = None) -> Sequence[LeaveRequest]:
        return self._leaves.list_requests(applicant_ids=[user_id], status=status, newest_first=True)

    def list_pending_approvals(self, *, manager_id: str) -> Sequence[LeaveRequest]:
        report_ids = self._users.list_direct_report_ids(manager_id)
        if not report_ids:
            return []
        return self._leaves.list_requests(
            applicant_ids=report_ids,
            status=LeaveStatus.PENDING,
            newest_first=False,
        )

    def list_leave_types(self) -> Sequence[LeaveType]:
        return self._leave_types.list_all()

    def _require(self, request_id: str) -> LeaveRequest:
        req = self._leaves.get(request_id)
        if not req:
            raise NotFoundError("Leave request not found")
        return req

    def _decide(
        self,
        *,
        request_id: str,
        manager_id: str,
        status: LeaveStatus,
        comment: Optional[str],
        verb: str,
    ) -> LeaveRequest:
        req = self._require(request_id)

        if req.status != LeaveStatus.PENDING:
            raise ValidationError("Leave request is not pending")

        applicant = self._users.get_by_id(req.applicant.user_id)
        if not applicant or applicant.manager_id != manager_id:
            logger.warning("User %s is not the manager of the applicant of leave request %s", manager_id, request_id)
            raise AuthorizationError(f"You are not authorized to {verb} this leave request")

        decided = self._leaves.decide(
            request_id=request_id,
            status=status,
            approver_id=manager_id,
            comment=optional_text(comment),
        )
        if not decided:
            raise ValidationError("Leave request is not pending")

        logger.info("Leave request %s %s by %s", request_id, status.value, manager_id)
        return self._require(request_id)
