from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.capabilities import can
from ..core.enums import Capability, LeaveStatus
from ..leave.balance import BalanceReader
from ..leave.repository import LeaveRequestRepository
from ..users.model import User
from ..users.repository import UserRepository


@dataclass(frozen=True)
class DashboardSummary:
    pending_requests: int
    pending_approvals: int
    available_days: int


class DashboardService:
    def __init__(self, leaves: LeaveRequestRepository, users: UserRepository, balances: BalanceReader):
        self._leaves = leaves
        self._users = users
        self._balances = balances

    def summary(self, *, user: User, year: Optional[int] = None) -> DashboardSummary:
        pending_requests = self._leaves.count_requests(applicant_ids=[user.user_id], status=LeaveStatus.PENDING)

        pending_approvals = 0
        if can(user.role, Capability.APPROVE_LEAVE):
            report_ids = self._users.list_direct_report_ids(user.user_id)
            pending_approvals = self._leaves.count_requests(applicant_ids=report_ids, status=LeaveStatus.PENDING)

        return DashboardSummary(
            pending_requests=pending_requests,
            pending_approvals=pending_approvals,
            available_days=self._balances.total_available(user_id=user.user_id, year=year),
        )
