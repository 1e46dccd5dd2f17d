from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .core.constants import DEFAULT_ACCESS_TOKEN_MINUTES
from .dashboard.service import DashboardService
from .leave.balance import BalanceReader
from .leave.calendar import WorkingDayCalculator
from .leave.overlap import OverlapChecker
from .leave.service import LeaveService
from .leave.sqlalchemy_leave_repository import SqlAlchemyLeaveRequestRepository
from .leave.sqlalchemy_reference_repository import (
    SqlAlchemyHolidayRepository,
    SqlAlchemyLeaveBalanceRepository,
    SqlAlchemyLeaveTypeRepository,
)
from .leave.validation import LeaveRequestValidator
from .users.service import AuthService
from .users.sqlalchemy_user_repository import SqlAlchemyUserRepository
from .users.tokens import TokenService


@dataclass(frozen=True)
class Container:
    users_repo: SqlAlchemyUserRepository
    leave_requests_repo: SqlAlchemyLeaveRequestRepository
    leave_types_repo: SqlAlchemyLeaveTypeRepository
    leave_balances_repo: SqlAlchemyLeaveBalanceRepository
    holidays_repo: SqlAlchemyHolidayRepository

    token_service: TokenService
    auth_service: AuthService
    leave_service: LeaveService
    balance_reader: BalanceReader
    dashboard_service: DashboardService


def build_container(*, settings: Mapping[str, Any]) -> Container:
    users_repo = SqlAlchemyUserRepository()
    leave_requests_repo = SqlAlchemyLeaveRequestRepository()
    leave_types_repo = SqlAlchemyLeaveTypeRepository()
    leave_balances_repo = SqlAlchemyLeaveBalanceRepository()
    holidays_repo = SqlAlchemyHolidayRepository()

    token_service = TokenService(
        str(settings.get("JWT_SECRET") or settings["SECRET_KEY"]),
        lifetime_minutes=int(settings.get("ACCESS_TOKEN_MINUTES", DEFAULT_ACCESS_TOKEN_MINUTES)),
    )
    auth_service = AuthService(users_repo, token_service)
    leave_service = LeaveService(
        leave_requests_repo,
        leave_types_repo,
        users_repo,
        validator=LeaveRequestValidator(leave_types_repo),
        overlap=OverlapChecker(leave_requests_repo),
        calendar=WorkingDayCalculator(holidays_repo),
    )
    balance_reader = BalanceReader(leave_balances_repo)
    dashboard_service = DashboardService(leave_requests_repo, users_repo, balance_reader)

    return Container(
        users_repo=users_repo,
        leave_requests_repo=leave_requests_repo,
        leave_types_repo=leave_types_repo,
        leave_balances_repo=leave_balances_repo,
        holidays_repo=holidays_repo,
        token_service=token_service,
        auth_service=auth_service,
        leave_service=leave_service,
        balance_reader=balance_reader,
        dashboard_service=dashboard_service,
    )
