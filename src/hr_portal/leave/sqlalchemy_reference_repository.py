from __future__ import annotations

from datetime import date
from typing import AbstractSet, Optional, Sequence

from sqlalchemy import select

from ..database.extensions import db
from ..database.tables import HolidayRow, LeaveBalanceRow, LeaveTypeRow
from .model import LeaveBalance, LeaveType
from .repository import HolidayRepository, LeaveBalanceRepository, LeaveTypeRepository
from .sqlalchemy_leave_repository import leave_type_from_row


class SqlAlchemyLeaveTypeRepository(LeaveTypeRepository):
    def get(self, type_id: str) -> Optional[LeaveType]:
        row = db.session.get(LeaveTypeRow, type_id)
        return leave_type_from_row(row) if row else None

    def list_all(self) -> Sequence[LeaveType]:
        rows = db.session.execute(select(LeaveTypeRow).order_by(LeaveTypeRow.name.asc())).scalars()
        return [leave_type_from_row(r) for r in rows]


class SqlAlchemyLeaveBalanceRepository(LeaveBalanceRepository):
    def list_for_user(self, *, user_id: str, year: int) -> Sequence[LeaveBalance]:
        rows = db.session.execute(
            select(LeaveBalanceRow)
            .join(LeaveTypeRow, LeaveBalanceRow.leave_type_id == LeaveTypeRow.id)
            .where(LeaveBalanceRow.user_id == user_id, LeaveBalanceRow.year == int(year))
            .order_by(LeaveTypeRow.name.asc())
        ).unique().scalars()
        return [
            LeaveBalance(
                user_id=r.user_id,
                leave_type=leave_type_from_row(r.leave_type),
                year=int(r.year),
                total_days=int(r.total_days),
                used_days=int(r.used_days),
            )
            for r in rows
        ]


class SqlAlchemyHolidayRepository(HolidayRepository):
    def dates_between(self, start_date: date, end_date: date) -> AbstractSet[date]:
        rows = db.session.execute(
            select(HolidayRow.date).where(HolidayRow.date >= start_date, HolidayRow.date <= end_date)
        ).scalars()
        return frozenset(rows)
