from __future__ import annotations

from datetime import date
from typing import Collection, Optional, Sequence

from sqlalchemy import delete, func, select, update

from ..common.datetime_utils import utcnow
from ..core.enums import LeaveStatus
from ..database.extensions import db
from ..database.tables import LeaveRequestRow, LeaveTypeRow, UserRow
from ..database.transaction import transaction
from .model import LeaveRequest, LeaveType, PersonRef
from .repository import LeaveRequestRepository


def _person(row: Optional[UserRow], *, with_email: bool) -> Optional[PersonRef]:
    if row is None:
        return None
    return PersonRef(
        user_id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email if with_email else None,
    )


def leave_type_from_row(row: LeaveTypeRow) -> LeaveType:
    return LeaveType(type_id=row.id, name=row.name, created_at=row.created_at, updated_at=row.updated_at)


def _to_request(row: LeaveRequestRow) -> LeaveRequest:
    return LeaveRequest(
        request_id=row.id,
        applicant=_person(row.applicant, with_email=True),
        approver=_person(row.approver, with_email=False),
        leave_type=leave_type_from_row(row.leave_type),
        start_date=row.start_date,
        end_date=row.end_date,
        reason=row.reason,
        status=LeaveStatus(row.status),
        working_days=row.working_days,
        comment=row.decision_comment,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyLeaveRequestRepository(LeaveRequestRepository):
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
        with transaction() as session:
            row = LeaveRequestRow(
                applicant_id=applicant_id,
                leave_type_id=leave_type_id,
                start_date=start_date,
                end_date=end_date,
                reason=reason,
                working_days=int(working_days),
                status=LeaveStatus.PENDING.value,
            )
            session.add(row)
            session.flush()
            return row.id

    def get(self, request_id: str) -> Optional[LeaveRequest]:
        row = db.session.get(LeaveRequestRow, request_id)
        return _to_request(row) if row else None

    def find_overlapping(
        self,
        *,
        applicant_id: str,
        start_date: date,
        end_date: date,
        statuses: Collection[LeaveStatus],
        exclude_id: Optional[str] = None,
    ) -> Optional[str]:
        stmt = select(LeaveRequestRow.id).where(
            LeaveRequestRow.applicant_id == applicant_id,
            LeaveRequestRow.status.in_([s.value for s in statuses]),
            LeaveRequestRow.start_date <= end_date,
            LeaveRequestRow.end_date >= start_date,
        )
        if exclude_id:
            stmt = stmt.where(LeaveRequestRow.id != exclude_id)
        return db.session.execute(stmt.limit(1)).scalar_one_or_none()

    def list_requests(
        self,
        *,
        applicant_ids: Sequence[str],
        status: Optional[LeaveStatus] = None,
        newest_first: bool = True,
    ) -> Sequence[LeaveRequest]:
        if not applicant_ids:
            return []

        stmt = select(LeaveRequestRow).where(LeaveRequestRow.applicant_id.in_(list(applicant_ids)))
        if status is not None:
            stmt = stmt.where(LeaveRequestRow.status == status.value)

        order = LeaveRequestRow.created_at.desc() if newest_first else LeaveRequestRow.created_at.asc()
        stmt = stmt.order_by(order)
        return [_to_request(row) for row in db.session.execute(stmt).unique().scalars()]

    def count_requests(self, *, applicant_ids: Sequence[str], status: Optional[LeaveStatus] = None) -> int:
        if not applicant_ids:
            return 0

        stmt = select(func.count(LeaveRequestRow.id)).where(LeaveRequestRow.applicant_id.in_(list(applicant_ids)))
        if status is not None:
            stmt = stmt.where(LeaveRequestRow.status == status.value)
        return int(db.session.execute(stmt).scalar_one())

    def decide(
        self,
        *,
        request_id: str,
        status: LeaveStatus,
        approver_id: str,
        comment: Optional[str] = None,
    ) -> bool:
        with transaction() as session:
            result = session.execute(
                update(LeaveRequestRow)
                .where(
                    LeaveRequestRow.id == request_id,
                    LeaveRequestRow.status == LeaveStatus.PENDING.value,
                )
                .values(
                    status=status.value,
                    approver_id=approver_id,
                    decision_comment=comment,
                    updated_at=utcnow(),
                )
                .execution_options(synchronize_session=False)
            )
            return result.rowcount == 1

    def delete_pending(self, request_id: str) -> bool:
        with transaction() as session:
            result = session.execute(
                delete(LeaveRequestRow)
                .where(
                    LeaveRequestRow.id == request_id,
                    LeaveRequestRow.status == LeaveStatus.PENDING.value,
                )
                .execution_options(synchronize_session=False)
            )
            return result.rowcount == 1
