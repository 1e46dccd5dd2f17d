from __future__ import annotations

import uuid

from ..common.datetime_utils import utcnow
from ..core.enums import LeaveStatus, Role, UserStatus
from .extensions import db


def _new_id() -> str:
    return str(uuid.uuid4())


class DepartmentRow(db.Model):
    __tablename__ = "departments"

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    name = db.Column(db.String(100), unique=True, nullable=False)


class UserRow(db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    role = db.Column(db.String(20), nullable=False, default=Role.EMPLOYEE.value)
    status = db.Column(db.String(20), nullable=False, default=UserStatus.ACTIVE.value)
    department_id = db.Column(db.String(36), db.ForeignKey("departments.id"), nullable=True)
    manager_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=True, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)


class LeaveTypeRow(db.Model):
    __tablename__ = "leave_types"

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    name = db.Column(db.String(100), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)


class LeaveBalanceRow(db.Model):
    __tablename__ = "leave_balances"
    __table_args__ = (db.UniqueConstraint("user_id", "leave_type_id", "year", name="uq_leave_balance_user_type_year"),)

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    user_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    leave_type_id = db.Column(db.String(36), db.ForeignKey("leave_types.id"), nullable=False)
    year = db.Column(db.Integer, nullable=False)
    total_days = db.Column(db.Integer, nullable=False, default=0)
    used_days = db.Column(db.Integer, nullable=False, default=0)

    leave_type = db.relationship("LeaveTypeRow", lazy="joined")


class HolidayRow(db.Model):
    __tablename__ = "holidays"

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    date = db.Column(db.Date, unique=True, nullable=False)
    name = db.Column(db.String(100), nullable=False, default="")


class LeaveRequestRow(db.Model):
    __tablename__ = "leave_requests"

    id = db.Column(db.String(36), primary_key=True, default=_new_id)
    applicant_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=False, index=True)
    approver_id = db.Column(db.String(36), db.ForeignKey("users.id"), nullable=True)
    leave_type_id = db.Column(db.String(36), db.ForeignKey("leave_types.id"), nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)
    reason = db.Column(db.Text, nullable=False)
    working_days = db.Column(db.Integer, nullable=True)
    status = db.Column(db.String(20), nullable=False, default=LeaveStatus.PENDING.value, index=True)
    decision_comment = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    applicant = db.relationship("UserRow", foreign_keys=[applicant_id], lazy="joined")
    approver = db.relationship("UserRow", foreign_keys=[approver_id], lazy="joined")
    leave_type = db.relationship("LeaveTypeRow", lazy="joined")
