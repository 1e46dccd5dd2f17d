from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

import mysql.connector
from sqlalchemy import inspect, select
from sqlalchemy.engine import make_url
from werkzeug.security import generate_password_hash

from ..common.datetime_utils import current_year
from ..core.enums import Role, UserStatus
from .extensions import db
from .tables import DepartmentRow, HolidayRow, LeaveBalanceRow, LeaveTypeRow, UserRow
from .transaction import transaction

logger = logging.getLogger(__name__)

# (name, yearly allocation)
DEMO_LEAVE_TYPES = (
    ("Annual Leave", 15),
    ("Sick Leave", 10),
    ("Personal Leave", 3),
)

# (month, day, name)
DEMO_HOLIDAYS = (
    (1, 1, "New Year's Day"),
    (5, 1, "Labour Day"),
    (12, 25, "Christmas Day"),
)


@dataclass(frozen=True)
class SeedResult:
    admin_id: str
    manager_id: str
    employee_id: str
    department_id: str
    leave_type_ids: dict


def ensure_database_exists(database_uri: str) -> None:
    """Create the MySQL schema named in the URI if it is missing. Other backends are left alone."""
    url = make_url(database_uri)
    if url.get_backend_name() != "mysql" or not url.database:
        return

    conn = mysql.connector.connect(
        host=url.host or "localhost",
        port=int(url.port or 3306),
        user=url.username or "root",
        password=url.password or "",
        use_pure=True,
    )
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{url.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def init_schema() -> None:
    """Create missing tables from ORM metadata. Needs an app context."""
    db.create_all()


def list_tables() -> list[str]:
    return sorted(inspect(db.engine).get_table_names())


def _upsert_department(session, name: str) -> DepartmentRow:
    row = session.execute(select(DepartmentRow).where(DepartmentRow.name == name)).scalar_one_or_none()
    if not row:
        row = DepartmentRow(name=name)
        session.add(row)
        session.flush()
    return row


def _upsert_user(
    session,
    *,
    email: str,
    password: str,
    first_name: str,
    last_name: str,
    role: Role,
    department_id: Optional[str] = None,
    manager_id: Optional[str] = None,
) -> UserRow:
    row = session.execute(select(UserRow).where(UserRow.email == email)).scalar_one_or_none()
    if not row:
        row = UserRow(email=email)
        session.add(row)

    row.password_hash = generate_password_hash(password)
    row.first_name = first_name
    row.last_name = last_name
    row.role = role.value
    row.status = UserStatus.ACTIVE.value
    row.department_id = department_id
    row.manager_id = manager_id
    session.flush()
    return row


def _upsert_leave_type(session, name: str) -> LeaveTypeRow:
    row = session.execute(select(LeaveTypeRow).where(LeaveTypeRow.name == name)).scalar_one_or_none()
    if not row:
        row = LeaveTypeRow(name=name)
        session.add(row)
        session.flush()
    return row


def _ensure_balance(session, *, user_id: str, leave_type_id: str, year: int, total_days: int) -> None:
    row = session.execute(
        select(LeaveBalanceRow).where(
            LeaveBalanceRow.user_id == user_id,
            LeaveBalanceRow.leave_type_id == leave_type_id,
            LeaveBalanceRow.year == year,
        )
    ).scalar_one_or_none()
    if not row:
        session.add(
            LeaveBalanceRow(user_id=user_id, leave_type_id=leave_type_id, year=year, total_days=total_days, used_days=0)
        )


def _ensure_holiday(session, *, holiday_date: date, name: str) -> None:
    exists = session.execute(select(HolidayRow.id).where(HolidayRow.date == holiday_date)).scalar_one_or_none()
    if not exists:
        session.add(HolidayRow(date=holiday_date, name=name))


def seed_demo_data(*, year: Optional[int] = None) -> SeedResult:
    """Insert or refresh the demo accounts and reference data. Safe to run repeatedly."""
    year = int(year or current_year())

    with transaction() as session:
        department = _upsert_department(session, "Engineering")

        admin = _upsert_user(
            session,
            email="admin@hrportal.example.com",
            password="admin123",
            first_name="Admin",
            last_name="User",
            role=Role.ADMIN,
        )
        manager = _upsert_user(
            session,
            email="manager@hrportal.example.com",
            password="manager123",
            first_name="Manager",
            last_name="User",
            role=Role.MANAGER,
            department_id=department.id,
        )
        employee = _upsert_user(
            session,
            email="employee@hrportal.example.com",
            password="employee123",
            first_name="Employee",
            last_name="User",
            role=Role.EMPLOYEE,
            department_id=department.id,
            manager_id=manager.id,
        )

        leave_type_ids = {}
        for name, total_days in DEMO_LEAVE_TYPES:
            leave_type = _upsert_leave_type(session, name)
            leave_type_ids[name] = leave_type.id
            for user in (admin, manager, employee):
                _ensure_balance(session, user_id=user.id, leave_type_id=leave_type.id, year=year, total_days=total_days)

        for month, day, name in DEMO_HOLIDAYS:
            _ensure_holiday(session, holiday_date=date(year, month, day), name=name)

        result = SeedResult(
            admin_id=admin.id,
            manager_id=manager.id,
            employee_id=employee.id,
            department_id=department.id,
            leave_type_ids=leave_type_ids,
        )

    logger.info("Demo data seeded for %d", year)
    return result
