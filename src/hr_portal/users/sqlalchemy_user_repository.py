from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func, select

from ..core.enums import Role, UserStatus
from ..database.extensions import db
from ..database.tables import UserRow
from .model import User
from .repository import UserRepository


def _to_user(row: UserRow) -> User:
    return User(
        user_id=row.id,
        email=row.email,
        first_name=row.first_name,
        last_name=row.last_name,
        password_hash=row.password_hash,
        role=Role(row.role),
        status=UserStatus(row.status),
        department_id=row.department_id,
        manager_id=row.manager_id,
    )


class SqlAlchemyUserRepository(UserRepository):
    def get_by_id(self, user_id: str) -> Optional[User]:
        row = db.session.get(UserRow, user_id)
        return _to_user(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        row = db.session.execute(
            select(UserRow).where(func.lower(UserRow.email) == email.strip().lower())
        ).scalar_one_or_none()
        return _to_user(row) if row else None

    def list_direct_report_ids(self, manager_id: str) -> Sequence[str]:
        return list(db.session.execute(select(UserRow.id).where(UserRow.manager_id == manager_id)).scalars())
