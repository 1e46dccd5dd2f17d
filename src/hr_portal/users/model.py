from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role, UserStatus


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: Plain data object, no database access code here.
    """

    user_id: str
    email: str
    first_name: str
    last_name: str
    password_hash: str
    role: Role
    status: UserStatus = UserStatus.ACTIVE
    department_id: Optional[str] = None
    manager_id: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE
