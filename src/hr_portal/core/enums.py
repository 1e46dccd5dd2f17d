from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    EMPLOYEE = "EMPLOYEE"


class UserStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class LeaveStatus(str, Enum):
    """Leave request workflow status as stored in the database."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class Capability(str, Enum):
    REQUEST_LEAVE = "REQUEST_LEAVE"
    VIEW_BALANCE = "VIEW_BALANCE"
    APPROVE_LEAVE = "APPROVE_LEAVE"
