from __future__ import annotations

from typing import FrozenSet, Mapping

from .enums import Capability, Role

_EMPLOYEE = frozenset({Capability.REQUEST_LEAVE, Capability.VIEW_BALANCE})
_APPROVER = _EMPLOYEE | {Capability.APPROVE_LEAVE}

ROLE_CAPABILITIES: Mapping[Role, FrozenSet[Capability]] = {
    Role.ADMIN: _APPROVER,
    Role.MANAGER: _APPROVER,
    Role.EMPLOYEE: _EMPLOYEE,
}

APPROVER_ROLES = frozenset(role for role, caps in ROLE_CAPABILITIES.items() if Capability.APPROVE_LEAVE in caps)


def can(role: Role, capability: Capability) -> bool:
    return capability in ROLE_CAPABILITIES.get(role, frozenset())
