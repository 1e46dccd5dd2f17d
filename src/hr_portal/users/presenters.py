from __future__ import annotations

from .model import User


def user_json(user: User) -> dict:
    return {
        "id": user.user_id,
        "email": user.email,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "role": user.role.value,
        "status": user.status.value,
        "departmentId": user.department_id,
        "managerId": user.manager_id,
    }
