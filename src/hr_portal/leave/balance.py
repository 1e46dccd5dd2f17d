from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import current_year
from .model import LeaveBalance
from .repository import LeaveBalanceRepository


class BalanceReader:
    """Read-only view of per-year leave allocations.

    Note: used_days is maintained outside the request lifecycle.
    """

    def __init__(self, balances: LeaveBalanceRepository):
        self._balances = balances

    def get_balance(self, *, user_id: str, year: Optional[int] = None) -> Sequence[LeaveBalance]:
        return self._balances.list_for_user(user_id=user_id, year=int(year or current_year()))

    def total_available(self, *, user_id: str, year: Optional[int] = None) -> int:
        return sum(b.available_days for b in self.get_balance(user_id=user_id, year=year))
