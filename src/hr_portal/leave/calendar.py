from __future__ import annotations

from datetime import date, timedelta
from typing import Collection

from ..core.constants import WEEKEND_DAYS
from .repository import HolidayRepository


def count_working_days(start_date: date, end_date: date, holidays: Collection[date] = ()) -> int:
    """Count days in the inclusive range that are neither weekend days nor holidays."""
    working_days = 0
    current = start_date
    while current <= end_date:
        if current.weekday() not in WEEKEND_DAYS and current not in holidays:
            working_days += 1
        current += timedelta(days=1)
    return working_days


class WorkingDayCalculator:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def count(self, start_date: date, end_date: date) -> int:
        if end_date < start_date:
            return 0
        return count_working_days(start_date, end_date, self._holidays.dates_between(start_date, end_date))
