from datetime import date

from hr_portal.leave.calendar import WorkingDayCalculator, count_working_days


class InMemoryHolidays:
    def __init__(self, dates):
        self._dates = set(dates)
        self.calls = []

    def dates_between(self, start_date, end_date):
        self.calls.append((start_date, end_date))
        return {d for d in self._dates if start_date <= d <= end_date}


def test_full_work_week_counts_five_days():
    assert count_working_days(date(2026, 3, 2), date(2026, 3, 6)) == 5


def test_weekend_only_range_counts_zero():
    assert count_working_days(date(2026, 3, 7), date(2026, 3, 8)) == 0


def test_single_weekday_counts_one():
    assert count_working_days(date(2026, 3, 4), date(2026, 3, 4)) == 1


def test_range_spanning_weekend_skips_saturday_and_sunday():
    # Thu 2026-03-05 .. Tue 2026-03-10
    assert count_working_days(date(2026, 3, 5), date(2026, 3, 10)) == 4


def test_holidays_are_excluded():
    holidays = {date(2026, 3, 3), date(2026, 3, 4)}
    assert count_working_days(date(2026, 3, 2), date(2026, 3, 6), holidays) == 3


def test_range_fully_covered_by_holidays_counts_zero():
    holidays = {date(2026, 3, 2), date(2026, 3, 3)}
    assert count_working_days(date(2026, 3, 2), date(2026, 3, 3), holidays) == 0


def test_holiday_on_weekend_is_not_subtracted_twice():
    assert count_working_days(date(2026, 3, 2), date(2026, 3, 8), {date(2026, 3, 7)}) == 5


def test_calculator_loads_holidays_for_the_requested_range():
    repo = InMemoryHolidays({date(2026, 3, 3), date(2026, 4, 1)})
    calc = WorkingDayCalculator(repo)

    assert calc.count(date(2026, 3, 2), date(2026, 3, 6)) == 4
    assert repo.calls == [(date(2026, 3, 2), date(2026, 3, 6))]


def test_calculator_reversed_range_is_zero_without_lookup():
    repo = InMemoryHolidays(set())
    calc = WorkingDayCalculator(repo)

    assert calc.count(date(2026, 3, 6), date(2026, 3, 2)) == 0
    assert repo.calls == []
