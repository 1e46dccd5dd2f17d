from __future__ import annotations

from datetime import date

import pytest

from hr_portal.common.datetime_utils import parse_iso_date


@pytest.mark.parametrize(
    "value",
    [
        "2026-03-02",
        " 2026-03-02 ",
        "2026-03-02T09:00:00",
        "2026-03-02T09:00:00Z",
        "2026-03-02T23:30:00.000Z",
        "2026-03-02T09:00:00+07:00",
    ],
)
def test_parse_iso_date_accepts_dates_and_datetimes(value):
    assert parse_iso_date(value) == date(2026, 3, 2)


@pytest.mark.parametrize(
    "value",
    [
        "2026-03-02garbage",
        "2026-03-0699999",
        "2026-03-02 junk",
        "2026-3-2",
        "2026-02-30",
        "not-a-date",
        "",
    ],
)
def test_parse_iso_date_rejects_malformed_values(value):
    with pytest.raises(ValueError):
        parse_iso_date(value)
