from __future__ import annotations

from datetime import date, datetime, timezone


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD into a date.

    A full ISO datetime ("2026-03-01T00:00:00Z") is accepted and truncated to its date part.
    Anything else raises ValueError.
    """
    value = value.strip()
    if len(value) == 10:
        return date.fromisoformat(value)

    if value[10:11] not in ("T", " "):
        raise ValueError(f"Invalid ISO date: {value!r}")
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value).date()


def utcnow() -> datetime:
    """Naive UTC timestamp as stored in DateTime columns.

    Note: Wrapped so tests can patch it.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def current_year() -> int:
    return date.today().year
