from __future__ import annotations

from datetime import date, datetime

# Fixed slot catalog. The last interval is 30 minutes on purpose.
TIME_SLOTS: tuple[str, ...] = (
    "09:00",
    "10:00",
    "11:00",
    "12:00",
    "13:00",
    "14:00",
    "15:00",
    "16:00",
    "16:30",
)


def is_known_slot(time_slot: str) -> bool:
    return time_slot in TIME_SLOTS


def split_slots(booked: list[str]) -> tuple[list[str], list[str]]:
    """
    Partition the catalog into (available, booked), both in catalog order.
    Booked values outside the catalog are ignored.
    """
    taken = set(booked)
    available = [slot for slot in TIME_SLOTS if slot not in taken]
    booked_in_catalog = [slot for slot in TIME_SLOTS if slot in taken]
    return available, booked_in_catalog


def to_date(value: date | datetime | str) -> date:
    """Normalize a date, datetime or ISO string to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return datetime.fromisoformat(text).date()


def to_datetime(value: date | datetime | str | None) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    return datetime.fromisoformat(value.strip())
