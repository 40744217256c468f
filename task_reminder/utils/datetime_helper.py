"""Date helpers shared by the reminder and task services"""
from datetime import datetime, timezone, timedelta

ONE_DAY = timedelta(days=1)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """
    Return an aware datetime, interpreting naive values as UTC

    Args:
        dt: datetime with or without tzinfo

    Returns:
        datetime with tzinfo set
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def days_until(due: datetime, now: datetime) -> int:
    """
    Whole days from now until due, rounding partial days up

    12 hours ahead gives 1, 1 ms in the past gives 0, 25 hours in the past
    gives -1. Computed on timedelta values so there is no float rounding.
    """
    remaining = ensure_utc(due) - ensure_utc(now)
    # ceil(a / b) == -((-a) // b)
    return -((-remaining) // ONE_DAY)


def format_due_date(dt: datetime) -> str:
    """
    Human readable due date for emails

    Returns:
        str: "Monday, October 14, 2025 at 10:30 AM UTC" style string
    """
    dt = ensure_utc(dt)
    hour = dt.hour % 12 or 12
    period = "AM" if dt.hour < 12 else "PM"
    return (
        f"{dt.strftime('%A')}, {dt.strftime('%B')} {dt.day}, {dt.year} "
        f"at {hour}:{dt.minute:02d} {period} {dt.tzname()}"
    )
