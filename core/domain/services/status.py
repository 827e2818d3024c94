"""
Status derivation for tasks.

The status of a task is never taken from storage: it is a pure function of
the due date and the current calendar day.

    due date <  today  →  COMPLETED
    due date == today  →  IN_PROGRESS
    due date >  today  →  PENDING

Past-due tasks are labelled COMPLETED, not "overdue". Kept as observed.
"""

from datetime import date, datetime
from typing import Any

from core.domain.models.task import TaskStatus


def parse_due_date(value: Any) -> date | None:
    """
    Reads a due date as a calendar day.

    Accepts `date`, `datetime` (time of day dropped) and ISO strings, either
    `YYYY-MM-DD` or a full ISO datetime. Datetimes carrying an offset (`Z`,
    `+02:00`) are converted to local time first, so the day is the one the
    user sees on their clock.

    Returns:
        The calendar day, or None when the value is not a date.
    """
    if isinstance(value, datetime):
        return _local_day(value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None
    return _local_day(parsed)


def _local_day(value: datetime) -> date:
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.date()


def derive_status(due_date: Any, today: date) -> TaskStatus:
    """
    Computes the status label of a task due on `due_date` as seen on `today`.

    A due date that cannot be read is neither before nor equal to today,
    so it falls through to PENDING.
    """
    if isinstance(today, datetime):
        today = today.date()

    due = parse_due_date(due_date)
    if due is None:
        return TaskStatus.PENDING
    if due < today:
        return TaskStatus.COMPLETED
    if due == today:
        return TaskStatus.IN_PROGRESS
    return TaskStatus.PENDING
