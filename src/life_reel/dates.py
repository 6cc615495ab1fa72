"""Calendar arithmetic shared by the models and the age rules."""

import calendar
from datetime import date, datetime


def to_day(value: date | datetime) -> date:
    """Calendar day of a date or timestamp."""
    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(start: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length."""
    index = start.year * 12 + (start.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def whole_months_between(start: date, end: date) -> int:
    """
    Whole calendar months from start to end. Negative when end is earlier.
    Jan 31 to Feb 28 counts as one month.
    """
    if end < start:
        return -whole_months_between(end, start)
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if add_months(start, months) > end:
        months -= 1
    return months


def calendar_difference(start: date, end: date) -> tuple[int, int, int]:
    """(years, months, days) elapsed from start to end. end must not precede start."""
    total_months = whole_months_between(start, end)
    days = (end - add_months(start, total_months)).days
    years, months = divmod(total_months, 12)
    return years, months, days
