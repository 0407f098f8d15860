"""Date manipulation utilities"""

from datetime import date


def months_between(start: date, end: date) -> int:
    """Whole calendar months from start to end (a month counts once its day-of-month is reached)"""
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return months


def full_years_between(start: date, end: date) -> int:
    """Completed years from start to end"""
    return months_between(start, end) // 12
