import calendar
import re
from datetime import date, timedelta

MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


def month_bounds(month):
    """
    Parse a ``YYYY-MM`` string.
    Returns: (first_day, last_day) of that calendar month.
    """
    match = MONTH_PATTERN.match(month or "")
    if not match:
        raise ValueError(f"Invalid month '{month}', expected YYYY-MM")

    year, month_number = int(match.group(1)), int(match.group(2))
    if not 1 <= month_number <= 12:
        raise ValueError(f"Invalid month '{month}', expected YYYY-MM")

    last_day = calendar.monthrange(year, month_number)[1]
    return date(year, month_number, 1), date(year, month_number, last_day)


DAY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_day(value):
    """Strict ``YYYY-MM-DD``; impossible dates raise ValueError too."""
    if not DAY_PATTERN.match(value or ""):
        raise ValueError("Invalid date format. Use YYYY-MM-DD")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError("Invalid date format. Use YYYY-MM-DD")


def dates_within(intervals, first_day, last_day):
    """
    Distinct dates covered by any (start, end) interval, clipped to
    [first_day, last_day]. A missing end means a single-day interval.
    """
    covered = set()

    for start, end in intervals:
        current = max(start, first_day)
        stop = min(end or start, last_day)

        while current <= stop:
            covered.add(current)
            current += timedelta(days=1)

    return sorted(covered)
