"""Date Range Utilities - Week Implementation"""
from datetime import date, datetime, timedelta
from typing import List, Tuple, Union

from classboard.config.settings import WEEK_LENGTH_DAYS

def parse_iso_date(value: Union[str, date, datetime], field_name: str = "date") -> date:
    """Parse a YYYY-MM-DD string (or pass a date through)

    Raises:
        ValueError: If the value is not a calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValueError(f"Invalid {field_name} '{value}', expected YYYY-MM-DD")

def get_week_dates(week_start: Union[str, date], days: int = WEEK_LENGTH_DAYS) -> List[date]:
    """Consecutive school days starting at week_start

    Args:
        week_start: First day of the week (normally a Monday)
        days: Number of school days, Monday-Friday by default

    Returns:
        list: ``days`` dates in chronological order
    """
    start = parse_iso_date(week_start, "week start")
    return [start + timedelta(days=offset) for offset in range(days)]

def get_week_range(week_start: Union[str, date], days: int = WEEK_LENGTH_DAYS) -> Tuple[date, date]:
    """First and last school day of the week"""
    dates = get_week_dates(week_start, days)
    return dates[0], dates[-1]

def monday_of(day: Union[str, date]) -> date:
    """Monday of the week containing the given day (weekday 0=Monday)"""
    parsed = parse_iso_date(day)
    return parsed - timedelta(days=parsed.weekday())
