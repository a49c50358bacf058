"""Time utilities - DRY principle"""
from datetime import date, datetime
from zoneinfo import ZoneInfo

from classboard.config.settings import SCHOOL_TIMEZONE

SCHOOL_TZ = ZoneInfo(SCHOOL_TIMEZONE)

# Current school-local time used for record timestamps

def now_local() -> datetime:
    return datetime.now(SCHOOL_TZ)

def today_local() -> date:
    return now_local().date()

def parse_timestamp(value) -> datetime:
    """Parse an ISO timestamp string; datetimes pass through unchanged"""
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError as e:
        raise ValueError(f"Invalid timestamp format: {e}")
