"""Time utilities - DRY principle"""
from datetime import date, datetime, time
from students_service.config.settings import DATE_FORMAT

def parse_date(value) -> date:
    """Parse an ISO date string (or date/datetime) into a calendar date"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError):
        return datetime.strptime(str(value), DATE_FORMAT).date()

def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)

def date_to_native(value: date) -> datetime:
    """Midnight datetime for a calendar date; BSON stores datetimes only"""
    return datetime.combine(value, time.min)
