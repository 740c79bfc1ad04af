"""
Date and time utility functions for WellnessHub.
"""

from datetime import date, datetime
from typing import Union


def to_calendar_date(value: Union[str, date, datetime]) -> date:
    """
    Calendar date of an appointment.

    Accepts ``YYYY-MM-DD`` or a full ISO 8601 timestamp (``Z`` suffix
    allowed); for timestamps only the date part is kept.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    if len(text) == 10:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text).date()
