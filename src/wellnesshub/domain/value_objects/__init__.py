"""
Value objects package for domain layer.
"""

from .time_slot import TimeSlot, hourly_slots, is_valid_time

__all__ = [
    "TimeSlot",
    "hourly_slots",
    "is_valid_time",
]
