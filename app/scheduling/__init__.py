"""
Scheduling core: slot grid generation and overlap detection.

Pure functions with no I/O; callers pass in a fresh snapshot of the day.
"""

from app.scheduling.overlap import Interval, Placement, RejectionReason, can_place, overlaps
from app.scheduling.slots import (
    DEFAULT_CLOSING,
    DEFAULT_OPENING,
    DEFAULT_STEP_MINUTES,
    format_time_of_day,
    generate_slots,
    parse_time_of_day,
)

__all__ = [
    "DEFAULT_CLOSING",
    "DEFAULT_OPENING",
    "DEFAULT_STEP_MINUTES",
    "Interval",
    "Placement",
    "RejectionReason",
    "can_place",
    "format_time_of_day",
    "generate_slots",
    "overlaps",
    "parse_time_of_day",
]
