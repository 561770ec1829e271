"""
Slot grid generation.

Produces the fixed, ordered set of bookable start times for a day from the
business opening/closing boundary and a fixed step.
"""

from datetime import time
from functools import lru_cache

DEFAULT_OPENING = time(8, 0)
DEFAULT_CLOSING = time(20, 0)
DEFAULT_STEP_MINUTES = 30

MINUTES_PER_DAY = 24 * 60


def minutes_since_midnight(value: time) -> int:
    """Convert a time of day to minutes since midnight."""
    return value.hour * 60 + value.minute


def time_from_minutes(minutes: int) -> time:
    """Convert minutes since midnight back to a time of day."""
    if not 0 <= minutes < MINUTES_PER_DAY:
        raise ValueError(f"{minutes} minutes is outside a single day")
    return time(minutes // 60, minutes % 60)


def parse_time_of_day(value: str) -> time:
    """
    Parse a strict "HH:MM" string.

    Raises:
        ValueError: If the string is not a valid 24h time of day
    """
    hours, sep, minutes = value.partition(":")
    if not sep or len(hours) != 2 or len(minutes) != 2:
        raise ValueError(f"Invalid time of day: {value!r}")
    if not (hours.isdigit() and minutes.isdigit()):
        raise ValueError(f"Invalid time of day: {value!r}")
    return time(int(hours), int(minutes))


def format_time_of_day(value: time) -> str:
    """Format a time of day as "HH:MM"."""
    return value.strftime("%H:%M")


@lru_cache(maxsize=128)
def generate_slots(
    opening: time = DEFAULT_OPENING,
    closing: time = DEFAULT_CLOSING,
    step_minutes: int = DEFAULT_STEP_MINUTES,
) -> tuple[time, ...]:
    """
    Generate the bookable start times of a day.

    Args:
        opening: first slot of the day
        closing: last possible slot; included only if it falls on a step boundary
        step_minutes: grid granularity

    Returns:
        Ascending tuple of slot start times. Empty when opening > closing.

    Raises:
        ValueError: If step_minutes is not positive
    """
    if step_minutes <= 0:
        raise ValueError("step_minutes must be positive")

    start = minutes_since_midnight(opening)
    end = minutes_since_midnight(closing)

    return tuple(time_from_minutes(m) for m in range(start, end + 1, step_minutes))
