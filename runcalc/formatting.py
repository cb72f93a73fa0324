"""
Formatting for durations and paces shown to the runner.

Remainders truncate toward zero (math.fmod), so a negative duration such as
an over-credited elevation estimate prints as '-1m -30s' instead of wrapping
around to a plausible positive time.
"""

import math

from .units import SECONDS_PER_HOUR, SECONDS_PER_MINUTE, format_number


def format_hms(hours: float, minutes: float, seconds: float) -> str:
    """
    Render a duration as '1h 30m 05s', or '25m 30s' when hours is zero.

    Minutes are never padded; seconds are left-padded with '0' to two
    characters. Integral floats print without a decimal part.
    """
    result = ''
    if hours > 0:
        result += f"{format_number(hours)}h "
    result += f"{format_number(minutes)}m {format_number(seconds).rjust(2, '0')}s"
    return result


def format_seconds_as_hms(total_seconds: float) -> str:
    """
    Format a total number of seconds via format_hms.

    Whole hours are always shown (7200 -> '2h 0m 00s'); the hour segment is
    only dropped when the hour component itself is zero.
    """
    hours = math.floor(total_seconds / SECONDS_PER_HOUR)
    minutes = math.floor(math.fmod(total_seconds, SECONDS_PER_HOUR) / SECONDS_PER_MINUTE)
    seconds = math.floor(math.fmod(total_seconds, SECONDS_PER_MINUTE))
    return format_hms(hours, minutes, seconds)


def format_pace(seconds_per_km: float) -> str:
    """Format a pace in seconds per km as 'm:ss' (305 -> '5:05')."""
    minutes = math.floor(seconds_per_km / SECONDS_PER_MINUTE)
    seconds = math.floor(math.fmod(seconds_per_km, SECONDS_PER_MINUTE))
    return f"{minutes}:{str(seconds).rjust(2, '0')}"
