"""
Pace and speed conversions. Time in seconds, distance in kilometers.

A zero distance or time gives inf (or nan for 0 / 0) rather than raising.
"""

from .units import KM_PER_MILE, SECONDS_PER_HOUR, divide


def calculate_pace_per_km(total_seconds: float, distance_km: float) -> float:
    """Seconds per kilometer."""
    return divide(total_seconds, distance_km)


def calculate_pace_per_mile(total_seconds: float, distance_km: float) -> float:
    """Seconds per mile."""
    return divide(total_seconds, distance_km / KM_PER_MILE)


def calculate_speed_kmh(total_seconds: float, distance_km: float) -> float:
    return divide(distance_km, total_seconds) * SECONDS_PER_HOUR


def calculate_speed_mph(total_seconds: float, distance_km: float) -> float:
    return calculate_speed_kmh(total_seconds, distance_km) / KM_PER_MILE
