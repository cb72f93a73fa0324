"""
Heart rate and pace training zones.

Based on:
- Karvonen et al. (1957): target HR = HRrest + %HRR × (HRmax - HRrest)
- Threshold-pace multipliers for five-zone pace training
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from .units import round_half_up


# Fractions of heart rate reserve, lowest intensity first
HR_ZONE_BANDS = [
    ('Zone 1', 0.50, 0.60),
    ('Zone 2', 0.60, 0.70),
    ('Zone 3', 0.70, 0.80),
    ('Zone 4', 0.80, 0.90),
    ('Zone 5', 0.90, 1.00),
]

# Multipliers on threshold pace (s/km); zone 4 is threshold itself
PACE_ZONE_FACTORS = [1.25, 1.15, 1.05, 1.00, 0.90]


@dataclass
class HeartRateZone:
    """A named heart rate range in bpm."""
    name: str
    min_hr: int
    max_hr: int


def calculate_hr_zones(max_hr: float, rest_hr: float) -> List[HeartRateZone]:
    """
    Calculate five Karvonen heart rate zones.

    Args:
        max_hr: Maximum heart rate (bpm)
        rest_hr: Resting heart rate (bpm)

    Returns:
        List of 5 HeartRateZone, Zone 1 first
    """
    hr_reserve = max_hr - rest_hr
    lows = rest_hr + hr_reserve * np.array([band[1] for band in HR_ZONE_BANDS])
    highs = rest_hr + hr_reserve * np.array([band[2] for band in HR_ZONE_BANDS])

    return [
        HeartRateZone(
            name=name,
            min_hr=round_half_up(low),
            max_hr=round_half_up(high),
        )
        for (name, _, _), low, high in zip(HR_ZONE_BANDS, lows, highs)
    ]


def calculate_pace_zones(threshold_pace_s: float) -> List[int]:
    """
    Calculate five pace zones from threshold pace.

    Pace is time per distance, so later zones are faster: zone 5 has the
    smallest value.

    Returns:
        List of 5 paces in seconds per km, slowest first
    """
    paces = threshold_pace_s * np.array(PACE_ZONE_FACTORS)
    return [round_half_up(p) for p in paces]
