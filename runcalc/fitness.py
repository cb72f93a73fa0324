"""
VO2max estimators: VDOT, Cooper test and the FMR composite.

Based on:
- Daniels & Gilbert (1979): oxygen cost of running, simplified linear form
- Cooper (1968): 12-minute field test
- Uth et al. (2004): HRmax/HRrest ratio method

All estimates are in mL/kg/min.
"""

from typing import Union

from .units import divide, is_female


# Age decay applied to the FMR composite beyond this age
FMR_AGE_THRESHOLD = 25
FMR_AGE_DECAY_PER_YEAR = 0.002
FMR_AGE_FACTOR_FLOOR = 0.7
FMR_FEMALE_FACTOR = 0.95


def calculate_vdot(distance_m: float, total_time_min: float) -> float:
    """
    Estimate VO2max from a race effort.

    VO2 = 0.2 × speed + 3.5, speed in meters per minute.

    Args:
        distance_m: Race distance in meters
        total_time_min: Finishing time in minutes

    Returns:
        Estimated VO2max (mL/kg/min), inf when total_time_min is 0
    """
    speed = divide(distance_m, total_time_min)
    return 0.2 * speed + 3.5


def calculate_cooper_vo2(distance_m: float) -> float:
    """Estimate VO2max from the distance covered in a 12-minute run."""
    return (distance_m - 504.9) / 44.73


def calculate_fmr_vo2(
    distance_m: float,
    total_time_min: float,
    max_hr: float,
    rest_hr: float,
    gender: Union[str, int] = 'male',
    age: float = 25
) -> float:
    """
    Composite VO2max estimate from pace and heart rate.

    Averages the time-based VDOT estimate with the heart rate ratio
    estimate (15 × HRmax / HRrest), then applies:
        - 0.95 multiplier for female athletes
        - age decay of 0.2% per year over 25, floored at 0.7

    Args:
        distance_m: Race distance in meters
        total_time_min: Finishing time in minutes
        max_hr: Maximum heart rate (bpm)
        rest_hr: Resting heart rate (bpm), 0 gives inf
        gender: 'male' / 'female', or the binary flag 1 / 0
        age: Age in years

    Returns:
        Estimated VO2max (mL/kg/min)
    """
    vo2_time = calculate_vdot(distance_m, total_time_min)
    vo2_hr = 15 * divide(max_hr, rest_hr)
    vo2max = (vo2_time + vo2_hr) / 2

    if is_female(gender):
        vo2max *= FMR_FEMALE_FACTOR

    if age > FMR_AGE_THRESHOLD:
        years_over = age - FMR_AGE_THRESHOLD
        age_factor = max(1 - FMR_AGE_DECAY_PER_YEAR * years_over, FMR_AGE_FACTOR_FLOOR)
        vo2max *= age_factor

    return vo2max


def classify_vo2(vo2: float) -> str:
    """
    Classify a VO2max value.

    Bands (mL/kg/min):
        - Poor: < 35
        - Fair: 35-45
        - Good: 45-55
        - Excellent: 55-65
        - Superior: >= 65

    Args:
        vo2: VO2max estimate

    Returns:
        Classification label
    """
    if vo2 < 35:
        return 'Poor'
    elif vo2 < 45:
        return 'Fair'
    elif vo2 < 55:
        return 'Good'
    elif vo2 < 65:
        return 'Excellent'
    else:
        return 'Superior'
