"""
Body composition ratings and race distance naming.
"""

from .units import KM_PER_MILE, divide, format_number, is_female


# Canonical race distances (km). Looked up by exact equality.
DISTANCE_NAMES = {
    KM_PER_MILE: '1 Mile',
    5: '5 km',
    10: '10 km',
    21.0975: 'Half Marathon',
    42.195: 'Marathon',
    50: '50 km',
    80.4672: '50 Miles',
    100: '100 km',
    160.934: '100 Miles',
}


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """Calculate Body Mass Index; a zero height gives inf."""
    height_m = height_cm / 100
    return divide(weight_kg, height_m * height_m)


def get_efficiency_rating(bmi: float, gender: str = 'male') -> str:
    """
    Rate a BMI for running economy.

    The optimal band is centered on 21 for women and 20 for men, +/- 1.
    Bands are checked in order and the first match wins:
        - Too Light: < 18
        - Very Lean: < optimal - 1
        - Optimal: <= optimal + 1
        - Good: < 25
        - Carrying Extra: < 27
        - Consider Weight Loss: otherwise

    Args:
        bmi: Body Mass Index
        gender: 'male' or 'female'; anything else rates as male

    Returns:
        Rating label
    """
    optimal_bmi = 21 if is_female(gender, allow_flag=False) else 20

    if bmi < 18:
        return 'Too Light'
    elif bmi < optimal_bmi - 1:
        return 'Very Lean'
    elif bmi <= optimal_bmi + 1:
        return 'Optimal'
    elif bmi < 25:
        return 'Good'
    elif bmi < 27:
        return 'Carrying Extra'
    else:
        return 'Consider Weight Loss'


def get_distance_name(km: float) -> str:
    """
    Name a race distance, e.g. 42.195 -> 'Marathon'.

    Matching is exact: 42.1950001 is not a marathon. Unknown distances fall
    back to '{km} km', printing integral values without a decimal part.
    """
    name = DISTANCE_NAMES.get(km)
    if name is not None:
        return name

    return f"{format_number(km)} km"
