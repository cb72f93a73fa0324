"""
Running calculator formula library.

This package provides pure functions for:
- VO2max estimation (VDOT, Cooper, FMR composite)
- Pace and speed conversions
- Time and pace formatting
- Race-time prediction and age grading
- Elevation-adjusted time
- Race nutrition planning
- Heart rate and pace training zones
- BMI, efficiency rating and race distance names
"""

# Fitness metrics
from .fitness import (
    calculate_vdot,
    calculate_cooper_vo2,
    calculate_fmr_vo2,
    classify_vo2,
)

# Pace and speed
from .pace import (
    calculate_pace_per_km,
    calculate_pace_per_mile,
    calculate_speed_kmh,
    calculate_speed_mph,
)

# Formatting
from .formatting import (
    format_hms,
    format_seconds_as_hms,
    format_pace,
)

# Race prediction
from .prediction import (
    predict_race_time_quick,
    calculate_personal_exponent,
    classify_age_grading,
)

# Elevation
from .elevation import calculate_elevation_adjusted_time

# Nutrition
from .nutrition import (
    NutritionParams,
    NutritionNeeds,
    calculate_nutrition_needs,
)

# Training zones
from .zones import (
    HeartRateZone,
    calculate_hr_zones,
    calculate_pace_zones,
)

# Body composition and distances
from .body import (
    DISTANCE_NAMES,
    calculate_bmi,
    get_efficiency_rating,
    get_distance_name,
)

__all__ = [
    # Fitness
    'calculate_vdot',
    'calculate_cooper_vo2',
    'calculate_fmr_vo2',
    'classify_vo2',
    # Pace
    'calculate_pace_per_km',
    'calculate_pace_per_mile',
    'calculate_speed_kmh',
    'calculate_speed_mph',
    # Formatting
    'format_hms',
    'format_seconds_as_hms',
    'format_pace',
    # Prediction
    'predict_race_time_quick',
    'calculate_personal_exponent',
    'classify_age_grading',
    # Elevation
    'calculate_elevation_adjusted_time',
    # Nutrition
    'NutritionParams',
    'NutritionNeeds',
    'calculate_nutrition_needs',
    # Zones
    'HeartRateZone',
    'calculate_hr_zones',
    'calculate_pace_zones',
    # Body
    'DISTANCE_NAMES',
    'calculate_bmi',
    'get_efficiency_rating',
    'get_distance_name',
]
