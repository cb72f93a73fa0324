"""
Race-day fueling plan: calories, carbohydrate, fluid and sodium.

Based on:
- Jeukendrup (2014): 30-60 g/h carbohydrate, up to 90 g/h for long events
- ACSM fluid guidance: ~400-800 mL/h, scaled for heat
"""

from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any, Tuple

from .units import divide, round_half_up


@dataclass
class NutritionParams:
    """
    Tunable constants for the fueling plan.

    Defaults reproduce the calculator's published numbers.
    """

    long_race_hours: float = 2.5         # Above this: long-race carb rate
    carbs_per_hour_short: float = 50.0   # g/h
    carbs_per_hour_long: float = 70.0    # g/h
    base_hydration_per_hour: float = 600.0  # mL/h before heat scaling
    sodium_per_hour: float = 500.0       # mg/h

    def to_dict(self) -> Dict[str, Any]:
        """Convert parameters to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'NutritionParams':
        """Create parameters from dictionary."""
        return cls(**d)

    def validate(self) -> Tuple[bool, str]:
        """Validate parameter constraints."""
        issues = []

        if self.long_race_hours <= 0:
            issues.append("Long race threshold must be positive")

        if not (0 <= self.carbs_per_hour_short <= self.carbs_per_hour_long):
            issues.append("Carbs: 0 <= short <= long")

        if self.base_hydration_per_hour < 0:
            issues.append("Base hydration must be non-negative")

        if self.sodium_per_hour < 0:
            issues.append("Sodium must be non-negative")

        if issues:
            return False, "; ".join(issues)
        return True, "Valid"


@dataclass
class NutritionNeeds:
    """Fueling plan for one race. Rates are per hour, totals per race."""
    total_time_hours: float
    speed_kmh: float
    calories_per_hour: float
    total_calories: float
    carbs_per_hour: float       # g
    total_carbs: float
    hydration_per_hour: int     # mL
    total_hydration: float
    sodium_per_hour: float      # mg
    total_sodium: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def calculate_nutrition_needs(
    weight_kg: float,
    distance_km: float,
    pace_min_per_km: float,
    terrain_factor: float = 1.0,
    temp_factor: float = 1.0,
    params: Optional[NutritionParams] = None
) -> NutritionNeeds:
    """
    Build a fueling plan for a race.

    Energy cost is approximated as 1 kcal/kg/km, i.e. weight × speed per
    hour, scaled by terrain and temperature. Carbohydrate steps up (it is
    not interpolated) once the race is longer than long_race_hours.
    Fluid scales with temp_factor and is rounded to whole mL.

    Args:
        weight_kg: Body weight
        distance_km: Race distance
        pace_min_per_km: Planned pace in minutes per km
        terrain_factor: Energy multiplier for terrain (1.0 road)
        temp_factor: Multiplier for heat (1.0 temperate)
        params: Fueling constants, defaults if None

    Returns:
        NutritionNeeds record
    """
    if params is None:
        params = NutritionParams()

    total_time_hours = (distance_km * pace_min_per_km) / 60
    speed_kmh = divide(60, pace_min_per_km)

    calories_per_hour = weight_kg * speed_kmh * terrain_factor * temp_factor
    total_calories = calories_per_hour * total_time_hours

    if total_time_hours > params.long_race_hours:
        carbs_per_hour = params.carbs_per_hour_long
    else:
        carbs_per_hour = params.carbs_per_hour_short
    total_carbs = carbs_per_hour * total_time_hours

    hydration_per_hour = round_half_up(params.base_hydration_per_hour * temp_factor)
    total_hydration = hydration_per_hour * total_time_hours

    sodium_per_hour = params.sodium_per_hour
    total_sodium = sodium_per_hour * total_time_hours

    return NutritionNeeds(
        total_time_hours=total_time_hours,
        speed_kmh=speed_kmh,
        calories_per_hour=calories_per_hour,
        total_calories=total_calories,
        carbs_per_hour=carbs_per_hour,
        total_carbs=total_carbs,
        hydration_per_hour=hydration_per_hour,
        total_hydration=total_hydration,
        sodium_per_hour=sodium_per_hour,
        total_sodium=total_sodium,
    )
