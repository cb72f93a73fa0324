"""
Elevation-adjusted finishing time using a modified Naismith's Rule.

Based on:
- Naismith (1892): +1 minute per 10 m of ascent
- Langmuir correction: descent credit, here capped by the ascent
"""

# Seconds per 10 m of climbing / descending
GAIN_PENALTY_PER_10M = 60
LOSS_BENEFIT_PER_10M = 30


def calculate_elevation_adjusted_time(
    flat_time_s: float,
    elev_gain_m: float,
    elev_loss_m: float,
    terrain_factor: float = 1.0
) -> float:
    """
    Adjust a flat-course time for climbing, descending and terrain.

    The descent credit can never exceed half the climb penalty computed
    from the same gain, however much the course drops. A terrain factor of
    1.0 is neutral. The result is not floored at zero.

    Args:
        flat_time_s: Expected time on a flat road course (seconds)
        elev_gain_m: Total ascent (meters)
        elev_loss_m: Total descent (meters)
        terrain_factor: Surface multiplier (1.0 road, >1 trail)

    Returns:
        Adjusted time in seconds
    """
    gain_penalty = (elev_gain_m / 10) * GAIN_PENALTY_PER_10M
    loss_benefit = min(
        (elev_loss_m / 10) * LOSS_BENEFIT_PER_10M,
        (elev_gain_m / 10) * LOSS_BENEFIT_PER_10M,
    )
    terrain_penalty = flat_time_s * (terrain_factor - 1)

    return flat_time_s + gain_penalty - loss_benefit + terrain_penalty
