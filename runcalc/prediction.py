"""
Race-time prediction and age-grading classification.

Based on:
- Riegel (1981): T2 = T1 × (D2 / D1)^k, k ≈ 1.06 for trained runners
- WMA age-grading standards (classification bands)
"""

import numpy as np

from .units import divide, power


DEFAULT_FATIGUE_FACTOR = 1.06


def predict_race_time_quick(
    known_distance_km: float,
    known_time_min: float,
    target_distance_km: float,
    fatigue_factor: float = DEFAULT_FATIGUE_FACTOR
) -> float:
    """
    Predict a race time with the Riegel power law.

    Args:
        known_distance_km: Distance of the reference performance
        known_time_min: Reference finishing time in minutes
        target_distance_km: Distance to predict
        fatigue_factor: Riegel exponent (higher = more slowdown with distance)

    Returns:
        Predicted finishing time in minutes; nan for a negative distance
        ratio, inf for a zero known distance
    """
    ratio = divide(target_distance_km, known_distance_km)
    return known_time_min * power(ratio, fatigue_factor)


def calculate_personal_exponent(
    race1_distance_km: float,
    race1_time_s: float,
    race2_distance_km: float,
    race2_time_s: float
) -> float:
    """
    Derive a personal Riegel exponent from two race results.

    k = ln(T2 / T1) / ln(D2 / D1)

    Equal distances or non-positive inputs give inf/nan rather than raising;
    callers treat a non-finite exponent as invalid input.

    Returns:
        Personal fatigue exponent
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        time_ratio = np.float64(race2_time_s) / np.float64(race1_time_s)
        distance_ratio = np.float64(race2_distance_km) / np.float64(race1_distance_km)
        exponent = np.log(time_ratio) / np.log(distance_ratio)
    return float(exponent)


def classify_age_grading(percentage: float) -> str:
    """
    Classify an age-graded percentage.

    Bands (lower bound inclusive):
        - World Class: >= 100
        - National Class: 90-100
        - Regional Class: 80-90
        - Local Class: 70-80
        - Excellent: 60-70
        - Good: < 60
    """
    if percentage >= 100:
        return 'World Class'
    elif percentage >= 90:
        return 'National Class'
    elif percentage >= 80:
        return 'Regional Class'
    elif percentage >= 70:
        return 'Local Class'
    elif percentage >= 60:
        return 'Excellent'
    else:
        return 'Good'

