#!/usr/bin/env python3
"""
Running Calculator - CLI Entry Point

Usage:
    python main.py vo2 --distance M --time MIN [--max-hr B --rest-hr B --gender G --age A]
    python main.py cooper --distance M
    python main.py pace --distance KM --time SECONDS
    python main.py predict --distance KM --time MIN [--target KM] [--fatigue F]
    python main.py exponent --d1 KM --t1 SECONDS --d2 KM --t2 SECONDS
    python main.py age-grade --percentage P
    python main.py elevation --time SECONDS --gain M --loss M [--terrain F]
    python main.py nutrition --weight KG --distance KM --pace MIN [--terrain F] [--temp F]
    python main.py zones [--max-hr B --rest-hr B] [--threshold-pace SECONDS]
    python main.py bmi --weight KG --height CM [--gender G]
    python main.py test
"""

import argparse
import math

import pandas as pd

from runcalc.fitness import (
    calculate_vdot,
    calculate_cooper_vo2,
    calculate_fmr_vo2,
    classify_vo2,
)
from runcalc.pace import (
    calculate_pace_per_km,
    calculate_pace_per_mile,
    calculate_speed_kmh,
    calculate_speed_mph,
)
from runcalc.formatting import format_seconds_as_hms, format_pace
from runcalc.prediction import (
    DEFAULT_FATIGUE_FACTOR,
    predict_race_time_quick,
    calculate_personal_exponent,
    classify_age_grading,
)
from runcalc.elevation import calculate_elevation_adjusted_time
from runcalc.nutrition import calculate_nutrition_needs
from runcalc.zones import calculate_hr_zones, calculate_pace_zones
from runcalc.body import (
    DISTANCE_NAMES,
    calculate_bmi,
    get_efficiency_rating,
    get_distance_name,
)


def run_vo2(distance_m, time_min, max_hr=None, rest_hr=None, gender='male', age=25):
    """Print VO2max estimates for a race effort."""
    vdot = calculate_vdot(distance_m, time_min)
    print("VO2max Estimate")
    print("=" * 40)
    print(f"  VDOT:  {vdot:.1f} mL/kg/min ({classify_vo2(vdot)})")

    fmr = None
    if max_hr is not None and rest_hr is not None:
        fmr = calculate_fmr_vo2(distance_m, time_min, max_hr, rest_hr, gender, age)
        print(f"  FMR:   {fmr:.1f} mL/kg/min ({classify_vo2(fmr)})")

    return vdot, fmr


def run_cooper(distance_m):
    """Print the Cooper 12-minute test estimate."""
    vo2 = calculate_cooper_vo2(distance_m)
    print(f"Cooper test ({distance_m:.0f} m in 12 min): {vo2:.1f} mL/kg/min ({classify_vo2(vo2)})")
    return vo2


def run_pace(distance_km, time_s):
    """Print pace and speed for a run."""
    pace_km = calculate_pace_per_km(time_s, distance_km)
    pace_mile = calculate_pace_per_mile(time_s, distance_km)

    print(f"Pace for {get_distance_name(distance_km)} in {format_seconds_as_hms(time_s)}")
    print("=" * 40)
    print(f"  Pace:   {format_pace(pace_km)} /km")
    print(f"  Pace:   {format_pace(pace_mile)} /mile")
    print(f"  Speed:  {calculate_speed_kmh(time_s, distance_km):.2f} km/h")
    print(f"  Speed:  {calculate_speed_mph(time_s, distance_km):.2f} mph")

    return pace_km, pace_mile


def build_prediction_table(known_distance_km, known_time_min, fatigue=DEFAULT_FATIGUE_FACTOR,
                           target_distances_km=None):
    """
    Tabulate predictions over the canonical race distances for display.

    One predict_race_time_quick call per row.

    Returns:
        DataFrame with columns distance_km, distance, predicted_min,
        predicted_time, pace_per_km
    """
    if target_distances_km is None:
        target_distances_km = list(DISTANCE_NAMES.keys())

    rows = []
    for target_km in target_distances_km:
        predicted_min = predict_race_time_quick(
            known_distance_km, known_time_min, target_km, fatigue
        )
        rows.append({
            'distance_km': target_km,
            'distance': get_distance_name(target_km),
            'predicted_min': predicted_min,
            'predicted_time': format_seconds_as_hms(predicted_min * 60),
            'pace_per_km': format_pace(predicted_min * 60 / target_km),
        })

    return pd.DataFrame(rows)


def run_predict(distance_km, time_min, target_km=None, fatigue=DEFAULT_FATIGUE_FACTOR):
    """Print a single prediction, or the full table when no target is given."""
    known = f"{get_distance_name(distance_km)} in {format_seconds_as_hms(time_min * 60)}"

    if target_km is not None:
        predicted = predict_race_time_quick(distance_km, time_min, target_km, fatigue)
        print(f"From {known} (k={fatigue:.2f}):")
        print(f"  {get_distance_name(target_km)}: {format_seconds_as_hms(predicted * 60)}")
        return predicted

    table = build_prediction_table(distance_km, time_min, fatigue)
    print(f"Predictions from {known} (k={fatigue:.2f})")
    print("=" * 50)
    with pd.option_context('display.width', 120):
        print(table[['distance', 'predicted_time', 'pace_per_km']].to_string(index=False))
    return table


def run_exponent(d1, t1, d2, t2):
    """Print the personal Riegel exponent from two races."""
    exponent = calculate_personal_exponent(d1, t1, d2, t2)
    if not math.isfinite(exponent):
        print("Personal exponent is undefined for these races "
              "(distances must differ and times must be positive)")
        return exponent

    print(f"Personal exponent: {exponent:.3f}")
    return exponent


def run_age_grade(percentage):
    label = classify_age_grading(percentage)
    print(f"Age grade {percentage:.1f}%: {label}")
    return label


def run_elevation(time_s, gain_m, loss_m, terrain=1.0):
    """Print the elevation-adjusted finishing time."""
    adjusted = calculate_elevation_adjusted_time(time_s, gain_m, loss_m, terrain)
    print("Elevation Adjustment")
    print("=" * 40)
    print(f"  Flat time:      {format_seconds_as_hms(time_s)}")
    print(f"  Gain / loss:    +{gain_m:.0f} m / -{loss_m:.0f} m")
    print(f"  Terrain factor: {terrain:.2f}")
    print(f"  Adjusted time:  {format_seconds_as_hms(adjusted)}")
    return adjusted


def run_nutrition(weight_kg, distance_km, pace_min, terrain=1.0, temp=1.0):
    """Print the race fueling plan."""
    needs = calculate_nutrition_needs(weight_kg, distance_km, pace_min, terrain, temp)

    print(f"Nutrition Plan: {get_distance_name(distance_km)}")
    print("=" * 50)
    print(f"  Race time:   {format_seconds_as_hms(needs.total_time_hours * 3600)} "
          f"at {needs.speed_kmh:.1f} km/h")
    print(f"  Calories:    {needs.calories_per_hour:.0f} kcal/h, {needs.total_calories:.0f} kcal total")
    print(f"  Carbs:       {needs.carbs_per_hour:.0f} g/h, {needs.total_carbs:.0f} g total")
    print(f"  Fluid:       {needs.hydration_per_hour} mL/h, {needs.total_hydration:.0f} mL total")
    print(f"  Sodium:      {needs.sodium_per_hour:.0f} mg/h, {needs.total_sodium:.0f} mg total")
    return needs


def run_zones(max_hr=None, rest_hr=None, threshold_pace=None):
    """Print heart rate and/or pace training zones."""
    hr_zones = None
    pace_zones = None

    if max_hr is not None and rest_hr is not None:
        hr_zones = calculate_hr_zones(max_hr, rest_hr)
        print("Heart Rate Zones (Karvonen)")
        print("=" * 40)
        for zone in hr_zones:
            print(f"  {zone.name}: {zone.min_hr}-{zone.max_hr} bpm")

    if threshold_pace is not None:
        pace_zones = calculate_pace_zones(threshold_pace)
        print("\nPace Zones")
        print("=" * 40)
        for i, pace in enumerate(pace_zones, start=1):
            print(f"  Zone {i}: {format_pace(pace)} /km")

    return hr_zones, pace_zones


def run_bmi(weight_kg, height_cm, gender='male'):
    bmi = calculate_bmi(weight_kg, height_cm)
    print(f"BMI: {bmi:.1f} ({get_efficiency_rating(bmi, gender)})")
    return bmi


def run_tests():
    """Run quick self-checks of the formulas."""
    print("Running tests...\n")

    print("Testing fitness metrics...")
    vdot = calculate_vdot(5000, 20)
    assert abs(vdot - 53.5) < 1e-9, "5K in 20:00 should give VDOT 53.5"
    print(f"  VDOT test passed: {vdot:.1f} ({classify_vo2(vdot)})")

    cooper = calculate_cooper_vo2(3000)
    assert calculate_cooper_vo2(3200) > cooper, "Cooper should increase with distance"
    print(f"  Cooper test passed: {cooper:.2f}")

    print("\nTesting formatting...")
    assert format_seconds_as_hms(3661) == '1h 1m 01s'
    assert format_seconds_as_hms(7200) == '2h 0m 00s'
    assert format_pace(305) == '5:05'
    print("  Formatting tests passed")

    print("\nTesting race prediction...")
    same = predict_race_time_quick(10, 50, 10, 1.06)
    assert same == 50, "Equal distance should return the known time"
    exponent = calculate_personal_exponent(5, 1200, 10, 2484)
    print(f"  Prediction tests passed: exponent = {exponent:.3f}")

    print("\nTesting elevation and nutrition...")
    assert calculate_elevation_adjusted_time(3600, 100, 10000, 1.0) == 3900
    needs = calculate_nutrition_needs(70, 50, 6, 1.0, 1.0)
    assert needs.carbs_per_hour == 70, "5h race should use the long-race carb rate"
    print(f"  Nutrition test passed: {needs.total_calories:.0f} kcal")

    print("\nTesting zones...")
    zones = calculate_hr_zones(190, 50)
    assert len(zones) == 5 and zones[0].min_hr == 120 and zones[4].max_hr == 190
    assert calculate_pace_zones(270)[3] == 270
    print("  Zone tests passed")

    print("\nTesting body and distances...")
    assert get_efficiency_rating(calculate_bmi(70, 175), 'male') == 'Good'
    assert get_distance_name(42.195) == 'Marathon'
    assert get_distance_name(15) == '15 km'
    print("  Body tests passed")

    print("\n" + "="*50)
    print("ALL TESTS PASSED!")
    print("="*50)


def _positive(value):
    """argparse type for strictly positive numbers."""
    number = float(value)
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(description='Running Calculator')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # VO2 command
    vo2_parser = subparsers.add_parser('vo2', help='Estimate VO2max from a race')
    vo2_parser.add_argument('--distance', type=_positive, required=True, help='Distance (m)')
    vo2_parser.add_argument('--time', type=_positive, required=True, help='Time (min)')
    vo2_parser.add_argument('--max-hr', type=_positive, help='Maximum heart rate (bpm)')
    vo2_parser.add_argument('--rest-hr', type=_positive, help='Resting heart rate (bpm)')
    vo2_parser.add_argument('--gender', choices=['male', 'female'], default='male')
    vo2_parser.add_argument('--age', type=float, default=25, help='Age (years)')

    # Cooper command
    cooper_parser = subparsers.add_parser('cooper', help='Cooper 12-minute test')
    cooper_parser.add_argument('--distance', type=_positive, required=True, help='Distance (m)')

    # Pace command
    pace_parser = subparsers.add_parser('pace', help='Pace and speed')
    pace_parser.add_argument('--distance', type=_positive, required=True, help='Distance (km)')
    pace_parser.add_argument('--time', type=_positive, required=True, help='Time (s)')

    # Predict command
    pred_parser = subparsers.add_parser('predict', help='Predict race times')
    pred_parser.add_argument('--distance', type=_positive, required=True, help='Known distance (km)')
    pred_parser.add_argument('--time', type=_positive, required=True, help='Known time (min)')
    pred_parser.add_argument('--target', type=_positive, help='Target distance (km)')
    pred_parser.add_argument('--fatigue', type=float, default=DEFAULT_FATIGUE_FACTOR,
                             help='Riegel exponent')

    # Exponent command
    exp_parser = subparsers.add_parser('exponent', help='Personal Riegel exponent')
    exp_parser.add_argument('--d1', type=_positive, required=True, help='Race 1 distance (km)')
    exp_parser.add_argument('--t1', type=_positive, required=True, help='Race 1 time (s)')
    exp_parser.add_argument('--d2', type=_positive, required=True, help='Race 2 distance (km)')
    exp_parser.add_argument('--t2', type=_positive, required=True, help='Race 2 time (s)')

    # Age grade command
    ag_parser = subparsers.add_parser('age-grade', help='Classify an age-graded percentage')
    ag_parser.add_argument('--percentage', type=float, required=True)

    # Elevation command
    elev_parser = subparsers.add_parser('elevation', help='Elevation-adjusted time')
    elev_parser.add_argument('--time', type=_positive, required=True, help='Flat time (s)')
    elev_parser.add_argument('--gain', type=float, default=0.0, help='Elevation gain (m)')
    elev_parser.add_argument('--loss', type=float, default=0.0, help='Elevation loss (m)')
    elev_parser.add_argument('--terrain', type=float, default=1.0, help='Terrain factor')

    # Nutrition command
    nut_parser = subparsers.add_parser('nutrition', help='Race fueling plan')
    nut_parser.add_argument('--weight', type=_positive, required=True, help='Weight (kg)')
    nut_parser.add_argument('--distance', type=_positive, required=True, help='Distance (km)')
    nut_parser.add_argument('--pace', type=_positive, required=True, help='Pace (min/km)')
    nut_parser.add_argument('--terrain', type=float, default=1.0, help='Terrain factor')
    nut_parser.add_argument('--temp', type=float, default=1.0, help='Temperature factor')

    # Zones command
    zones_parser = subparsers.add_parser('zones', help='Training zones')
    zones_parser.add_argument('--max-hr', type=_positive, help='Maximum heart rate (bpm)')
    zones_parser.add_argument('--rest-hr', type=_positive, help='Resting heart rate (bpm)')
    zones_parser.add_argument('--threshold-pace', type=_positive, help='Threshold pace (s/km)')

    # BMI command
    bmi_parser = subparsers.add_parser('bmi', help='BMI and efficiency rating')
    bmi_parser.add_argument('--weight', type=_positive, required=True, help='Weight (kg)')
    bmi_parser.add_argument('--height', type=_positive, required=True, help='Height (cm)')
    bmi_parser.add_argument('--gender', choices=['male', 'female'], default='male')

    # Test command
    subparsers.add_parser('test', help='Run self-checks')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == 'vo2':
        if (args.max_hr is None) != (args.rest_hr is None):
            parser.error('--max-hr and --rest-hr must be given together')
        run_vo2(args.distance, args.time, args.max_hr, args.rest_hr, args.gender, args.age)
    elif args.command == 'cooper':
        run_cooper(args.distance)
    elif args.command == 'pace':
        run_pace(args.distance, args.time)
    elif args.command == 'predict':
        run_predict(args.distance, args.time, args.target, args.fatigue)
    elif args.command == 'exponent':
        run_exponent(args.d1, args.t1, args.d2, args.t2)
    elif args.command == 'age-grade':
        run_age_grade(args.percentage)
    elif args.command == 'elevation':
        run_elevation(args.time, args.gain, args.loss, args.terrain)
    elif args.command == 'nutrition':
        run_nutrition(args.weight, args.distance, args.pace, args.terrain, args.temp)
    elif args.command == 'zones':
        if (args.max_hr is None) != (args.rest_hr is None):
            parser.error('--max-hr and --rest-hr must be given together')
        if args.max_hr is None and args.threshold_pace is None:
            parser.error('give --max-hr/--rest-hr and/or --threshold-pace')
        run_zones(args.max_hr, args.rest_hr, args.threshold_pace)
    elif args.command == 'bmi':
        run_bmi(args.weight, args.height, args.gender)
    elif args.command == 'test':
        run_tests()
    else:
        parser.print_help()


if __name__ == '__main__':
    main()
