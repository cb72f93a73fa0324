"""
Tests for the command-line front end.

Run with: python -m pytest tests/test_cli.py -v
"""

import pandas as pd
import pytest

import main
from runcalc.body import DISTANCE_NAMES
from runcalc.prediction import predict_race_time_quick


# =============================================================================
# Subcommand Output Tests
# =============================================================================

class TestCommands:
    """Each subcommand prints a report built from the formulas."""

    def test_vo2_vdot_only(self, capsys):
        main.main(['vo2', '--distance', '5000', '--time', '20'])
        out = capsys.readouterr().out
        assert 'VDOT:  53.5 mL/kg/min (Good)' in out
        assert 'FMR' not in out

    def test_vo2_with_heart_rate(self, capsys):
        main.main(['vo2', '--distance', '5000', '--time', '20',
                   '--max-hr', '190', '--rest-hr', '60', '--age', '30'])
        out = capsys.readouterr().out
        assert 'FMR:   50.0 mL/kg/min (Good)' in out

    def test_cooper(self, capsys):
        main.main(['cooper', '--distance', '3000'])
        assert '55.8 mL/kg/min (Excellent)' in capsys.readouterr().out

    def test_pace(self, capsys):
        main.main(['pace', '--distance', '10', '--time', '3000'])
        out = capsys.readouterr().out
        assert 'Pace for 10 km in 50m 00s' in out
        assert '5:00 /km' in out
        assert '12.00 km/h' in out

    def test_predict_single_target(self, capsys):
        predicted = main.run_predict(10, 50, 10, 1.06)
        assert predicted == pytest.approx(50)
        assert '10 km: 50m 00s' in capsys.readouterr().out

    def test_predict_table(self, capsys):
        main.main(['predict', '--distance', '10', '--time', '50'])
        out = capsys.readouterr().out
        assert 'Marathon' in out
        assert '100 Miles' in out

    def test_elevation_negative_estimate(self, capsys):
        main.main(['elevation', '--time', '60', '--terrain', '-0.5'])
        assert 'Adjusted time:  -1m -30s' in capsys.readouterr().out

    def test_exponent_undefined(self, capsys):
        main.main(['exponent', '--d1', '10', '--t1', '3000', '--d2', '10', '--t2', '3100'])
        assert 'undefined' in capsys.readouterr().out

    def test_age_grade(self, capsys):
        main.main(['age-grade', '--percentage', '90'])
        assert 'National Class' in capsys.readouterr().out

    def test_elevation(self, capsys):
        main.main(['elevation', '--time', '3600', '--gain', '100', '--loss', '10000'])
        assert 'Adjusted time:  1h 5m 00s' in capsys.readouterr().out

    def test_nutrition(self, capsys):
        main.main(['nutrition', '--weight', '70', '--distance', '50', '--pace', '6'])
        out = capsys.readouterr().out
        assert '70 g/h' in out
        assert '600 mL/h' in out

    def test_zones(self, capsys):
        main.main(['zones', '--max-hr', '190', '--rest-hr', '50', '--threshold-pace', '270'])
        out = capsys.readouterr().out
        assert 'Zone 1: 120-134 bpm' in out
        assert 'Zone 4: 4:30 /km' in out

    def test_bmi(self, capsys):
        main.main(['bmi', '--weight', '70', '--height', '175'])
        assert 'BMI: 22.9 (Good)' in capsys.readouterr().out

    def test_self_check(self, capsys):
        main.main(['test'])
        assert 'ALL TESTS PASSED!' in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        main.main([])
        assert 'usage' in capsys.readouterr().out.lower()


# =============================================================================
# Prediction Table Tests
# =============================================================================

class TestPredictionTable:
    """Tests for the multi-distance prediction display."""

    def test_default_covers_canonical_distances(self):
        table = main.build_prediction_table(10, 50)
        assert isinstance(table, pd.DataFrame)
        assert len(table) == len(DISTANCE_NAMES)
        assert list(table.columns) == [
            'distance_km', 'distance', 'predicted_min', 'predicted_time', 'pace_per_km'
        ]
        assert 'Marathon' in table['distance'].tolist()

    def test_rows_match_single_prediction(self):
        table = main.build_prediction_table(10, 50, 1.06, [5, 10, 42.195])
        expected = [predict_race_time_quick(10, 50, d, 1.06) for d in [5, 10, 42.195]]
        assert table['predicted_min'].tolist() == pytest.approx(expected)

    def test_known_distance_row(self):
        row = main.build_prediction_table(10, 50, 1.06, [10]).iloc[0]
        assert row['distance'] == '10 km'
        assert row['predicted_time'] == '50m 00s'
        assert row['pace_per_km'] == '5:00'


# =============================================================================
# Input Rejection Tests
# =============================================================================

class TestInputValidation:
    """The CLI rejects inputs the formulas do not guard against."""

    def test_zero_time_rejected(self):
        with pytest.raises(SystemExit):
            main.main(['vo2', '--distance', '5000', '--time', '0'])

    def test_negative_distance_rejected(self):
        with pytest.raises(SystemExit):
            main.main(['pace', '--distance', '-5', '--time', '1500'])

    def test_heart_rates_must_come_together(self):
        with pytest.raises(SystemExit):
            main.main(['vo2', '--distance', '5000', '--time', '20', '--max-hr', '190'])

    def test_zones_needs_an_input(self):
        with pytest.raises(SystemExit):
            main.main(['zones'])
