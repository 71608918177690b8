"""
Unit tests for training input validation.
"""

import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from performance_science_mcp_server.utils.validation import (  # pylint: disable=wrong-import-position
    resolve_athlete_id,
    validate_training_input,
)


def test_duration_out_of_range_is_rejected():
    """Test a 500 minute session is rejected."""
    assert validate_training_input({"duration": 500}) == "Duration must be between 1 and 480 minutes."


def test_valid_duration_does_not_hide_intensity_error():
    """Test checks continue past a valid field."""
    reason = validate_training_input({"duration": 60, "intensity": 11})

    assert reason is not None
    assert "Intensity" in reason


def test_empty_candidate_is_valid():
    """Test nothing provided means nothing to reject."""
    assert validate_training_input({}) is None


def test_none_fields_are_skipped():
    """Test None is treated as not yet provided, not as zero."""
    assert validate_training_input({"duration": None, "sleep_hours": None}) is None


def test_first_violation_wins():
    """Test fields are checked duration, intensity, sleep, RHR."""
    reason = validate_training_input(
        {"duration": 0, "intensity": 11, "sleep_hours": 30, "resting_heart_rate": 10}
    )
    assert reason == "Duration must be between 1 and 480 minutes."

    reason = validate_training_input({"sleep_hours": 30, "resting_heart_rate": 10})
    assert reason == "Sleep hours must be between 0 and 24."

    reason = validate_training_input({"resting_heart_rate": 210})
    assert reason == "Resting Heart Rate seems unrealistic (30-200 bpm)."


def test_range_bounds_are_inclusive():
    """Test values on the range edges are accepted."""
    assert validate_training_input(
        {"duration": 1, "intensity": 1, "sleep_hours": 0, "resting_heart_rate": 30}
    ) is None
    assert validate_training_input(
        {"duration": 480, "intensity": 10, "sleep_hours": 24, "resting_heart_rate": 200}
    ) is None


def test_metrics_must_be_flat_values():
    """Test sport metrics accept numbers, text and booleans only."""
    assert validate_training_input(
        {"metrics": {"distance_km": 10.5, "surface": "track", "race": False}}
    ) is None

    reason = validate_training_input({"metrics": {"splits": [4.5, 4.6]}})
    assert reason == "Metric 'splits' must be a number, text or boolean."


def test_non_finite_values_are_rejected():
    """Test NaN and infinity fall outside every range."""
    nan = float("nan")
    inf = float("inf")

    assert validate_training_input({"duration": nan}) == "Duration must be between 1 and 480 minutes."
    assert validate_training_input({"intensity": nan}) == "Intensity must be between 1 and 10."
    assert validate_training_input({"sleep_hours": nan}) == "Sleep hours must be between 0 and 24."
    assert validate_training_input(
        {"resting_heart_rate": nan}
    ) == "Resting Heart Rate seems unrealistic (30-200 bpm)."

    assert validate_training_input({"duration": inf}) == "Duration must be between 1 and 480 minutes."
    assert validate_training_input({"intensity": -inf}) == "Intensity must be between 1 and 10."


def test_resolve_athlete_id_prefers_argument():
    """Test an explicit athlete ID overrides the configured default."""
    assert resolve_athlete_id("a2", "a1") == ("a2", "")
    assert resolve_athlete_id(None, "a1") == ("a1", "")


def test_resolve_athlete_id_without_any_id():
    """Test a missing athlete ID produces an error message."""
    athlete_id, error = resolve_athlete_id(None, None)

    assert athlete_id == ""
    assert error.startswith("Error:")


if __name__ == "__main__":
    import pytest

    sys.exit(pytest.main([__file__, "-v"]))
