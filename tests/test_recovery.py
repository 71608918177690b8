"""
Unit tests for the Recovery Readiness score.
"""

import pathlib
import sys
from datetime import datetime, timedelta, timezone

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from performance_science_mcp_server.analytics.recovery import (  # pylint: disable=wrong-import-position
    calculate_load_score,
    calculate_recovery_score,
    calculate_rhr_score,
    calculate_sleep_score,
    interpret_recovery_score,
)
from performance_science_mcp_server.utils.types import (  # pylint: disable=wrong-import-position
    InsightStatus,
    TrainingLog,
)

NOW = datetime(2026, 3, 1, 7, 0, tzinfo=timezone.utc)


def _log(
    days_ago: int,
    duration: float = 60,
    intensity: float = 5,
    sleep_hours: float | None = None,
    resting_heart_rate: float | None = None,
) -> TrainingLog:
    return TrainingLog(
        id=f"log-{days_ago}",
        athlete_id="a1",
        date=(NOW - timedelta(days=days_ago)).isoformat(),
        duration=duration,
        intensity=intensity,
        sleep_hours=sleep_hours,
        resting_heart_rate=resting_heart_rate,
    )


def _week(latest: TrainingLog, **older) -> list[TrainingLog]:
    """Latest log followed by six older ones, newest first."""
    return [latest] + [_log(d, **older) for d in range(1, 7)]


def test_fewer_than_7_logs_is_calibration():
    """Test recovery is not scored before 7 logs exist."""
    logs = [_log(d, sleep_hours=8, resting_heart_rate=60) for d in range(6)]
    insight = calculate_recovery_score(logs)

    assert insight.status == InsightStatus.CALIBRATION
    assert insight.value == "Calibration"


def test_empty_logs_is_calibration():
    """Test no logs at all is a calibration placeholder, not an error."""
    assert calculate_recovery_score([]).status == InsightStatus.CALIBRATION


def test_fully_recovered_scores_100():
    """Test full sleep, stable RHR and zero recent load."""
    logs = [
        _log(d, intensity=0 if d < 3 else 5, sleep_hours=8, resting_heart_rate=60)
        for d in range(7)
    ]
    insight = calculate_recovery_score(logs)

    assert insight.value == "100%"
    assert insight.status == InsightStatus.OPTIMAL
    assert insight.description == "Body is well-recovered and ready for high intensity."


def test_short_sleep_and_heavy_load_is_warning():
    """Test 4h sleep, no RHR data and a 500 mean recent load."""
    # sleep 50, rhr 100 (baseline defaults to 60), load 100 - 50 = 50
    # 50 * 0.4 + 100 * 0.3 + 50 * 0.3 = 65
    logs = _week(_log(0, duration=50, intensity=10, sleep_hours=4), duration=50, intensity=10)
    insight = calculate_recovery_score(logs)

    assert insight.value == "65%"
    assert insight.status == InsightStatus.WARNING
    assert "Sleep (4h): 50pts" in insight.calculation_logic
    assert "Load Factor: 50pts" in insight.calculation_logic


def test_elevated_rhr_is_penalised():
    """Test an RHR above baseline lowers the score."""
    # baseline (66 + 6 * 60) / 7 = 60.86, deviation 8.45%, rhr score 57.75
    # 100 * 0.4 + 57.75 * 0.3 + 100 * 0.3 = 87.3
    logs = _week(
        _log(0, intensity=0, sleep_hours=8, resting_heart_rate=66),
        intensity=0,
        resting_heart_rate=60,
    )
    insight = calculate_recovery_score(logs)

    assert insight.value == "87%"
    assert "RHR Dev (8.5%)" in insight.calculation_logic


def test_lower_rhr_is_not_rewarded():
    """Test an RHR below baseline scores the same as a stable one."""
    logs = _week(
        _log(0, intensity=0, sleep_hours=8, resting_heart_rate=54),
        intensity=0,
        resting_heart_rate=60,
    )

    assert calculate_recovery_score(logs).value == "100%"


def test_poor_recovery_is_danger():
    """Test short sleep, high RHR and heavy load."""
    # sleep 25, rhr deviation 40% -> 0, load 4800 -> 0; 25 * 0.4 = 10
    logs = _week(
        _log(0, duration=480, intensity=10, sleep_hours=2, resting_heart_rate=90),
        duration=480,
        intensity=10,
        resting_heart_rate=60,
    )
    insight = calculate_recovery_score(logs)

    assert insight.value == "10%"
    assert insight.status == InsightStatus.DANGER
    assert insight.description == "Consider a recovery session or reduced intensity today."


def test_missing_sleep_counts_as_full_night():
    """Test absent sleep data defaults to 8 hours."""
    logs = _week(_log(0, intensity=0), intensity=0)

    assert calculate_recovery_score(logs).value == "100%"


def test_zero_sleep_is_recorded_not_missing():
    """Test a recorded 0h night scores 0 for sleep."""
    logs = _week(_log(0, intensity=0, sleep_hours=0), intensity=0)

    # 0 * 0.4 + 100 * 0.3 + 100 * 0.3 = 60
    assert calculate_recovery_score(logs).value == "60%"


def test_logs_are_ordered_by_date_not_position():
    """Test the latest log is found by date when logs arrive oldest first."""
    newest_first = _week(_log(0, duration=50, intensity=10, sleep_hours=4), duration=50, intensity=10)
    oldest_first = list(reversed(newest_first))

    assert calculate_recovery_score(oldest_first) == calculate_recovery_score(newest_first)


def test_sub_scores():
    """Test individual sub-score formulas."""
    assert calculate_sleep_score(None) == 100.0
    assert calculate_sleep_score(10) == 100.0
    assert calculate_sleep_score(6) == 75.0
    assert calculate_rhr_score(-10.0) == 100.0
    assert calculate_rhr_score(10.0) == 50.0
    assert calculate_rhr_score(30.0) == 0.0
    assert calculate_load_score(250.0) == 75.0
    assert calculate_load_score(5000.0) == 0.0


def test_score_interpretation_boundaries():
    """Test status brackets."""
    assert interpret_recovery_score(49) == InsightStatus.DANGER
    assert interpret_recovery_score(50) == InsightStatus.WARNING
    assert interpret_recovery_score(74) == InsightStatus.WARNING
    assert interpret_recovery_score(75) == InsightStatus.OPTIMAL


if __name__ == "__main__":
    import pytest

    sys.exit(pytest.main([__file__, "-v"]))
