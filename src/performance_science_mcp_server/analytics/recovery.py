"""Recovery and readiness metrics."""

from typing import Sequence

from performance_science_mcp_server.analytics.baselines import (
    resting_hr_baseline,
    session_load,
    sort_newest_first,
)
from performance_science_mcp_server.utils.dates import format_fixed, round_half_up
from performance_science_mcp_server.utils.types import InsightStatus, ScientificInsight, TrainingLog

MIN_LOGS_FOR_RECOVERY = 7
TARGET_SLEEP_HOURS = 8.0
RHR_BASELINE_SAMPLE = 7
RECENT_LOAD_SESSIONS = 3

# Tunables without a physiological derivation; recalibrate here only.
RHR_PENALTY_MULTIPLIER = 5.0
LOAD_NORMALIZATION = 10.0

SLEEP_WEIGHT = 0.4
RHR_WEIGHT = 0.3
LOAD_WEIGHT = 0.3

RECOVERY_LABEL = "Recovery Readiness"


def calculate_sleep_score(sleep_hours: float | None) -> float:
    """Score last night's sleep against an 8 hour target (0-100).

    Missing sleep data counts as a full night.
    """
    sleep = TARGET_SLEEP_HOURS if sleep_hours is None else sleep_hours
    return min(100.0, (sleep / TARGET_SLEEP_HOURS) * 100)


def calculate_rhr_deviation(current_rhr: float, baseline_rhr: float) -> float:
    """Percentage deviation of today's resting HR from baseline."""
    if baseline_rhr == 0:
        return 0.0

    return ((current_rhr - baseline_rhr) / baseline_rhr) * 100


def calculate_rhr_score(rhr_deviation: float) -> float:
    """Score resting HR deviation (0-100).

    Only an elevated RHR (a fatigue signal) is penalised; a value below
    baseline scores the full 100.
    """
    penalty = rhr_deviation * RHR_PENALTY_MULTIPLIER if rhr_deviation > 0 else 0.0
    return max(0.0, 100 - penalty)


def calculate_load_score(recent_load: float) -> float:
    """Score recent mean session load (0-100), lower load is better."""
    return max(0.0, 100 - (recent_load / LOAD_NORMALIZATION))


def interpret_recovery_score(score: int) -> InsightStatus:
    """Classify a composite recovery score.

    Interpretation:
      ≥ 75  = Optimal
      50-74 = Warning
      < 50  = Danger
    """
    if score < 50:
        return InsightStatus.DANGER
    elif score < 75:
        return InsightStatus.WARNING
    else:
        return InsightStatus.OPTIMAL


def calculate_recovery_score(logs: Sequence[TrainingLog]) -> ScientificInsight:
    """Calculate same-day Recovery Readiness (0-100).

    Score = Sleep (40%) + RHR deviation (30%) + recent 3-session load (30%)

    Logs are ordered newest first internally, so the caller's order is not
    trusted.

    Args:
        logs: Training logs for a single athlete, any order

    Returns:
        ScientificInsight with a percentage value, or a calibration placeholder
    """
    ordered = sort_newest_first(logs)

    if not ordered or len(ordered) < MIN_LOGS_FOR_RECOVERY:
        return ScientificInsight(
            label=RECOVERY_LABEL,
            value="Calibration",
            status=InsightStatus.CALIBRATION,
            description=(
                "Establishing baseline recovery metrics. "
                f"Requires {MIN_LOGS_FOR_RECOVERY} days of sleep and RHR data."
            ),
            calculation_logic=(
                "Weighted score based on Sleep Duration, Resting Heart Rate deviation, "
                "and 3-day training load."
            ),
        )

    latest = ordered[0]

    # 1. Sleep
    sleep_hours = TARGET_SLEEP_HOURS if latest.sleep_hours is None else latest.sleep_hours
    sleep_score = calculate_sleep_score(latest.sleep_hours)

    # 2. Resting HR against the recent baseline
    baseline_rhr = resting_hr_baseline(ordered, sample_size=RHR_BASELINE_SAMPLE)
    current_rhr = (
        baseline_rhr if latest.resting_heart_rate is None else float(latest.resting_heart_rate)
    )
    rhr_deviation = calculate_rhr_deviation(current_rhr, baseline_rhr)
    rhr_score = calculate_rhr_score(rhr_deviation)

    # 3. Recent load
    recent = ordered[:RECENT_LOAD_SESSIONS]
    recent_load = sum(session_load(log) for log in recent) / len(recent)
    load_score = calculate_load_score(recent_load)

    total_score = round_half_up(
        sleep_score * SLEEP_WEIGHT + rhr_score * RHR_WEIGHT + load_score * LOAD_WEIGHT
    )
    status = interpret_recovery_score(total_score)

    if status == InsightStatus.OPTIMAL:
        description = "Body is well-recovered and ready for high intensity."
    else:
        description = "Consider a recovery session or reduced intensity today."

    return ScientificInsight(
        label=RECOVERY_LABEL,
        value=f"{total_score}%",
        status=status,
        description=description,
        calculation_logic=(
            f"Sleep ({sleep_hours:g}h): {format_fixed(sleep_score, 0)}pts | "
            f"RHR Dev ({format_fixed(rhr_deviation, 1)}%): {format_fixed(rhr_score, 0)}pts | "
            f"Load Factor: {format_fixed(load_score, 0)}pts"
        ),
    )
