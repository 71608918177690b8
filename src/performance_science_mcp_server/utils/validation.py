"""
Validation utilities for the Performance Science MCP Server.

Input range checks for new training logs and athlete ID resolution for tools.
"""

from typing import Any, Mapping

# (field, lower, upper, message), checked in this order
TRAINING_INPUT_RANGES: tuple[tuple[str, float, float, str], ...] = (
    ("duration", 1, 480, "Duration must be between 1 and 480 minutes."),
    ("intensity", 1, 10, "Intensity must be between 1 and 10."),
    ("sleep_hours", 0, 24, "Sleep hours must be between 0 and 24."),
    (
        "resting_heart_rate",
        30,
        200,
        "Resting Heart Rate seems unrealistic (30-200 bpm).",
    ),
)


def validate_metrics(metrics: Mapping[str, Any]) -> str | None:
    """Check that sport-specific metrics are flat number/text/boolean values."""
    for key, value in metrics.items():
        if not isinstance(key, str):
            return f"Metric names must be text, got {key!r}."
        if not isinstance(value, (int, float, str, bool)):
            return f"Metric '{key}' must be a number, text or boolean."
    return None


def validate_training_input(candidate: Mapping[str, Any]) -> str | None:
    """Validate a (possibly partial) training log before it is accepted.

    Fields are checked in a fixed order and the first violation wins.
    Absent or None fields are treated as not yet provided and skipped.

    Args:
        candidate: Mapping with any of duration, intensity, sleep_hours,
            resting_heart_rate and metrics

    Returns:
        None if valid, otherwise a human-readable rejection reason
    """
    for field, lower, upper, message in TRAINING_INPUT_RANGES:
        value = candidate.get(field)
        if value is None:
            continue
        if not lower <= value <= upper:
            return message

    metrics = candidate.get("metrics")
    if metrics is not None:
        return validate_metrics(metrics)

    return None


def resolve_athlete_id(
    athlete_id: str | None, default_athlete_id: str | None
) -> tuple[str, str]:
    """Pick the athlete ID for a tool call.

    Args:
        athlete_id: ID passed to the tool
        default_athlete_id: ID from configuration

    Returns:
        Tuple of (athlete_id, error_message); error_message is empty on success
    """
    athlete_id_to_use = athlete_id if athlete_id is not None else default_athlete_id
    if not athlete_id_to_use:
        return (
            "",
            "Error: No athlete ID provided and no default ATHLETE_ID found in environment variables.",
        )
    return athlete_id_to_use, ""
