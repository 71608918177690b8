"""
Formatting utilities for Performance Science MCP Server

Turns insights, calibration status and training logs into readable text.
"""

from datetime import datetime
from typing import Any

from performance_science_mcp_server.utils.types import (
    CalibrationStatus,
    InsightStatus,
    ScientificInsight,
    TrainingLog,
)

STATUS_MARKERS = {
    InsightStatus.OPTIMAL: "✅",
    InsightStatus.WARNING: "⚠️",
    InsightStatus.DANGER: "⛔",
    InsightStatus.CALIBRATION: "⏳",
    InsightStatus.NEUTRAL: "➖",
}


def format_date_with_day_of_week(date_value: str) -> str:
    """Format a date string to include day of week for better readability.

    Args:
        date_value: Date string in ISO-8601 format (YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS)

    Returns:
        Formatted date string with day of week prefix (e.g., "Saturday, 2026-02-21")
        or original value if parsing fails
    """
    if not date_value:
        return date_value

    try:
        date_str = date_value.split("T")[0]
        date_obj = datetime.strptime(date_str, "%Y-%m-%d")
        return f"{date_obj.strftime('%A')}, {date_str}"
    except (ValueError, AttributeError):
        return date_value


def _add_field(lines: list[str], label: str, value: Any, unit: str = "") -> None:
    """Add a field to lines only if value is not None/empty."""
    if value is not None and value != "":
        lines.append(f"{label}: {value}{unit}")


def format_insight(insight: ScientificInsight) -> str:
    """Format a scientific insight as a short status block."""
    marker = STATUS_MARKERS[insight.status]
    lines = [
        f"{insight.label}: {insight.value}",
        f"  Status: {marker} {insight.status.value}",
        f"  {insight.description}",
        f"  Calculation: {insight.calculation_logic}",
    ]
    return "\n".join(lines)


def format_calibration_status(status: CalibrationStatus) -> str:
    if status.is_calibrating:
        return (
            "Calibration phase: active\n"
            f"  {status.days_remaining} day(s) remaining before metrics are considered reliable."
        )
    return "Calibration phase: complete"


def format_training_log(log: TrainingLog) -> str:
    """Format a training log, showing only non-empty fields."""
    lines = [f"Session: {format_date_with_day_of_week(log.date)}"]
    _add_field(lines, "ID", log.id)
    _add_field(lines, "Sport", log.sport_type)
    _add_field(lines, "Type", log.training_type)
    _add_field(lines, "Duration", log.duration, " min")
    _add_field(lines, "Intensity", f"{log.intensity}/10")
    _add_field(lines, "Load", f"{log.load:g}")
    _add_field(lines, "Sleep", log.sleep_hours, " h")
    _add_field(lines, "Resting HR", log.resting_heart_rate, " bpm")

    for key, value in sorted(log.metrics.items()):
        _add_field(lines, f"  {key}", value)

    _add_field(lines, "Notes", log.notes)
    return "\n".join(lines)
