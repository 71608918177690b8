"""Acute:Chronic Workload Ratio (ACWR)."""

import math
from datetime import datetime
from typing import Sequence

from performance_science_mcp_server.analytics.baselines import rolling_average_load
from performance_science_mcp_server.utils.dates import format_fixed
from performance_science_mcp_server.utils.types import InsightStatus, ScientificInsight, TrainingLog

ACUTE_WINDOW_DAYS = 7
CHRONIC_WINDOW_DAYS = 28
MIN_LOGS_FOR_ACWR = 14

ACWR_LABEL = "ACWR (Load Ratio)"


def classify_acwr(ratio: float) -> tuple[InsightStatus, str]:
    """Classify an ACWR value.

    Target: 0.8-1.3 ("sweet spot")
      < 0.8     = Under-training
      1.3-1.5   = High workload (upper bound inclusive)
      > 1.5     = Load spike, injury risk

    Args:
        ratio: ACWR value

    Returns:
        Tuple of (status, description)
    """
    if ratio < 0.8:
        return InsightStatus.WARNING, "Under-training. Risk of detraining or loss of fitness."
    elif ratio <= 1.3:
        return InsightStatus.OPTIMAL, 'Workload is in the optimal "Sweet Spot" for adaptation.'
    elif ratio <= 1.5:
        return InsightStatus.WARNING, "High workload. Monitor for fatigue."
    else:
        return (
            InsightStatus.DANGER,
            "Spike in workload detected. Significant increase in injury risk.",
        )


def calculate_acwr(logs: Sequence[TrainingLog], now: datetime) -> ScientificInsight:
    """Calculate the Acute:Chronic Workload Ratio.

    ACWR = (7-day average load) / (28-day average load)

    Both averages divide by the fixed window length. Log order does not
    matter; logs are selected by date relative to now.

    Args:
        logs: Training logs for a single athlete
        now: Reference time for the trailing windows

    Returns:
        ScientificInsight with the ratio, or a calibration / N/A placeholder
    """
    if len(logs) < MIN_LOGS_FOR_ACWR:
        return ScientificInsight(
            label=ACWR_LABEL,
            value="Calibration",
            status=InsightStatus.CALIBRATION,
            description=(
                "Insufficient data for reliable workload analysis. "
                f"Requires {MIN_LOGS_FOR_ACWR}+ days of consistent logging."
            ),
            calculation_logic=(
                "ACWR = (7-day Average Load) / (28-day Average Load). "
                "Load = Duration × Intensity (RPE)."
            ),
        )

    acute_load = rolling_average_load(logs, ACUTE_WINDOW_DAYS, now)
    chronic_load = rolling_average_load(logs, CHRONIC_WINDOW_DAYS, now)

    # Corrupt (non-finite) session values fall back to the same placeholder
    if chronic_load == 0 or not (math.isfinite(acute_load) and math.isfinite(chronic_load)):
        return ScientificInsight(
            label="ACWR",
            value="N/A",
            status=InsightStatus.NEUTRAL,
            description="No chronic load data available.",
            calculation_logic="ACWR = Acute Load / Chronic Load",
        )

    ratio = acute_load / chronic_load
    status, description = classify_acwr(ratio)

    return ScientificInsight(
        label=ACWR_LABEL,
        value=format_fixed(ratio, 2),
        status=status,
        description=description,
        calculation_logic=(
            f"Acute Load ({ACUTE_WINDOW_DAYS}d avg): {format_fixed(acute_load, 1)} | "
            f"Chronic Load ({CHRONIC_WINDOW_DAYS}d avg): {format_fixed(chronic_load, 1)} | "
            f"Ratio: {format_fixed(ratio, 2)}"
        ),
    )
