"""
Analytics modules for performance-science metrics.

This package contains pure functions over training logs:
- Baselines and rolling window calculations
- Acute:Chronic Workload Ratio
- Recovery readiness
- Calibration phase
- Training consistency (streaks, weekly volume)
"""

__all__ = [
    "baselines",
    "load",
    "recovery",
    "calibration",
    "consistency",
]
