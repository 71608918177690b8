"""Training consistency: day streaks, weekly volume, levels and milestones."""

from datetime import date, datetime, timedelta
from typing import Any, Iterable

from performance_science_mcp_server.utils.dates import ensure_aware, round_half_up
from performance_science_mcp_server.utils.types import TrainingLog


def _training_days(logs: Iterable[TrainingLog]) -> list[date]:
    """Distinct calendar days with at least one log, most recent first."""
    return sorted({log.timestamp.date() for log in logs}, reverse=True)


def calculate_training_streak(logs: Iterable[TrainingLog], now: datetime) -> int:
    """Count consecutive training days ending at the most recent logged day.

    The streak is broken (0) once the most recent logged day is more than
    one calendar day before now. Several logs on one day count once.

    Args:
        logs: Training logs in any order
        now: Reference time

    Returns:
        Streak length in days
    """
    days = _training_days(logs)
    if not days:
        return 0

    today = ensure_aware(now).date()
    if (today - days[0]).days > 1:
        return 0

    streak = 1
    for previous, current in zip(days, days[1:]):
        if (previous - current).days != 1:
            break
        streak += 1

    return streak


def calculate_weekly_volume_change(logs: Iterable[TrainingLog], now: datetime) -> int:
    """Calculate percent change in training minutes, this week vs last week.

    This week is [now - 7d, now], last week is [now - 14d, now - 7d).

    Args:
        logs: Training logs in any order
        now: Reference time

    Returns:
        Rounded percentage change (0 when last week has no volume)
    """
    logs = list(logs)
    now = ensure_aware(now)
    week_ago = now - timedelta(days=7)

    this_week = sum(log.duration for log in logs if week_ago <= log.timestamp <= now)
    last_week = sum(
        log.duration
        for log in logs
        if now - timedelta(days=14) <= log.timestamp < week_ago
    )

    if last_week <= 0:
        return 0

    return round_half_up(((this_week - last_week) / last_week) * 100)


def describe_volume_change(change: int) -> str:
    """Interpret a week-over-week volume change.

    Args:
        change: Percentage change from calculate_weekly_volume_change

    Returns:
        Interpretation string
    """
    if change > 0:
        return f"Volume up {change}% on last week. Consistency is paying off."
    elif change < 0:
        return f"Volume down {abs(change)}% on last week. Use the lighter load to sharpen technique."
    else:
        return "Weekly volume matched last week."


# (minimum sessions, level), highest first
ATHLETE_LEVELS = (
    (50, "Pro"),
    (31, "Elite"),
    (16, "Advanced"),
    (6, "Amateur"),
    (0, "Rookie"),
)

# (streak days, milestone name)
STREAK_MILESTONES = (
    (7, "Week Warrior"),
    (30, "Monthly Master"),
    (90, "Quarterly King"),
)


def calculate_athlete_level(session_count: int) -> tuple[str, int]:
    """Rank an athlete by total logged sessions.

    Levels: Rookie (0-5), Amateur (6-15), Advanced (16-30), Elite (31-49), Pro (50+)

    Args:
        session_count: Number of logged sessions

    Returns:
        Tuple of (level, xp_percent); xp fills 10% per session and resets every 10
    """
    level = next(name for minimum, name in ATHLETE_LEVELS if session_count >= minimum)
    return level, (session_count % 10) * 10


def calculate_streak_milestones(streak: int) -> list[dict[str, Any]]:
    """Progress towards the 7/30/90-day streak milestones.

    Args:
        streak: Current streak from calculate_training_streak

    Returns:
        List of milestone dictionaries (name, days, unlocked, progress 0-100)
    """
    return [
        {
            "name": name,
            "days": days,
            "unlocked": streak >= days,
            "progress": min(100, round_half_up(streak / days * 100)),
        }
        for days, name in STREAK_MILESTONES
    ]
