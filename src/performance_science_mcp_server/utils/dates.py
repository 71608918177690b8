"""Date helpers for ISO-8601 timestamps stored on logs and users."""

import math
from decimal import ROUND_HALF_UP, Decimal
from datetime import datetime, timezone


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 date or date-time string into an aware datetime.

    Accepts a trailing ``Z`` (as written by JavaScript ``toISOString``).
    Strings without an offset are read as UTC.

    Raises:
        ValueError: If the string is not ISO-8601.
    """
    if not isinstance(value, str) or not value:
        raise ValueError(f"Invalid timestamp: {value!r}")

    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def ensure_aware(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with parsed timestamps."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def whole_days_between(start: datetime, end: datetime) -> int:
    """Number of full 24h periods from start to end, truncated toward zero."""
    seconds = (ensure_aware(end) - ensure_aware(start)).total_seconds()
    return math.trunc(seconds / 86400)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def round_half_up(value: float) -> int:
    """Round halves toward positive infinity (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def format_fixed(value: float, places: int) -> str:
    """Format with a fixed number of decimals, rounding exact halves up.

    Works on the exact binary value, so 1.125 -> "1.13" but 1.005 -> "1.00".
    Non-finite values render as "N/A".
    """
    if not math.isfinite(value):
        return "N/A"

    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
