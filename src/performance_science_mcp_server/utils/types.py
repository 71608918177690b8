"""
Record types shared by the scoring engine, the log store and the MCP tools.

Persisted records use the camelCase keys written by the dashboard app
(``athleteId``, ``sleepHours``, ...). The dataclasses expose snake_case
attributes and convert at the ``from_dict``/``to_dict`` boundary.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Union

from performance_science_mcp_server.utils.dates import parse_timestamp

MetricValue = Union[int, float, str, bool]


class InsightStatus(str, Enum):
    """Closed classification attached to every insight."""

    OPTIMAL = "optimal"
    WARNING = "warning"
    DANGER = "danger"
    CALIBRATION = "calibration"
    NEUTRAL = "neutral"


class UserRole(str, Enum):
    ATHLETE = "ATHLETE"
    COACH = "COACH"


@dataclass(frozen=True)
class TrainingLog:
    """A single logged training session."""

    id: str
    athlete_id: str
    date: str
    duration: float
    intensity: float
    sleep_hours: float | None = None
    resting_heart_rate: float | None = None
    sport_type: str | None = None
    training_type: str | None = None
    metrics: dict[str, MetricValue] = field(default_factory=dict)
    notes: str = ""

    @property
    def load(self) -> float:
        """Session load: duration (minutes) x intensity (RPE)."""
        return self.duration * self.intensity

    @property
    def timestamp(self) -> datetime:
        return parse_timestamp(self.date)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TrainingLog":
        """Build a log from its persisted (camelCase) form."""
        return cls(
            id=str(data["id"]),
            athlete_id=str(data.get("athleteId", "")),
            date=data["date"],
            duration=data.get("duration", 0),
            intensity=data.get("intensity", 0),
            sleep_hours=data.get("sleepHours"),
            resting_heart_rate=data.get("restingHeartRate"),
            sport_type=data.get("sportType"),
            training_type=data.get("trainingType"),
            metrics=dict(data.get("metrics") or {}),
            notes=data.get("notes") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "athleteId": self.athlete_id,
            "date": self.date,
            "duration": self.duration,
            "intensity": self.intensity,
            "metrics": dict(self.metrics),
            "notes": self.notes,
        }
        optional = {
            "sleepHours": self.sleep_hours,
            "restingHeartRate": self.resting_heart_rate,
            "sportType": self.sport_type,
            "trainingType": self.training_type,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data


@dataclass(frozen=True)
class User:
    """Account record; only ``joined_at`` matters to the engine."""

    id: str
    name: str
    joined_at: str
    email: str | None = None
    role: UserRole = UserRole.ATHLETE
    sport_preference: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            joined_at=data["joinedAt"],
            email=data.get("email"),
            role=UserRole(data.get("role", UserRole.ATHLETE.value)),
            sport_preference=data.get("sportPreference"),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "joinedAt": self.joined_at,
            "role": self.role.value,
        }
        if self.email is not None:
            data["email"] = self.email
        if self.sport_preference is not None:
            data["sportPreference"] = self.sport_preference
        return data


@dataclass(frozen=True)
class ScientificInsight:
    """A derived indicator ready for display.

    ``value`` is either a formatted number/percentage or one of the status
    tokens ``"Calibration"`` / ``"N/A"``. ``calculation_logic`` is an audit
    trail of the intermediate numbers, not meant to be parsed.
    """

    label: str
    value: str
    status: InsightStatus
    description: str
    calculation_logic: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "value": self.value,
            "status": self.status.value,
            "description": self.description,
            "calculation_logic": self.calculation_logic,
        }


@dataclass(frozen=True)
class CalibrationStatus:
    is_calibrating: bool
    days_remaining: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_calibrating": self.is_calibrating,
            "days_remaining": self.days_remaining,
        }
