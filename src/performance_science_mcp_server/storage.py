"""
Local JSON store for users and training logs.

Mirrors the dashboard's local storage: ``users.json`` holds user records and
``logs.json`` holds every athlete's logs, newest first. Files are rewritten
atomically through a temporary file in the same directory.
"""

import json
import logging
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

from performance_science_mcp_server.config import get_config
from performance_science_mcp_server.utils.types import TrainingLog, User

logger = logging.getLogger(__name__)

USERS_FILENAME = "users.json"
LOGS_FILENAME = "logs.json"


class StorageError(Exception):
    """Raised when a store file cannot be read, parsed or written."""


class LogStore:
    """File-backed store for one installation."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    @property
    def users_file(self) -> Path:
        return self.data_dir / USERS_FILENAME

    @property
    def logs_file(self) -> Path:
        return self.data_dir / LOGS_FILENAME

    def _read_list(self, path: Path) -> list[dict[str, Any]]:
        if not path.exists():
            return []

        raw = path.read_text(encoding="utf-8").strip() or "[]"
        try:
            records = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Could not parse {path}: {exc}") from exc

        if not isinstance(records, list):
            raise StorageError(f"{path} must contain a JSON list")
        return records

    def _write_list(self, path: Path, records: list[dict[str, Any]]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(records, indent=2) + "\n"

        temp_path: Path | None = None
        try:
            with NamedTemporaryFile("w", dir=path.parent, delete=False, encoding="utf-8") as tmp:
                temp_path = Path(tmp.name)
                tmp.write(payload)
            temp_path.replace(path)
        except OSError as exc:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise StorageError(f"Could not write {path}: {exc}") from exc

    def load_logs(self, athlete_id: str | None = None) -> list[TrainingLog]:
        """Load training logs in stored order, optionally for one athlete."""
        try:
            logs = [TrainingLog.from_dict(record) for record in self._read_list(self.logs_file)]
        except (KeyError, TypeError) as exc:
            raise StorageError(f"Malformed training log in {self.logs_file}: {exc}") from exc

        if athlete_id is None:
            return logs
        return [log for log in logs if log.athlete_id == athlete_id]

    def add_log(self, log: TrainingLog) -> None:
        """Prepend a log so the file stays newest first."""
        records = self._read_list(self.logs_file)
        records.insert(0, log.to_dict())
        self._write_list(self.logs_file, records)
        logger.info("Stored training log %s for athlete %s", log.id, log.athlete_id)

    def load_user(self, user_id: str) -> User | None:
        for record in self._read_list(self.users_file):
            if str(record.get("id")) == user_id:
                try:
                    return User.from_dict(record)
                except (KeyError, ValueError) as exc:
                    raise StorageError(f"Malformed user record {user_id}: {exc}") from exc
        return None

    def save_user(self, user: User) -> None:
        """Insert or replace a user record."""
        records = [r for r in self._read_list(self.users_file) if str(r.get("id")) != user.id]
        records.append(user.to_dict())
        self._write_list(self.users_file, records)
        logger.info("Saved user %s", user.id)


def get_store() -> LogStore:
    """Store rooted at the configured data directory."""
    return LogStore(get_config().data_dir)
