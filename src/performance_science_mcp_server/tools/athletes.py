"""Athlete account tools."""

import uuid

from performance_science_mcp_server.config import get_config
from performance_science_mcp_server.mcp_instance import mcp
from performance_science_mcp_server.storage import StorageError, get_store
from performance_science_mcp_server.utils.dates import utc_now
from performance_science_mcp_server.utils.types import User, UserRole

config = get_config()


@mcp.tool()
async def register_athlete(
    name: str,
    athlete_id: str | None = None,
    email: str | None = None,
    sport_preference: str | None = None,
) -> str:
    """Create an athlete account and start its calibration phase.

    The join time is recorded as now; metrics stay in calibration for the
    first 14 days.

    Args:
        name: Athlete display name
        athlete_id: ID to register (optional, defaults to ATHLETE_ID from .env or a new ID)
        email: Contact email (optional)
        sport_preference: Main sport, e.g. Running (optional)
    """
    user_id = athlete_id or config.athlete_id or uuid.uuid4().hex[:12]

    try:
        store = get_store()
        if store.load_user(user_id) is not None:
            return f"Error: Athlete {user_id} is already registered."

        user = User(
            id=user_id,
            name=name,
            joined_at=utc_now().isoformat(),
            email=email,
            role=UserRole.ATHLETE,
            sport_preference=sport_preference,
        )
        store.save_user(user)
    except StorageError as e:
        return f"Error registering athlete: {e}"

    return f"Registered athlete {user.name} (ID: {user.id}), joined {user.joined_at}."
