"""
Streaks Repository - durable longest-streak records.

The longest streak is stored per user so that loading a partial window of
entries (or deleting old ones) never lowers it.
"""

import logging
from datetime import datetime, timezone

logger = logging.getLogger("Scrolls.Database.Streaks")

TABLE = "user_streaks"


class StreaksRepository:
    """Repository for per-user streak records."""

    def __init__(self, client):
        """Initialize with Supabase client."""
        self.client = client

    def get_longest(self, user_id: str) -> int:
        """Get the recorded longest streak, 0 if none."""
        try:
            result = self.client.table(TABLE).select("longest_streak").eq(
                "user_id", user_id
            ).limit(1).execute()
            if not result.data:
                return 0
            return int(result.data[0].get("longest_streak") or 0)
        except Exception as e:
            logger.error(f"Error fetching streak record for {user_id}: {e}")
            return 0

    def record_longest(self, user_id: str, longest: int) -> int:
        """
        Persist ``longest`` if it beats the stored value.

        Returns:
            The longest streak on record after the call
        """
        stored = self.get_longest(user_id)
        if longest <= stored:
            return stored

        try:
            self.client.table(TABLE).upsert(
                {
                    "user_id": user_id,
                    "longest_streak": longest,
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                },
                on_conflict="user_id",
            ).execute()
            logger.info(f"Longest streak for {user_id} raised {stored} -> {longest}")
        except Exception as e:
            logger.error(f"Error recording longest streak for {user_id}: {e}")
            return stored
        return longest
