"""
Prayers Repository - prayer request data access.

Handles:
- Listing a user's prayers
- Creating active prayer requests
- Marking a prayer answered (one-way)
- Deleting prayers
"""

import logging
from datetime import datetime, timezone
from typing import List

from app.features.journaling.models import Prayer, PrayerCreate, PrayerStatus
from app.shared.errors import ConflictError, NotFoundError

logger = logging.getLogger("Scrolls.Database.Prayers")

TABLE = "prayers"


class PrayersRepository:
    """Repository for prayer operations, always scoped to one user."""

    def __init__(self, client):
        """Initialize with Supabase client."""
        self.client = client

    def list_for_user(self, user_id: str) -> List[Prayer]:
        """Get all prayers for a user, newest first. Unreadable rows are skipped."""
        try:
            result = self.client.table(TABLE).select("*").eq(
                "user_id", user_id
            ).order("created_at", desc=True).execute()
        except Exception as e:
            logger.error(f"Error fetching prayers for {user_id}: {e}")
            return []

        prayers = []
        for row in result.data or []:
            try:
                prayers.append(Prayer.from_row(row))
            except ValueError as e:
                logger.warning(f"Skipping malformed prayer {row.get('id')}: {e}")
        return prayers

    def get(self, user_id: str, prayer_id: str) -> Prayer:
        result = self.client.table(TABLE).select("*").eq(
            "id", prayer_id
        ).eq("user_id", user_id).limit(1).execute()
        if not result.data:
            raise NotFoundError("Prayer not found", resource_type="prayer", resource_id=prayer_id)
        return Prayer.from_row(result.data[0])

    def create(self, user_id: str, prayer: PrayerCreate) -> Prayer:
        """Insert a new active prayer request."""
        payload = {
            "user_id": user_id,
            "request": prayer.request,
            "category": prayer.category.value,
            "status": PrayerStatus.ACTIVE.value,
        }
        try:
            result = self.client.table(TABLE).insert(payload).execute()
        except Exception as e:
            logger.error(f"Error creating prayer: {e}")
            raise

        created = Prayer.from_row(result.data[0])
        logger.info(f"Prayer created: {created.id} ({created.category.value})")
        return created

    def answer(self, user_id: str, prayer_id: str, note: str) -> Prayer:
        """
        Mark an active prayer as answered.

        The note and date are written together and only once; answering an
        already answered prayer raises ConflictError.
        """
        existing = self.get(user_id, prayer_id)
        if existing.status == PrayerStatus.ANSWERED:
            raise ConflictError(
                "Prayer has already been answered",
                {"prayer_id": prayer_id, "answered_date": str(existing.answered_date)},
            )

        # Filtering on status keeps a concurrent answer from overwriting the first
        result = self.client.table(TABLE).update({
            "status": PrayerStatus.ANSWERED.value,
            "answered_note": note,
            "answered_date": datetime.now(timezone.utc).isoformat(),
        }).eq("id", prayer_id).eq("user_id", user_id).eq(
            "status", PrayerStatus.ACTIVE.value
        ).execute()

        if not result.data:
            raise ConflictError("Prayer has already been answered", {"prayer_id": prayer_id})

        logger.info(f"Prayer answered: {prayer_id}")
        return Prayer.from_row(result.data[0])

    def delete(self, user_id: str, prayer_id: str) -> None:
        try:
            result = self.client.table(TABLE).delete().eq(
                "id", prayer_id
            ).eq("user_id", user_id).execute()
        except Exception as e:
            logger.error(f"Error deleting prayer {prayer_id}: {e}")
            raise

        if not result.data:
            raise NotFoundError("Prayer not found", resource_type="prayer", resource_id=prayer_id)
        logger.info(f"Prayer deleted: {prayer_id}")
