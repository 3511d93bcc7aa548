"""
Journal Entries Repository - journal entry data access.

Handles:
- Listing a user's entries (newest first)
- Creating an entry for a calendar date
- Deleting an entry
"""

import logging
from typing import List

from app.features.journaling.models import JournalEntry, JournalEntryCreate
from app.shared.errors import NotFoundError

logger = logging.getLogger("Scrolls.Database.Journals")

TABLE = "journal_entries"


class JournalsRepository:
    """Repository for journal entry operations, always scoped to one user."""

    def __init__(self, client):
        """Initialize with Supabase client."""
        self.client = client

    def list_for_user(self, user_id: str) -> List[JournalEntry]:
        """Get all entries for a user. Rows without a usable date are skipped."""
        try:
            result = self.client.table(TABLE).select("*").eq(
                "user_id", user_id
            ).order("created_at", desc=True).execute()
        except Exception as e:
            logger.error(f"Error fetching journal entries for {user_id}: {e}")
            return []

        entries = []
        for row in result.data or []:
            try:
                entries.append(JournalEntry.from_row(row))
            except ValueError as e:
                logger.warning(f"Skipping malformed journal entry {row.get('id')}: {e}")
        return entries

    def create(self, user_id: str, entry: JournalEntryCreate) -> JournalEntry:
        """Insert an entry and return it as stored."""
        payload = {
            "user_id": user_id,
            "content": entry.content or "",
            "mood": entry.mood.value if entry.mood else None,
            "gratitude": entry.gratitude,
            "entry_date": entry.date.isoformat(),
            "prayer": entry.prayer,
        }
        payload = {k: v for k, v in payload.items() if v is not None}

        try:
            result = self.client.table(TABLE).insert(payload).execute()
        except Exception as e:
            logger.error(f"Error creating journal entry: {e}")
            raise

        created = JournalEntry.from_row(result.data[0])
        logger.info(f"Journal entry created: {created.id} for {created.date}")
        return created

    def delete(self, user_id: str, entry_id: str) -> None:
        """Delete one of the user's entries."""
        try:
            result = self.client.table(TABLE).delete().eq(
                "id", entry_id
            ).eq("user_id", user_id).execute()
        except Exception as e:
            logger.error(f"Error deleting journal entry {entry_id}: {e}")
            raise

        if not result.data:
            raise NotFoundError("Journal entry not found", resource_type="journal_entry", resource_id=entry_id)
        logger.info(f"Journal entry deleted: {entry_id}")
