"""
Database Client - Unified Access to All Data Repositories

A thin wrapper that hands one Supabase client to each repository.
"""

import logging
from functools import lru_cache

from app.core.database import get_supabase
from app.features.database.repositories.community import CommunityRepository
from app.features.database.repositories.journals import JournalsRepository
from app.features.database.repositories.prayers import PrayersRepository
from app.features.database.repositories.streaks import StreaksRepository

logger = logging.getLogger("Scrolls.Database")


class DatabaseClient:
    """
    Unified database client providing access to all repositories.

    Usage:
        db = get_database_client()
        entries = db.journals.list_for_user(user_id)
        db.streaks.record_longest(user_id, 12)
    """

    def __init__(self, client=None):
        """Initialize with a Supabase client (the shared one by default)."""
        self._client = client if client is not None else get_supabase()

        self.journals = JournalsRepository(self._client)
        self.prayers = PrayersRepository(self._client)
        self.streaks = StreaksRepository(self._client)
        self.community = CommunityRepository(self._client)

        logger.info("Database client initialized with all repositories")

    @property
    def client(self):
        """Direct access to Supabase client, e.g. for auth lookups."""
        return self._client


@lru_cache(maxsize=1)
def get_database_client() -> DatabaseClient:
    """Get the singleton database client."""
    return DatabaseClient()
