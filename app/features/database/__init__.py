"""
Database Feature Module - Organized Data Access Layer

Provides access to the Supabase tables behind the journal service.

Usage:
    from app.features.database import get_database_client

    db = get_database_client()
    entries = db.journals.list_for_user(user_id)
    prayer = db.prayers.answer(user_id, prayer_id, note)
"""

from app.features.database.client import DatabaseClient, get_database_client

__all__ = [
    "DatabaseClient",
    "get_database_client",
]
