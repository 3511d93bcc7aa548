"""Database Repositories - Organized data access."""

from app.features.database.repositories.community import CommunityRepository
from app.features.database.repositories.journals import JournalsRepository
from app.features.database.repositories.prayers import PrayersRepository
from app.features.database.repositories.streaks import StreaksRepository

__all__ = [
    "CommunityRepository",
    "JournalsRepository",
    "PrayersRepository",
    "StreaksRepository",
]
