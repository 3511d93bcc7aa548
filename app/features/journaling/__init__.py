"""
Journaling feature module.

- Journal entries and prayer requests per user
- Observable stores owned by a per-user AppState
- Streak calculation over entry dates
"""

from app.features.journaling.models import (
    JournalEntry,
    JournalEntryCreate,
    Mood,
    Prayer,
    PrayerCategory,
    PrayerCreate,
    PrayerStatus,
    StreakSnapshot,
)
from app.features.journaling.streak import calculate_streak

__all__ = [
    "JournalEntry",
    "JournalEntryCreate",
    "Mood",
    "Prayer",
    "PrayerCategory",
    "PrayerCreate",
    "PrayerStatus",
    "StreakSnapshot",
    "calculate_streak",
]
