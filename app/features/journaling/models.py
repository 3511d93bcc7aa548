"""
Journal, prayer and streak models.

Rows come from Supabase in snake_case (``entry_date``, ``created_at``,
``answered_note``); the API speaks camelCase through ``CamelModel``.
"""

import datetime as dt
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field, field_validator

from app.shared.models import CamelModel


class Mood(str, Enum):
    GRATEFUL = "grateful"
    PEACEFUL = "peaceful"
    JOYFUL = "joyful"
    HOPEFUL = "hopeful"
    REFLECTIVE = "reflective"
    TROUBLED = "troubled"
    ANXIOUS = "anxious"
    SEEKING = "seeking"


class PrayerCategory(str, Enum):
    THANKSGIVING = "thanksgiving"
    INTERCESSION = "intercession"
    PETITION = "petition"
    CONFESSION = "confession"
    PRAISE = "praise"
    GUIDANCE = "guidance"


class PrayerStatus(str, Enum):
    ACTIVE = "active"
    ANSWERED = "answered"


def coerce_date(value: Any) -> Optional[dt.date]:
    """
    Best-effort conversion of a stored entry date to a calendar date.

    Accepts dates, datetimes and ISO strings (date or timestamp). Anything
    else, including empty strings, returns None.
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str) and len(value) >= 10:
        try:
            return dt.date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def _mood_or_none(value: Any) -> Optional[Mood]:
    try:
        return Mood(value) if value else None
    except ValueError:
        return None


# =============================================================================
# JOURNAL ENTRIES
# =============================================================================

class JournalEntry(CamelModel):
    """One journal record for one calendar date."""

    id: str
    date: dt.date
    mood: Optional[Mood] = None
    gratitude: List[str] = Field(default_factory=list)
    content: Optional[str] = None
    prayer: Optional[str] = None
    created_at: Optional[dt.datetime] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "JournalEntry":
        """Build an entry from a ``journal_entries`` row."""
        entry_date = coerce_date(row.get("entry_date") or row.get("date"))
        if entry_date is None:
            raise ValueError(f"Journal entry {row.get('id')} has no valid entry_date")
        return cls(
            id=str(row["id"]),
            date=entry_date,
            mood=_mood_or_none(row.get("mood")),
            gratitude=list(row.get("gratitude") or []),
            content=row.get("content"),
            prayer=row.get("prayer"),
            created_at=row.get("created_at"),
        )


class JournalEntryCreate(CamelModel):
    """Fields the client supplies; id and createdAt are set by the store."""

    date: dt.date
    mood: Optional[Mood] = None
    gratitude: List[str] = Field(default_factory=list)
    content: Optional[str] = None
    prayer: Optional[str] = None

    @field_validator("gratitude")
    @classmethod
    def _drop_blank_gratitude(cls, value: List[str]) -> List[str]:
        return [item.strip() for item in value if item and item.strip()]


# =============================================================================
# PRAYERS
# =============================================================================

class Prayer(CamelModel):
    """A prayer request; answered prayers carry the note and date together."""

    id: str
    request: str
    category: PrayerCategory
    status: PrayerStatus = PrayerStatus.ACTIVE
    answered_note: Optional[str] = None
    answered_date: Optional[dt.datetime] = None
    created_at: Optional[dt.datetime] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "Prayer":
        return cls(
            id=str(row["id"]),
            request=row.get("request") or "",
            category=row.get("category") or PrayerCategory.PETITION,
            status=row.get("status") or PrayerStatus.ACTIVE,
            answered_note=row.get("answered_note"),
            answered_date=row.get("answered_date"),
            created_at=row.get("created_at"),
        )


class PrayerCreate(CamelModel):
    request: str = Field(min_length=1)
    category: PrayerCategory = PrayerCategory.PETITION


class AnswerPrayerRequest(CamelModel):
    note: str = ""


# =============================================================================
# STREAKS
# =============================================================================

class StreakSnapshot(CamelModel):
    """Derived streak view; recomputed on every observation of the entries."""

    model_config = ConfigDict(frozen=True)

    current: int = 0
    longest: int = 0
    last_entry: Optional[dt.date] = None
    weekly_entries: int = 0
