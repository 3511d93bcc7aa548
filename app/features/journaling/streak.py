"""
Streak calculation over a user's journal entries.

Pure and deterministic: the result depends only on the entries, ``today`` and
the durable longest streak the caller supplies. Streaks count calendar days
(the entry's ``date``), never creation timestamps.
"""

import datetime as dt
from typing import Any, Iterable, List, Mapping

from app.features.journaling.models import StreakSnapshot, coerce_date

WEEK_WINDOW_DAYS = 7


def _entry_date(entry: Any):
    if isinstance(entry, Mapping):
        return coerce_date(entry.get("date") or entry.get("entry_date"))
    return coerce_date(getattr(entry, "date", None))


def _runs(days_desc: List[dt.date]) -> List[int]:
    """Lengths of consecutive-day runs in a descending list of distinct dates."""
    runs: List[int] = []
    length = 1
    for newer, older in zip(days_desc, days_desc[1:]):
        if (newer - older).days <= 1:
            length += 1
        else:
            runs.append(length)
            length = 1
    runs.append(length)
    return runs


def calculate_streak(
    entries: Iterable[Any],
    today: dt.date,
    previous_longest: int = 0,
) -> StreakSnapshot:
    """
    Compute the streak snapshot for a set of entries.

    Args:
        entries: JournalEntry objects or row mappings with a ``date``/``entry_date``
        today: The user's current calendar date
        previous_longest: Longest streak already recorded for the user

    Entries with missing or malformed dates are ignored. Entries dated after
    ``today`` (a client ahead of the server zone) still count. Several
    entries on the same day count once toward the streak but individually
    toward ``weekly_entries``.
    """
    dates = [d for d in (_entry_date(e) for e in entries) if d is not None]
    previous_longest = max(previous_longest or 0, 0)

    if not dates:
        return StreakSnapshot(longest=previous_longest)

    days_desc = sorted(set(dates), reverse=True)
    last_date = days_desc[0]
    runs = _runs(days_desc)

    # A lapse of two or more days since the last entry breaks the streak;
    # a future-dated last entry gives a negative lapse
    current = runs[0] if (today - last_date).days <= 1 else 0

    week_start = today - dt.timedelta(days=WEEK_WINDOW_DAYS - 1)
    weekly_entries = sum(1 for d in dates if d >= week_start)

    return StreakSnapshot(
        current=current,
        longest=max(current, max(runs), previous_longest),
        last_entry=last_date,
        weekly_entries=weekly_entries,
    )
