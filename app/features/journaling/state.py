"""Per-user application state: journal, prayers and the derived streak."""

import datetime as dt
import logging
from functools import cached_property
from typing import Callable, Optional

from app.features.database.client import DatabaseClient
from app.features.journaling.models import StreakSnapshot
from app.features.journaling.store import DerivedStore, JournalStore, PrayerStore, derived
from app.features.journaling.streak import calculate_streak

logger = logging.getLogger("Scrolls.Journaling.State")


class AppState:
    """
    State container for one authenticated user.

    The streak store is derived from the journal store; whenever it reports a
    longest streak above the recorded one, the new value is persisted.
    """

    def __init__(
        self,
        db: DatabaseClient,
        user_id: str,
        today: Callable[[], dt.date],
    ):
        self.user_id = user_id
        self._db = db
        self._today = today
        self._recorded_longest: Optional[int] = None

        self.journal = JournalStore(db.journals, user_id)
        self.prayers = PrayerStore(db.prayers, user_id)

    @property
    def recorded_longest(self) -> int:
        if self._recorded_longest is None:
            self._recorded_longest = self._db.streaks.get_longest(self.user_id)
        return self._recorded_longest

    @cached_property
    def streak(self) -> DerivedStore[StreakSnapshot]:
        store = derived(
            self.journal,
            lambda entries: calculate_streak(entries, self._today(), self.recorded_longest),
        )
        store.subscribe(self._persist_longest)
        return store

    def _persist_longest(self, snapshot: StreakSnapshot) -> None:
        if snapshot.longest > self.recorded_longest:
            self._recorded_longest = self._db.streaks.record_longest(self.user_id, snapshot.longest)
