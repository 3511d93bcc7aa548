"""
Observable state containers for a user's journal and prayers.

``Store`` replaces module-level reactive singletons with an explicit object
owned by whoever builds it (see ``AppState``). Delivery guarantees:

- ``subscribe`` calls the new subscriber immediately with the current value
- subscribers are notified in subscription order
- a value set from inside a subscriber is queued and delivered after the
  current round, so every subscriber observes values in the same order
"""

import logging
from collections import deque
from typing import Callable, Deque, Generic, List, Tuple, TypeVar

from app.features.database.repositories.journals import JournalsRepository
from app.features.database.repositories.prayers import PrayersRepository
from app.features.journaling.models import JournalEntry, JournalEntryCreate, Prayer, PrayerCreate

logger = logging.getLogger("Scrolls.Journaling.Store")

T = TypeVar("T")
U = TypeVar("U")

Subscriber = Callable[[T], None]
Unsubscribe = Callable[[], None]


class ReadableStore(Generic[T]):
    """A value that can be read and observed."""

    def __init__(self, initial: T):
        self._value = initial
        self._subscribers: List[Subscriber] = []
        self._pending: Deque[T] = deque()
        self._notifying = False

    def get(self) -> T:
        return self._value

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        """Register ``callback`` and call it with the current value."""
        self._subscribers.append(callback)
        callback(self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _latest(self) -> T:
        return self._pending[-1] if self._pending else self._value

    def _publish(self, value: T) -> None:
        self._pending.append(value)
        if self._notifying:
            return

        self._notifying = True
        try:
            while self._pending:
                self._value = self._pending.popleft()
                for callback in list(self._subscribers):
                    callback(self._value)
        finally:
            self._notifying = False
            self._pending.clear()


class Store(ReadableStore[T]):
    """A writable store."""

    def set(self, value: T) -> None:
        self._publish(value)

    def update(self, fn: Callable[[T], T]) -> None:
        """Apply ``fn`` to the most recent value, including queued ones."""
        self._publish(fn(self._latest()))


class DerivedStore(ReadableStore[U]):
    """Read-only store recomputed from a source store on every change."""

    def __init__(self, source: ReadableStore[T], fn: Callable[[T], U]):
        self._fn = fn
        super().__init__(fn(source.get()))
        self._primed = False
        self._unsubscribe = source.subscribe(self._on_source)

    def _on_source(self, value: T) -> None:
        # The initial value was computed in __init__
        if not self._primed:
            self._primed = True
            return
        self._publish(self._fn(value))

    def close(self) -> None:
        self._unsubscribe()


def derived(source: ReadableStore[T], fn: Callable[[T], U]) -> DerivedStore[U]:
    return DerivedStore(source, fn)


# =============================================================================
# DOMAIN STORES
# =============================================================================

class JournalStore(Store[Tuple[JournalEntry, ...]]):
    """One user's journal entries, newest first, backed by Supabase."""

    def __init__(self, repository: JournalsRepository, user_id: str):
        super().__init__(())
        self._repository = repository
        self.user_id = user_id

    def load(self) -> Tuple[JournalEntry, ...]:
        entries = tuple(self._repository.list_for_user(self.user_id))
        self.set(entries)
        logger.debug(f"Loaded {len(entries)} journal entries for {self.user_id}")
        return entries

    def add(self, entry: JournalEntryCreate) -> JournalEntry:
        created = self._repository.create(self.user_id, entry)
        self.update(lambda entries: (created,) + entries)
        return created

    def delete(self, entry_id: str) -> None:
        self._repository.delete(self.user_id, entry_id)
        self.update(lambda entries: tuple(e for e in entries if e.id != entry_id))


class PrayerStore(Store[Tuple[Prayer, ...]]):
    """One user's prayer requests, newest first, backed by Supabase."""

    def __init__(self, repository: PrayersRepository, user_id: str):
        super().__init__(())
        self._repository = repository
        self.user_id = user_id

    def load(self) -> Tuple[Prayer, ...]:
        prayers = tuple(self._repository.list_for_user(self.user_id))
        self.set(prayers)
        return prayers

    def add(self, prayer: PrayerCreate) -> Prayer:
        created = self._repository.create(self.user_id, prayer)
        self.update(lambda prayers: (created,) + prayers)
        return created

    def answer(self, prayer_id: str, note: str) -> Prayer:
        answered = self._repository.answer(self.user_id, prayer_id, note)
        self.update(lambda prayers: tuple(answered if p.id == prayer_id else p for p in prayers))
        return answered

    def delete(self, prayer_id: str) -> None:
        self._repository.delete(self.user_id, prayer_id)
        self.update(lambda prayers: tuple(p for p in prayers if p.id != prayer_id))
