"""Tests for observable stores and the per-user AppState."""

from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest

from app.features.journaling.models import JournalEntry, JournalEntryCreate, PrayerCreate, PrayerStatus
from app.features.journaling.state import AppState
from app.features.journaling.store import JournalStore, Store, derived
from app.shared.errors import NotFoundError

TODAY = date(2026, 3, 15)


class TestStore:
    def test_subscribe_receives_current_value(self) -> None:
        store = Store(1)
        seen = []
        store.subscribe(seen.append)
        assert seen == [1]

    def test_subscribers_notified_in_subscription_order(self) -> None:
        store = Store(0)
        calls = []
        store.subscribe(lambda v: calls.append(("a", v)))
        store.subscribe(lambda v: calls.append(("b", v)))
        calls.clear()

        store.set(5)
        assert calls == [("a", 5), ("b", 5)]

    def test_unsubscribe_stops_notifications(self) -> None:
        store = Store(0)
        callback = MagicMock()
        unsubscribe = store.subscribe(callback)
        unsubscribe()
        store.set(1)
        callback.assert_called_once_with(0)

    def test_update_applies_function(self) -> None:
        store = Store((1,))
        store.update(lambda items: items + (2,))
        assert store.get() == (1, 2)

    def test_nested_set_is_delivered_after_current_round(self) -> None:
        store = Store(0)
        first, second = [], []

        def bump(value: int) -> None:
            first.append(value)
            if value == 1:
                store.set(2)

        store.subscribe(bump)
        store.subscribe(second.append)
        store.set(1)

        assert first == [0, 1, 2]
        assert second == [0, 1, 2]
        assert store.get() == 2

    def test_nested_update_sees_queued_value(self) -> None:
        store = Store(0)

        def chain(value: int) -> None:
            if value == 1:
                store.update(lambda v: v + 1)
                store.update(lambda v: v + 1)

        store.subscribe(chain)
        store.set(1)
        assert store.get() == 3


class TestDerived:
    def test_recomputes_on_source_change(self) -> None:
        source = Store(2)
        doubled = derived(source, lambda v: v * 2)
        assert doubled.get() == 4
        source.set(5)
        assert doubled.get() == 10

    def test_initial_value_computed_once(self) -> None:
        fn = MagicMock(side_effect=lambda v: v)
        derived(Store(1), fn)
        fn.assert_called_once_with(1)

    def test_close_detaches_from_source(self) -> None:
        source = Store(1)
        view = derived(source, lambda v: v + 1)
        view.close()
        source.set(10)
        assert view.get() == 2


class TestJournalStore:
    def test_load_add_delete(self, db) -> None:
        store = JournalStore(db.journals, "user-1")
        assert store.load() == ()

        created = store.add(JournalEntryCreate(date=TODAY, content="Psalm 23"))
        assert store.get()[0].id == created.id

        store.delete(created.id)
        assert store.get() == ()

    def test_delete_missing_entry_leaves_state(self, db) -> None:
        store = JournalStore(db.journals, "user-1")
        store.add(JournalEntryCreate(date=TODAY))
        with pytest.raises(NotFoundError):
            store.delete("missing")
        assert len(store.get()) == 1


class TestAppState:
    def _state(self, db, user_id: str = "user-1") -> AppState:
        return AppState(db, user_id, today=lambda: TODAY)

    def test_streak_follows_journal(self, db) -> None:
        state = self._state(db)
        state.journal.load()
        assert state.streak.get().current == 0

        state.journal.add(JournalEntryCreate(date=TODAY - timedelta(days=1)))
        state.journal.add(JournalEntryCreate(date=TODAY))
        snapshot = state.streak.get()
        assert snapshot.current == 2
        assert snapshot.weekly_entries == 2

    def test_longest_is_persisted_and_never_lowered(self, db) -> None:
        state = self._state(db)
        for offset in range(3):
            state.journal.add(JournalEntryCreate(date=TODAY - timedelta(days=offset)))
        assert state.streak.get().longest == 3
        assert db.streaks.get_longest("user-1") == 3

        for entry in list(state.journal.get()):
            state.journal.delete(entry.id)
        assert state.streak.get().current == 0
        assert state.streak.get().longest == 3
        assert db.streaks.get_longest("user-1") == 3

    def test_recorded_longest_carries_across_instances(self, db) -> None:
        db.streaks.record_longest("user-1", 9)
        state = self._state(db)
        state.journal.load()
        assert state.streak.get().longest == 9

    def test_users_are_isolated(self, db) -> None:
        mine = self._state(db, "user-1")
        theirs = self._state(db, "user-2")
        mine.journal.add(JournalEntryCreate(date=TODAY))
        assert theirs.journal.load() == ()

    def test_prayer_answer_replaces_in_place(self, db) -> None:
        state = self._state(db)
        first = state.prayers.add(PrayerCreate(request="Healing for Naomi"))
        state.prayers.add(PrayerCreate(request="Wisdom at work"))

        answered = state.prayers.answer(first.id, "She is recovering")
        prayers = state.prayers.get()
        assert len(prayers) == 2
        assert prayers[1].id == first.id
        assert prayers[1].status == PrayerStatus.ANSWERED
        assert answered.answered_note == "She is recovering"

    def test_entries_are_journal_entry_models(self, db) -> None:
        state = self._state(db)
        state.journal.add(JournalEntryCreate(date=TODAY, gratitude=["family", "  "]))
        entry = state.journal.load()[0]
        assert isinstance(entry, JournalEntry)
        assert entry.gratitude == ["family"]
