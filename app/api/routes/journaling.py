"""
Journaling API Routes

Journal entries and the derived streak for the authenticated user.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from app.api.dependencies import get_app_state
from app.api.models import DeletedResponse, EntryCreatedResponse
from app.features.journaling.models import JournalEntry, JournalEntryCreate, StreakSnapshot
from app.features.journaling.state import AppState

router = APIRouter(tags=["Journaling"])
logger = logging.getLogger("Scrolls.API.Journaling")


@router.get("/entries", response_model=List[JournalEntry])
async def list_entries(state: AppState = Depends(get_app_state)):
    """All of the user's journal entries, newest first."""
    return list(state.journal.load())


@router.post("/entries", response_model=EntryCreatedResponse, status_code=201)
async def create_entry(entry: JournalEntryCreate, state: AppState = Depends(get_app_state)):
    """Record an entry and return it with the updated streak."""
    state.journal.load()
    created = state.journal.add(entry)
    logger.info("Entry %s recorded for %s", created.id, created.date)
    return EntryCreatedResponse(entry=created, streak=state.streak.get())


@router.delete("/entries/{entry_id}", response_model=DeletedResponse)
async def delete_entry(entry_id: str, state: AppState = Depends(get_app_state)):
    state.journal.delete(entry_id)
    return DeletedResponse(deleted=entry_id)


@router.get("/streak", response_model=StreakSnapshot)
async def get_streak(state: AppState = Depends(get_app_state)):
    """
    Current and longest streak, last entry date and entries this week.

    "Today" is evaluated in the ``tz`` query parameter's zone.
    """
    state.journal.load()
    return state.streak.get()
