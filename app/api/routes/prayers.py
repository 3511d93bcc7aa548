"""
Prayer API Routes

A user's prayer list: add requests, mark them answered, remove them.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from app.api.dependencies import get_app_state
from app.api.models import DeletedResponse
from app.features.journaling.models import AnswerPrayerRequest, Prayer, PrayerCreate
from app.features.journaling.state import AppState

router = APIRouter(prefix="/prayers", tags=["Prayers"])
logger = logging.getLogger("Scrolls.API.Prayers")


@router.get("", response_model=List[Prayer])
async def list_prayers(state: AppState = Depends(get_app_state)):
    """All of the user's prayers, newest first."""
    return list(state.prayers.load())


@router.post("", response_model=Prayer, status_code=201)
async def create_prayer(prayer: PrayerCreate, state: AppState = Depends(get_app_state)):
    state.prayers.load()
    return state.prayers.add(prayer)


@router.post("/{prayer_id}/answer", response_model=Prayer)
async def answer_prayer(
    prayer_id: str,
    body: AnswerPrayerRequest,
    state: AppState = Depends(get_app_state),
):
    """Mark a prayer as answered. Answering twice is a conflict."""
    state.prayers.load()
    answered = state.prayers.answer(prayer_id, body.note)
    logger.info("Prayer %s answered", prayer_id)
    return answered


@router.delete("/{prayer_id}", response_model=DeletedResponse)
async def delete_prayer(prayer_id: str, state: AppState = Depends(get_app_state)):
    state.prayers.delete(prayer_id)
    return DeletedResponse(deleted=prayer_id)
