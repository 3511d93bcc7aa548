"""
Transcription API Routes

POST /transcribe converts a base64 voice note into text with Whisper.
Unlike guidance there is no fallback: failures are reported as 500.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.api.dependencies import get_transcription_service
from app.features.transcription.service import TranscriptionService, decode_audio
from app.shared.errors import (
    ErrorResponse,
    TranscriptionError,
    configuration_error,
    get_correlation_id,
    validation_error,
)

router = APIRouter(tags=["Transcription"])
logger = logging.getLogger("Scrolls.API.Transcription")


class TranscribeRequest(BaseModel):
    audio: Optional[str] = Field(default=None, description="Base64-encoded audio (webm)")


class TranscribeResponse(BaseModel):
    success: bool
    text: str
    timestamp: str


@router.post(
    "/transcribe",
    response_model=TranscribeResponse,
    responses={400: {"model": ErrorResponse}},
)
async def transcribe_audio(
    payload: TranscribeRequest,
    request: Request,
    service: Optional[TranscriptionService] = Depends(get_transcription_service),
):
    """Transcribe a recorded voice note."""
    correlation_id = get_correlation_id(request)

    if not payload.audio:
        return validation_error("Audio data is required", {"field": "audio"}, correlation_id)

    if service is None:
        logger.error("Missing OPENAI_API_KEY environment variable")
        return configuration_error("OpenAI API key not configured", "openai", correlation_id)

    try:
        audio = decode_audio(payload.audio)
    except ValueError as exc:
        return validation_error(str(exc), {"field": "audio"}, correlation_id)

    try:
        text = await service.transcribe(audio)
    except TranscriptionError as exc:
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": exc.message,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
        )

    return TranscribeResponse(
        success=True,
        text=text,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
