"""
Voice note transcription with OpenAI Whisper.

There is no safe fallback transcript, so upstream failures surface as
TranscriptionError.
"""

import base64
import binascii
import logging
from typing import Optional

from openai import AsyncOpenAI

from app.core.config import settings
from app.services.openai_client import get_openai_client
from app.shared.errors import TranscriptionError

logger = logging.getLogger("Scrolls.Transcription")

AUDIO_FILENAME = "audio.webm"
AUDIO_CONTENT_TYPE = "audio/webm"


def decode_audio(encoded: str) -> bytes:
    """
    Decode base64 audio, tolerating a ``data:...;base64,`` prefix and
    line-wrapped (MIME) payloads.

    Raises:
        ValueError: If the payload is not valid base64 or is empty
    """
    if encoded.startswith("data:") and "," in encoded:
        encoded = encoded.split(",", 1)[1]
    # MIME-style base64 wraps lines
    encoded = "".join(encoded.split())
    try:
        audio = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("Audio must be base64-encoded") from exc
    if not audio:
        raise ValueError("Audio data is empty")
    return audio


class TranscriptionService:
    """Send recorded audio to Whisper and return the text."""

    def __init__(
        self,
        client: Optional[AsyncOpenAI] = None,
        model: Optional[str] = None,
        language: Optional[str] = None,
    ) -> None:
        self.client = client or get_openai_client()
        self.model = model or settings.WHISPER_MODEL
        self.language = language or settings.TRANSCRIPTION_LANGUAGE

    async def transcribe(self, audio: bytes) -> str:
        logger.info("Calling Whisper API", extra={"audio_bytes": len(audio)})
        try:
            result = await self.client.audio.transcriptions.create(
                file=(AUDIO_FILENAME, audio, AUDIO_CONTENT_TYPE),
                model=self.model,
                language=self.language,
            )
        except Exception as exc:
            logger.error("Whisper API error: %s", exc)
            raise TranscriptionError(f"Whisper API error: {exc}") from exc

        text = getattr(result, "text", None)
        if text is None:
            raise TranscriptionError("Whisper API returned no text")

        logger.info("Transcription complete (%s chars)", len(text))
        return text
