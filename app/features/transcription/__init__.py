"""Transcription feature module: base64 voice notes to text via Whisper."""

from app.features.transcription.service import TranscriptionService, decode_audio

__all__ = [
    "TranscriptionService",
    "decode_audio",
]
