"""Tests for audio decoding and the Whisper-backed transcription service (mocked client)."""

import asyncio
import base64
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.features.transcription.service import TranscriptionService, decode_audio
from app.shared.errors import TranscriptionError

AUDIO = b"\x1aE\xdf\xa3webm-bytes"


def _client(return_value=None, side_effect=None) -> MagicMock:
    client = MagicMock()
    client.audio.transcriptions.create = AsyncMock(return_value=return_value, side_effect=side_effect)
    return client


class TestDecodeAudio:
    def test_plain_base64(self) -> None:
        assert decode_audio(base64.b64encode(AUDIO).decode()) == AUDIO

    def test_data_url_prefix(self) -> None:
        encoded = "data:audio/webm;base64," + base64.b64encode(AUDIO).decode()
        assert decode_audio(encoded) == AUDIO

    def test_line_wrapped_base64(self) -> None:
        encoded = base64.encodebytes(AUDIO * 20).decode()
        assert "\n" in encoded
        assert decode_audio(encoded) == AUDIO * 20

    def test_invalid_base64(self) -> None:
        with pytest.raises(ValueError, match="base64"):
            decode_audio("not base64 at all!")


class TestTranscribe:
    def test_returns_text(self) -> None:
        client = _client(return_value=SimpleNamespace(text="Thank you Lord for today"))
        service = TranscriptionService(client=client, model="whisper-1", language="en")

        assert asyncio.run(service.transcribe(AUDIO)) == "Thank you Lord for today"

        kwargs = client.audio.transcriptions.create.call_args.kwargs
        assert kwargs["model"] == "whisper-1"
        assert kwargs["language"] == "en"
        assert kwargs["file"] == ("audio.webm", AUDIO, "audio/webm")

    def test_upstream_error_raises(self) -> None:
        client = _client(side_effect=RuntimeError("rate limited"))
        service = TranscriptionService(client=client, model="whisper-1", language="en")

        with pytest.raises(TranscriptionError, match="rate limited"):
            asyncio.run(service.transcribe(AUDIO))

    def test_missing_text_raises(self) -> None:
        client = _client(return_value=SimpleNamespace(text=None))
        service = TranscriptionService(client=client, model="whisper-1", language="en")

        with pytest.raises(TranscriptionError):
            asyncio.run(service.transcribe(AUDIO))
