"""API tests for POST /api/transcribe."""

import base64
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.api.dependencies import get_transcription_service
from app.shared.errors import TranscriptionError

AUDIO_B64 = base64.b64encode(b"webm-audio").decode()


@pytest.fixture
def service(app):
    mock = MagicMock()
    mock.transcribe = AsyncMock(return_value="Lord, thank you for this morning")
    app.dependency_overrides[get_transcription_service] = lambda: mock
    return mock


class TestTranscribeEndpoint:
    def test_success(self, client, service) -> None:
        resp = client.post("/api/transcribe", json={"audio": AUDIO_B64})
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["text"] == "Lord, thank you for this morning"
        service.transcribe.assert_awaited_once_with(b"webm-audio")

    def test_missing_audio_is_400(self, client, service) -> None:
        resp = client.post("/api/transcribe", json={})
        assert resp.status_code == 400
        service.transcribe.assert_not_called()

    def test_invalid_base64_is_400(self, client, service) -> None:
        resp = client.post("/api/transcribe", json={"audio": "%%%not-base64%%%"})
        assert resp.status_code == 400
        assert resp.json()["error"]["details"] == {"field": "audio"}

    def test_missing_api_key_is_500(self, app, client) -> None:
        app.dependency_overrides[get_transcription_service] = lambda: None
        resp = client.post("/api/transcribe", json={"audio": AUDIO_B64})
        assert resp.status_code == 500
        assert resp.json()["error"]["code"] == "CONFIGURATION_ERROR"

    def test_upstream_failure_is_500(self, client, service) -> None:
        service.transcribe.side_effect = TranscriptionError("Whisper API error: quota exceeded")
        resp = client.post("/api/transcribe", json={"audio": AUDIO_B64})

        assert resp.status_code == 500
        body = resp.json()
        assert body["success"] is False
        assert "quota exceeded" in body["error"]
        assert body["timestamp"]
