"""Tests for guidance parsing and the Claude-backed guidance service (mocked client)."""

from __future__ import annotations

import asyncio
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.features.guidance.fallbacks import call_failure_guidance, parse_failure_guidance
from app.features.guidance.models import GuidanceDegraded, GuidanceRequest, GuidanceSuccess
from app.features.guidance.service import (
    GuidanceParseError,
    GuidanceService,
    extract_json_object,
    parse_guidance,
)

GOOD_GUIDANCE = {
    "verses": [
        {
            "reference": "Isaiah 41:10",
            "text": "So do not fear, for I am with you.",
            "application": "You are not facing this alone.",
        }
    ],
    "prayer": "Father, steady my heart. Amen.",
    "actionStep": "Write down one thing you can hand over to God today.",
    "encouragement": "He holds you fast.",
}


def _response(text: str) -> SimpleNamespace:
    return SimpleNamespace(
        content=[SimpleNamespace(text=text)],
        usage=SimpleNamespace(input_tokens=120, output_tokens=300),
    )


def _service(client: MagicMock) -> GuidanceService:
    return GuidanceService(client=client, model="claude-3-5-haiku-20241022", max_tokens=1500, temperature=0.7)


def _client(return_value=None, side_effect=None) -> MagicMock:
    client = MagicMock()
    client.messages.create = AsyncMock(return_value=return_value, side_effect=side_effect)
    return client


def _generate(service: GuidanceService, situation: str = "I am anxious about my new job"):
    return asyncio.run(service.generate(GuidanceRequest(situation=situation, mood="anxious")))


class TestParseGuidance:
    def test_plain_json(self) -> None:
        guidance = parse_guidance(json.dumps(GOOD_GUIDANCE))
        assert guidance.verses[0].reference == "Isaiah 41:10"
        assert guidance.action_step.startswith("Write down")

    def test_json_inside_prose(self) -> None:
        text = "Here is some guidance:\n" + json.dumps(GOOD_GUIDANCE) + "\nBlessings."
        assert parse_guidance(text).prayer == GOOD_GUIDANCE["prayer"]

    def test_fenced_json(self) -> None:
        text = "```json\n" + json.dumps(GOOD_GUIDANCE) + "\n```"
        assert len(parse_guidance(text).verses) == 1

    def test_no_json(self) -> None:
        assert extract_json_object("No braces here") is None
        with pytest.raises(GuidanceParseError, match="No JSON"):
            parse_guidance("No braces here")

    def test_invalid_json(self) -> None:
        with pytest.raises(GuidanceParseError, match="Invalid JSON"):
            parse_guidance("{ verses: nope }")

    def test_empty_verses_rejected(self) -> None:
        data = dict(GOOD_GUIDANCE, verses=[])
        with pytest.raises(GuidanceParseError, match="shape"):
            parse_guidance(json.dumps(data))


class TestGenerate:
    def test_well_formed_response(self) -> None:
        client = _client(return_value=_response(json.dumps(GOOD_GUIDANCE)))
        result = _generate(_service(client))

        assert isinstance(result, GuidanceSuccess)
        assert len(result.guidance.verses) >= 1
        assert result.guidance.verses[0].reference == "Isaiah 41:10"

    def test_sends_prompt_and_settings(self) -> None:
        client = _client(return_value=_response(json.dumps(GOOD_GUIDANCE)))
        _generate(_service(client), situation="Grieving my father")

        kwargs = client.messages.create.call_args.kwargs
        assert kwargs["model"] == "claude-3-5-haiku-20241022"
        assert kwargs["max_tokens"] == 1500
        assert kwargs["temperature"] == 0.7
        assert "Grieving my father" in kwargs["messages"][0]["content"]

    def test_unparseable_response_uses_parse_fallback(self) -> None:
        client = _client(return_value=_response("I'm sorry, I cannot help with that."))
        result = _generate(_service(client))

        assert isinstance(result, GuidanceDegraded)
        assert result.failure == "parse"
        assert result.guidance == parse_failure_guidance()

    def test_call_failure_uses_call_fallback(self) -> None:
        client = _client(side_effect=RuntimeError("connection reset"))
        result = _generate(_service(client))

        assert isinstance(result, GuidanceDegraded)
        assert result.failure == "call"
        assert "connection reset" in result.reason
        assert result.guidance == call_failure_guidance()

    def test_empty_content_is_a_call_failure(self) -> None:
        client = _client(return_value=SimpleNamespace(content=[], usage=None))
        result = _generate(_service(client))
        assert result.failure == "call"


class TestFallbacks:
    def test_fallbacks_are_valid_guidance(self) -> None:
        assert len(parse_failure_guidance().verses) == 1
        assert len(call_failure_guidance().verses) == 2

    def test_fallbacks_are_fresh_copies(self) -> None:
        first = call_failure_guidance()
        first.verses.clear()
        assert len(call_failure_guidance().verses) == 2
