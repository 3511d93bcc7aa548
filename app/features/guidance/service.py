"""
Biblical guidance generation with Claude.

Idle -> Requesting -> Parsed | ParseFailed -> Fallback | CallFailed -> Fallback

Every path ends with a valid Guidance object. Failures are reported through
GuidanceDegraded so callers can tell real guidance from a fallback.
"""

from __future__ import annotations

import json
import logging
import re
import time
from typing import Any, Dict, Optional

from anthropic import AsyncAnthropic
from pydantic import ValidationError

from app.core.config import settings
from app.core.logging_utils import estimate_cost, log_llm_cost, sanitize_for_logging
from app.features.guidance.fallbacks import call_failure_guidance, parse_failure_guidance
from app.features.guidance.models import (
    Guidance,
    GuidanceDegraded,
    GuidanceRequest,
    GuidanceResult,
    GuidanceSuccess,
)
from app.features.guidance.prompts import build_guidance_prompt

logger = logging.getLogger("Scrolls.Guidance")

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


class GuidanceParseError(ValueError):
    """The model's text did not contain a usable guidance object."""


def strip_code_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = re.sub(r"^```(?:json)?\n?", "", text)
        text = re.sub(r"\n?```$", "", text)
    return text


def extract_json_object(text: str) -> Optional[str]:
    """Return the outermost ``{...}`` span, ignoring any surrounding prose."""
    match = _JSON_OBJECT.search(strip_code_fences(text))
    return match.group(0) if match else None


def parse_guidance(text: str) -> Guidance:
    """
    Parse raw model output into Guidance.

    Raises:
        GuidanceParseError: no JSON object, invalid JSON, or wrong shape
    """
    candidate = extract_json_object(text)
    if candidate is None:
        raise GuidanceParseError("No JSON found in response")

    try:
        data: Dict[str, Any] = json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise GuidanceParseError(f"Invalid JSON: {exc}") from exc

    try:
        return Guidance.model_validate(data)
    except ValidationError as exc:
        raise GuidanceParseError(f"Unexpected guidance shape: {exc.error_count()} error(s)") from exc


class GuidanceService:
    """Generate guidance for a described situation."""

    def __init__(
        self,
        client: Optional[AsyncAnthropic] = None,
        model: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> None:
        self.client = client or AsyncAnthropic(
            api_key=settings.ANTHROPIC_API_KEY,
            timeout=settings.GUIDANCE_TIMEOUT_SECONDS,
        )
        self.model = model or settings.CLAUDE_GUIDANCE_MODEL
        self.max_tokens = max_tokens or settings.GUIDANCE_MAX_TOKENS
        self.temperature = settings.GUIDANCE_TEMPERATURE if temperature is None else temperature

        logger.info("Guidance service initialized with model %s", self.model)

    async def generate(self, request: GuidanceRequest) -> GuidanceResult:
        """Generate guidance; never raises for upstream or parse failures."""
        prompt = build_guidance_prompt(
            situation=request.situation or "",
            mood=request.mood,
            recent_journal_content=request.recent_journal_content,
        )
        logger.info(
            "Requesting guidance",
            extra={"request": sanitize_for_logging(request.model_dump(exclude_none=True), max_len=60)},
        )

        started = time.monotonic()
        try:
            response_text = await self._invoke_model(prompt, started)
        except Exception as exc:  # pylint: disable=broad-except
            logger.error("Claude guidance call failed, using fallback guidance: %s", exc)
            return GuidanceDegraded(
                guidance=call_failure_guidance(),
                reason=str(exc) or exc.__class__.__name__,
                failure="call",
            )

        try:
            guidance = parse_guidance(response_text)
        except GuidanceParseError as exc:
            logger.error(
                "Failed to parse Claude guidance: %s | snippet=%s",
                exc,
                response_text[:500],
            )
            return GuidanceDegraded(
                guidance=parse_failure_guidance(),
                reason=str(exc),
                failure="parse",
            )

        logger.info("Guidance generated with %s verse(s)", len(guidance.verses))
        return GuidanceSuccess(guidance=guidance)

    async def _invoke_model(self, prompt: str, started: float) -> str:
        """Send the prompt to Claude and return the raw text output."""
        response = await self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            messages=[{"role": "user", "content": prompt}],
        )

        if not response.content:
            raise ValueError(f"Model {self.model} returned empty content")

        self._log_usage(response, int((time.monotonic() - started) * 1000))

        block = response.content[0]
        return block.text if hasattr(block, "text") else str(block)

    def _log_usage(self, response: Any, duration_ms: int) -> None:
        usage = getattr(response, "usage", None)
        if usage is None:
            return
        input_tokens = getattr(usage, "input_tokens", 0) or 0
        output_tokens = getattr(usage, "output_tokens", 0) or 0
        log_llm_cost(
            model=self.model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            cost_usd=estimate_cost(self.model, input_tokens, output_tokens),
            duration_ms=duration_ms,
            endpoint="/guidance",
        )
