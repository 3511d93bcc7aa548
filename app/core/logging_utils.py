"""
Logging utilities for user-written text and AI API usage.

Includes:
- Redaction/truncation of journal text and secrets for safe logging
- Structured usage events for Claude calls
"""
import json
import logging
import re
from typing import Any, Dict, Optional

# Keys whose values never reach the logs
SENSITIVE_KEYS = (
    "api_key", "apikey", "token", "password", "secret", "authorization",
    "email", "audio",
)

# USD per million tokens (input, output)
MODEL_PRICING = {
    "claude-3-5-haiku-20241022": (0.80, 4.00),
    "claude-haiku-4-5-20251001": (1.00, 5.00),
    "claude-sonnet-4-5-20250929": (3.00, 15.00),
}

_CONTROL_CHARS = re.compile(r"[\x00-\x1F\x7F]")
REDACTED = "[redacted]"


def _is_sensitive(key: Any) -> bool:
    name = str(key).lower()
    return any(marker in name for marker in SENSITIVE_KEYS)


def sanitize_for_logging(data: Any, max_len: int = 100) -> Any:
    """
    Make a value safe to attach to a log record.

    Secret-looking keys (and base64 audio) are redacted. Journal content and
    situations are personal, so every string is clipped to ``max_len``.
    """
    if isinstance(data, dict):
        return {
            key: REDACTED if _is_sensitive(key) else sanitize_for_logging(value, max_len)
            for key, value in data.items()
        }
    if isinstance(data, (list, tuple)):
        return [sanitize_for_logging(item, max_len) for item in data]
    if data is None or isinstance(data, (bool, int, float)):
        return data

    text = _CONTROL_CHARS.sub("", str(data))
    return text if len(text) <= max_len else f"{text[:max_len]}... ({len(text)} chars)"


def estimate_cost(model: str, input_tokens: int, output_tokens: int) -> float:
    """Estimate the USD cost of a Claude call; unknown models cost 0."""
    input_price, output_price = MODEL_PRICING.get(model, (0.0, 0.0))
    return (input_tokens * input_price + output_tokens * output_price) / 1_000_000


# =============================================================================
# USAGE EVENTS
# =============================================================================

_cost_logger = logging.getLogger("Scrolls.Cost")


def log_llm_cost(
    model: str,
    input_tokens: int,
    output_tokens: int,
    cost_usd: float,
    duration_ms: Optional[int] = None,
    endpoint: str = "unknown",
) -> None:
    """
    Emit one ``LLM_COST {...}`` line per model call.

    The payload is JSON so usage per endpoint can be summed from the logs
    without a metrics backend.
    """
    event: Dict[str, Any] = {
        "event": "llm_cost",
        "model": model,
        "endpoint": endpoint,
        "tokens": {"input": input_tokens, "output": output_tokens},
        "cost_usd": round(cost_usd, 6),
    }
    if duration_ms is not None:
        event["duration_ms"] = duration_ms

    _cost_logger.info("LLM_COST %s", json.dumps(event, sort_keys=True))
