"""
Shared OpenAI client.

Centralizes OpenAI API access; currently used for Whisper transcription.
"""

import logging
from functools import lru_cache

from openai import AsyncOpenAI

from app.core.config import settings
from app.shared.errors import ConfigurationError

logger = logging.getLogger("Scrolls.OpenAI")


@lru_cache(maxsize=1)
def get_openai_client() -> AsyncOpenAI:
    """
    Get the singleton OpenAI async client.

    Raises:
        ConfigurationError: If OPENAI_API_KEY is not set
    """
    if not settings.OPENAI_API_KEY:
        raise ConfigurationError("OpenAI API key not configured", service="openai")

    client = AsyncOpenAI(
        api_key=settings.OPENAI_API_KEY,
        timeout=settings.TRANSCRIPTION_TIMEOUT_SECONDS,
    )
    logger.info("OpenAI client initialized")
    return client
