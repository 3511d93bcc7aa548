"""Supabase client factory."""

import logging
from functools import lru_cache

from supabase import Client, create_client

from app.core.config import settings
from app.shared.errors import ConfigurationError

logger = logging.getLogger("Scrolls.Database")


@lru_cache(maxsize=1)
def get_supabase() -> Client:
    """
    Get the singleton Supabase client.

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_KEY is not set
    """
    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        raise ConfigurationError("Supabase credentials not configured", service="supabase")

    client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    logger.info("Supabase client initialized")
    return client
