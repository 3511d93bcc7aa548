"""Request-scoped dependencies: services, database, current user and state."""

import datetime as dt
import logging
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import Depends, Query
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.api.models import CurrentUser
from app.core.config import settings
from app.features.database.client import DatabaseClient, get_database_client
from app.features.guidance.service import GuidanceService
from app.features.journaling.state import AppState
from app.features.transcription.service import TranscriptionService
from app.shared.errors import AuthenticationError, InvalidRequestError

logger = logging.getLogger("Scrolls.API.Dependencies")

_bearer = HTTPBearer(auto_error=False)


@lru_cache(maxsize=1)
def _guidance_service() -> GuidanceService:
    return GuidanceService()


@lru_cache(maxsize=1)
def _transcription_service() -> TranscriptionService:
    return TranscriptionService()


def get_guidance_service() -> Optional[GuidanceService]:
    """Singleton guidance service, or None when no Claude key is configured."""
    if not settings.ANTHROPIC_API_KEY:
        return None
    return _guidance_service()


def get_transcription_service() -> Optional[TranscriptionService]:
    """Singleton transcription service, or None when no OpenAI key is configured."""
    if not settings.OPENAI_API_KEY:
        return None
    return _transcription_service()


def get_database() -> DatabaseClient:
    return get_database_client()


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    db: DatabaseClient = Depends(get_database),
) -> CurrentUser:
    """Resolve the Supabase user behind the request's bearer token."""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")

    try:
        response = db.client.auth.get_user(credentials.credentials)
    except Exception as exc:
        logger.info("Rejected access token: %s", exc)
        raise AuthenticationError("Invalid or expired access token") from exc

    user = getattr(response, "user", None)
    if user is None:
        raise AuthenticationError("Invalid or expired access token")
    return CurrentUser.from_supabase(user)


def today_in(tz_name: Optional[str]) -> dt.date:
    """The current calendar date in ``tz_name`` (default zone if None)."""
    name = tz_name or settings.DEFAULT_TIMEZONE
    try:
        zone = ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidRequestError(f"Unknown timezone: {name}", {"field": "tz"}) from exc
    return dt.datetime.now(zone).date()


def get_app_state(
    tz: Optional[str] = Query(default=None, description="IANA timezone used for 'today'"),
    user: CurrentUser = Depends(get_current_user),
    db: DatabaseClient = Depends(get_database),
) -> AppState:
    """Build the per-user state container for this request."""
    today_in(tz)  # fail fast on an unknown zone
    return AppState(db, user.id, today=lambda: today_in(tz))
