"""
Guidance feature module.

Turns a described situation (plus optional mood and journal context) into
verses, a prayer, an action step and an encouragement, falling back to fixed
payloads when Claude fails or answers with something unparsable.
"""

from app.features.guidance.models import (
    Guidance,
    GuidanceDegraded,
    GuidanceRequest,
    GuidanceResponse,
    GuidanceResult,
    GuidanceSuccess,
    Verse,
)
from app.features.guidance.service import GuidanceService, parse_guidance

__all__ = [
    "Guidance",
    "GuidanceDegraded",
    "GuidanceRequest",
    "GuidanceResponse",
    "GuidanceResult",
    "GuidanceService",
    "GuidanceSuccess",
    "Verse",
    "parse_guidance",
]
