"""
Guidance API Routes

POST /guidance turns a described situation into verses, a prayer, an action
step and encouragement. Once the request is well-formed it always answers 200:
upstream or parse failures yield ``success: false`` with fallback guidance.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Request

from app.api.dependencies import get_guidance_service
from app.features.guidance.models import GuidanceDegraded, GuidanceRequest, GuidanceResponse
from app.features.guidance.service import GuidanceService
from app.shared.errors import ErrorResponse, configuration_error, get_correlation_id, validation_error

router = APIRouter(tags=["Guidance"])
logger = logging.getLogger("Scrolls.API.Guidance")

DEGRADED_MESSAGES = {
    "call": "Guidance service unavailable, using fallback guidance",
    "parse": "Guidance could not be read, using fallback guidance",
}


@router.post(
    "/guidance",
    response_model=GuidanceResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_guidance(
    payload: GuidanceRequest,
    request: Request,
    service: Optional[GuidanceService] = Depends(get_guidance_service),
):
    """Generate biblical guidance for the user's situation."""
    correlation_id = get_correlation_id(request)

    situation = (payload.situation or "").strip()
    if not situation:
        return validation_error(
            "Situation is required",
            details={"field": "situation"},
            correlation_id=correlation_id,
        )

    if service is None:
        logger.error("Missing ANTHROPIC_API_KEY environment variable")
        return configuration_error(
            "Claude API key not configured",
            service="anthropic",
            correlation_id=correlation_id,
        )

    result = await service.generate(payload.model_copy(update={"situation": situation}))
    timestamp = datetime.now(timezone.utc).isoformat()

    if isinstance(result, GuidanceDegraded):
        logger.warning("Returning fallback guidance (%s failure): %s", result.failure, result.reason)
        return GuidanceResponse(
            success=False,
            guidance=result.guidance,
            error=DEGRADED_MESSAGES[result.failure],
            timestamp=timestamp,
        )

    return GuidanceResponse(success=True, guidance=result.guidance, timestamp=timestamp)
