"""Guidance request/response models and the tagged generation result."""

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field

from app.shared.models import CamelModel


class Verse(CamelModel):
    reference: str = Field(min_length=1)
    text: str = Field(min_length=1)
    application: str = ""


class Guidance(CamelModel):
    """Structured advisory content for a described situation."""

    verses: List[Verse] = Field(min_length=1)
    prayer: str = Field(min_length=1)
    action_step: str = Field(min_length=1)
    encouragement: str = ""


class GuidanceRequest(CamelModel):
    """
    Situation is optional at the schema level so that a missing value is
    reported as a 400 by the route rather than a generic validation error.
    """

    situation: Optional[str] = None
    mood: Optional[str] = None
    recent_journal_content: Optional[str] = None


class GuidanceSuccess(BaseModel):
    """Guidance parsed from the model's response."""

    kind: Literal["success"] = "success"
    guidance: Guidance


class GuidanceDegraded(BaseModel):
    """A fixed fallback payload, with the reason the real one is missing."""

    kind: Literal["degraded"] = "degraded"
    guidance: Guidance
    reason: str
    failure: Literal["parse", "call"]


GuidanceResult = Union[GuidanceSuccess, GuidanceDegraded]


class GuidanceResponse(CamelModel):
    success: bool
    guidance: Guidance
    error: Optional[str] = None
    timestamp: str
