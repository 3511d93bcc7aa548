"""Community feed models."""

import datetime as dt
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from app.shared.models import CamelModel


class ShareType(str, Enum):
    POST = "post"
    PRAYER = "prayer"
    TESTIMONY = "testimony"
    PRAISE = "praise"


class CommunityPostCreate(CamelModel):
    """What a user shares from their journal or prayer list."""

    mood: Optional[str] = None
    gratitude: List[str] = Field(default_factory=list)
    content: Optional[str] = None
    prayer: Optional[str] = None
    share_type: ShareType = ShareType.POST
    is_anonymous: bool = False


class CommunityPost(CamelModel):
    id: str
    user_name: Optional[str] = None
    mood: Optional[str] = None
    gratitude: List[str] = Field(default_factory=list)
    content: Optional[str] = None
    prayer: Optional[str] = None
    share_type: ShareType = ShareType.POST
    is_anonymous: bool = False
    created_at: Optional[dt.datetime] = None

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "CommunityPost":
        return cls(
            id=str(row["id"]),
            user_name=row.get("user_name"),
            mood=row.get("mood"),
            gratitude=list(row.get("gratitude") or []),
            content=row.get("content"),
            prayer=row.get("prayer"),
            share_type=row.get("share_type") or ShareType.POST,
            is_anonymous=bool(row.get("is_anonymous")),
            created_at=row.get("created_at"),
        )
