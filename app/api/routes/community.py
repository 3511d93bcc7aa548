"""
Community API Routes

The shared feed. Anonymous posts are stored without the author's name;
prayer posts are mirrored onto the prayer wall.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_current_user, get_database
from app.api.models import CurrentUser
from app.core.config import settings
from app.features.community.models import CommunityPost, CommunityPostCreate
from app.features.database.client import DatabaseClient

router = APIRouter(prefix="/community", tags=["Community"])
logger = logging.getLogger("Scrolls.API.Community")


@router.get("/posts", response_model=List[CommunityPost])
async def list_posts(
    limit: Optional[int] = Query(default=None, ge=1, le=200),
    user: CurrentUser = Depends(get_current_user),
    db: DatabaseClient = Depends(get_database),
):
    """Most recent community posts, newest first."""
    return db.community.list_recent(limit or settings.COMMUNITY_FEED_LIMIT)


@router.post("/posts", response_model=CommunityPost, status_code=201)
async def share_post(
    post: CommunityPostCreate,
    user: CurrentUser = Depends(get_current_user),
    db: DatabaseClient = Depends(get_database),
):
    return db.community.share(user.id, user.display_name, post)
