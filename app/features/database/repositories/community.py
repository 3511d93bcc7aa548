"""
Community Repository - community feed and prayer wall.

Handles:
- Sharing posts (anonymous posts carry no user name)
- Mirroring prayer shares onto the prayer wall
- Reading the recent feed
"""

import logging
from typing import List, Optional

from app.features.community.models import CommunityPost, CommunityPostCreate, ShareType

logger = logging.getLogger("Scrolls.Database.Community")

POSTS_TABLE = "community_posts"
PRAYER_WALL_TABLE = "prayer_wall"


class CommunityRepository:
    """Repository for community sharing."""

    def __init__(self, client):
        """Initialize with Supabase client."""
        self.client = client

    def share(self, user_id: str, user_name: Optional[str], post: CommunityPostCreate) -> CommunityPost:
        """Publish a post to the feed and return it as stored."""
        payload = {
            "user_id": user_id,
            "user_name": None if post.is_anonymous else user_name,
            "content": post.content,
            "mood": post.mood,
            "gratitude": post.gratitude,
            "prayer": post.prayer,
            "is_anonymous": post.is_anonymous,
            "share_type": post.share_type.value,
        }

        try:
            result = self.client.table(POSTS_TABLE).insert(payload).execute()
        except Exception as e:
            logger.error(f"Error sharing community post: {e}")
            raise

        created = CommunityPost.from_row(result.data[0])
        logger.info(f"Community post shared: {created.id} ({created.share_type.value})")

        if post.share_type == ShareType.PRAYER and post.prayer:
            self._mirror_to_prayer_wall(user_id, created.id, post)

        return created

    def _mirror_to_prayer_wall(self, user_id: str, post_id: str, post: CommunityPostCreate) -> None:
        """Copy a prayer share onto the prayer wall. The post stands even if this fails."""
        try:
            self.client.table(PRAYER_WALL_TABLE).insert({
                "post_id": post_id,
                "user_id": user_id,
                "prayer_request": post.prayer,
                "anonymous": post.is_anonymous,
            }).execute()
            logger.info(f"Prayer wall entry added for post {post_id}")
        except Exception as e:
            logger.error(f"Error adding prayer wall entry for post {post_id}: {e}")

    def list_recent(self, limit: int = 50) -> List[CommunityPost]:
        """Get the most recent community posts."""
        try:
            result = self.client.table(POSTS_TABLE).select("*").order(
                "created_at", desc=True
            ).limit(limit).execute()
            return [CommunityPost.from_row(row) for row in result.data or []]
        except Exception as e:
            logger.error(f"Error getting community feed: {e}")
            return []
