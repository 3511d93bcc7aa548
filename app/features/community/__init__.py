"""
Community feature module.

Users can share a journal entry, prayer request, testimony or praise to a
public feed, optionally anonymously. Prayer shares also land on the prayer wall.
"""

from app.features.community.models import CommunityPost, CommunityPostCreate, ShareType

__all__ = [
    "CommunityPost",
    "CommunityPostCreate",
    "ShareType",
]
