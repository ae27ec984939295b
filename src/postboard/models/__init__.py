# src/postboard/models/__init__.py
"""Domain records for the Postboard service."""

from .events import PostCreated, PostEvent, PostLikedDisliked, PostUpdated
from .post import Post

__all__ = [
    "Post",
    "PostEvent", "PostCreated", "PostUpdated", "PostLikedDisliked",
]
