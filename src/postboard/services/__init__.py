# src/postboard/services/__init__.py
"""Business logic services for the Postboard application."""

from .events import EventBus
from .post_service import PostStore

__all__ = [
    "EventBus",
    "PostStore",
]
