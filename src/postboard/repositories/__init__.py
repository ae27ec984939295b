"""Storage helpers for the Postboard service."""

from .post_repo import PostRepository

__all__ = ["PostRepository"]
