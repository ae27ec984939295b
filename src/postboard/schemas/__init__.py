"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .post import PostCreate, PostResponse, PostUpdate

__all__ = [
    "PostCreate", "PostResponse", "PostUpdate",
]
