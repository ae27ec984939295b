# src/postboard/schemas/post.py
"""Post-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Markdown content, stored verbatim")


class PostUpdate(BaseModel):
    """Schema for replacing a post's title and content."""

    title: str = Field(..., description="New title")
    content: str = Field(..., description="New markdown content")


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    title: str
    content: str
    author: str
    is_banned: bool
    likes: int
    dislikes: int

    model_config = ConfigDict(from_attributes=True)
