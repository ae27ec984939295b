"""Versioned API router wiring for v1.

This module composes the version 1 API surface by including the sub-routers
that define their own endpoints. It contains no business logic and no
endpoint definitions.
"""
from __future__ import annotations

from typing import Final

from fastapi import APIRouter

from . import routes_posts

api_v1: Final[APIRouter] = APIRouter()
api_v1.include_router(routes_posts.router, prefix="/posts")

__all__ = ["api_v1"]
