# src/postboard/api/v1/__init__.py
"""Version 1 API endpoints."""

from .router import api_v1

__all__ = ["api_v1"]
