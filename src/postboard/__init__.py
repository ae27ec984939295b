"""Postboard: a small post store with author-only edits and admin moderation."""

__version__ = "0.1.0"
