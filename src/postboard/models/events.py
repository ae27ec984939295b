"""Notifications emitted after successful post mutations."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, ClassVar


@dataclass(frozen=True)
class PostEvent:
    """Base class for post notifications."""

    name: ClassVar[str] = "PostEvent"

    def as_dict(self) -> dict[str, Any]:
        """Return the event payload together with its name."""
        return {"event": self.name, **asdict(self)}


@dataclass(frozen=True)
class PostCreated(PostEvent):
    name: ClassVar[str] = "PostCreated"

    id: int
    author: str


@dataclass(frozen=True)
class PostUpdated(PostEvent):
    name: ClassVar[str] = "PostUpdated"

    id: int
    author: str


@dataclass(frozen=True)
class PostLikedDisliked(PostEvent):
    """A like (``is_like=True``) or dislike cast by ``caller``."""

    name: ClassVar[str] = "PostLikedDisliked"

    id: int
    caller: str
    is_like: bool
