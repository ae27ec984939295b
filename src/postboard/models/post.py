"""In-memory post record."""
from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class Post:
    """Primary content entity produced by users.

    ``id`` is the record's position in creation order and never changes meaning.
    """

    id: int
    title: str
    # Stored verbatim; markdown is not rendered here.
    content: str
    author: str
    is_banned: bool = False
    likes: int = 0
    dislikes: int = 0

    def snapshot(self) -> Post:
        """Return a detached copy safe to hand out to callers."""
        return replace(self)
