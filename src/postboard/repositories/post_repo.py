"""Data access helpers for working with posts."""
from __future__ import annotations

import threading

from postboard.core.errors import PostNotFoundError
from postboard.models.post import Post

__all__ = ["PostRepository"]


class PostRepository:
    """Append-only, index-addressed collection of posts.

    Records are never removed or reordered, so a post's id stays a valid index
    for the lifetime of the repository. Methods do not lock on their own:
    callers hold ``lock`` around every read-modify-write, and every store built
    on the same repository shares it.
    """

    def __init__(self) -> None:
        """Initialize an empty collection."""
        self._posts: list[Post] = []
        self.lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._posts)

    def next_id(self) -> int:
        """Return the id the next appended post must carry."""
        return len(self._posts)

    def append(self, post: Post) -> Post:
        """Store ``post`` at the end of the collection.

        Raises:
            ValueError: If ``post.id`` does not match its insertion index.
        """
        if post.id != len(self._posts):
            raise ValueError(f"Post id {post.id} does not match next index {len(self._posts)}")
        self._posts.append(post)
        return post

    def get(self, post_id: int) -> Post:
        """Return the live record for ``post_id``."""
        # Negative ids would otherwise index from the end of the list.
        if post_id < 0 or post_id >= len(self._posts):
            raise PostNotFoundError(post_id)
        return self._posts[post_id]

    def all(self) -> list[Post]:
        """Return the live records in creation order."""
        return list(self._posts)
