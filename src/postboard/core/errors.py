"""Error kinds raised by the post store."""
from __future__ import annotations


class PostStoreError(Exception):
    """Base exception for post store failures."""


class PostNotFoundError(PostStoreError, IndexError):
    """Raised when an operation references a post id that does not exist."""

    def __init__(self, post_id: int) -> None:
        self.post_id = post_id
        super().__init__(f"Post {post_id} does not exist")


class UnauthorizedError(PostStoreError, PermissionError):
    """Raised when the caller is not allowed to perform an action.

    Attributes:
        caller: Identity that was rejected.
        action: Name of the refused action (``"update"`` or ``"ban"``).
    """

    def __init__(self, caller: str, action: str, message: str | None = None) -> None:
        self.caller = caller
        self.action = action
        super().__init__(message or f"Unauthorized account: {caller}")
