"""Post storage with ownership and moderation rules."""
from __future__ import annotations

import logging

from postboard.core.errors import UnauthorizedError
from postboard.models.events import PostCreated, PostLikedDisliked, PostUpdated
from postboard.models.post import Post
from postboard.repositories.post_repo import PostRepository
from postboard.services.events import EventBus

logger = logging.getLogger(__name__)

AUTHOR_ONLY_MESSAGE = "Only the author can update the post"


class PostStore:
    """Create, read, update, ban and score posts.

    Only a post's author may update it and only the administrator may ban it.
    Every public method holds the repository lock for its whole duration, so
    calls are atomic with respect to one another, including calls made through
    other stores sharing the same repository. Events are published under the
    same lock, after the mutation has been applied.

    Mutating methods return a snapshot taken right after their own change, so the result
    reflects exactly that call.

    Args:
        admin: Identity allowed to ban posts. Fixed for the store's lifetime.
        repo: Backing collection; a fresh one is created when omitted.
        events: Bus receiving notifications; a private one is created when omitted.
    """

    def __init__(
        self,
        admin: str,
        *,
        repo: PostRepository | None = None,
        events: EventBus | None = None,
    ) -> None:
        if not admin:
            raise ValueError("Administrator identity must be a non-empty string")
        self._admin = admin
        self._repo = repo if repo is not None else PostRepository()
        self.events = events if events is not None else EventBus()
        self._lock = self._repo.lock

    @property
    def admin(self) -> str:
        """Identity allowed to ban posts."""
        return self._admin

    def __len__(self) -> int:
        with self._lock:
            return len(self._repo)

    def create_post(self, caller: str, title: str, content: str) -> int:
        """Append a new post authored by ``caller`` and return its id."""
        return self.publish_post(caller, title, content).id

    def publish_post(self, caller: str, title: str, content: str) -> Post:
        """Same as :meth:`create_post` but return a snapshot of the new record."""
        with self._lock:
            post = self._repo.append(
                Post(
                    id=self._repo.next_id(),
                    title=title,
                    content=content,
                    author=caller,
                )
            )
            logger.debug("Post %d created by %s", post.id, caller)
            snapshot = post.snapshot()
            self.events.publish(PostCreated(id=post.id, author=caller))
            return snapshot

    def get_post(self, post_id: int) -> Post:
        """Return a snapshot of the post with ``post_id``.

        Raises:
            PostNotFoundError: If no post has that id.
        """
        with self._lock:
            return self._repo.get(post_id).snapshot()

    def get_posts(self) -> list[Post]:
        """Return snapshots of all posts in creation order, banned ones included."""
        with self._lock:
            return [post.snapshot() for post in self._repo.all()]

    def update_post(self, caller: str, post_id: int, title: str, content: str) -> Post:
        """Replace the title and content of a post.

        Raises:
            PostNotFoundError: If no post has that id.
            UnauthorizedError: If ``caller`` is not the post's author.
        """
        with self._lock:
            post = self._repo.get(post_id)
            if caller != post.author:
                logger.warning("Rejected update of post %d by non-author %s", post_id, caller)
                raise UnauthorizedError(caller, "update", AUTHOR_ONLY_MESSAGE)
            post.title = title
            post.content = content
            logger.debug("Post %d updated by %s", post_id, caller)
            snapshot = post.snapshot()
            self.events.publish(PostUpdated(id=post_id, author=post.author))
            return snapshot

    def ban_post(self, caller: str, post_id: int) -> Post:
        """Flag a post as banned. Banning twice is allowed and changes nothing.

        Raises:
            PostNotFoundError: If no post has that id.
            UnauthorizedError: If ``caller`` is not the administrator.
        """
        with self._lock:
            post = self._repo.get(post_id)
            if caller != self._admin:
                logger.warning("Rejected ban of post %d by %s", post_id, caller)
                raise UnauthorizedError(caller, "ban")
            post.is_banned = True
            logger.info("Post %d banned by %s", post_id, caller)
            return post.snapshot()

    def like_post(self, caller: str, post_id: int) -> Post:
        """Add one like to a post. Repeated likes by the same caller all count."""
        return self._vote(caller, post_id, is_like=True)

    def dislike_post(self, caller: str, post_id: int) -> Post:
        """Add one dislike to a post. Repeated dislikes by the same caller all count."""
        return self._vote(caller, post_id, is_like=False)

    def _vote(self, caller: str, post_id: int, *, is_like: bool) -> Post:
        with self._lock:
            post = self._repo.get(post_id)
            if is_like:
                post.likes += 1
            else:
                post.dislikes += 1
            logger.debug(
                "Post %d %s by %s (likes=%d, dislikes=%d)",
                post_id,
                "liked" if is_like else "disliked",
                caller,
                post.likes,
                post.dislikes,
            )
            snapshot = post.snapshot()
            self.events.publish(PostLikedDisliked(id=post_id, caller=caller, is_like=is_like))
            return snapshot
