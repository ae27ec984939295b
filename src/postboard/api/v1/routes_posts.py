"""Post endpoints for Postboard API v1.

Reads are public. Mutations need a bearer token whose subject is the caller
identity; ownership and moderation rules are enforced by the store. Mutation
responses carry the record as it stood right after that call.
"""
from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from postboard.api.v1.dependencies import CallerDep, StoreDep
from postboard.core.errors import PostNotFoundError, UnauthorizedError
from postboard.models.post import Post
from postboard.schemas.post import PostCreate, PostResponse, PostUpdate

router = APIRouter(tags=["posts"])


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")


def _forbidden(exc: UnauthorizedError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))


def to_post_response(post: Post) -> PostResponse:
    """Convert a stored post to its API schema."""
    return PostResponse.model_validate(post)


@router.get("", response_model=list[PostResponse], summary="List all posts")
def list_posts(store: StoreDep) -> list[PostResponse]:
    """Return every post in creation order, banned posts included."""
    return [to_post_response(post) for post in store.get_posts()]


@router.get("/{post_id}", response_model=PostResponse, summary="Fetch a post")
def read_post(post_id: int, store: StoreDep) -> PostResponse:
    """Return a single post; anyone may read it, banned or not."""
    try:
        return to_post_response(store.get_post(post_id))
    except PostNotFoundError as exc:
        raise _not_found() from exc


@router.post(
    path="",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new post",
    response_description="The created post with its assigned id.",
)
def create_post_endpoint(payload: PostCreate, caller: CallerDep, store: StoreDep) -> PostResponse:
    """Create a post authored by the caller.

    Args:
        payload: Title and markdown content.
        caller: Identity taken from the bearer token.
        store: Post store injected by FastAPI.

    Returns:
        The created post, including its id.
    """
    return to_post_response(store.publish_post(caller, payload.title, payload.content))


@router.put("/{post_id}", response_model=PostResponse, summary="Update a post")
def update_post_endpoint(
    post_id: int,
    payload: PostUpdate,
    caller: CallerDep,
    store: StoreDep,
) -> PostResponse:
    """Replace the title and content of a post owned by the caller."""
    try:
        return to_post_response(
            store.update_post(caller, post_id, payload.title, payload.content)
        )
    except PostNotFoundError as exc:
        raise _not_found() from exc
    except UnauthorizedError as exc:
        raise _forbidden(exc) from exc


@router.post("/{post_id}/ban", response_model=PostResponse, summary="Ban a post")
def ban_post_endpoint(post_id: int, caller: CallerDep, store: StoreDep) -> PostResponse:
    """Flag a post as banned. Only the administrator may call this."""
    try:
        return to_post_response(store.ban_post(caller, post_id))
    except PostNotFoundError as exc:
        raise _not_found() from exc
    except UnauthorizedError as exc:
        raise _forbidden(exc) from exc


@router.post("/{post_id}/like", response_model=PostResponse, summary="Like a post")
def like_post_endpoint(post_id: int, caller: CallerDep, store: StoreDep) -> PostResponse:
    """Add one like from the caller; repeated likes all count."""
    try:
        return to_post_response(store.like_post(caller, post_id))
    except PostNotFoundError as exc:
        raise _not_found() from exc


@router.post("/{post_id}/dislike", response_model=PostResponse, summary="Dislike a post")
def dislike_post_endpoint(post_id: int, caller: CallerDep, store: StoreDep) -> PostResponse:
    """Add one dislike from the caller; repeated dislikes all count."""
    try:
        return to_post_response(store.dislike_post(caller, post_id))
    except PostNotFoundError as exc:
        raise _not_found() from exc
