"""Shared API dependencies for caller identity and store access."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from postboard.core.security import InvalidTokenError, decode_caller
from postboard.core.settings import Settings
from postboard.services.post_service import PostStore

# Missing credentials are reported as 401 below rather than by the scheme itself.
bearer_scheme = HTTPBearer(auto_error=False)


def get_store(request: Request) -> PostStore:
    """Return the store owned by the running application."""
    store: PostStore = request.app.state.store
    return store


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    app_settings: Settings = request.app.state.settings
    return app_settings


def get_caller(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    app_settings: Annotated[Settings, Depends(get_settings)],
) -> str:
    """Resolve the caller identity from the bearer token.

    Raises:
        HTTPException: If the token is missing or invalid.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return decode_caller(credentials.credentials, app_settings)
    except InvalidTokenError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(err),
            headers={"WWW-Authenticate": "Bearer"},
        ) from err


# Type aliases used by route signatures
StoreDep = Annotated[PostStore, Depends(get_store)]
CallerDep = Annotated[str, Depends(get_caller)]
