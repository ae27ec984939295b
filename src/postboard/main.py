# src/postboard/main.py
"""Main entry point for the Postboard application."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from postboard.api.v1 import api_v1
from postboard.core.logging import configure_logging
from postboard.core.settings import Settings, settings
from postboard.models.events import PostEvent
from postboard.services.post_service import PostStore

logger = logging.getLogger(__name__)


def _log_event(event: PostEvent) -> None:
    logger.info("event %s", event.as_dict())


def create_app(
    app_settings: Settings | None = None,
    store: PostStore | None = None,
) -> FastAPI:
    """Build the FastAPI application around a single post store.

    Args:
        app_settings: Configuration to use; the module-level settings by default.
        store: Store to serve; one administered by ``admin_identity`` is built
            when omitted.
    """
    cfg = app_settings or settings
    configure_logging(cfg.log_level)

    app = FastAPI(
        title=cfg.app_name,
        description="Post store with author-only edits and administrator moderation",
        version=cfg.app_version,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=cfg.cors_allow_credentials,
        allow_methods=cfg.cors_allow_methods,
        allow_headers=cfg.cors_allow_headers,
    )
    app.add_middleware(GZipMiddleware)

    app.state.settings = cfg
    app.state.store = store if store is not None else PostStore(cfg.admin_identity)
    app.state.store.events.subscribe(_log_event)
    logger.info("Serving %s with administrator %s", cfg.app_name, app.state.store.admin)

    app.include_router(api_v1, prefix="/api/v1")

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint to verify the service is running."""
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict[str, str]:
        """Root endpoint with basic information about the API."""
        return {
            "name": cfg.app_name,
            "version": cfg.app_version,
            "admin": app.state.store.admin,
            "docs": "/docs",
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("postboard.main:app", host="0.0.0.0", port=8000, reload=settings.debug)
