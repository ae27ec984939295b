# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

os.environ.setdefault("SECRET_KEY", "postboard-test-secret")

from postboard.core.security import create_access_token
from postboard.main import create_app
from postboard.models.events import PostEvent
from postboard.services.post_service import PostStore

# The identity that sets up the store becomes its administrator.
OWNER = "0xowner"
ADDR1 = "0xaddr1"
ADDR2 = "0xaddr2"

MARKDOWN_TITLE = "# SpaceX: Revolutionizing Space Exploration"
MARKDOWN_POST = """
SpaceX has been at the forefront of revolutionizing the space industry.



### Reusable Rockets: A Game-Changer

Rockets such as the **Falcon 9** can be recovered and refueled for subsequent launches.

### Mars Colonization: The Ultimate Goal

- Starship
- Dragon
"""


def _bearer(identity: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(identity)}"}


@pytest.fixture()
def store() -> PostStore:
    """Return an empty store administered by OWNER."""
    return PostStore(OWNER)


@pytest.fixture()
def recorded_events(store: PostStore) -> Iterator[list[PostEvent]]:
    """Collect every event the store publishes during the test."""
    events: list[PostEvent] = []
    unsubscribe = store.events.subscribe(events.append)
    try:
        yield events
    finally:
        unsubscribe()


@pytest.fixture()
def app(store: PostStore) -> FastAPI:
    return create_app(store=store)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def owner_headers() -> dict[str, str]:
    """Authorization headers for the administrator."""
    return _bearer(OWNER)


@pytest.fixture()
def addr1_headers() -> dict[str, str]:
    return _bearer(ADDR1)


@pytest.fixture()
def addr2_headers() -> dict[str, str]:
    return _bearer(ADDR2)
