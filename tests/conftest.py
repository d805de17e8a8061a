"""
Pytest configuration and fixtures for the collection inspector tests.
"""

import os
import sys
import logging

import pytest

# Add src and repo root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from tests.utilities.service_mocks import (
    FakeSession,
    collection_body,
    qdrant_session,
)


@pytest.fixture(autouse=True)
def _reset_cli_log_handler():
    """Drop the CLI's stream handler so each test binds a fresh stream."""
    yield
    root_logger = logging.getLogger()
    for h in list(root_logger.handlers):
        if getattr(h, "_qdrant_collection_cli", False):
            root_logger.removeHandler(h)
    root_logger.setLevel(logging.WARNING)


@pytest.fixture
def config():
    """Default configuration (fixed local endpoint)."""
    from qdrant_collection_cli.config import Config
    return Config()


@pytest.fixture
def empty_session():
    """Server with no collections."""
    return qdrant_session({})


@pytest.fixture
def mixed_session():
    """Server with one healthy, one yellow and one missing collection."""
    session = qdrant_session({
        "docs": collection_body("green", vectors_count=10, points_count=10,
                                indexed_vectors_count=8, vectors={"size": 768, "distance": "Cosine"}),
        "images": collection_body("yellow", points_count=3),
    })
    # Listed but deleted before its detail call
    session.add("/collections", {"result": {"collections": [
        {"name": "docs"}, {"name": "images"}, {"name": "gone"},
    ]}})
    return session


@pytest.fixture
def patch_session(monkeypatch):
    """Route every requests.Session() created by the client to a fake."""
    import qdrant_collection_cli.client as client_mod

    def _patch(session: FakeSession) -> FakeSession:
        monkeypatch.setattr(client_mod.requests, "Session", lambda: session)
        return session

    return _patch
