"""
Shared Test Fixtures for Post Gallery

Fixtures include a headless QApplication, post factories, a mocked
API client and a gallery configuration pointing at the bundled assets.
"""

import os

# Must be set before any Qt import creates the platform integration
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from unittest.mock import MagicMock
from typing import List

from PyQt6.QtWidgets import QApplication

from postgallery.core.config import GalleryConfig
from postgallery.core.dto.post import PostDTO


# =============================================================================
# Qt Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def qapp():
    """Single QApplication for the whole test session (offscreen platform)."""
    app = QApplication.instance() or QApplication([])
    yield app


# =============================================================================
# Data Factories
# =============================================================================

@pytest.fixture
def make_post():
    """
    Factory for PostDTO objects.

    Usage:
        def test_something(make_post):
            post = make_post(id=3, user_id=2)
    """
    def _make(id: int = 1, user_id: int = 1, title: str = None, body: str = None) -> PostDTO:
        return PostDTO(
            id=id,
            user_id=user_id,
            title=title if title is not None else f"Post {id}",
            body=body if body is not None else f"Body of post {id}",
        )
    return _make


@pytest.fixture
def sample_posts(make_post) -> List[PostDTO]:
    """Interleaved posts from three authors, in arrival order."""
    return [
        make_post(id=1, user_id=2),
        make_post(id=2, user_id=1),
        make_post(id=3, user_id=3),
        make_post(id=4, user_id=1),
        make_post(id=5, user_id=2),
        make_post(id=6, user_id=10),
    ]


@pytest.fixture
def raw_posts() -> List[dict]:
    """Payload shaped like the JSONPlaceholder /posts endpoint."""
    return [
        {"userId": 1, "id": 1, "title": "sunt aut facere", "body": "quia et suscipit"},
        {"userId": 1, "id": 2, "title": "qui est esse", "body": "est rerum tempore"},
        {"userId": 2, "id": 11, "title": "et ea vero quia", "body": "delectus reiciendis"},
    ]


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def mock_client(raw_posts):
    """API client returning normalized posts, as PlaceholderClient would."""
    client = MagicMock()
    client.PLATFORM = "placeholder"
    client.get_posts.return_value = [
        {"id": p["id"], "user_id": p["userId"], "title": p["title"], "body": p["body"]}
        for p in raw_posts
    ]
    return client


@pytest.fixture
def gallery_config() -> GalleryConfig:
    return GalleryConfig()
