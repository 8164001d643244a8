from __future__ import annotations

from typing import Any, Dict, List
import logging

from .base import APIError, BaseAPIClient


class PlaceholderClient(BaseAPIClient):
    """Client for JSONPlaceholder-style post feeds (``/posts``)."""

    BASE_URL = "https://jsonplaceholder.typicode.com"
    PLATFORM = "placeholder"
    _logger = logging.getLogger(__name__)

    # --------------------------------------------------
    # Posts
    # --------------------------------------------------

    def get_posts(self) -> List[dict]:
        data = self._request("GET", "/posts")
        if not isinstance(data, list):
            raise APIError(f"{self.PLATFORM} posts response not a list")

        posts = [self.normalize_post(p) for p in data if isinstance(p, dict)]
        self._logger.info(f"Fetched {len(posts)} posts from {self.PLATFORM}")
        return posts

    # --------------------------------------------------
    # Normalization
    # --------------------------------------------------

    def normalize_post(self, raw: dict) -> Dict[str, Any]:
        return {
            "id": raw.get("id"),
            "user_id": raw.get("userId", raw.get("user_id")),
            "title": raw.get("title") or "",
            "body": raw.get("body") or "",
        }
