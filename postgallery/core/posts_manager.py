from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional
import logging

from postgallery.core.api import PlaceholderClient
from postgallery.core.api.contracts import PostsAPIClient
from postgallery.core.dto.post import PostDTO


logger = logging.getLogger(__name__)


def group_posts_by_user(posts: Iterable[PostDTO]) -> Dict[int, List[PostDTO]]:
    """
    Partition posts by author id.

    Keys are inserted in ascending order so iterating the result walks the
    groups the way the list view renders them. Posts inside a group keep
    their arrival order. Always derived fresh, nothing is cached.
    """
    buckets: Dict[int, List[PostDTO]] = {}
    for post in posts:
        buckets.setdefault(post.user_id, []).append(post)
    return {user_id: buckets[user_id] for user_id in sorted(buckets)}


def _as_id(value: Any) -> int:
    """Convert a payload id to int; bools and fractional floats are invalid."""
    if isinstance(value, bool):
        raise ValueError(f"boolean id: {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"fractional id: {value!r}")
    return int(value)


class PostsManager:
    """
    Authoritative domain manager for post retrieval.

    Guarantees:
    - Normalizes source quirks
    - Returns DTOs only
    - Zero UI logic
    """

    def __init__(self, client: Optional[PostsAPIClient] = None):
        self._client = client or PlaceholderClient()

    # ---------------------------------------------------------
    # Posts
    # ---------------------------------------------------------

    def get_posts(self) -> List[PostDTO]:
        data = self._client.get_posts()
        return self._posts_from_raw(data)

    def get_grouped_posts(self) -> Dict[int, List[PostDTO]]:
        return group_posts_by_user(self.get_posts())

    # ---------------------------------------------------------
    # Internal
    # ---------------------------------------------------------

    @staticmethod
    def _post_from_raw(raw: Any) -> Optional[PostDTO]:
        if not isinstance(raw, dict):
            return None
        try:
            post_id = _as_id(raw.get("id"))
            user_id = _as_id(raw.get("user_id"))
        except (TypeError, ValueError):
            logger.debug(f"Skipping post with invalid id/user_id: {str(raw)[:200]}")
            return None

        return PostDTO(
            id=post_id,
            user_id=user_id,
            title=str(raw.get("title") or ""),
            body=str(raw.get("body") or ""),
        )

    def _posts_from_raw(self, items: Any) -> List[PostDTO]:
        posts: List[PostDTO] = []
        if not isinstance(items, list):
            return posts

        for raw in items:
            post = self._post_from_raw(raw)
            if post is not None:
                posts.append(post)

        return posts
