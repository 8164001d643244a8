from __future__ import annotations

import logging
from typing import Optional

import requests

from postgallery.core.api import PlaceholderClient
from postgallery.core.config import AppConfig, load_config
from postgallery.core.posts_manager import PostsManager

logger = logging.getLogger(__name__)


class CoreContext:
    """
    Shared Core dependencies (config + client + managers).

    Use a single instance for app lifetime for consistency and performance.
    """

    def __init__(
        self,
        *,
        config: Optional[AppConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or load_config()
        self.session = session or requests.Session()

        self._client = PlaceholderClient(
            session=self.session,
            base_url=self.config.api_base_url,
            timeout=self.config.request_timeout,
        )
        logger.info(f"API client created - base_url: {self._client.BASE_URL}")

        self.posts = PostsManager(client=self._client)

    @property
    def gallery(self):
        return self.config.gallery

    def close(self) -> None:
        try:
            self.session.close()
        except Exception as e:
            logger.debug(f"Error closing HTTP session: {e}")
        logger.info("Core context closed")
