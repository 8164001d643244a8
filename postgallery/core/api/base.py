"""
Core API contract for post sources.

This module is intentionally UI-agnostic and DTO-agnostic.
Source quirks are normalized inside concrete clients.

Contract goals:
- Stable, minimal surface area
- Returns plain dict/list payloads (DTO creation belongs to managers)
- Every transport or parsing failure surfaces as APIError
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import requests
import logging


class APIError(RuntimeError):
    """Raised for source HTTP / parsing errors."""


logger = logging.getLogger(__name__)


API_HEADERS = {
    "User-Agent": "PostGallery/1.0 (+https://github.com/postgallery/postgallery)",
    "Accept": "application/json",
    "Accept-Language": "en-US,en;q=0.9",
}


class BaseAPIClient(ABC):
    """
    Authoritative Core API contract.

    UI must NOT call clients directly; managers should.
    """

    BASE_URL: str
    PLATFORM: str

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        base_url: Optional[str] = None,
        timeout: int = 30,
    ):
        self.session = session or requests.Session()
        self._configure_session()
        if base_url:
            self.BASE_URL = base_url.rstrip("/")
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Session / Request helpers
    # ------------------------------------------------------------------

    def _configure_session(self) -> None:
        self.session.headers.update(API_HEADERS)

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        url = f"{self.BASE_URL}{path}"

        if params:
            logger.debug(f"Request params: {params}")
        logger.info(f"API Request: {method} {url}")

        req_headers = dict(self.session.headers)
        if headers:
            req_headers.update(headers)

        try:
            resp = self.session.request(
                method=method,
                url=url,
                params=params,
                headers=req_headers,
                timeout=self.timeout,
            )
            if not resp.ok:
                raise APIError(f"{self.PLATFORM} API error {resp.status_code}: {resp.text}")

            data = resp.json()
        except Exception as e:
            if isinstance(e, APIError):
                raise
            raise APIError(f"{self.PLATFORM} request failed: {e}") from e

        return data

    # ------------------------------------------------------------------
    # Normalization helpers (source-specific)
    # ------------------------------------------------------------------

    @abstractmethod
    def normalize_post(self, raw: dict) -> dict:
        """
        Convert raw post object -> normalized dict.
        Expected normalized keys:
          - id, user_id, title, body
        """

    # ------------------------------------------------------------------
    # Posts
    # ------------------------------------------------------------------

    @abstractmethod
    def get_posts(self) -> List[dict]:
        """
        Returns ALL posts (non-paginated).
        Returned list items are normalized dicts (not DTOs).
        """
