from __future__ import annotations

from typing import Any, Dict, List, Protocol


class PostsAPIClient(Protocol):
    PLATFORM: str

    # Full posts feed (non-paginated)
    def get_posts(self) -> List[Dict[str, Any]]:
        ...
