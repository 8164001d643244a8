from postgallery.core.api.base import BaseAPIClient, APIError
from postgallery.core.api.placeholder import PlaceholderClient

__all__ = [
    "BaseAPIClient",
    "APIError",
    "PlaceholderClient",
]
