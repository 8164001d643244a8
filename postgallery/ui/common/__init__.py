"""Common utilities and shared components."""

from .view_models import PostsViewModel

__all__ = [
    'PostsViewModel',
]
