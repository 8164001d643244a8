"""Grouped post list."""

from .post_list import GroupedPostListView

__all__ = ['GroupedPostListView']
