"""
Tests for PostsManager and post grouping

Covers:
- Grouping by author id (partition, key order, arrival order)
- Payload normalization into PostDTO
- Error propagation from the API client
"""

import dataclasses
import pytest
from collections import Counter

from postgallery.core.api import APIError
from postgallery.core.dto.post import PostDTO
from postgallery.core.posts_manager import PostsManager, group_posts_by_user


# =============================================================================
# Grouping Tests
# =============================================================================

class TestGroupPostsByUser:
    """Tests for group_posts_by_user."""

    def test_union_of_groups_equals_input(self, sample_posts):
        """Every post lands in exactly one group."""
        grouped = group_posts_by_user(sample_posts)

        flattened = [post for group in grouped.values() for post in group]
        assert Counter(flattened) == Counter(sample_posts)
        assert len(flattened) == len(sample_posts)

    def test_each_group_holds_only_its_author(self, sample_posts):
        grouped = group_posts_by_user(sample_posts)

        for user_id, posts in grouped.items():
            assert all(post.user_id == user_id for post in posts)

    def test_keys_strictly_ascending(self, sample_posts):
        """Numeric order, so 10 sorts after 3."""
        keys = list(group_posts_by_user(sample_posts).keys())

        assert keys == [1, 2, 3, 10]
        assert all(a < b for a, b in zip(keys, keys[1:]))

    def test_groups_keep_arrival_order(self, sample_posts):
        grouped = group_posts_by_user(sample_posts)

        assert [p.id for p in grouped[1]] == [2, 4]
        assert [p.id for p in grouped[2]] == [1, 5]

    def test_empty_list_has_no_groups(self):
        assert group_posts_by_user([]) == {}

    def test_duplicate_posts_are_kept(self, make_post):
        """Identical records are both kept; grouping never dedupes."""
        post = make_post(id=7, user_id=4)

        grouped = group_posts_by_user([post, post])

        assert grouped == {4: [post, post]}

    def test_accepts_any_iterable(self, sample_posts):
        grouped = group_posts_by_user(iter(sample_posts))

        assert sum(len(g) for g in grouped.values()) == len(sample_posts)


# =============================================================================
# PostsManager Tests
# =============================================================================

class TestPostsManager:
    """Tests for PostsManager.get_posts / get_grouped_posts."""

    def test_get_posts_returns_dtos(self, mock_client):
        manager = PostsManager(client=mock_client)

        posts = manager.get_posts()

        assert posts == [
            PostDTO(id=1, user_id=1, title="sunt aut facere", body="quia et suscipit"),
            PostDTO(id=2, user_id=1, title="qui est esse", body="est rerum tempore"),
            PostDTO(id=11, user_id=2, title="et ea vero quia", body="delectus reiciendis"),
        ]
        mock_client.get_posts.assert_called_once_with()

    def test_get_grouped_posts(self, mock_client):
        manager = PostsManager(client=mock_client)

        grouped = manager.get_grouped_posts()

        assert list(grouped.keys()) == [1, 2]
        assert [p.id for p in grouped[1]] == [1, 2]

    def test_skips_invalid_items(self, mock_client):
        mock_client.get_posts.return_value = [
            {"id": 1, "user_id": 1, "title": "ok", "body": ""},
            {"id": None, "user_id": 1, "title": "no id"},
            {"id": 3, "user_id": "abc", "title": "bad user"},
            "not a dict",
            {"id": "4", "user_id": "2", "title": None, "body": None},
        ]
        manager = PostsManager(client=mock_client)

        posts = manager.get_posts()

        assert [p.id for p in posts] == [1, 4]
        assert posts[1] == PostDTO(id=4, user_id=2, title="", body="")

    def test_skips_bool_and_fractional_ids(self, mock_client):
        mock_client.get_posts.return_value = [
            {"id": True, "user_id": 1, "title": "bool id"},
            {"id": 1.7, "user_id": 1, "title": "fractional id"},
            {"id": 2, "user_id": False, "title": "bool user"},
            {"id": 3, "user_id": 2.5, "title": "fractional user"},
            {"id": 5.0, "user_id": 3, "title": "whole float"},
        ]
        manager = PostsManager(client=mock_client)

        posts = manager.get_posts()

        assert posts == [PostDTO(id=5, user_id=3, title="whole float", body="")]

    def test_non_list_payload_gives_no_posts(self, mock_client):
        mock_client.get_posts.return_value = {"unexpected": True}
        manager = PostsManager(client=mock_client)

        assert manager.get_posts() == []

    def test_client_error_propagates(self, mock_client):
        mock_client.get_posts.side_effect = APIError("placeholder request failed: boom")
        manager = PostsManager(client=mock_client)

        with pytest.raises(APIError):
            manager.get_posts()

    def test_post_dto_is_immutable(self, make_post):
        post = make_post()

        with pytest.raises(dataclasses.FrozenInstanceError):
            post.title = "changed"
