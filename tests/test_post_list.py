"""
Tests for GroupedPostListView
"""

import pytest
from unittest.mock import MagicMock, patch

from postgallery.ui.common.view_models import PostsViewModel
from postgallery.ui.posts.post_list import GroupedPostListView


@pytest.fixture
def view_model(qapp):
    return PostsViewModel(MagicMock())


@pytest.fixture
def post_list(view_model):
    view = GroupedPostListView(view_model)
    yield view
    view.close()
    view.deleteLater()


class TestGroupedPostListView:
    """Tests for section rendering and selection."""

    def test_empty_list_renders_no_sections(self, post_list):
        assert post_list.topLevelItemCount() == 0

    def test_sections_ascending_by_author(self, post_list, view_model, sample_posts):
        view_model.set_posts(sample_posts)

        assert post_list.section_titles() == ["User 1", "User 2", "User 3", "User 10"]

    def test_entries_in_arrival_order(self, post_list, view_model, sample_posts):
        view_model.set_posts(sample_posts)

        sections = post_list.sections()
        assert sections["User 1"] == ["Post 2", "Post 4"]
        assert sections["User 2"] == ["Post 1", "Post 5"]
        assert sum(len(titles) for titles in sections.values()) == len(sample_posts)

    def test_rebuilds_on_every_change(self, post_list, view_model, sample_posts, make_post):
        view_model.set_posts(sample_posts)
        view_model.set_posts([make_post(id=1, user_id=7, title="only")])

        assert post_list.sections() == {"User 7": ["only"]}

        view_model.set_posts([])
        assert post_list.topLevelItemCount() == 0

    def test_clicking_entry_emits_post(self, post_list, view_model, sample_posts):
        view_model.set_posts(sample_posts)
        selected = []
        post_list.post_selected.connect(selected.append)

        entry = post_list.topLevelItem(0).child(1)
        post_list.itemClicked.emit(entry, 0)

        assert selected == [sample_posts[3]]

    def test_clicking_section_header_emits_nothing(self, post_list, view_model, sample_posts):
        view_model.set_posts(sample_posts)
        selected = []
        post_list.post_selected.connect(selected.append)

        post_list.itemClicked.emit(post_list.topLevelItem(0), 0)

        assert selected == []

    def test_first_show_requests_load(self, post_list, view_model):
        with patch.object(view_model, "ensure_loaded") as mock_ensure:
            post_list.show()

        mock_ensure.assert_called()
