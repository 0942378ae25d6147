"""Tests for loading posts from a content directory."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from inkwell.config import Settings
from inkwell.filesystem.content_manager import ContentManager, discover_posts

if TYPE_CHECKING:
    from pathlib import Path


def _write_post(posts_dir: Path, name: str, front_matter: str, body: str = "# Title\n") -> None:
    path = posts_dir / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\n{front_matter}---\n{body}", encoding="utf-8")


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    posts_dir = tmp_path / "posts"
    posts_dir.mkdir()
    (tmp_path / "index.toml").write_text(
        '[site]\ntitle = "Notes"\ndefault_author = "Ada"\ncategories = ["Design", "React"]\n'
    )
    _write_post(posts_dir, "older.md", "title: Older\npublished_at: 2024-01-01\ncategory: Design\n")
    _write_post(posts_dir, "nested/newer.md", "title: Newer\npublished_at: 2024-02-01\n")
    return tmp_path


class TestDiscoverPosts:
    def test_finds_nested_markdown(self, content_dir: Path) -> None:
        found = [p.relative_to(content_dir).as_posix() for p in discover_posts(content_dir)]
        assert found == ["posts/nested/newer.md", "posts/older.md"]

    def test_ignores_other_files(self, content_dir: Path) -> None:
        (content_dir / "posts" / "notes.txt").write_text("not a post")
        assert len(discover_posts(content_dir)) == 2

    def test_missing_posts_dir(self, tmp_path: Path) -> None:
        assert discover_posts(tmp_path) == []


class TestScanPosts:
    def test_parses_posts_with_site_defaults(self, content_dir: Path) -> None:
        posts = ContentManager(content_dir=content_dir).scan_posts()
        assert {post.title for post in posts} == {"Older", "Newer"}
        assert all(post.author == "Ada" for post in posts)

    def test_invalid_yaml_is_skipped(
        self, content_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        (content_dir / "posts" / "bad.md").write_text("---\n: invalid yaml [\n---\n# Bad")
        with caplog.at_level(logging.ERROR):
            posts = ContentManager(content_dir=content_dir).scan_posts()
        assert len(posts) == 2
        assert "posts/bad.md" in caplog.text

    def test_invalid_dates_are_skipped(self, content_dir: Path) -> None:
        _write_post(
            content_dir / "posts",
            "backwards.md",
            "title: Backwards\npublished_at: 2024-05-01\nupdated_at: 2024-04-01\n",
        )
        titles = {post.title for post in ContentManager(content_dir=content_dir).scan_posts()}
        assert "Backwards" not in titles

    def test_undecodable_file_is_skipped(self, content_dir: Path) -> None:
        (content_dir / "posts" / "binary.md").write_bytes(b"\xff\xfe\x00bad")
        assert len(ContentManager(content_dir=content_dir).scan_posts()) == 2

    def test_programming_error_propagates(self, content_dir: Path) -> None:
        target = "inkwell.filesystem.content_manager.parse_post"
        with patch(target, side_effect=AttributeError("bug")), pytest.raises(
            AttributeError, match="bug"
        ):
            ContentManager(content_dir=content_dir).scan_posts()

    def test_words_per_minute_used_for_read_time(self, content_dir: Path) -> None:
        _write_post(
            content_dir / "posts",
            "long.md",
            "title: Long\npublished_at: 2024-03-01\n",
            body="word " * 300,
        )
        posts = ContentManager(content_dir=content_dir, words_per_minute=100).scan_posts()
        assert next(post for post in posts if post.title == "Long").read_time == 3


class TestLoadStore:
    def test_newest_first(self, content_dir: Path) -> None:
        store = ContentManager(content_dir=content_dir).load_store()
        assert [post.title for post in store.all()] == ["Newer", "Older"]
        assert store.get_by_slug("older").published_at == date(2024, 1, 1)

    def test_duplicate_slug_skipped(
        self, content_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        _write_post(
            content_dir / "posts",
            "copy.md",
            "title: Copy\nslug: older\nid: copy\npublished_at: 2023-01-01\n",
        )
        with caplog.at_level(logging.WARNING):
            store = ContentManager(content_dir=content_dir).load_store()
        assert len(store) == 2
        assert store.get_by_slug("older").title == "Older"
        assert "Skipping post older" in caplog.text


class TestApplyTo:
    def test_site_values_override_settings(self, content_dir: Path) -> None:
        settings = Settings(_env_file=None, site_title="Default", posts_per_page=7)
        updated = ContentManager(content_dir=content_dir).apply_to(settings)
        assert updated.site_title == "Notes"
        assert updated.admin_categories == ["Design", "React"]
        assert updated.posts_per_page == 7
        assert settings.site_title == "Default"

    def test_missing_index_keeps_settings(self, tmp_path: Path) -> None:
        settings = Settings(_env_file=None)
        updated = ContentManager(content_dir=tmp_path).apply_to(settings)
        assert updated.site_title == settings.site_title
        assert updated.admin_categories == settings.admin_categories
