"""Content directory scanner (read-only)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import yaml

from inkwell.exceptions import DuplicatePostError
from inkwell.filesystem.frontmatter import parse_post
from inkwell.filesystem.toml_manager import SiteConfig, parse_site_config
from inkwell.services.post_service import DEFAULT_WORDS_PER_MINUTE, PostStore

if TYPE_CHECKING:
    from pathlib import Path

    from inkwell.config import Settings
    from inkwell.schemas.post import Post

logger = logging.getLogger(__name__)


def discover_posts(content_dir: Path) -> list[Path]:
    """Recursively discover all markdown files under content/posts/."""
    posts_dir = content_dir / "posts"
    if not posts_dir.exists():
        return []
    return sorted(posts_dir.rglob("*.md"))


@dataclass
class ContentManager:
    """Loads posts and site configuration from a content directory."""

    content_dir: Path
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE
    _site_config: SiteConfig | None = field(default=None, repr=False)

    @property
    def site_config(self) -> SiteConfig:
        """Get site configuration, loading if needed."""
        if self._site_config is None:
            self._site_config = parse_site_config(self.content_dir)
        return self._site_config

    def scan_posts(self) -> list[Post]:
        """Parse every post file; unparsable files are logged and skipped."""
        posts: list[Post] = []
        timezone = self.site_config.timezone or "UTC"
        for post_path in discover_posts(self.content_dir):
            rel_path = post_path.relative_to(self.content_dir).as_posix()
            try:
                raw_content = post_path.read_text(encoding="utf-8")
                post = parse_post(
                    raw_content,
                    file_path=rel_path,
                    default_tz=timezone,
                    default_author=self.site_config.default_author,
                    words_per_minute=self.words_per_minute,
                )
            except (OSError, ValueError, yaml.YAMLError):
                logger.exception("Skipping post %s due to parse error", rel_path)
                continue
            posts.append(post)
        return posts

    def load_store(self) -> PostStore:
        """Build a store from the scanned posts, newest publication first.

        Posts whose id or slug repeats an earlier one are skipped.
        """
        posts = sorted(self.scan_posts(), key=lambda post: post.published_at, reverse=True)
        store = PostStore()
        for post in posts:
            try:
                store.add(post, first=False)
            except DuplicatePostError as exc:
                logger.warning("Skipping post %s: %s", post.slug, exc)
        logger.info("Loaded %d posts from %s", len(store), self.content_dir)
        return store

    def apply_to(self, settings: Settings) -> Settings:
        """Return settings with site values from index.toml layered on top."""
        cfg = self.site_config
        updates: dict[str, object] = {}
        if cfg.title is not None:
            updates["site_title"] = cfg.title
        if cfg.description is not None:
            updates["site_description"] = cfg.description
        if cfg.timezone is not None:
            updates["timezone"] = cfg.timezone
        if cfg.categories:
            updates["admin_categories"] = cfg.categories
        return settings.model_copy(update=updates)
