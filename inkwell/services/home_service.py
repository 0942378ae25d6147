"""Home page: site header plus featured and recent posts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inkwell.schemas.listing import HomePage
from inkwell.services.listing_service import build_card

if TYPE_CHECKING:
    from inkwell.config import Settings
    from inkwell.schemas.post import Post
    from inkwell.services.post_service import PostStore


def featured_posts(store: PostStore, limit: int) -> list[Post]:
    """Published featured posts in store order."""
    return [post for post in store.published() if post.featured][:limit]


def recent_posts(store: PostStore, limit: int) -> list[Post]:
    """Published posts, newest publication date first (ties keep store order)."""
    posts = sorted(store.published(), key=lambda post: post.published_at, reverse=True)
    return posts[:limit]


def build_home(store: PostStore, settings: Settings) -> HomePage:
    return HomePage(
        site_title=settings.site_title,
        site_description=settings.site_description,
        featured=[build_card(post) for post in featured_posts(store, settings.home_featured_limit)],
        recent=[build_card(post) for post in recent_posts(store, settings.home_recent_limit)],
    )
