"""Application entry point: settings, logging and wiring of the blog views."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from inkwell.config import Settings
from inkwell.filesystem.content_manager import ContentManager
from inkwell.services.admin_service import AdminService
from inkwell.services.debounce_service import SearchBox
from inkwell.services.home_service import build_home
from inkwell.services.listing_service import ListingView
from inkwell.services.post_service import PostStore
from inkwell.services.sample_posts import sample_posts

if TYPE_CHECKING:
    from inkwell.schemas.listing import HomePage
    from inkwell.services.debounce_service import Scheduler

logger = logging.getLogger(__name__)


def configure_logging(debug: bool, *, quiet: bool = False) -> None:
    """Configure application logging. ``quiet`` limits output to warnings."""
    level = logging.DEBUG if debug else logging.WARNING if quiet else logging.INFO
    fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    logging.basicConfig(
        level=level,
        format=fmt,
        stream=sys.stdout,
        force=True,
    )


def load_content(settings: Settings) -> tuple[Settings, PostStore]:
    """Seed the post store from the content directory, or from the sample posts."""
    if settings.content_dir is None:
        logger.info("No content directory configured; using sample posts")
        return settings, PostStore(sample_posts())

    if not settings.content_dir.is_dir():
        msg = f"Content directory does not exist: {settings.content_dir}"
        raise NotADirectoryError(msg)

    content_manager = ContentManager(
        content_dir=settings.content_dir,
        words_per_minute=settings.words_per_minute,
    )
    settings = content_manager.apply_to(settings)
    return settings, content_manager.load_store()


@dataclass
class BlogApp:
    """The blog's views wired to one shared in-memory store."""

    settings: Settings
    store: PostStore
    listing: ListingView
    admin: AdminService

    def home(self) -> HomePage:
        return build_home(self.store, self.settings)

    def search_box(self, scheduler: Scheduler | None = None) -> SearchBox:
        """A search box whose debounced queries drive the listing view."""
        return SearchBox(
            self.listing.set_query,
            delay_ms=self.settings.search_debounce_ms,
            scheduler=scheduler,
        )


def create_app(settings: Settings | None = None) -> BlogApp:
    """Create the blog application."""
    settings, store = load_content(settings or Settings())
    logger.info(
        "Starting %s with %d posts (debug=%s)", settings.site_title, len(store), settings.debug
    )
    return BlogApp(
        settings=settings,
        store=store,
        listing=ListingView(store, per_page=settings.posts_per_page),
        admin=AdminService(store, settings=settings),
    )
