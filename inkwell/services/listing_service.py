"""Blog listing: view state transitions, card building and page rendering."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from inkwell.schemas.listing import ListingPage, PostCard, ViewState
from inkwell.services.datetime_service import format_display_date
from inkwell.services.pagination_service import clamp_page, paginate, pagination_info
from inkwell.services.search_service import filter_posts, highlight, normalize_query

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inkwell.schemas.listing import PageWindow
    from inkwell.schemas.post import PaginationInfo, Post
    from inkwell.services.post_service import PostStore

logger = logging.getLogger(__name__)

DEFAULT_POSTS_PER_PAGE = 3


def with_query(state: ViewState, query: str) -> ViewState:
    """New state for a search query; a changed query goes back to page 1."""
    if query == state.query:
        return state
    return state.model_copy(update={"query": query, "page": 1})


def with_category(state: ViewState, category: str | None) -> ViewState:
    """New state for a category choice (``None`` = all); a change goes back to page 1."""
    if category == state.category:
        return state
    return state.model_copy(update={"category": category, "page": 1})


def with_page(state: ViewState, page: int, total_pages: int) -> ViewState:
    """New state for a requested page, clamped into ``[1, total_pages]``."""
    page = clamp_page(page, total_pages)
    if page == state.page:
        return state
    return state.model_copy(update={"page": page})


def cleared(state: ViewState) -> ViewState:
    """New state with query and category reset."""
    return with_category(with_query(state, ""), None)


def result_summary(count: int, query: str, category: str | None) -> str | None:
    """Result count message, or ``None`` when no filter is active."""
    query = normalize_query(query)
    if not query and category is None:
        return None
    summary = f"Found {count} post{'' if count == 1 else 's'}"
    if query:
        summary += f' for "{query}"'
    if category is not None:
        summary += f' in "{category}"'
    return summary


def build_card(post: Post, query: str | None = None) -> PostCard:
    """Build a post card, highlighting ``query`` in the title and excerpt."""
    return PostCard(
        id=post.id,
        slug=post.slug,
        href=f"/blog/{post.slug}",
        title=highlight(post.title, query),
        excerpt=highlight(post.excerpt, query),
        category=post.category,
        author=post.author,
        published_label=format_display_date(post.published_at),
        read_time_label=f"{post.read_time} min read",
        featured=post.featured,
    )


def run_pipeline(posts: Sequence[Post], state: ViewState, per_page: int) -> PageWindow:
    """Filter then paginate ``posts`` for a view state."""
    filtered = filter_posts(posts, state.query, state.category)
    return paginate(filtered, state.page, per_page)


class ListingView:
    """State holder for the blog listing page.

    Reads a fresh snapshot of the store's published posts on every render,
    so admin edits show up without any invalidation step.
    """

    def __init__(self, store: PostStore, *, per_page: int = DEFAULT_POSTS_PER_PAGE) -> None:
        if per_page < 1:
            msg = f"per_page must be at least 1, got {per_page}"
            raise ValueError(msg)
        self.store = store
        self.per_page = per_page
        self.state = ViewState()

    @property
    def categories(self) -> list[str]:
        return self.store.categories()

    def _window(self) -> PageWindow:
        return run_pipeline(self.store.published(), self.state, self.per_page)

    @property
    def pagination(self) -> PaginationInfo:
        return pagination_info(self._window())

    def set_query(self, query: str) -> None:
        """Apply a (debounced) search query."""
        self.state = with_query(self.state, query)

    def select_category(self, category: str | None) -> None:
        self.state = with_category(self.state, category)

    def go_to_page(self, page: int) -> int:
        """Move to ``page`` (clamped) and return the page actually shown."""
        window = self._window()
        self.state = with_page(self.state, page, window.total_pages)
        return self.state.page

    def clear_filters(self) -> None:
        self.state = cleared(self.state)

    def render(self) -> ListingPage:
        window = self._window()
        if window.page != self.state.page:
            # The store shrank under us; show the last page that exists
            self.state = self.state.model_copy(update={"page": window.page})
        return ListingPage(
            state=self.state,
            categories=self.categories,
            cards=[build_card(post, self.state.query) for post in window.posts],
            pagination=pagination_info(window),
            summary=result_summary(window.total, self.state.query, self.state.category),
        )
