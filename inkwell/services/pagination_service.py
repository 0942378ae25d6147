"""Fixed-size page slicing for filtered post lists."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from inkwell.schemas.listing import PageWindow
from inkwell.schemas.post import PaginationInfo

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inkwell.schemas.post import Post

logger = logging.getLogger(__name__)


def total_pages(count: int, per_page: int) -> int:
    """Number of pages needed for ``count`` items; never less than 1."""
    if per_page < 1:
        msg = f"per_page must be at least 1, got {per_page}"
        raise ValueError(msg)
    return max(1, math.ceil(count / per_page))


def clamp_page(page: int, pages: int) -> int:
    """Clamp a requested 1-based page number into ``[1, pages]``."""
    return min(max(page, 1), max(pages, 1))


def paginate(posts: Sequence[Post], page: int, per_page: int) -> PageWindow:
    """Slice ``posts`` into the window for ``page``.

    Out-of-range pages are clamped rather than rejected.
    """
    pages = total_pages(len(posts), per_page)
    current = clamp_page(page, pages)
    if current != page:
        logger.debug("Clamped page %d to %d (total_pages=%d)", page, current, pages)

    start = (current - 1) * per_page
    return PageWindow(
        posts=list(posts[start : start + per_page]),
        page=current,
        total_pages=pages,
        total=len(posts),
        per_page=per_page,
    )


def pagination_info(window: PageWindow) -> PaginationInfo:
    """Summarize a page window for the pagination control."""
    return PaginationInfo(
        current_page=window.page,
        total_pages=window.total_pages,
        total_posts=window.total,
        posts_per_page=window.per_page,
    )
