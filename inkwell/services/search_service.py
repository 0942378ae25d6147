"""Client-side post search: substring filtering and match highlighting."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from inkwell.schemas.listing import HighlightSegment

if TYPE_CHECKING:
    from collections.abc import Iterable

    from inkwell.schemas.post import Post

logger = logging.getLogger(__name__)


def normalize_query(query: str | None) -> str:
    """Trim a raw search query. ``None`` and whitespace-only become ``""``."""
    if query is None:
        return ""
    return query.strip()


def query_pattern(query: str) -> re.Pattern[str]:
    """Literal, case-insensitive pattern for a normalized query.

    Filtering and highlighting both match through this pattern, so a post is
    kept exactly when its text would show a highlighted match.
    """
    return re.compile(f"({re.escape(query)})", flags=re.IGNORECASE)


def matches_query(post: Post, query: str) -> bool:
    """Check whether a post contains ``query`` (case-insensitive substring).

    Title, excerpt, content and every tag are searched; one hit is enough.
    ``query`` must already be normalized and non-empty.
    """
    pattern = query_pattern(query)
    fields = (post.title, post.excerpt, post.content, *post.tags)
    return any(pattern.search(value) for value in fields)


def filter_posts(posts: Iterable[Post], query: str | None, category: str | None) -> list[Post]:
    """Filter posts by free-text query and category.

    - ``category`` (when not ``None``) must equal the post category exactly
    - the trimmed ``query`` (when non-empty) must match per ``matches_query``
    - both conditions must hold; input order is preserved

    With no active filter a new list with every post is returned.
    """
    needle = normalize_query(query)
    result = [
        post
        for post in posts
        if (category is None or post.category == category)
        and (not needle or matches_query(post, needle))
    ]
    logger.debug("Filtered posts (query=%r, category=%r): %d match", needle, category, len(result))
    return result


def highlight(text: str, query: str | None) -> list[HighlightSegment]:
    """Split ``text`` into segments, flagging case-insensitive matches of ``query``.

    The query is matched literally (regex metacharacters are escaped).
    Joining the segment texts always gives back ``text`` unchanged.
    """
    needle = normalize_query(query)
    if not needle or not text:
        return [HighlightSegment(text, False)]

    # With one capturing group, re.split puts matches at odd indices
    parts = query_pattern(needle).split(text)
    return [
        HighlightSegment(part, index % 2 == 1) for index, part in enumerate(parts) if part
    ]
