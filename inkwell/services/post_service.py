"""In-memory post store and post helpers."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from inkwell.exceptions import DuplicatePostError, PostNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from inkwell.schemas.post import Post

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PER_MINUTE = 200


def calculate_read_time(content: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """Estimate reading time in whole minutes (at least 1)."""
    word_count = len(content.split())
    return max(1, math.ceil(word_count / words_per_minute))


class PostStore:
    """Ordered in-memory collection of posts.

    Keeps ids and slugs unique. Readers get tuple snapshots, so a listing
    rendered from ``all()`` is unaffected by later admin edits.
    """

    def __init__(self, posts: Iterable[Post] = ()) -> None:
        self._posts: list[Post] = []
        for post in posts:
            self.add(post, first=False)

    def __len__(self) -> int:
        return len(self._posts)

    def __iter__(self) -> Iterator[Post]:
        return iter(self.all())

    def __contains__(self, post_id: object) -> bool:
        return any(post.id == post_id for post in self._posts)

    def all(self) -> tuple[Post, ...]:
        """Snapshot of every post in store order."""
        return tuple(self._posts)

    def published(self) -> tuple[Post, ...]:
        """Snapshot of published posts in store order."""
        return tuple(post for post in self._posts if post.published)

    def get(self, post_id: str) -> Post | None:
        for post in self._posts:
            if post.id == post_id:
                return post
        return None

    def get_by_slug(self, slug: str) -> Post | None:
        for post in self._posts:
            if post.slug == slug:
                return post
        return None

    def slugs(self, *, exclude_id: str | None = None) -> set[str]:
        """Slugs in use, optionally ignoring one post (the one being edited)."""
        return {post.slug for post in self._posts if post.id != exclude_id}

    def categories(self) -> list[str]:
        """Distinct categories of published posts, in order of first appearance."""
        seen: dict[str, None] = {}
        for post in self._posts:
            if post.published and post.category:
                seen.setdefault(post.category, None)
        return list(seen)

    def add(self, post: Post, *, first: bool = True) -> None:
        """Insert a post at the front (newest first) or at the end."""
        if post.id in self:
            msg = f"A post with id '{post.id}' already exists"
            raise DuplicatePostError(msg)
        if post.slug in self.slugs():
            msg = f"A post with slug '{post.slug}' already exists"
            raise DuplicatePostError(msg)
        if first:
            self._posts.insert(0, post)
        else:
            self._posts.append(post)

    def replace(self, post: Post) -> Post:
        """Swap in a new version of an existing post, keeping its position.

        Returns the previous version.
        """
        for index, existing in enumerate(self._posts):
            if existing.id == post.id:
                break
        else:
            raise PostNotFoundError(post.id)

        if post.slug in self.slugs(exclude_id=post.id):
            msg = f"A post with slug '{post.slug}' already exists"
            raise DuplicatePostError(msg)
        self._posts[index] = post
        return existing

    def remove(self, post_id: str) -> Post:
        """Delete a post by id and return it."""
        for index, post in enumerate(self._posts):
            if post.id == post_id:
                del self._posts[index]
                return post
        raise PostNotFoundError(post_id)
