"""Admin panel business logic: create, edit and delete posts in the store."""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

from inkwell.config import Settings
from inkwell.exceptions import DuplicatePostError, PostNotFoundError, PostValidationError
from inkwell.schemas.post import Post, PostFormData
from inkwell.services.datetime_service import today as current_date
from inkwell.services.post_service import calculate_read_time
from inkwell.services.slug_service import resolve_slug

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import date

    from inkwell.services.post_service import PostStore

logger = logging.getLogger(__name__)


def form_from_post(post: Post) -> PostFormData:
    """Load an existing post into the admin form."""
    return PostFormData(
        title=post.title,
        slug=post.slug,
        excerpt=post.excerpt,
        content=post.content,
        author=post.author,
        category=post.category,
        tags=list(post.tags),
        featured=post.featured,
        published=post.published,
    )


def _validate(form: PostFormData) -> None:
    missing = form.missing_required_fields()
    if missing:
        raise PostValidationError(missing)


class AdminService:
    """Create/update/delete posts held in a ``PostStore``."""

    def __init__(
        self,
        store: PostStore,
        *,
        settings: Settings | None = None,
        today: Callable[[], date] | None = None,
    ) -> None:
        self.store = store
        self.settings = settings or Settings()
        self._today = today or (lambda: current_date(self.settings.timezone))

    @property
    def categories(self) -> list[str]:
        return list(self.settings.admin_categories)

    def _slug_for(self, form: PostFormData, *, post_id: str | None = None) -> str:
        taken = self.store.slugs(exclude_id=post_id)
        slug, explicit = resolve_slug(form.title, form.slug, taken)
        if explicit and slug in taken:
            msg = f"Slug '{slug}' is already used by another post"
            raise DuplicatePostError(msg)
        return slug

    def create_post(self, form: PostFormData) -> Post:
        """Validate the form and add a new post at the top of the store."""
        _validate(form)
        day = self._today()
        post = Post(
            id=uuid.uuid4().hex,
            title=form.title,
            slug=self._slug_for(form),
            excerpt=form.excerpt,
            content=form.content,
            author=form.author,
            category=form.category,
            tags=tuple(form.tags),
            published_at=day,
            updated_at=day,
            read_time=calculate_read_time(form.content, self.settings.words_per_minute),
            featured=form.featured,
            published=form.published,
        )
        self.store.add(post, first=True)
        logger.info("Created post %s (%s)", post.id, post.slug)
        return post

    def update_post(self, post_id: str, form: PostFormData) -> Post:
        """Validate the form and replace an existing post, keeping id and publish date."""
        existing = self.store.get(post_id)
        if existing is None:
            raise PostNotFoundError(post_id)
        _validate(form)

        post = Post.model_validate(
            existing.model_dump()
            | {
                "title": form.title,
                "slug": self._slug_for(form, post_id=post_id),
                "excerpt": form.excerpt,
                "content": form.content,
                "author": form.author,
                "category": form.category,
                "tags": tuple(form.tags),
                "updated_at": max(self._today(), existing.published_at),
                "read_time": calculate_read_time(form.content, self.settings.words_per_minute),
                "featured": form.featured,
                "published": form.published,
            }
        )
        self.store.replace(post)
        logger.info("Updated post %s (%s)", post.id, post.slug)
        return post

    def delete_post(self, post_id: str) -> Post:
        post = self.store.remove(post_id)
        logger.info("Deleted post %s (%s)", post.id, post.slug)
        return post
