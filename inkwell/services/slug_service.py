"""Slug generation for post URLs (``/blog/<slug>``)."""

from __future__ import annotations

import re
import unicodedata
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Collection

MAX_SLUG_LENGTH = 80
UNTITLED_SLUG = "untitled"

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def generate_post_slug(title: str, *, max_length: int = MAX_SLUG_LENGTH) -> str:
    """Generate a URL-safe slug from a post title.

    - Fold unicode to ASCII (NFKD, non-ASCII dropped)
    - Lowercase
    - Collapse every run of non-alphanumeric chars into one hyphen
    - Strip leading/trailing hyphens
    - Truncate to ``max_length`` on a word boundary where possible
    - Return "untitled" when nothing is left
    """
    ascii_title = unicodedata.normalize("NFKD", title).encode("ascii", "ignore").decode("ascii")
    slug = _NON_ALNUM_RUN.sub("-", ascii_title.lower()).strip("-")

    if not slug:
        return UNTITLED_SLUG

    if len(slug) > max_length:
        cut = slug[:max_length]
        # Back off to the last word boundary; a single long word is hard-cut
        boundary = cut.rfind("-")
        if boundary > 0:
            cut = cut[:boundary]
        slug = cut.rstrip("-")

    return slug


def unique_slug(slug: str, taken: Collection[str]) -> str:
    """Return ``slug``, or ``slug-2``, ``slug-3``, ... if it is already taken."""
    if slug not in taken:
        return slug

    counter = 2
    while f"{slug}-{counter}" in taken:
        counter += 1
    return f"{slug}-{counter}"


def resolve_slug(title: str, override: str, taken: Collection[str]) -> tuple[str, bool]:
    """Pick the slug for a post being saved.

    Returns ``(slug, explicit)``. An explicit ``override`` is normalized but
    never renamed, so the caller can reject a clash; a slug derived from the
    title is made unique against ``taken``.
    """
    override = override.strip()
    if override:
        return generate_post_slug(override), True
    return unique_slug(generate_post_slug(title), taken), False
