"""YAML front matter parser for blog post files."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime

import frontmatter

from inkwell.schemas.post import Post, parse_tags
from inkwell.services.datetime_service import parse_date, today
from inkwell.services.post_service import DEFAULT_WORDS_PER_MINUTE, calculate_read_time
from inkwell.services.slug_service import generate_post_slug

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "Uncategorized"

RECOGNIZED_FIELDS: frozenset[str] = frozenset(
    {
        "id",
        "title",
        "slug",
        "excerpt",
        "author",
        "category",
        "tags",
        "published_at",
        "updated_at",
        "featured",
        "published",
    }
)


def extract_title(content: str, file_path: str = "") -> str:
    """Extract title from first # heading in markdown body.

    Falls back to deriving title from filename.
    """
    for line in content.strip().split("\n"):
        stripped = line.strip()
        if stripped.startswith("# "):
            return stripped.removeprefix("# ").strip()
    if file_path:
        name = file_path.rsplit("/", maxsplit=1)[-1]
        name = re.sub(r"^\d{4}-\d{2}-\d{2}-?", "", name)  # strip date prefix
        name = name.removesuffix(".md")
        return name.replace("-", " ").replace("_", " ").title()
    return "Untitled"


def parse_tag_field(raw_tags: object | None) -> tuple[str, ...]:
    """Parse tags from front matter: a YAML list or a comma-separated string."""
    if raw_tags is None:
        return ()
    if isinstance(raw_tags, str):
        return tuple(parse_tags(raw_tags))
    if isinstance(raw_tags, list):
        return tuple(str(tag).strip() for tag in raw_tags if str(tag).strip())
    return ()


def generate_excerpt(content: str, max_length: int = 200) -> str:
    """Build a plain excerpt from the body: headings, code blocks and images skipped."""
    lines: list[str] = []
    in_code_block = False
    for line in content.split("\n"):
        stripped = line.strip()
        if stripped.startswith("```"):
            in_code_block = not in_code_block
            continue
        if in_code_block or stripped.startswith(("#", "![")):
            continue
        if stripped:
            lines.append(stripped)

    text = " ".join(lines)
    if len(text) > max_length:
        text = text[:max_length].rsplit(" ", maxsplit=1)[0] + "..."
    return text


def _date_field(raw: object, default_tz: str) -> date | None:
    if raw is None:
        return None
    if isinstance(raw, (date, datetime)):
        return parse_date(raw, default_tz=default_tz)
    return parse_date(str(raw), default_tz=default_tz)


def _text_field(raw: object, default: str = "") -> str:
    if raw is None:
        return default
    text = str(raw).strip()
    return text or default


def parse_post(
    raw_content: str,
    file_path: str = "",
    *,
    default_tz: str = "UTC",
    default_author: str = "",
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> Post:
    """Parse a markdown file with YAML front matter into a Post.

    Raises ``ValueError`` (including ``pydantic.ValidationError``) when the
    front matter cannot produce a valid post, e.g. ``updated_at`` before
    ``published_at``.
    """
    post = frontmatter.loads(raw_content)
    unknown = sorted(set(post.metadata) - RECOGNIZED_FIELDS)
    if unknown:
        logger.debug("Ignoring unknown front matter fields in %s: %s", file_path, unknown)

    title = _text_field(post.get("title")) or extract_title(post.content, file_path)
    slug = _text_field(post.get("slug")) or generate_post_slug(title)

    raw_published = _date_field(post.get("published_at"), default_tz)
    raw_updated = _date_field(post.get("updated_at"), default_tz)
    # A lone updated_at also serves as the publication date
    published_at = raw_published or raw_updated or today(default_tz)
    updated_at = raw_updated or published_at

    return Post(
        id=_text_field(post.get("id"), slug),
        title=title,
        slug=slug,
        excerpt=_text_field(post.get("excerpt")) or generate_excerpt(post.content),
        content=post.content,
        author=_text_field(post.get("author"), default_author),
        category=_text_field(post.get("category"), DEFAULT_CATEGORY),
        tags=parse_tag_field(post.get("tags")),
        published_at=published_at,
        updated_at=updated_at,
        read_time=calculate_read_time(post.content, words_per_minute),
        featured=bool(post.get("featured", False)),
        published=bool(post.get("published", True)),
    )
