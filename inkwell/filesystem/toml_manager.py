"""TOML reader for the site configuration file (index.toml)."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


@dataclass
class SiteConfig:
    """Parsed site configuration from index.toml."""

    title: str | None = None
    description: str | None = None
    default_author: str = ""
    timezone: str | None = None
    categories: list[str] = field(default_factory=list)


def parse_site_config(content_dir: Path) -> SiteConfig:
    """Parse index.toml from the content directory.

    Unset values stay ``None``/empty so application settings apply.
    """
    index_path = content_dir / "index.toml"
    if not index_path.exists():
        return SiteConfig()

    data = tomllib.loads(index_path.read_text(encoding="utf-8"))
    site_data = data.get("site", {})

    raw_categories = site_data.get("categories", [])
    if not isinstance(raw_categories, list):
        msg = f"site.categories must be a list, got {type(raw_categories).__name__}"
        raise ValueError(msg)

    return SiteConfig(
        title=site_data.get("title"),
        description=site_data.get("description"),
        default_author=site_data.get("default_author", ""),
        timezone=site_data.get("timezone"),
        categories=[str(c) for c in raw_categories],
    )
