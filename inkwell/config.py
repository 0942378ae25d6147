"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ADMIN_CATEGORIES = ["Web Development", "Programming", "Design", "React", "TypeScript"]


class Settings(BaseSettings):
    """Inkwell application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    debug: bool = False

    # Content
    content_dir: Path | None = None
    site_title: str = "ModernBlog"
    site_description: str = (
        "A beautiful, fast, and modern blog platform. Share your thoughts with the world."
    )
    timezone: str = "UTC"

    # Listing
    posts_per_page: int = Field(default=3, ge=1)
    search_debounce_ms: int = Field(default=300, ge=0)

    # Posts
    words_per_minute: int = Field(default=200, ge=1)

    # Home page
    home_featured_limit: int = Field(default=3, ge=0)
    home_recent_limit: int = Field(default=3, ge=0)

    # Admin
    admin_categories: list[str] = Field(default_factory=lambda: list(DEFAULT_ADMIN_CATEGORIES))
