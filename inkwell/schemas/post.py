"""Post-related schemas."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

REQUIRED_FORM_FIELDS = ("title", "content", "author")


def parse_tags(value: str) -> list[str]:
    """Split a comma-separated tag string, trimming entries and dropping empties."""
    return [tag.strip() for tag in value.split(",") if tag.strip()]


class Post(BaseModel):
    """A single blog article record.

    Records are immutable once stored; edits produce a new instance via
    ``model_copy(update=...)`` and replace the old one in the store.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    title: str
    slug: str = Field(min_length=1)
    excerpt: str = ""
    content: str = ""
    author: str = ""
    category: str = ""
    tags: tuple[str, ...] = ()
    published_at: date
    updated_at: date
    read_time: int = Field(ge=1, description="Estimated reading time in minutes")
    featured: bool = False
    published: bool = True

    @model_validator(mode="after")
    def check_dates(self) -> Post:
        if self.updated_at < self.published_at:
            msg = "updated_at must not be earlier than published_at"
            raise ValueError(msg)
        return self


class PostFormData(BaseModel):
    """Admin form contents for creating or editing a post.

    Required fields are checked by the admin service rather than here so an
    incomplete form can still be held while the user is typing.
    """

    title: str = ""
    slug: str = ""
    excerpt: str = ""
    content: str = ""
    author: str = ""
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    featured: bool = False
    published: bool = True

    @field_validator("title", "slug", "author", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v: object) -> object:
        if isinstance(v, str):
            return parse_tags(v)
        if isinstance(v, (list, tuple)):
            return [str(tag).strip() for tag in v if str(tag).strip()]
        return v

    def missing_required_fields(self) -> tuple[str, ...]:
        """Return the names of required fields that are blank."""
        return tuple(name for name in REQUIRED_FORM_FIELDS if not getattr(self, name).strip())


class PaginationInfo(BaseModel):
    """Pagination details for the listing page."""

    current_page: int = Field(ge=1)
    total_pages: int = Field(ge=1)
    total_posts: int = Field(ge=0)
    posts_per_page: int = Field(ge=1)
