"""Listing, card and home page schemas."""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from inkwell.schemas.post import PaginationInfo, Post


class HighlightSegment(NamedTuple):
    """A run of text and whether it matched the active query."""

    text: str
    is_match: bool


class ViewState(BaseModel):
    """Query state owned by a listing view.

    ``category`` is ``None`` for "all categories".
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    category: str | None = None
    page: int = Field(default=1, ge=1)


class PageWindow(BaseModel):
    """The slice of filtered posts shown for the current page."""

    model_config = ConfigDict(frozen=True)

    posts: list[Post]
    page: int = Field(ge=1)
    total_pages: int = Field(ge=1)
    total: int = Field(ge=0)
    per_page: int = Field(ge=1)


class PostCard(BaseModel):
    """Render-ready post card."""

    id: str
    slug: str
    href: str
    title: list[HighlightSegment]
    excerpt: list[HighlightSegment]
    category: str
    author: str
    published_label: str
    read_time_label: str
    featured: bool = False


class ListingPage(BaseModel):
    """Everything the listing page renders for one view state."""

    state: ViewState
    categories: list[str]
    cards: list[PostCard]
    pagination: PaginationInfo
    summary: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.cards

    @property
    def show_pagination(self) -> bool:
        return self.pagination.total_pages > 1


class HomePage(BaseModel):
    """Home page content."""

    site_title: str
    site_description: str
    featured: list[PostCard] = Field(default_factory=list)
    recent: list[PostCard] = Field(default_factory=list)
