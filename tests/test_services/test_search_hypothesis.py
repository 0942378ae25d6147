"""Property-based tests for the filter, highlight and pagination pipeline."""

from __future__ import annotations

import math
import string

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from inkwell.services.pagination_service import paginate
from inkwell.services.search_service import filter_posts, highlight
from tests.conftest import make_post

PROPERTY_SETTINGS = settings(
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)

_WORD_ALPHABET = string.ascii_letters + string.digits + " .*+?()[]{}|^$\\-"
_TEXT = st.text(alphabet=_WORD_ALPHABET, max_size=40)
_QUERY = st.text(alphabet=_WORD_ALPHABET, max_size=6)
_CATEGORY = st.sampled_from(["React", "Design", "Programming", "react"])


@st.composite
def _posts(draw: st.DrawFn) -> list:
    count = draw(st.integers(min_value=0, max_value=12))
    return [
        make_post(
            str(index),
            title=draw(_TEXT),
            excerpt=draw(_TEXT),
            content=draw(_TEXT),
            category=draw(_CATEGORY),
            tags=tuple(draw(st.lists(_TEXT, max_size=3))),
        )
        for index in range(count)
    ]


def _is_subsequence(sub: list, full: list) -> bool:
    it = iter(full)
    return all(any(item is candidate for candidate in it) for item in sub)


class TestFilterProperties:
    @PROPERTY_SETTINGS
    @given(posts=_posts(), query=_QUERY)
    def test_result_is_ordered_subset_containing_query(self, posts: list, query: str) -> None:
        result = filter_posts(posts, query, None)

        assert _is_subsequence(result, posts)
        needle = query.strip().lower()
        for post in result:
            fields = [post.title, post.excerpt, post.content, *post.tags]
            assert any(needle in value.lower() for value in fields)

    @PROPERTY_SETTINGS
    @given(posts=_posts(), query=_QUERY)
    def test_rejected_posts_do_not_contain_query(self, posts: list, query: str) -> None:
        result = filter_posts(posts, query, None)
        rejected = [post for post in posts if all(post is not kept for kept in result)]
        needle = query.strip().lower()
        for post in rejected:
            fields = [post.title, post.excerpt, post.content, *post.tags]
            assert not any(needle in value.lower() for value in fields)

    @PROPERTY_SETTINGS
    @given(posts=_posts())
    def test_empty_query_without_category_is_identity(self, posts: list) -> None:
        assert filter_posts(posts, "", None) == posts

    @PROPERTY_SETTINGS
    @given(posts=_posts(), query=_QUERY, category=_CATEGORY)
    def test_category_is_exact(self, posts: list, query: str, category: str) -> None:
        assert all(post.category == category for post in filter_posts(posts, query, category))

    @PROPERTY_SETTINGS
    @given(posts=_posts(), query=_QUERY, category=st.none() | _CATEGORY)
    def test_filter_is_idempotent(self, posts: list, query: str, category: str | None) -> None:
        once = filter_posts(posts, query, category)
        assert filter_posts(once, query, category) == once


class TestPaginationProperties:
    @PROPERTY_SETTINGS
    @given(items=st.lists(st.integers(), max_size=40), per_page=st.integers(1, 7))
    def test_windows_reconstruct_collection(self, items: list[int], per_page: int) -> None:
        posts = [make_post(str(index)) for index in range(len(items))]
        first = paginate(posts, 1, per_page)

        assert first.total_pages == max(1, math.ceil(len(posts) / per_page))
        rebuilt = []
        for page in range(1, first.total_pages + 1):
            rebuilt.extend(paginate(posts, page, per_page).posts)
        assert rebuilt == posts

    @PROPERTY_SETTINGS
    @given(count=st.integers(0, 30), page=st.integers(-100, 100))
    def test_requested_page_is_always_clamped(self, count: int, page: int) -> None:
        posts = [make_post(str(index)) for index in range(count)]
        window = paginate(posts, page, 3)
        assert 1 <= window.page <= window.total_pages


class TestHighlightProperties:
    @PROPERTY_SETTINGS
    @given(text=st.text(max_size=60), query=st.none() | st.text(max_size=8))
    def test_segments_rebuild_original_text(self, text: str, query: str | None) -> None:
        segments = highlight(text, query)
        assert "".join(segment.text for segment in segments) == text

    @PROPERTY_SETTINGS
    @given(text=_TEXT, query=_QUERY)
    def test_matched_segments_equal_query_ignoring_case(self, text: str, query: str) -> None:
        needle = query.strip().lower()
        for segment in highlight(text, query):
            if segment.is_match:
                assert segment.text.lower() == needle

    @PROPERTY_SETTINGS
    @given(text=_TEXT, query=_QUERY)
    def test_highlight_is_deterministic(self, text: str, query: str) -> None:
        assert highlight(text, query) == highlight(text, query)

    @PROPERTY_SETTINGS
    @given(text=st.text(max_size=40), query=st.text(max_size=4))
    def test_filter_keeps_post_iff_title_is_highlighted(self, text: str, query: str) -> None:
        post = make_post("1", title=text, excerpt="", content="", tags=())
        kept = filter_posts([post], query, None) == [post]
        marked = any(segment.is_match for segment in highlight(text, query))
        assert kept == (marked or not query.strip())
