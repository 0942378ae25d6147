"""Shared test fixtures for Inkwell."""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING

import pytest

from inkwell.config import Settings
from inkwell.schemas.post import Post
from inkwell.services.post_service import PostStore
from inkwell.services.sample_posts import sample_posts

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class ManualTimer:
    when: float
    callback: Callable[[], object]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class ManualScheduler:
    """Deterministic stand-in for an event loop's ``call_later``.

    Time is in milliseconds and only moves when a test calls ``advance_to``.
    """

    now_ms: float = 0.0
    _queue: list[tuple[float, int, ManualTimer]] = field(default_factory=list)
    _seq: itertools.count[int] = field(default_factory=itertools.count)

    def call_later(self, delay: float, callback: Callable[[], object]) -> ManualTimer:
        timer = ManualTimer(when=self.now_ms + round(delay * 1000, 6), callback=callback)
        heapq.heappush(self._queue, (timer.when, next(self._seq), timer))
        return timer

    @property
    def live_timers(self) -> list[ManualTimer]:
        return [timer for _, _, timer in self._queue if not timer.cancelled]

    def _run_due(self, t_ms: float, *, inclusive: bool) -> None:
        while self._queue and (
            self._queue[0][0] <= t_ms if inclusive else self._queue[0][0] < t_ms
        ):
            when, _, timer = heapq.heappop(self._queue)
            self.now_ms = when
            if not timer.cancelled:
                timer.callback()
        self.now_ms = t_ms

    def advance_to(self, t_ms: float) -> None:
        """Run every timer due at or before ``t_ms`` in order, then set the clock."""
        self._run_due(t_ms, inclusive=True)

    def advance_until(self, t_ms: float) -> None:
        """Move the clock to ``t_ms`` running only timers due strictly earlier.

        Used before delivering an input event at ``t_ms``: input at an
        instant is handled before timers due at that same instant.
        """
        self._run_due(t_ms, inclusive=False)

    def advance(self, delta_ms: float) -> None:
        self.advance_to(self.now_ms + delta_ms)


def make_post(post_id: str, **overrides: object) -> Post:
    """Build a valid post with predictable defaults."""
    data: dict[str, object] = {
        "id": post_id,
        "title": f"Post {post_id}",
        "slug": f"post-{post_id}",
        "excerpt": "",
        "content": "",
        "author": "Test Author",
        "category": "General",
        "tags": (),
        "published_at": date(2024, 1, 1),
        "updated_at": date(2024, 1, 1),
        "read_time": 1,
    }
    data.update(overrides)
    return Post.model_validate(data)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def store() -> PostStore:
    return PostStore(sample_posts())


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()
