"""Search input debouncing with a single cancellable timer."""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 300


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback later; ``asyncio`` event loops qualify."""

    def call_later(self, delay: float, callback: Callable[[], object]) -> TimerHandle: ...


class DebounceState(StrEnum):
    IDLE = "idle"
    PENDING = "pending"


class QueryDebouncer:
    """Emit a value only after input has been quiet for ``delay_ms``.

    At most one timer is pending: every ``push`` cancels the previous timer
    and starts a new one. ``clear`` skips the delay and emits ``""`` at once.

    Not thread-safe; use from the event loop that runs the timers.
    """

    def __init__(
        self,
        on_emit: Callable[[str], object],
        *,
        delay_ms: int = DEFAULT_DELAY_MS,
        scheduler: Scheduler | None = None,
    ) -> None:
        if delay_ms < 0:
            msg = f"delay_ms must not be negative, got {delay_ms}"
            raise ValueError(msg)
        self._on_emit = on_emit
        self._delay = delay_ms / 1000
        self._scheduler = scheduler
        self._timer: TimerHandle | None = None
        self._pending_value: str | None = None

    @property
    def state(self) -> DebounceState:
        return DebounceState.IDLE if self._timer is None else DebounceState.PENDING

    @property
    def pending_value(self) -> str | None:
        """Value that will be emitted when the timer fires, if any."""
        return self._pending_value

    def _get_scheduler(self) -> Scheduler:
        if self._scheduler is None:
            self._scheduler = asyncio.get_running_loop()
        return self._scheduler

    def push(self, value: str) -> None:
        """Record a keystroke; (re)start the quiet-period timer."""
        scheduler = self._get_scheduler()
        self.cancel()
        self._pending_value = value
        self._timer = scheduler.call_later(self._delay, self._fire)

    def clear(self) -> None:
        """Cancel any pending emission and emit an empty query immediately."""
        self.cancel()
        logger.debug("Search cleared")
        self._on_emit("")

    def cancel(self) -> None:
        """Drop the pending emission, if any, without emitting."""
        if self._timer is not None:
            self._timer.cancel()
        self._timer = None
        self._pending_value = None

    close = cancel

    def _fire(self) -> None:
        value = self._pending_value or ""
        self._timer = None
        self._pending_value = None
        logger.debug("Debounced search query: %r", value)
        self._on_emit(value)

    def __enter__(self) -> QueryDebouncer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class SearchBox:
    """Search input control: holds the typed text and debounces it."""

    def __init__(
        self,
        on_search: Callable[[str], object],
        *,
        delay_ms: int = DEFAULT_DELAY_MS,
        scheduler: Scheduler | None = None,
    ) -> None:
        self.value = ""
        self.debouncer = QueryDebouncer(on_search, delay_ms=delay_ms, scheduler=scheduler)

    @property
    def show_clear_button(self) -> bool:
        return bool(self.value)

    def type(self, text: str) -> None:
        """Replace the input text, as an input change event does."""
        self.value = text
        self.debouncer.push(text)

    def clear(self) -> None:
        """Explicit clear action: empty the box and reset the search at once."""
        self.value = ""
        self.debouncer.clear()

    def close(self) -> None:
        self.debouncer.close()
