"""Search and scroll controllers built on explicit asyncio timer handles."""

from __future__ import annotations

import asyncio
import inspect
import time
from collections.abc import Awaitable, Callable
from typing import Any

import structlog

from message_center.config import ClientSettings
from message_center.schemas.message import MessageType

from .state import MessageCenterStore

logger = structlog.get_logger()


class Debouncer:
    """Run *func* once, *delay* seconds after the last call.

    Each call cancels the pending timer handle and schedules a new one with
    the latest arguments.  Coroutine results are wrapped in a task; the
    last such task is kept on :attr:`task` so callers can await it.
    """

    def __init__(self, func: Callable[..., Any], delay: float) -> None:
        self.func = func
        self.delay = delay
        self._handle: asyncio.TimerHandle | None = None
        self.task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def __call__(self, *args: Any) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, args)

    def _fire(self, args: tuple[Any, ...]) -> None:
        self._handle = None
        result = self.func(*args)
        if inspect.isawaitable(result):
            self.task = asyncio.ensure_future(result)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


class Throttler:
    """Leading-edge throttle: run at most once per *interval*, drop the rest."""

    def __init__(
        self,
        func: Callable[..., Any],
        interval: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.func = func
        self.interval = interval
        self._clock = clock
        self._last: float | None = None

    def __call__(self, *args: Any) -> Any:
        now = self._clock()
        if self._last is not None and now - self._last < self.interval:
            return None
        self._last = now
        return self.func(*args)


class DebouncedSearch:
    """Debounce search keystrokes into list fetches.

    ``set_search_value`` and ``set_context`` both schedule a fetch with the
    latest value, view and filter after the quiet period.  View and filter
    changes go through the store reducers first.  The underlying
    debouncer is rebuilt only when :attr:`delay` changes.
    """

    def __init__(
        self,
        store: MessageCenterStore,
        *,
        delay: float | None = None,
        initial_value: str = "",
    ) -> None:
        self._store = store
        self.search_value = initial_value
        self.is_searching = False
        self.view: MessageType = store.state.view
        self.filter: str = store.state.filter
        if delay is None:
            delay = ClientSettings().search_debounce_ms / 1000
        self._debouncer = Debouncer(self._search, delay)

    @property
    def delay(self) -> float:
        return self._debouncer.delay

    @delay.setter
    def delay(self, value: float) -> None:
        if value != self._debouncer.delay:
            self._debouncer.cancel()
            self._debouncer = Debouncer(self._search, value)

    @property
    def debouncer(self) -> Debouncer:
        return self._debouncer

    async def _search(self, query: str, view: MessageType, filter: str) -> None:
        self.is_searching = True
        try:
            self._store.set_search_term(query)
            await self._store.fetch_messages(filter=filter, search=query, type=view)
        finally:
            self.is_searching = False

    def set_search_value(self, value: str) -> None:
        self.search_value = value
        self._debouncer(value, self.view, self.filter)

    def set_context(self, *, view: MessageType | None = None, filter: str | None = None) -> None:
        if view is not None:
            self._store.set_view(view)
        if filter is not None:
            self._store.set_filter(filter)
        self.view = self._store.state.view
        self.filter = self._store.state.filter
        self._debouncer(self.search_value, self.view, self.filter)

    async def clear_search(self) -> None:
        """Reset the term and refetch right away, skipping the debounce."""
        self._debouncer.cancel()
        self.search_value = ""
        self._store.set_search_term("")
        await self._store.fetch_messages(filter=self.filter, search="", type=self.view)


class ScrollPagination:
    """Throttled near-bottom detection that triggers load-more."""

    def __init__(
        self,
        on_load_more: Callable[[], Any],
        *,
        has_more: Callable[[], bool],
        loading: Callable[[], bool],
        threshold: int = 100,
        interval: float = 0.2,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._on_load_more = on_load_more
        self._has_more = has_more
        self._loading = loading
        self.threshold = threshold
        self._throttled = Throttler(self._check, interval, clock=clock)
        self.task: asyncio.Task | None = None

    def handle_scroll(self, scroll_top: float, scroll_height: float, client_height: float) -> None:
        self._throttled(scroll_top, scroll_height, client_height)

    def _check(self, scroll_top: float, scroll_height: float, client_height: float) -> None:
        if scroll_height - scroll_top > client_height + self.threshold:
            return
        if not self._has_more() or self._loading():
            return
        result = self._on_load_more()
        if inspect.isawaitable(result):
            self.task = asyncio.ensure_future(result)


class MessageListPager:
    """Pagination and retry state for the message list view.

    The API has no real pagination: the first ``load_more`` always
    concludes there are no further pages.
    """

    def __init__(
        self,
        store: MessageCenterStore,
        settings: ClientSettings | None = None,
        *,
        load_delay: float = 0.5,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        settings = settings or ClientSettings()
        self._store = store
        self.page = 1
        self.has_more = True
        self.loading_more = False
        self._load_delay = load_delay
        self._retry = Throttler(self._refresh, settings.retry_throttle_ms / 1000, clock=clock)
        self.scroll = ScrollPagination(
            self.load_more,
            has_more=lambda: self.has_more,
            loading=lambda: self.loading_more,
            threshold=settings.scroll_threshold_px,
            interval=settings.scroll_throttle_ms / 1000,
            clock=clock,
        )

    async def reset(self) -> None:
        """Start over after a view, filter or search change."""
        self.page = 1
        self.has_more = True
        await self._store.fetch_messages()

    async def load_more(self) -> None:
        if self.loading_more or not self.has_more:
            return
        self.loading_more = True
        try:
            await asyncio.sleep(self._load_delay)
            self.has_more = False
            logger.debug("load_more_exhausted", page=self.page)
        finally:
            self.loading_more = False

    def _refresh(self) -> Awaitable[bool]:
        return self._store.fetch_messages()

    async def retry(self) -> None:
        """The "Try Again" action; at most one refetch per retry interval."""
        result = self._retry()
        if result is not None:
            await result
