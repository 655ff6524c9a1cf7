"""Centralized client state for the message list and detail views.

:class:`MessageCenterStore` owns a single :class:`MessagesState` and
updates it from async actions that call the API.  The list goes
``idle -> loading -> loaded | failed`` and back to ``loading`` on every
accepted fetch.

Two guards keep rapid fetches orderly:

* a cooldown drops a fetch issued less than ``fetch_cooldown_ms`` after
  the previous accepted one (silently, it never becomes ``state.error``);
* every accepted fetch takes a sequence number and a response older than
  the latest dispatched fetch is discarded, so a slow early response can
  never overwrite a newer one.

Counter side effects of mutations are applied locally and are not
reconciled with the server until the next fetch.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from enum import Enum

import structlog
from pydantic import BaseModel

from message_center.config import ClientSettings
from message_center.errors import MessageAPIError, Throttled
from message_center.query import legal_filters
from message_center.schemas.message import Message, MessageType, NewMessage
from message_center.schemas.reference import MessageTemplate, Vendor

from .api import MessageAPIClient

logger = structlog.get_logger()


class ListStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class MessagesState(BaseModel):
    messages: list[Message] = []
    selected_message: Message | None = None
    loading: bool = False
    error: str | None = None
    status: ListStatus = ListStatus.IDLE
    view: MessageType = MessageType.INBOX
    filter: str = "all"
    search_term: str = ""
    total_count: int = 0
    unread_count: int = 0
    vendors: list[Vendor] = []
    templates: list[MessageTemplate] = []


class MessageCenterStore:
    def __init__(
        self,
        api: MessageAPIClient,
        settings: ClientSettings | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.api = api
        self.state = MessagesState()
        self._settings = settings or ClientSettings()
        self._clock = clock
        self._last_fetch: float | None = None
        self._fetch_seq = 0

    # ------------------------------------------------------------------
    # Plain reducers
    # ------------------------------------------------------------------

    def set_view(self, view: MessageType) -> None:
        view = MessageType(view)
        self.state.view = view
        if self.state.filter not in legal_filters(view):
            self.state.filter = "all"

    def set_filter(self, value: str) -> None:
        if value not in legal_filters(self.state.view):
            raise ValueError(f"Filter {value!r} is not available for {self.state.view.value} messages")
        self.state.filter = value

    def set_search_term(self, value: str) -> None:
        self.state.search_term = value

    def clear_selected_message(self) -> None:
        self.state.selected_message = None

    def clear_error(self) -> None:
        self.state.error = None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _find(self, message_id: str) -> int | None:
        for i, message in enumerate(self.state.messages):
            if message.id == message_id:
                return i
        return None

    def _replace(self, message: Message) -> bool:
        """Swap in *message* wherever it is shown. True if it was in the list."""
        index = self._find(message.id)
        if index is not None:
            self.state.messages[index] = message
        if self.state.selected_message is not None and self.state.selected_message.id == message.id:
            self.state.selected_message = message
        return index is not None

    def _check_cooldown(self) -> None:
        now = self._clock()
        cooldown = self._settings.fetch_cooldown_ms / 1000
        if self._last_fetch is not None and now - self._last_fetch < cooldown:
            raise Throttled("Request throttled")
        self._last_fetch = now

    # ------------------------------------------------------------------
    # List
    # ------------------------------------------------------------------

    async def fetch_messages(
        self,
        *,
        filter: str | None = None,
        search: str | None = None,
        type: MessageType | None = None,
    ) -> bool:
        """Load the list for the given (or current) view, filter and search.

        An accepted fetch records its view, filter and search term in the
        state, so later argument-less fetches repeat it.  Returns True when
        this call's response was applied to the state.
        """
        try:
            self._check_cooldown()
        except Throttled:
            logger.debug("fetch_messages_throttled")
            return False

        view = MessageType(type) if type is not None else self.state.view
        filter = filter if filter is not None else self.state.filter
        self.state.view = view
        self.state.filter = filter if filter in legal_filters(view) else "all"
        if search is not None:
            self.state.search_term = search

        self._fetch_seq += 1
        seq = self._fetch_seq
        self.state.loading = True
        self.state.error = None
        self.state.status = ListStatus.LOADING

        try:
            response = await self.api.get_messages(
                self.state.filter, self.state.search_term, self.state.view
            )
        except MessageAPIError as exc:
            if seq != self._fetch_seq:
                logger.debug("stale_fetch_discarded", seq=seq, latest=self._fetch_seq)
                return False
            self.state.loading = False
            self.state.error = exc.message or "Failed to fetch messages"
            self.state.status = ListStatus.FAILED
            return False

        if seq != self._fetch_seq:
            logger.debug("stale_fetch_discarded", seq=seq, latest=self._fetch_seq)
            return False

        self.state.loading = False
        self.state.messages = response.messages
        self.state.total_count = response.total_count
        self.state.unread_count = response.unread_count
        self.state.status = ListStatus.LOADED
        return True

    # ------------------------------------------------------------------
    # Detail
    # ------------------------------------------------------------------

    async def fetch_message_by_id(self, message_id: str) -> Message | None:
        self.state.loading = True
        self.state.error = None
        try:
            message = await self.api.get_message(message_id)
        except MessageAPIError as exc:
            self.state.loading = False
            self.state.error = exc.message or "Failed to fetch message"
            return None
        self.state.loading = False
        self.state.selected_message = message
        return message

    async def open_message(self, message: Message) -> None:
        """Select *message* for the detail view, marking it read if needed."""
        self.state.selected_message = message
        if not message.is_read:
            await self.mark_as_read(message.id)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def mark_as_read(self, message_id: str) -> Message | None:
        try:
            message = await self.api.mark_as_read(message_id)
        except MessageAPIError as exc:
            self.state.error = exc.message or "Failed to mark as read"
            return None
        if self._replace(message):
            self.state.unread_count = max(0, self.state.unread_count - 1)
        return message

    async def mark_as_unread(self, message_id: str) -> Message | None:
        try:
            message = await self.api.mark_as_unread(message_id)
        except MessageAPIError as exc:
            self.state.error = exc.message or "Failed to mark as unread"
            return None
        if self._replace(message):
            self.state.unread_count += 1
        return message

    async def mark_as_acknowledged(self, message_id: str) -> Message | None:
        try:
            message = await self.api.mark_as_acknowledged(message_id)
        except MessageAPIError as exc:
            self.state.error = exc.message or "Failed to mark as acknowledged"
            return None
        self._replace(message)
        return message

    async def mark_as_unacknowledged(self, message_id: str) -> Message | None:
        try:
            message = await self.api.mark_as_unacknowledged(message_id)
        except MessageAPIError as exc:
            self.state.error = exc.message or "Failed to mark as unacknowledged"
            return None
        self._replace(message)
        return message

    async def send_message(self, data: NewMessage) -> Message:
        """Send a message and prepend it to the list.

        Re-raises :class:`MessageAPIError` after recording it so the
        compose form can show per-field errors.
        """
        self.state.loading = True
        self.state.error = None
        try:
            message = await self.api.send_message(data)
        except MessageAPIError as exc:
            self.state.loading = False
            self.state.error = exc.message or "Failed to send message"
            raise
        self.state.loading = False
        self.state.messages.insert(0, message)
        self.state.total_count += 1
        return message

    async def delete_message(self, message_id: str) -> bool:
        try:
            await self.api.delete_message(message_id)
        except MessageAPIError as exc:
            self.state.error = exc.message or "Failed to delete message"
            return False

        index = self._find(message_id)
        if index is not None:
            deleted = self.state.messages.pop(index)
            self.state.total_count -= 1
            if not deleted.is_read:
                self.state.unread_count = max(0, self.state.unread_count - 1)
        if self.state.selected_message is not None and self.state.selected_message.id == message_id:
            self.state.selected_message = None
        return True

    # ------------------------------------------------------------------
    # Reference data
    # ------------------------------------------------------------------

    async def load_vendors(self) -> list[Vendor]:
        """Vendors for the compose form; empty if they could not be loaded."""
        if not self.state.vendors:
            try:
                self.state.vendors = await self.api.get_vendors()
            except MessageAPIError as exc:
                logger.warning("load_vendors_failed", error=exc.message)
        return self.state.vendors

    async def load_templates(self) -> list[MessageTemplate]:
        if not self.state.templates:
            try:
                self.state.templates = await self.api.get_templates()
            except MessageAPIError as exc:
                logger.warning("load_templates_failed", error=exc.message)
        return self.state.templates
