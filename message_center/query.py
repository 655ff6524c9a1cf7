"""Filter, search and sort a message collection for the list view."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from message_center.schemas.message import Message, MessageType

INBOX_FILTERS = frozenset({"all", "unread", "read"})
SENT_FILTERS = frozenset({"all", "read", "acknowledged"})


def legal_filters(type: MessageType) -> frozenset[str]:
    """Filters that mean something for *type*; anything else acts as ``all``."""
    return INBOX_FILTERS if type == MessageType.INBOX else SENT_FILTERS


@dataclass(frozen=True)
class QueryResult:
    messages: list[Message]
    total_count: int
    unread_count: int


def matches_filter(message: Message, type: MessageType, filter: str | None) -> bool:
    if type == MessageType.INBOX:
        if filter == "unread":
            return not message.is_read
        if filter == "read":
            return message.is_read
    else:
        if filter == "read":
            return message.is_read
        if filter == "acknowledged":
            return message.is_acknowledged is True
    return True


def matches_search(message: Message, search: str | None) -> bool:
    """Case-insensitive substring match on subject, sender, preview or recipient."""
    if not search:
        return True
    term = search.lower()
    fields = [message.subject, message.sender, message.preview]
    if message.recipient:
        fields.append(message.recipient)
    return any(term in field.lower() for field in fields)


def count_unread(messages: Iterable[Message]) -> int:
    """Unread inbox messages; sent messages never count."""
    return sum(1 for m in messages if m.type == MessageType.INBOX and not m.is_read)


def query_messages(
    messages: Iterable[Message],
    *,
    type: MessageType = MessageType.INBOX,
    filter: str | None = None,
    search: str | None = None,
) -> QueryResult:
    """Run a list query over *messages*.

    ``total_count`` is the number of messages of *type* regardless of
    filter and search.  ``unread_count`` is global over the inbox.
    Results are newest first; equal timestamps keep collection order.
    """
    messages = list(messages)
    of_type = [m for m in messages if m.type == type]

    matched = [
        m for m in of_type
        if matches_filter(m, type, filter) and matches_search(m, search)
    ]
    matched = sorted(matched, key=lambda m: m.timestamp, reverse=True)

    return QueryResult(
        messages=matched,
        total_count=len(of_type),
        unread_count=count_unread(messages),
    )
