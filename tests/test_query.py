"""Pure unit tests for the list query engine."""

from __future__ import annotations

from datetime import datetime, timezone

from message_center.query import (
    INBOX_FILTERS,
    SENT_FILTERS,
    count_unread,
    legal_filters,
    query_messages,
)
from message_center.schemas.message import MessageType
from tests.conftest import make_message


def _ts(day: int, hour: int = 0) -> datetime:
    return datetime(2025, 1, day, hour, tzinfo=timezone.utc)


def _collection():
    return [
        make_message("i1", is_read=False, subject="Sales report", timestamp=_ts(20)),
        make_message("i2", is_read=True, subject="Audit", sender="Compliance", timestamp=_ts(22)),
        make_message("i3", is_read=False, subject="Maintenance", timestamp=_ts(21)),
        make_message(
            "s1", type=MessageType.SENT, is_read=True, is_acknowledged=True,
            recipient="Finance Department", subject="Budget", timestamp=_ts(19),
        ),
        make_message(
            "s2", type=MessageType.SENT, is_read=True, is_acknowledged=False,
            recipient="HR", subject="RSVP", timestamp=_ts(23),
        ),
    ]


def test_inbox_all_sorted_newest_first():
    result = query_messages(_collection(), type=MessageType.INBOX, filter="all")
    assert [m.id for m in result.messages] == ["i2", "i3", "i1"]


def test_inbox_unread_filter():
    result = query_messages(_collection(), type=MessageType.INBOX, filter="unread")
    assert [m.id for m in result.messages] == ["i3", "i1"]
    assert all(not m.is_read for m in result.messages)


def test_inbox_read_filter():
    result = query_messages(_collection(), type=MessageType.INBOX, filter="read")
    assert [m.id for m in result.messages] == ["i2"]


def test_sent_acknowledged_filter():
    result = query_messages(_collection(), type=MessageType.SENT, filter="acknowledged")
    assert [m.id for m in result.messages] == ["s1"]


def test_unknown_filter_behaves_as_all():
    # "unread" is not a sent-view filter and "acknowledged" not an inbox one
    sent = query_messages(_collection(), type=MessageType.SENT, filter="unread")
    assert [m.id for m in sent.messages] == ["s2", "s1"]
    inbox = query_messages(_collection(), type=MessageType.INBOX, filter="acknowledged")
    assert len(inbox.messages) == 3


def test_search_is_case_insensitive_across_fields():
    assert [m.id for m in query_messages(_collection(), search="AUDIT").messages] == ["i2"]
    assert [m.id for m in query_messages(_collection(), search="compliance").messages] == ["i2"]
    sent = query_messages(_collection(), type=MessageType.SENT, search="finance")
    assert [m.id for m in sent.messages] == ["s1"]


def test_search_matches_preview():
    messages = [make_message("p1", content="Inventory levels attached")]
    assert len(query_messages(messages, search="inventory").messages) == 1


def test_search_no_match():
    assert query_messages(_collection(), search="zzz").messages == []


def test_total_count_ignores_filter_and_search():
    result = query_messages(_collection(), type=MessageType.INBOX, filter="unread", search="sales")
    assert len(result.messages) == 1
    assert result.total_count == 3


def test_unread_count_is_global_over_inbox():
    for type in (MessageType.INBOX, MessageType.SENT):
        for filter in ("all", "read", "acknowledged"):
            result = query_messages(_collection(), type=type, filter=filter, search="x")
            assert result.unread_count == 2


def test_equal_timestamps_keep_collection_order():
    same = _ts(10)
    messages = [make_message(f"m{i}", timestamp=same) for i in range(5)]
    result = query_messages(messages)
    assert [m.id for m in result.messages] == ["m0", "m1", "m2", "m3", "m4"]


def test_results_only_contain_requested_type():
    result = query_messages(_collection(), type=MessageType.SENT)
    assert {m.type for m in result.messages} == {MessageType.SENT}


def test_count_unread_skips_sent():
    messages = [make_message("s", type=MessageType.SENT, is_read=False)]
    assert count_unread(messages) == 0


def test_legal_filters():
    assert legal_filters(MessageType.INBOX) == INBOX_FILTERS
    assert legal_filters(MessageType.SENT) == SENT_FILTERS
    assert "acknowledged" not in INBOX_FILTERS
