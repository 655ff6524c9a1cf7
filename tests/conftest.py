"""Shared test fixtures for the Message Center."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

from message_center.app import create_app
from message_center.config import ClientSettings, Settings
from message_center.schemas.message import Message, MessageType, Priority
from message_center.store import InMemoryMessageRepository, MessageStore


@pytest.fixture
def settings() -> Settings:
    return Settings(log_json=False)


@pytest.fixture
def repository() -> InMemoryMessageRepository:
    return InMemoryMessageRepository.seeded()


@pytest.fixture
def store(repository) -> MessageStore:
    return MessageStore(repository)


@pytest.fixture
async def app(settings, repository):
    return create_app(settings, repository)


@pytest.fixture
async def client(app):
    """Async HTTP test client. Lifespan is not started."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.fixture
def client_settings() -> ClientSettings:
    return ClientSettings(base_url="http://test/api", timeout_seconds=5.0)


def make_message(
    message_id: str = "m1",
    *,
    type: MessageType = MessageType.INBOX,
    is_read: bool = False,
    subject: str = "Subject",
    sender: str = "Sender",
    recipient: str | None = None,
    timestamp: datetime | None = None,
    is_acknowledged: bool | None = None,
    content: str = "Body",
) -> Message:
    return Message(
        id=message_id,
        sender=sender,
        recipient=recipient,
        subject=subject,
        preview=content[:100],
        content=content,
        priority=Priority.MEDIUM,
        timestamp=timestamp or datetime(2025, 1, 1, tzinfo=timezone.utc),
        is_read=is_read,
        is_acknowledged=is_acknowledged,
        type=type,
    )


def message_json(message: Message) -> dict:
    return message.model_dump(mode="json", by_alias=True)


class FakeClock:
    """Manually advanced monotonic clock for throttle and cooldown tests."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
