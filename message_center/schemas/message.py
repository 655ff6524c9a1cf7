"""Message models shared by the API server and the client data layer."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageType(str, Enum):
    INBOX = "inbox"
    SENT = "sent"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Message(CamelModel):
    """A single inbox or sent message."""

    id: str
    sender: str
    recipient: str | None = None
    recipient_email: str | None = None
    subject: str
    preview: str
    content: str
    priority: Priority
    timestamp: datetime
    is_read: bool
    has_attachment: bool = False
    is_acknowledged: bool | None = None  # sent messages only
    type: MessageType


class NewMessage(CamelModel):
    """Request body for POST /messages.

    Every field is optional here; the store accumulates all validation
    failures itself so the caller gets the full list at once.
    """

    recipient: str | None = None
    vendor_id: str | None = None
    subject: str | None = None
    content: str | None = None
    priority: str | None = None


class MessagesResponse(CamelModel):
    """Response for GET /messages."""

    messages: list[Message]
    total_count: int
    unread_count: int
