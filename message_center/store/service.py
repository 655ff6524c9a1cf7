"""Store operations the HTTP API performs on a message repository."""

from __future__ import annotations

import re
import uuid
from datetime import UTC, datetime

import structlog

from message_center.errors import InvalidOperationError, ValidationFailedError
from message_center.query import QueryResult, query_messages
from message_center.schemas.message import (
    Message,
    MessageType,
    NewMessage,
    Priority,
)
from message_center.schemas.reference import MessageTemplate, Vendor

from .fixtures import make_preview
from .repository import MessageRepository

logger = structlog.get_logger()

_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")
_VALID_PRIORITIES = {p.value for p in Priority}

SENDER_SELF = "You"


def _clean(value: str | None) -> str:
    return (value or "").strip()


class MessageStore:
    """Read, query and mutate messages held by a :class:`MessageRepository`.

    Mutations only ever touch ``is_read`` and ``is_acknowledged`` on
    existing messages; ``id`` and ``type`` are fixed at creation.
    """

    def __init__(self, repository: MessageRepository) -> None:
        self._repo = repository

    @property
    def repository(self) -> MessageRepository:
        return self._repo

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, message_id: str) -> Message:
        return self._repo.get(message_id)

    def query(
        self,
        *,
        type: MessageType = MessageType.INBOX,
        filter: str | None = None,
        search: str | None = None,
    ) -> QueryResult:
        return query_messages(self._repo.list(), type=type, filter=filter, search=search)

    def vendors(self) -> list[Vendor]:
        return self._repo.list_vendors()

    def templates(self) -> list[MessageTemplate]:
        return self._repo.list_templates()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_read(self, message_id: str, value: bool) -> Message:
        message = self._repo.get(message_id)
        updated = self._repo.update(message.model_copy(update={"is_read": value}))
        logger.info("message_read_state_changed", message_id=message_id, is_read=value)
        return updated

    def set_acknowledged(self, message_id: str, value: bool) -> Message:
        message = self._repo.get(message_id)
        if message.type != MessageType.SENT:
            raise InvalidOperationError("Only sent messages can be acknowledged")
        updated = self._repo.update(message.model_copy(update={"is_acknowledged": value}))
        logger.info(
            "message_acknowledged_state_changed",
            message_id=message_id,
            is_acknowledged=value,
        )
        return updated

    def create(self, data: NewMessage) -> Message:
        """Validate *data* and store it as a new sent message.

        Raises :class:`ValidationFailedError` listing every failure.
        A vendor reference takes precedence over a free-text recipient.
        """
        errors: list[str] = []
        recipient: str | None = None
        recipient_email: str | None = None

        vendor_id = _clean(data.vendor_id)
        free_text = _clean(data.recipient)
        if vendor_id:
            vendor = self._repo.get_vendor(vendor_id)
            if vendor is None:
                errors.append("Selected vendor does not exist")
            else:
                recipient, recipient_email = vendor.name, vendor.email
        elif not free_text:
            errors.append("Recipient is required")
        elif not _EMAIL_RE.search(free_text):
            errors.append("Please enter a valid email address")
        else:
            recipient = recipient_email = free_text

        subject = _clean(data.subject)
        if not subject:
            errors.append("Subject is required")

        content = _clean(data.content)
        if not content:
            errors.append("Message content is required")

        priority = data.priority if data.priority is not None else Priority.MEDIUM.value
        if priority not in _VALID_PRIORITIES:
            errors.append("Invalid priority level")

        if errors:
            logger.info("message_validation_failed", errors=errors)
            raise ValidationFailedError(errors)

        message = Message(
            id=str(uuid.uuid4()),
            sender=SENDER_SELF,
            recipient=recipient,
            recipient_email=recipient_email,
            subject=subject,
            preview=make_preview(content),
            content=content,
            priority=Priority(priority),
            timestamp=datetime.now(UTC),
            is_read=True,
            has_attachment=False,
            is_acknowledged=False,
            type=MessageType.SENT,
        )
        self._repo.add(message)
        logger.info(
            "message_created",
            message_id=message.id,
            subject=message.subject,
            recipient=message.recipient,
        )
        return message

    def delete(self, message_id: str) -> None:
        self._repo.delete(message_id)
        logger.info("message_deleted", message_id=message_id)
