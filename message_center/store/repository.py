"""Storage interface behind :class:`MessageStore` and its in-memory implementation."""

from __future__ import annotations

import abc

from message_center.errors import MessageNotFoundError
from message_center.schemas.message import Message
from message_center.schemas.reference import MessageTemplate, Vendor


class MessageRepository(abc.ABC):
    """Abstract storage for messages and reference data.

    Implementations keep collection order: ``add`` puts the new message
    first and ``list`` returns messages in that order.  The query engine
    relies on it to break timestamp ties.
    """

    @abc.abstractmethod
    def get(self, message_id: str) -> Message:
        """Return the message or raise :class:`MessageNotFoundError`."""
        ...

    @abc.abstractmethod
    def list(self) -> list[Message]:
        ...

    @abc.abstractmethod
    def add(self, message: Message) -> Message:
        ...

    @abc.abstractmethod
    def update(self, message: Message) -> Message:
        """Replace the stored message with the same id."""
        ...

    @abc.abstractmethod
    def delete(self, message_id: str) -> None:
        ...

    @abc.abstractmethod
    def list_vendors(self) -> list[Vendor]:
        ...

    @abc.abstractmethod
    def list_templates(self) -> list[MessageTemplate]:
        ...

    def get_vendor(self, vendor_id: str) -> Vendor | None:
        return next((v for v in self.list_vendors() if v.id == vendor_id), None)


class InMemoryMessageRepository(MessageRepository):
    """List-backed repository. Nothing survives a process restart."""

    def __init__(
        self,
        messages: list[Message] | None = None,
        vendors: list[Vendor] | None = None,
        templates: list[MessageTemplate] | None = None,
    ) -> None:
        self._messages: list[Message] = list(messages or [])
        self._vendors: list[Vendor] = list(vendors or [])
        self._templates: list[MessageTemplate] = list(templates or [])

    @classmethod
    def seeded(cls) -> InMemoryMessageRepository:
        """Repository pre-loaded with the fixture messages, vendors and templates."""
        from .fixtures import seed_messages, seed_templates, seed_vendors

        return cls(seed_messages(), seed_vendors(), seed_templates())

    def _index(self, message_id: str) -> int:
        for i, message in enumerate(self._messages):
            if message.id == message_id:
                return i
        raise MessageNotFoundError(message_id)

    def get(self, message_id: str) -> Message:
        return self._messages[self._index(message_id)]

    def list(self) -> list[Message]:
        return list(self._messages)

    def add(self, message: Message) -> Message:
        if any(m.id == message.id for m in self._messages):
            raise ValueError(f"Duplicate message id: {message.id}")
        self._messages.insert(0, message)
        return message

    def update(self, message: Message) -> Message:
        self._messages[self._index(message.id)] = message
        return message

    def delete(self, message_id: str) -> None:
        del self._messages[self._index(message_id)]

    def list_vendors(self) -> list[Vendor]:
        return list(self._vendors)

    def list_templates(self) -> list[MessageTemplate]:
        return list(self._templates)
