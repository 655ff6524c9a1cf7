"""Message storage: repository abstraction and store operations."""

from .repository import InMemoryMessageRepository, MessageRepository
from .service import MessageStore

__all__ = [
    "InMemoryMessageRepository",
    "MessageRepository",
    "MessageStore",
]
