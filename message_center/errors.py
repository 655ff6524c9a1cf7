"""Error taxonomy shared by the store, the HTTP layer and the client."""

from __future__ import annotations


class MessageCenterError(Exception):
    """Base exception for all Message Center errors."""


class MessageNotFoundError(MessageCenterError):
    """No message with the given id exists."""

    def __init__(self, message_id: str) -> None:
        super().__init__("Message not found")
        self.message_id = message_id


class InvalidOperationError(MessageCenterError):
    """The operation is not allowed for this message (e.g. acknowledging an inbox message)."""


class ValidationFailedError(MessageCenterError):
    """A create-message request failed validation.

    ``details`` holds every failure, not just the first one.
    """

    def __init__(self, details: list[str]) -> None:
        super().__init__("Validation failed")
        self.details = details


class MessageAPIError(MessageCenterError):
    """Client-side failure talking to the message API.

    Covers both server error responses (``status_code`` set) and network
    errors or timeouts (``status_code`` is ``None``).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or []


class Throttled(MessageCenterError):
    """A list fetch was dropped by the client cooldown. Never shown to the user."""
