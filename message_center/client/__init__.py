"""Client data layer: API client, centralized state and UI controllers."""

from .api import MessageAPIClient
from .compose import ComposeForm, apply_template, map_send_errors, to_new_message, validate_compose
from .controllers import DebouncedSearch, Debouncer, MessageListPager, ScrollPagination, Throttler
from .state import ListStatus, MessageCenterStore, MessagesState

__all__ = [
    "ComposeForm",
    "DebouncedSearch",
    "Debouncer",
    "ListStatus",
    "MessageAPIClient",
    "MessageCenterStore",
    "MessageListPager",
    "MessagesState",
    "ScrollPagination",
    "Throttler",
    "apply_template",
    "map_send_errors",
    "to_new_message",
    "validate_compose",
]
