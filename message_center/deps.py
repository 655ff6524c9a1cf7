"""FastAPI dependency-injection helpers."""

from __future__ import annotations

from fastapi import Request

from message_center.config import Settings
from message_center.store import MessageStore


def get_store(request: Request) -> MessageStore:
    return MessageStore(request.app.state.repository)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
