"""Message list, detail and mutation endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from message_center.deps import get_store
from message_center.schemas.common import ErrorResponse, SuccessResponse
from message_center.schemas.message import (
    Message,
    MessagesResponse,
    MessageType,
    NewMessage,
)
from message_center.store import MessageStore

router = APIRouter(prefix="/messages", tags=["messages"])

_NOT_FOUND = {404: {"model": ErrorResponse}}


@router.get("", response_model=MessagesResponse)
async def list_messages(
    store: Annotated[MessageStore, Depends(get_store)],
    filter: str = Query(default="all"),
    search: str = Query(default=""),
    type: MessageType = Query(default=MessageType.INBOX),
):
    """Filtered, searched, newest-first list of one message type."""
    result = store.query(type=type, filter=filter, search=search)
    return MessagesResponse(
        messages=result.messages,
        total_count=result.total_count,
        unread_count=result.unread_count,
    )


@router.get("/{message_id}", response_model=Message, responses=_NOT_FOUND)
async def get_message(
    message_id: str,
    store: Annotated[MessageStore, Depends(get_store)],
):
    return store.get(message_id)


@router.patch("/{message_id}/read", response_model=Message, responses=_NOT_FOUND)
async def mark_read(
    message_id: str,
    store: Annotated[MessageStore, Depends(get_store)],
):
    return store.set_read(message_id, True)


@router.patch("/{message_id}/unread", response_model=Message, responses=_NOT_FOUND)
async def mark_unread(
    message_id: str,
    store: Annotated[MessageStore, Depends(get_store)],
):
    return store.set_read(message_id, False)


@router.patch(
    "/{message_id}/acknowledged",
    response_model=Message,
    responses={**_NOT_FOUND, 400: {"model": ErrorResponse}},
)
async def mark_acknowledged(
    message_id: str,
    store: Annotated[MessageStore, Depends(get_store)],
):
    """Acknowledge a sent message. Inbox messages are rejected with 400."""
    return store.set_acknowledged(message_id, True)


@router.patch(
    "/{message_id}/unacknowledged",
    response_model=Message,
    responses={**_NOT_FOUND, 400: {"model": ErrorResponse}},
)
async def mark_unacknowledged(
    message_id: str,
    store: Annotated[MessageStore, Depends(get_store)],
):
    return store.set_acknowledged(message_id, False)


@router.post(
    "",
    response_model=Message,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_message(
    body: NewMessage,
    store: Annotated[MessageStore, Depends(get_store)],
):
    """Send a new message. All validation failures are returned together."""
    return store.create(body)


@router.delete("/{message_id}", response_model=SuccessResponse, responses=_NOT_FOUND)
async def delete_message(
    message_id: str,
    store: Annotated[MessageStore, Depends(get_store)],
):
    store.delete(message_id)
    return SuccessResponse()
