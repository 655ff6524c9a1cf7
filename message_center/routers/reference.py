"""Vendor and template lookups for the compose form."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from message_center.deps import get_store
from message_center.schemas.reference import MessageTemplate, Vendor
from message_center.store import MessageStore

router = APIRouter(tags=["reference"])


@router.get("/vendors", response_model=list[Vendor])
async def list_vendors(store: Annotated[MessageStore, Depends(get_store)]):
    return store.vendors()


@router.get("/templates", response_model=list[MessageTemplate])
async def list_templates(store: Annotated[MessageStore, Depends(get_store)]):
    return store.templates()
