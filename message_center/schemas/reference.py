"""Read-only reference data used by the compose form."""

from __future__ import annotations

from pydantic import BaseModel


class Vendor(BaseModel):
    id: str
    name: str
    email: str
    category: str


class MessageTemplate(BaseModel):
    id: str
    name: str
    subject: str
    content: str
