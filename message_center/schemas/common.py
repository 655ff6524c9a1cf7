"""Shared response schemas."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    details: list[str] | None = None


class SuccessResponse(BaseModel):
    success: bool = True
