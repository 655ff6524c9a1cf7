"""Async HTTP client for the message API."""

from __future__ import annotations

from typing import Any

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from message_center.config import ClientSettings
from message_center.errors import MessageAPIError
from message_center.schemas.message import (
    Message,
    MessagesResponse,
    MessageType,
    NewMessage,
)
from message_center.schemas.reference import MessageTemplate, Vendor

logger = structlog.get_logger()


class MessageAPIClient:
    """Typed wrapper over the message endpoints.

    Every failure surfaces as :class:`MessageAPIError`: server error bodies
    keep their ``error`` string and ``details``; transport errors and
    timeouts get a generic message.  Nothing is retried.

    Use either ``start()``/``stop()`` or ``async with``.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def start(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self._settings.base_url,
            timeout=httpx.Timeout(self._settings.timeout_seconds),
            transport=self._transport,
        )
        logger.info("message_api_client_started", base_url=self._settings.base_url)

    async def stop(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("message_api_client_stopped")

    async def __aenter__(self) -> MessageAPIClient:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        if self._client is None:
            raise AssertionError("Client not started")

        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            logger.warning("message_api_timeout", method=method, path=path)
            raise MessageAPIError("Request timed out") from exc
        except httpx.TransportError as exc:
            logger.warning("message_api_network_error", method=method, path=path, error=str(exc))
            raise MessageAPIError("Network error") from exc

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            raise MessageAPIError(
                body.get("error") or f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
                details=body.get("details"),
            )
        try:
            return response.json()
        except ValueError as exc:
            logger.warning("message_api_invalid_body", method=method, path=path)
            raise MessageAPIError("Invalid response from server", status_code=response.status_code) from exc

    @staticmethod
    def _parse(schema: Any, data: Any) -> Any:
        try:
            return TypeAdapter(schema).validate_python(data)
        except ValidationError as exc:
            logger.warning("message_api_unexpected_shape", schema=getattr(schema, "__name__", str(schema)))
            raise MessageAPIError("Invalid response from server") from exc

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def get_messages(
        self,
        filter: str | None = None,
        search: str | None = None,
        type: MessageType = MessageType.INBOX,
    ) -> MessagesResponse:
        params: dict[str, str] = {}
        if filter:
            params["filter"] = filter
        if search:
            params["search"] = search
        params["type"] = MessageType(type).value
        data = await self._request("GET", "/messages", params=params)
        return self._parse(MessagesResponse, data)

    async def get_message(self, message_id: str) -> Message:
        return self._parse(Message, await self._request("GET", f"/messages/{message_id}"))

    async def mark_as_read(self, message_id: str) -> Message:
        return self._parse(Message, await self._request("PATCH", f"/messages/{message_id}/read"))

    async def mark_as_unread(self, message_id: str) -> Message:
        return self._parse(Message, await self._request("PATCH", f"/messages/{message_id}/unread"))

    async def mark_as_acknowledged(self, message_id: str) -> Message:
        data = await self._request("PATCH", f"/messages/{message_id}/acknowledged")
        return self._parse(Message, data)

    async def mark_as_unacknowledged(self, message_id: str) -> Message:
        data = await self._request("PATCH", f"/messages/{message_id}/unacknowledged")
        return self._parse(Message, data)

    async def send_message(self, data: NewMessage) -> Message:
        body = data.model_dump(by_alias=True, exclude_none=True)
        return self._parse(Message, await self._request("POST", "/messages", json=body))

    async def delete_message(self, message_id: str) -> None:
        await self._request("DELETE", f"/messages/{message_id}")

    async def get_vendors(self) -> list[Vendor]:
        return self._parse(list[Vendor], await self._request("GET", "/vendors"))

    async def get_templates(self) -> list[MessageTemplate]:
        data = await self._request("GET", "/templates")
        return self._parse(list[MessageTemplate], data)
