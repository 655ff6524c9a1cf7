"""Compose-form validation, template prefill and error mapping."""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel

from message_center.errors import MessageAPIError
from message_center.schemas.message import NewMessage, Priority
from message_center.schemas.reference import MessageTemplate

_EMAIL_RE = re.compile(r"\S+@\S+\.\S+")

# Server detail -> form field, first match wins.
_DETAIL_FIELDS = [
    ("recipient", "recipient"),
    ("email", "recipient"),
    ("vendor", "recipient"),
    ("subject", "subject"),
    ("content", "content"),
    ("priority", "priority"),
]


class ComposeForm(BaseModel):
    recipient_type: Literal["vendor", "custom"] = "vendor"
    vendor_id: str = ""
    custom_recipient: str = ""
    subject: str = ""
    content: str = ""
    priority: Priority = Priority.MEDIUM


def validate_compose(form: ComposeForm) -> dict[str, str]:
    """Per-field errors for *form*; empty when it can be sent."""
    errors: dict[str, str] = {}

    if form.recipient_type == "vendor":
        if not form.vendor_id:
            errors["recipient"] = "Please select a vendor"
    else:
        recipient = form.custom_recipient.strip()
        if not recipient:
            errors["recipient"] = "Recipient is required"
        elif not _EMAIL_RE.search(recipient):
            errors["recipient"] = "Please enter a valid email address"

    if not form.subject.strip():
        errors["subject"] = "Subject is required"
    if not form.content.strip():
        errors["content"] = "Message content is required"
    return errors


def apply_template(form: ComposeForm, template: MessageTemplate) -> ComposeForm:
    return form.model_copy(update={"subject": template.subject, "content": template.content})


def to_new_message(form: ComposeForm) -> NewMessage:
    data = NewMessage(
        subject=form.subject.strip(),
        content=form.content.strip(),
        priority=form.priority.value,
    )
    if form.recipient_type == "vendor":
        data.vendor_id = form.vendor_id
    else:
        data.recipient = form.custom_recipient.strip()
    return data


def map_send_errors(exc: MessageAPIError) -> dict[str, str]:
    """Route server validation details to form fields.

    Details that name no field, and errors without details, end up under
    ``"general"``.
    """
    if not exc.details:
        return {"general": exc.message or "Failed to send message. Please try again."}

    errors: dict[str, str] = {}
    general: list[str] = []
    for detail in exc.details:
        lowered = detail.lower()
        field = next((f for key, f in _DETAIL_FIELDS if key in lowered), None)
        if field is None or field in errors:
            general.append(detail)
        else:
            errors[field] = detail
    if general:
        errors["general"] = ", ".join(general)
    return errors
