"""Tests for compose-form helpers."""

from __future__ import annotations

from message_center.client.compose import (
    ComposeForm,
    apply_template,
    map_send_errors,
    to_new_message,
    validate_compose,
)
from message_center.errors import MessageAPIError
from message_center.schemas.message import Priority
from message_center.schemas.reference import MessageTemplate


def test_empty_vendor_form():
    errors = validate_compose(ComposeForm())
    assert errors == {
        "recipient": "Please select a vendor",
        "subject": "Subject is required",
        "content": "Message content is required",
    }


def test_custom_recipient_rules():
    form = ComposeForm(recipient_type="custom", subject="s", content="c")
    assert validate_compose(form) == {"recipient": "Recipient is required"}
    form.custom_recipient = "not-an-email"
    assert validate_compose(form) == {"recipient": "Please enter a valid email address"}
    form.custom_recipient = " ann@example.org "
    assert validate_compose(form) == {}


def test_whitespace_only_fields_are_empty():
    form = ComposeForm(vendor_id="vendor1", subject="   ", content="\n")
    assert set(validate_compose(form)) == {"subject", "content"}


def test_apply_template_keeps_recipient():
    form = ComposeForm(vendor_id="vendor2", priority=Priority.HIGH)
    template = MessageTemplate(id="t", name="T", subject="Subj", content="Body")
    filled = apply_template(form, template)
    assert filled.subject == "Subj"
    assert filled.content == "Body"
    assert filled.vendor_id == "vendor2"
    assert filled.priority == Priority.HIGH
    assert form.subject == ""


def test_to_new_message_vendor():
    data = to_new_message(ComposeForm(vendor_id="vendor1", custom_recipient="x@y.z", subject=" s ", content="c"))
    assert data.vendor_id == "vendor1"
    assert data.recipient is None
    assert data.subject == "s"
    assert data.priority == "medium"


def test_to_new_message_custom():
    data = to_new_message(ComposeForm(recipient_type="custom", custom_recipient=" x@y.z ", subject="s", content="c"))
    assert data.recipient == "x@y.z"
    assert data.vendor_id is None


def test_map_send_errors_routes_details_to_fields():
    exc = MessageAPIError("Validation failed", status_code=400, details=[
        "Please enter a valid email address",
        "Subject is required",
        "Message content is required",
        "Something odd",
    ])
    assert map_send_errors(exc) == {
        "recipient": "Please enter a valid email address",
        "subject": "Subject is required",
        "content": "Message content is required",
        "general": "Something odd",
    }


def test_map_send_errors_without_details():
    assert map_send_errors(MessageAPIError("Network error")) == {"general": "Network error"}
    assert map_send_errors(MessageAPIError("")) == {
        "general": "Failed to send message. Please try again.",
    }
