"""Test suite for the contact message service."""

from __future__ import annotations

import time

import pytest

from portfolio_site.errors import ContentValidationError
from portfolio_site.services.messages import create_message, list_messages

VALID = {
    "name": "Jamie Visitor",
    "email": "jamie@example.com",
    "message": "Hello! Loved your projects.",
}


def test_create_valid_message(tmp_db):
    result = create_message({**VALID, "mobile": "+1 555 0100"})

    assert result["id"]
    assert result["mobile"] == "+1 555 0100"
    assert result["created_at"] is not None
    assert len(list_messages()) == 1


@pytest.mark.parametrize(
    "email",
    ["jamie@example.com", "first.last@mail.example.org", "a-b@domain.co"],
)
def test_accepts_simple_emails(tmp_db, email):
    assert create_message({**VALID, "email": email})["email"] == email


@pytest.mark.parametrize(
    "email",
    [
        "not-an-email",
        "user@domain",
        "@example.com",
        "a b@c.com",
        "a@b.com\n",
        "\u00e9@\u00fc.com",
        "user@example.info",
    ],
)
def test_rejects_malformed_emails(tmp_db, email):
    with pytest.raises(ContentValidationError) as exc_info:
        create_message({**VALID, "email": email})

    assert exc_info.value.fields == ["email"]
    assert "valid email" in exc_info.value.message


@pytest.mark.parametrize("email", ["a" * 5000 + "!", "a" * 240 + "!", "a@" + "b" * 240 + "!"])
def test_long_invalid_emails_are_rejected_quickly(tmp_db, email):
    started = time.perf_counter()
    with pytest.raises(ContentValidationError):
        create_message({**VALID, "email": email})

    assert time.perf_counter() - started < 1.0


def test_email_over_254_characters_is_rejected(tmp_db):
    local = "a" * 64
    domain = ".".join(["b" * 60] * 3) + ".com"
    subdomain = "c" * 80
    assert create_message({**VALID, "email": f"{local}@{domain}"})

    with pytest.raises(ContentValidationError):
        create_message({**VALID, "email": f"{local}@{subdomain}.{domain}"})


def test_message_length_limit(tmp_db):
    assert create_message({**VALID, "message": "x" * 1000})

    with pytest.raises(ContentValidationError) as exc_info:
        create_message({**VALID, "message": "x" * 1001})

    assert exc_info.value.fields == ["message"]


def test_name_and_mobile_length_limits(tmp_db):
    with pytest.raises(ContentValidationError):
        create_message({**VALID, "name": "n" * 61})
    with pytest.raises(ContentValidationError):
        create_message({**VALID, "mobile": "1" * 21})

    assert list_messages() == []


def test_missing_fields_are_named(tmp_db):
    with pytest.raises(ContentValidationError) as exc_info:
        create_message({})

    assert set(exc_info.value.fields) == {"name", "email", "message"}
    assert "Please provide your name" in exc_info.value.message


def test_created_at_in_payload_is_ignored(tmp_db):
    result = create_message({**VALID, "createdAt": "1999-01-01T00:00:00Z"})

    assert result["created_at"].year != 1999
