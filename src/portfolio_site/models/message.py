"""Contact message document.

Limits and messages mirror what the contact form shows to visitors.
"""

from __future__ import annotations

import re

from pydantic import ConfigDict, field_validator

from portfolio_site.models.base import DocumentModel

NAME_MAX_LENGTH = 60
MOBILE_MAX_LENGTH = 20
MESSAGE_MAX_LENGTH = 1000

EMAIL_MAX_LENGTH = 254

# Matched with fullmatch; ASCII word characters only.
EMAIL_PATTERN = re.compile(r"\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*(?:\.\w{2,3})+", re.ASCII)


def _require(value: str | None, message: str) -> str:
    if value is None or value == "":
        raise ValueError(message)
    return value


class MessageDocument(DocumentModel):
    # Run the validators for omitted fields too, so missing values are reported.
    model_config = ConfigDict(validate_default=True)

    name: str | None = None
    email: str | None = None
    mobile: str | None = None
    message: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str:
        v = _require(v, "Please provide your name")
        if len(v) > NAME_MAX_LENGTH:
            raise ValueError(f"Name cannot be more than {NAME_MAX_LENGTH} characters")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str | None) -> str:
        v = _require(v, "Please provide your email")
        if len(v) > EMAIL_MAX_LENGTH or not EMAIL_PATTERN.fullmatch(v):
            raise ValueError("Please provide a valid email address")
        return v

    @field_validator("mobile")
    @classmethod
    def validate_mobile(cls, v: str | None) -> str | None:
        if v is not None and len(v) > MOBILE_MAX_LENGTH:
            raise ValueError(f"Mobile number cannot be more than {MOBILE_MAX_LENGTH} characters")
        return v

    @field_validator("message")
    @classmethod
    def validate_message(cls, v: str | None) -> str:
        v = _require(v, "Please provide a message")
        if len(v) > MESSAGE_MAX_LENGTH:
            raise ValueError(f"Message cannot be more than {MESSAGE_MAX_LENGTH} characters")
        return v
