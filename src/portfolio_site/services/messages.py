"""Contact message service.

Messages are the only content that anonymous visitors can write. They are
never updated, and there is no delete operation.
"""

from __future__ import annotations

import logging
from typing import Any

from portfolio_site.data.db import get_session
from portfolio_site.data.models import Message
from portfolio_site.models import MessageDocument
from portfolio_site.services.documents import apply_document, build_document

logger = logging.getLogger(__name__)

__all__ = ["create_message", "list_messages"]


def _message_to_dict(message: Message) -> dict[str, Any]:
    return {
        "id": message.id,
        "name": message.name,
        "email": message.email,
        "mobile": message.mobile,
        "message": message.message,
        "created_at": message.created_at,
    }


def create_message(payload: dict[str, Any]) -> dict[str, Any]:
    """Validate and store a contact form submission.

    Raises:
        ContentValidationError: On a missing name/email/message, a malformed
            email, or a field over its length limit.
    """
    document = build_document(MessageDocument, payload)
    with get_session() as session:
        message = Message()
        apply_document(message, document)
        session.add(message)
        session.flush()
        logger.info("Stored contact message %s", message.id)
        return _message_to_dict(message)


def list_messages() -> list[dict[str, Any]]:
    """Return all messages, most recent first."""
    with get_session() as session:
        messages = session.query(Message).order_by(Message.created_at.desc(), Message.id).all()
        return [_message_to_dict(m) for m in messages]
