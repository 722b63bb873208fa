"""Public contact form and message inbox routes."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, status

from portfolio_site.api.schemas.common import ApiResponse
from portfolio_site.api.schemas.messages import MessageResponse
from portfolio_site.services.messages import create_message, list_messages

router = APIRouter(tags=["contact"])


@router.post(
    "/contact",
    response_model=ApiResponse[MessageResponse],
    status_code=status.HTTP_201_CREATED,
)
def submit_contact_message(
    payload: Annotated[dict[str, Any], Body(description="name, email, mobile, message")],
) -> ApiResponse[MessageResponse]:
    """Store a message from the public contact form. No authentication required."""
    return ApiResponse(data=MessageResponse(**create_message(payload)))


# NOTE: the inbox is not gated. Whether contact messages should be
# admin-only is still open with the site owner.
@router.get("/messages", response_model=ApiResponse[list[MessageResponse]])
def list_contact_messages() -> ApiResponse[list[MessageResponse]]:
    """List all contact messages, most recent first."""
    return ApiResponse(data=[MessageResponse(**m) for m in list_messages()])
