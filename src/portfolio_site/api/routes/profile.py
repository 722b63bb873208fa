"""Profile routes for the API."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from portfolio_site.api.dependencies import require_admin
from portfolio_site.api.schemas.common import ApiResponse
from portfolio_site.api.schemas.profile import ProfileResponse
from portfolio_site.services.profile import get_profile, upsert_profile

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ApiResponse[ProfileResponse | None])
def read_profile() -> ApiResponse[ProfileResponse | None]:
    """Return the site owner's profile, or null if none has been saved yet."""
    result = get_profile()
    return ApiResponse(data=ProfileResponse(**result) if result else None)


@router.put(
    "",
    response_model=ApiResponse[ProfileResponse],
    dependencies=[Depends(require_admin)],
)
def save_profile(
    payload: Annotated[dict[str, Any], Body(description="Profile fields to set")],
) -> ApiResponse[ProfileResponse]:
    """Create the profile or update it in place.

    Identity and timestamp keys (``_id``, ``createdAt``, ``updatedAt``,
    ``__v``) in the body are ignored.
    """
    return ApiResponse(data=ProfileResponse(**upsert_profile(payload)))
