"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from stackit.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from stackit.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{handle}", response_model=GetUserProfileResponse)
async def get_user_profile(
    handle: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    limit: int = Query(default=10, ge=1, le=50),
) -> GetUserProfileResponse:
    """Public profile: role, join date, activity counts and recent posts."""
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(handle=handle, limit=limit)
        )
    except Exception as e:
        raise to_http_exception(e, "fetch user profile")
