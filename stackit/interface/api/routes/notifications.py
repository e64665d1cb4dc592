"""Notification routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel

from stackit.application.usecase.auth import GetCurrentUserUseCase
from stackit.application.usecase.notification import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkReadRequest,
    MarkReadResponse,
    MarkReadUseCase,
)
from stackit.interface.api.auth import require_user
from stackit.interface.error import to_http_exception

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


class MarkReadAPIRequest(BaseModel):
    """API request for marking notifications read.

    Omit ``notification_ids`` to mark everything read.
    """

    notification_ids: list[UUID] | None = None


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    unread_only: bool = False,
    limit: int = 20,
    offset: int = 0,
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the current user's notifications, newest first."""
    user = await require_user(get_current_user_use_case, auth_token)

    try:
        return await list_notifications_use_case.execute(
            ListNotificationsRequest(
                user_id=user.user_id,
                unread_only=unread_only,
                limit=limit,
                offset=offset,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "list notifications")


@router.post("/read", response_model=MarkReadResponse)
async def mark_read(
    request: MarkReadAPIRequest,
    mark_read_use_case: FromDishka[MarkReadUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> MarkReadResponse:
    """Mark the current user's notifications as read."""
    user = await require_user(get_current_user_use_case, auth_token)

    try:
        return await mark_read_use_case.execute(
            MarkReadRequest(
                user_id=user.user_id,
                notification_ids=(
                    [str(i) for i in request.notification_ids]
                    if request.notification_ids is not None
                    else None
                ),
            )
        )
    except Exception as e:
        raise to_http_exception(e, "mark notifications read")
