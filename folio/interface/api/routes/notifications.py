"""Notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from folio.application.usecase.notification import (
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllReadRequest,
    MarkAllReadResponse,
    MarkAllReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadResponse,
    MarkNotificationReadUseCase,
)
from folio.domain.service import JWTService
from folio.interface.api.session import require_user_id

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = None,
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """List the current user's notifications, newest first.

    limit defaults to the configured page size; values outside 1..max
    are rejected with 400.

    Example:
        GET /notifications?limit=20

        {"notifications": [{"notification_id": 12, "kind": "star", ...}]}
    """
    user_id = require_user_id(jwt_service, auth_token)

    return await list_notifications_use_case.execute(
        ListNotificationsRequest(user_id=user_id, limit=limit, offset=offset)
    )


@router.post("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkAllReadResponse:
    """Mark every unread notification of the current user as read."""
    user_id = require_user_id(jwt_service, auth_token)

    return await mark_all_read_use_case.execute(MarkAllReadRequest(user_id=user_id))


@router.get("/unread-count", response_model=GetUnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetUnreadCountResponse:
    user_id = require_user_id(jwt_service, auth_token)

    return await get_unread_count_use_case.execute(
        GetUnreadCountRequest(user_id=user_id)
    )


@router.post("/{notification_id}/read", response_model=MarkNotificationReadResponse)
async def mark_notification_read(
    notification_id: int,
    mark_notification_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> MarkNotificationReadResponse:
    """Mark one notification as read.

    Notifications belonging to someone else are treated as missing and
    return success=false.
    """
    user_id = require_user_id(jwt_service, auth_token)

    return await mark_notification_read_use_case.execute(
        MarkNotificationReadRequest(notification_id=notification_id, user_id=user_id)
    )
