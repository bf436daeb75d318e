"""Notification inbox routes.

Every route acts on the caller's own inbox.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from stackit.application.usecase.notification import (
    ClearNotificationsRequest,
    ClearNotificationsResponse,
    ClearNotificationsUseCase,
    DeleteNotificationRequest,
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    ListUnreadNotificationsResponse,
    ListUnreadNotificationsUseCase,
    MarkAllReadRequest,
    MarkAllReadResponse,
    MarkAllReadUseCase,
    MarkReadRequest,
    MarkReadResponse,
    MarkReadUseCase,
)
from stackit.domain.service import JWTService
from stackit.interface.api.auth import require_principal

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListNotificationsResponse:
    """List the caller's notifications, newest first."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(principal=principal)
    )


@router.get("/unread", response_model=ListUnreadNotificationsResponse)
async def list_unread_notifications(
    list_unread_use_case: FromDishka[ListUnreadNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListUnreadNotificationsResponse:
    """List the caller's unread notifications, newest first."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await list_unread_use_case.execute(
        ListNotificationsRequest(principal=principal)
    )


@router.put("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> MarkAllReadResponse:
    """Mark every notification of the caller as read."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await mark_all_read_use_case.execute(
        MarkAllReadRequest(principal=principal)
    )


@router.put("/{notification_id}/read", response_model=MarkReadResponse)
async def mark_read(
    notification_id: UUID,
    mark_read_use_case: FromDishka[MarkReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> MarkReadResponse:
    """Mark one notification as read."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await mark_read_use_case.execute(
        MarkReadRequest(principal=principal, notification_id=str(notification_id))
    )


# Declared before /{notification_id} so "clear-all" is not parsed as an ID
@router.delete("/clear-all", response_model=ClearNotificationsResponse)
async def clear_notifications(
    clear_notifications_use_case: FromDishka[ClearNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ClearNotificationsResponse:
    """Delete every notification of the caller."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await clear_notifications_use_case.execute(
        ClearNotificationsRequest(principal=principal)
    )


@router.delete("/{notification_id}", response_model=DeleteNotificationResponse)
async def delete_notification(
    notification_id: UUID,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> DeleteNotificationResponse:
    """Delete one notification."""
    principal = require_principal(jwt_service, auth_token, authorization)
    return await delete_notification_use_case.execute(
        DeleteNotificationRequest(
            principal=principal, notification_id=str(notification_id)
        )
    )
