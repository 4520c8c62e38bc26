"""Notification use cases."""

from .get_unread_count import (
    GetUnreadCountRequest,
    GetUnreadCountResponse,
    GetUnreadCountUseCase,
)
from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from .mark_all_read import MarkAllReadRequest, MarkAllReadResponse, MarkAllReadUseCase
from .mark_notification_read import (
    MarkNotificationReadRequest,
    MarkNotificationReadResponse,
    MarkNotificationReadUseCase,
)

__all__ = [
    "GetUnreadCountRequest",
    "GetUnreadCountResponse",
    "GetUnreadCountUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllReadRequest",
    "MarkAllReadResponse",
    "MarkAllReadUseCase",
    "MarkNotificationReadRequest",
    "MarkNotificationReadResponse",
    "MarkNotificationReadUseCase",
    "NotificationItem",
]
