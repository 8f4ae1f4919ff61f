"""
Notification manager.

A single-session, in-memory notification list driven from the console:
- Domain models (Notification and its User/Alert/System variants)
- NotificationStore for identity and CRUD
- ConsoleChannel standing in for real delivery
- NotificationShell, the interactive menu loop
"""

from notifications.errors import (
    NotificationError,
    InvalidVariantError,
    NotificationNotFoundError,
    EmptyInputError,
)
from notifications.channels import ConsoleChannel, DeliveryRecord, RecordKind, configure_logging
from notifications.models import (
    Variant,
    Notification,
    UserNotification,
    AlertNotification,
    SystemNotification,
    SessionUser,
    build_notification,
)
from notifications.store import NotificationStore
from notifications.shell import NotificationShell

__all__ = [
    "NotificationError",
    "InvalidVariantError",
    "NotificationNotFoundError",
    "EmptyInputError",
    "ConsoleChannel",
    "DeliveryRecord",
    "RecordKind",
    "configure_logging",
    "Variant",
    "Notification",
    "UserNotification",
    "AlertNotification",
    "SystemNotification",
    "SessionUser",
    "build_notification",
    "NotificationStore",
    "NotificationShell",
]
