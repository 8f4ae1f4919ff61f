"""
Error taxonomy for the notification manager.

- InvalidVariantError: a notification was requested with a variant tag outside
  the closed set. This is a caller bug, not bad user data.
- NotificationNotFoundError: an id lookup missed. The shell recovers from it.
- EmptyInputError: the session username was blank.
"""

from typing import Any


class NotificationError(Exception):
    """Base class for all notification manager errors."""


class InvalidVariantError(NotificationError, ValueError):
    """Raised when a notification variant tag is not recognized."""

    def __init__(self, variant: Any):
        self.variant = variant
        super().__init__(f"Unknown notification variant: {variant!r}")


class NotificationNotFoundError(NotificationError, LookupError):
    """Raised when no notification exists with the requested id."""

    def __init__(self, notification_id: Any):
        self.notification_id = notification_id
        super().__init__(f"Notification not found: {notification_id}")


class EmptyInputError(NotificationError, ValueError):
    """Raised when a required text input is empty or whitespace-only."""

    def __init__(self, field_name: str = "input"):
        self.field_name = field_name
        super().__init__(f"{field_name} must not be empty")
