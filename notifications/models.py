"""
Domain models for the notification manager.

A notification is a small record (id, message, read flag) that comes in exactly
one of three variants. The variants only differ in how they announce
themselves when delivered.

Design decisions:
- Using Pydantic for validation; every field is frozen, mark_read() sets is_read
- The variant set is closed: Variant enum + VARIANT_CLASSES registry
- deliver() is abstract on the base class, so every variant must implement it
- Output goes through a ConsoleChannel bound by the store at creation time
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from notifications.channels import ConsoleChannel, DeliveryRecord
from notifications.errors import EmptyInputError, InvalidVariantError


# =============================================================================
# Variants
# =============================================================================

class Variant(str, Enum):
    """The closed set of notification variants."""
    USER = "user"         # Delivered to the end user
    ALERT = "alert"       # Delivered as an urgent alert
    SYSTEM = "system"     # Delivered as a system-level notice


def coerce_variant(value: Union[Variant, str, Any]) -> Variant:
    """
    Resolve a Variant from an enum member or its string tag.

    Tags are matched case-insensitively and surrounding whitespace is ignored.

    Raises:
        InvalidVariantError: If the value does not name one of the variants
    """
    if isinstance(value, Variant):
        return value
    if isinstance(value, str):
        try:
            return Variant(value.strip().lower())
        except ValueError:
            pass
    raise InvalidVariantError(value)


# =============================================================================
# Notifications
# =============================================================================

class Notification(BaseModel, ABC):
    """
    Base notification record.

    Only the store should construct notifications (it assigns the id). All
    fields are frozen; mark_read() is the only way to flip the read flag.
    """
    id: int = Field(..., gt=0, frozen=True, description="Store-assigned identifier")
    message: str = Field(..., frozen=True, description="Free-form notification text")
    is_read: bool = Field(default=False, frozen=True, description="Set once the user marks it read")
    variant: Variant = Field(..., frozen=True)

    model_config = ConfigDict(validate_assignment=True)

    _channel: ConsoleChannel = PrivateAttr(default_factory=ConsoleChannel)

    # Prefix written in front of the message on delivery
    MARKER: ClassVar[str] = ""

    def bind_channel(self, channel: ConsoleChannel) -> "Notification":
        """Route this notification's output through the given channel."""
        self._channel = channel
        return self

    @property
    def channel(self) -> ConsoleChannel:
        return self._channel

    def render(self) -> str:
        """Build the display line for the current state."""
        status = "yes" if self.is_read else "no"
        return f"[{self.id}] {self.message} - Read: {status}"

    def display(self) -> str:
        """Write the display line to the channel and return it."""
        line = self.render()
        self._channel.display(self.id, line)
        return line

    def mark_read(self) -> None:
        """
        Mark this notification as read.

        Always succeeds, including when it was already read.
        """
        if not self.is_read:
            # is_read is frozen against outside assignment
            object.__setattr__(self, "is_read", True)
        self._channel.confirm(f"Notification {self.id} marked as read", notification_id=self.id)

    def _send(self) -> DeliveryRecord:
        return self._channel.deliver(self.id, self.variant.value, f"{self.MARKER}: {self.message}")

    @abstractmethod
    def deliver(self) -> DeliveryRecord:
        """Write the variant-specific delivery line. Never mutates state."""


class UserNotification(Notification):
    """Notification addressed to the end user."""
    variant: Literal[Variant.USER] = Field(default=Variant.USER, frozen=True)

    MARKER: ClassVar[str] = "👤 User notification"

    def deliver(self) -> DeliveryRecord:
        return self._send()


class AlertNotification(Notification):
    """Urgent alert."""
    variant: Literal[Variant.ALERT] = Field(default=Variant.ALERT, frozen=True)

    MARKER: ClassVar[str] = "⚠️ Alert notification"

    def deliver(self) -> DeliveryRecord:
        return self._send()


class SystemNotification(Notification):
    """System-level notice."""
    variant: Literal[Variant.SYSTEM] = Field(default=Variant.SYSTEM, frozen=True)

    MARKER: ClassVar[str] = "💻 System notification"

    def deliver(self) -> DeliveryRecord:
        return self._send()


VARIANT_CLASSES: dict[Variant, type[Notification]] = {
    Variant.USER: UserNotification,
    Variant.ALERT: AlertNotification,
    Variant.SYSTEM: SystemNotification,
}


def build_notification(
    variant: Union[Variant, str],
    notification_id: int,
    message: str,
    channel: Optional[ConsoleChannel] = None,
) -> Notification:
    """
    Construct a notification of the given variant.

    Args:
        variant: Variant member or tag ("user", "alert", "system")
        notification_id: Id to assign
        message: Notification text
        channel: Channel to bind; a fresh stdout channel if omitted

    Raises:
        InvalidVariantError: If the variant is not recognized
    """
    cls = VARIANT_CLASSES[coerce_variant(variant)]
    notification = cls(id=notification_id, message=message)
    if channel is not None:
        notification.bind_channel(channel)
    return notification


# =============================================================================
# Session
# =============================================================================

class SessionUser(BaseModel):
    """The single user owning the current session."""
    username: str = Field(..., min_length=1, description="Non-blank display name")

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @classmethod
    def from_input(cls, raw: str) -> "SessionUser":
        """
        Build a session user from raw prompt input.

        Raises:
            EmptyInputError: If the input is empty or whitespace-only
        """
        if raw is None or not raw.strip():
            raise EmptyInputError("username")
        return cls(username=raw)
