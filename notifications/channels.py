"""
Console output channel for the notification manager.

Nothing is actually sent anywhere: "delivering" a notification means writing a
line to the console. The channel also keeps a history of everything it wrote so
tests can assert on output without capturing stdout.

Design decisions:
- One channel per session, handed to the store and the shell
- The target stream is resolved at write time (defaults to sys.stdout)
- Every emitted line is recorded as a DeliveryRecord
- Logging goes to stderr so it never interleaves with the menu on stdout
"""

import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, TextIO

logger = logging.getLogger("notifications.channels")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"


_handler: Optional[logging.StreamHandler] = None


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Safe to call more than once: the handler is only installed once,
    later calls just change the level.
    """
    global _handler
    package_logger = logging.getLogger("notifications")
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    if _handler not in package_logger.handlers:
        _handler.setStream(sys.stderr)
        package_logger.addHandler(_handler)
    package_logger.setLevel(level)
    return package_logger


class RecordKind(str, Enum):
    """What a recorded console line was for."""
    DELIVER = "deliver"
    DISPLAY = "display"
    CONFIRM = "confirm"
    INFO = "info"


@dataclass
class DeliveryRecord:
    """
    A single line written by the channel.

    notification_id and variant are only set for lines that belong to a
    specific notification.
    """
    kind: RecordKind
    text: str
    notification_id: Optional[int] = None
    variant: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        if self.notification_id is None:
            return f"{self.kind.value.upper()}: {self.text}"
        return f"{self.kind.value.upper()} #{self.notification_id}: {self.text}"


class ConsoleChannel:
    """
    Writes notification output to a text stream and tracks what was written.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize the console channel.

        Args:
            stream: Where to write. None means sys.stdout at the time of writing.
        """
        self._stream = stream
        self.sent_messages: list[DeliveryRecord] = []

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _emit(self, record: DeliveryRecord) -> DeliveryRecord:
        print(record.text, file=self.stream)
        self.sent_messages.append(record)
        return record

    def deliver(self, notification_id: int, variant: str, text: str) -> DeliveryRecord:
        """
        Emit a notification's delivery line.

        Args:
            notification_id: Id of the notification being delivered
            variant: Variant tag, kept on the record for assertions
            text: The fully rendered line, marker included

        Returns:
            The DeliveryRecord that was written
        """
        logger.debug(f"[DELIVER] #{notification_id} ({variant}) | {text}")
        return self._emit(DeliveryRecord(
            kind=RecordKind.DELIVER,
            text=text,
            notification_id=notification_id,
            variant=variant,
        ))

    def display(self, notification_id: int, text: str) -> DeliveryRecord:
        """Emit a notification's display line."""
        return self._emit(DeliveryRecord(
            kind=RecordKind.DISPLAY,
            text=text,
            notification_id=notification_id,
        ))

    def confirm(self, text: str, notification_id: Optional[int] = None) -> DeliveryRecord:
        """Emit a confirmation line (mark-read, delete, create)."""
        return self._emit(DeliveryRecord(
            kind=RecordKind.CONFIRM,
            text=text,
            notification_id=notification_id,
        ))

    def info(self, text: str) -> DeliveryRecord:
        """Emit a plain informational line (menus, empty states, errors)."""
        return self._emit(DeliveryRecord(kind=RecordKind.INFO, text=text))

    def get_sent_count(self) -> int:
        """Get the number of lines written (for testing)."""
        return len(self.sent_messages)

    def get_deliveries(self) -> list[DeliveryRecord]:
        """Get only the delivery lines."""
        return [m for m in self.sent_messages if m.kind == RecordKind.DELIVER]

    def get_lines(self) -> list[str]:
        """Get the text of every line written, in order."""
        return [m.text for m in self.sent_messages]

    def find_by_notification(self, notification_id: int) -> list[DeliveryRecord]:
        """Find every line written on behalf of a notification."""
        return [m for m in self.sent_messages if m.notification_id == notification_id]

    def clear_history(self):
        """Clear recorded history (useful between tests)."""
        self.sent_messages.clear()
