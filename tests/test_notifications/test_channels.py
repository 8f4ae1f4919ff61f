"""
Tests for the console channel.

These tests verify that the channel writes to its stream, records
every line and that logging setup is idempotent.
"""

import io
import logging

import pytest

from notifications import channels as channels_module
from notifications.channels import (
    ConsoleChannel,
    DeliveryRecord,
    RecordKind,
    configure_logging,
)


@pytest.fixture
def package_logger():
    """The package logger, with its handlers and level restored afterwards."""
    package_logger = logging.getLogger("notifications")
    original_handlers = list(package_logger.handlers)
    original_level = package_logger.level
    yield package_logger
    package_logger.handlers = original_handlers
    package_logger.setLevel(original_level)


class TestConsoleChannel:
    """Tests for writing and tracking lines."""

    def test_deliver_writes_and_records(self, channel: ConsoleChannel, stream: io.StringIO):
        """Test that a delivery is written to the stream and recorded."""
        record = channel.deliver(1, "alert", "⚠️ Alert notification: Disco lleno")

        assert stream.getvalue() == "⚠️ Alert notification: Disco lleno\n"
        assert record.kind == RecordKind.DELIVER
        assert record.notification_id == 1
        assert record.variant == "alert"
        assert channel.get_sent_count() == 1

    def test_tracks_all_kinds_in_order(self, channel: ConsoleChannel):
        """Test that every kind of line is recorded in write order."""
        channel.info("Choose an option:")
        channel.display(1, "[1] a - Read: no")
        channel.deliver(1, "user", "👤 User notification: a")
        channel.confirm("Notification 1 marked as read", notification_id=1)

        assert [r.kind for r in channel.sent_messages] == [
            RecordKind.INFO,
            RecordKind.DISPLAY,
            RecordKind.DELIVER,
            RecordKind.CONFIRM,
        ]
        assert channel.get_lines()[0] == "Choose an option:"
        assert len(channel.get_deliveries()) == 1

    def test_find_by_notification(self, channel: ConsoleChannel):
        """Test finding every line written for one notification."""
        channel.deliver(1, "user", "first")
        channel.deliver(2, "user", "second")
        channel.confirm("Notification 1 marked as read", notification_id=1)

        found = channel.find_by_notification(1)

        assert [r.text for r in found] == ["first", "Notification 1 marked as read"]
        assert channel.find_by_notification(3) == []

    def test_clear_history(self, channel: ConsoleChannel):
        """Test clearing the recorded history."""
        channel.info("hello")
        assert channel.get_sent_count() == 1

        channel.clear_history()

        assert channel.get_sent_count() == 0

    def test_defaults_to_stdout(self, capsys):
        """Test that a channel without a stream writes to stdout."""
        channel = ConsoleChannel()

        channel.info("to stdout")

        assert capsys.readouterr().out == "to stdout\n"

    def test_deliver_logs_debug(self, channel: ConsoleChannel, caplog):
        """Test that deliveries are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="notifications.channels"):
            channel.deliver(4, "system", "💻 System notification: up")

        assert any("[DELIVER] #4" in r.message for r in caplog.records)


class TestDeliveryRecord:
    """Tests for DeliveryRecord."""

    def test_str_with_notification(self):
        """Test string representation of a notification line."""
        record = DeliveryRecord(kind=RecordKind.DELIVER, text="hi", notification_id=3)
        assert str(record) == "DELIVER #3: hi"

    def test_str_without_notification(self):
        """Test string representation of a plain line."""
        record = DeliveryRecord(kind=RecordKind.INFO, text="No notifications")
        assert str(record) == "INFO: No notifications"


class TestConfigureLogging:
    """Tests for the package logging setup."""

    def test_installs_single_handler(self, package_logger: logging.Logger):
        """Test that repeated calls install one handler and update the level."""
        configure_logging(logging.INFO)
        configure_logging(logging.DEBUG)

        assert package_logger.handlers.count(channels_module._handler) == 1
        assert package_logger.level == logging.DEBUG

    def test_reattaches_same_handler(self, package_logger: logging.Logger):
        """Test that the module handler is reused after being removed."""
        configure_logging(logging.INFO)
        handler = channels_module._handler
        package_logger.removeHandler(handler)

        configure_logging(logging.INFO)

        assert channels_module._handler is handler
        assert handler in package_logger.handlers

    def test_handler_format(self, package_logger: logging.Logger):
        """Test that the handler uses the package log format."""
        configure_logging(logging.WARNING)

        formatter = channels_module._handler.formatter
        assert formatter._fmt == "%(asctime)s | %(levelname)s | %(message)s"
        assert formatter.datefmt == "%H:%M:%S"
