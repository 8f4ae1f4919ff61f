"""
Scripted demonstration of the notification manager.

Runs a fixed session without prompting: two notifications are created and
delivered, one is marked read and then deleted, and a lookup of the deleted id
shows the not-found path.
"""

import logging
from typing import Optional

from notifications.channels import ConsoleChannel
from notifications.errors import NotificationNotFoundError
from notifications.models import Variant
from notifications.store import NotificationStore

logger = logging.getLogger("notifications.demo")


def _heading(channel: ConsoleChannel, text: str) -> None:
    channel.info("-" * 70)
    channel.info(text)
    channel.info("-" * 70)


def _show(channel: ConsoleChannel, store: NotificationStore) -> None:
    for notification in store.list():
        notification.display()
    if store.is_empty:
        channel.info("No notifications")


def run_scenario_demo(channel: Optional[ConsoleChannel] = None) -> NotificationStore:
    """
    Walk through create, deliver, mark-read and delete on a fresh store.

    Returns the store so callers can inspect the final state.
    """
    channel = channel or ConsoleChannel()
    store = NotificationStore(channel=channel)

    channel.info("=" * 70)
    channel.info("NOTIFICATION MANAGER DEMO")
    channel.info("=" * 70)

    _heading(channel, "ACTION: Create a user notification and an alert")
    payment = store.create("Pago recibido", Variant.USER)
    payment.display()
    payment.deliver()
    disk = store.create("Disco lleno", Variant.ALERT)
    disk.display()
    disk.deliver()

    _heading(channel, f"ACTION: Mark notification {payment.id} as read")
    store.mark_read(payment.id)
    _show(channel, store)

    _heading(channel, f"ACTION: Delete notification {payment.id}")
    store.delete(payment.id)
    _show(channel, store)

    _heading(channel, f"ACTION: Mark deleted notification {payment.id} as read")
    try:
        store.mark_read(payment.id)
    except NotificationNotFoundError as e:
        logger.info(f"Expected miss: {e}")
        channel.info("Notification not found")

    channel.info("")
    channel.info(f"Lines written: {channel.get_sent_count()}, deliveries: {len(channel.get_deliveries())}")
    return store
