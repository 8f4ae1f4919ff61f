"""
In-memory notification store.

The store owns every notification of the session. It is the only place that
assigns ids, and ids are never reused: deleting notification 2 and creating a
new one yields the next unused id, not 2.

Design decisions:
- Items live in an insertion-ordered dict keyed by id (O(1) lookup,
  list() still returns creation order)
- One store per session, created by the caller and passed around explicitly
- Lookups that miss raise NotificationNotFoundError; delete() reports a miss
  by returning False instead
"""

import logging
from typing import Iterator, Optional, Union

from notifications.channels import ConsoleChannel
from notifications.errors import NotificationNotFoundError
from notifications.models import Notification, Variant, build_notification, coerce_variant

logger = logging.getLogger("notifications.store")


def _is_id(value: object) -> bool:
    """Ids are plain ints; bool is rejected even though True == 1."""
    return isinstance(value, int) and not isinstance(value, bool)


class NotificationStore:
    """
    Ordered collection of notifications with identity-based CRUD.

    Example usage:
        store = NotificationStore()
        n = store.create("Disk almost full", Variant.ALERT)
        n.deliver()
        store.mark_read(n.id)
        store.delete(n.id)
    """

    def __init__(self, channel: Optional[ConsoleChannel] = None):
        """
        Initialize an empty store.

        Args:
            channel: Channel bound to every notification this store creates.
                     Defaults to a stdout channel.
        """
        self.channel = channel or ConsoleChannel()
        self._items: dict[int, Notification] = {}
        self._next_id = 1

    @property
    def next_id(self) -> int:
        """The id the next created notification will get."""
        return self._next_id

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, notification_id: object) -> bool:
        return _is_id(notification_id) and notification_id in self._items

    def __iter__(self) -> Iterator[Notification]:
        return iter(list(self._items.values()))

    def create(self, message: str, variant: Union[Variant, str]) -> Notification:
        """
        Create and store a new unread notification.

        Args:
            message: Notification text
            variant: Variant member or tag ("user", "alert", "system")

        Returns:
            The new notification

        Raises:
            InvalidVariantError: If the variant is not recognized. No id is
                consumed in that case.
        """
        resolved = coerce_variant(variant)
        notification = build_notification(resolved, self._next_id, message, channel=self.channel)
        self._next_id += 1
        self._items[notification.id] = notification
        logger.info(f"Created {resolved.value} notification {notification.id}")
        return notification

    def list(self) -> list[Notification]:
        """All notifications in creation order. Empty list if there are none."""
        return list(self._items.values())

    def find_by_id(self, notification_id: int) -> Notification:
        """
        Look up a notification by id.

        Anything that is not a plain int (None, bool, str) is a miss.

        Raises:
            NotificationNotFoundError: If no notification has this id
        """
        notification = self._items.get(notification_id) if _is_id(notification_id) else None
        if notification is None:
            logger.debug(f"Lookup miss for notification {notification_id}")
            raise NotificationNotFoundError(notification_id)
        return notification

    def mark_read(self, notification_id: int) -> Notification:
        """
        Mark a notification as read. Idempotent.

        Returns:
            The notification that was marked

        Raises:
            NotificationNotFoundError: If no notification has this id
        """
        notification = self.find_by_id(notification_id)
        notification.mark_read()
        logger.debug(f"Marked notification {notification_id} as read")
        return notification

    def delete(self, notification_id: int) -> bool:
        """
        Remove a notification permanently.

        Returns:
            True if a notification was removed, False if the id was unknown
        """
        removed = self._items.pop(notification_id, None) if _is_id(notification_id) else None
        if removed is None:
            logger.debug(f"Delete of unknown notification {notification_id} ignored")
            return False
        logger.info(f"Deleted notification {notification_id}")
        return True
