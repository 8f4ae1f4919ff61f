"""
Interactive shell for the notification manager.

The shell asks for a username, then loops over a main menu until the user
exits. It holds one NotificationStore for the whole session and calls into it
for every action; it never touches notifications behind the store's back.

Design decisions:
- Input comes from an injectable function (defaults to input()) so tests can
  script a whole session
- Output goes through the store's ConsoleChannel
- Lookup misses and bad ids are user-facing messages, never fatal
- InvalidVariantError aborts only the current action
"""

import logging
from typing import Callable, Optional

from notifications.channels import ConsoleChannel
from notifications.errors import EmptyInputError, InvalidVariantError, NotificationNotFoundError
from notifications.models import SessionUser, Variant
from notifications.store import NotificationStore

logger = logging.getLogger("notifications.shell")

InputFunc = Callable[[str], str]

MENU_CHOICES = [
    ("view", "View notifications"),
    ("create", "Create notification"),
    ("read", "Mark as read"),
    ("delete", "Delete notification"),
    ("exit", "Exit"),
]

VARIANT_CHOICES = [
    (Variant.USER, "User notification"),
    (Variant.ALERT, "Alert notification"),
    (Variant.SYSTEM, "System notification"),
]


def parse_id(raw: str) -> Optional[int]:
    """Parse a decimal id. Returns None for anything that is not an integer."""
    try:
        return int(raw.strip())
    except (ValueError, AttributeError):
        return None


def _resolve_choice(raw: str, choices: list) -> Optional[object]:
    """Match an answer against a numbered menu, by number or by key."""
    answer = raw.strip().lower()
    if answer.isdecimal():
        index = int(answer) - 1
        if 0 <= index < len(choices):
            return choices[index][0]
        return None
    for key, _label in choices:
        value = key.value if isinstance(key, Variant) else key
        if answer == value:
            return key
    return None


class NotificationShell:
    """
    The interactive session.

    Example usage:
        shell = NotificationShell(NotificationStore())
        shell.run()
    """

    def __init__(
        self,
        store: NotificationStore,
        channel: Optional[ConsoleChannel] = None,
        input_func: Optional[InputFunc] = None,
    ):
        self.store = store
        self.channel = channel or store.channel
        self.input = input_func or input
        self.user: Optional[SessionUser] = None
        self.running = False

    # =========================================================================
    # Prompts
    # =========================================================================

    def _say(self, text: str) -> None:
        self.channel.info(text)

    def prompt_username(self) -> SessionUser:
        """Ask for a username until a non-blank one is given."""
        while True:
            raw = self.input("Enter your username: ")
            try:
                user = SessionUser.from_input(raw)
            except EmptyInputError:
                self._say("Invalid username, try again")
                continue
            self._say(f"Welcome {user.username}")
            logger.info(f"Session started for {user.username}")
            return user

    def _prompt_menu(self, title: str, choices: list) -> Optional[object]:
        self._say(title)
        for number, (_key, label) in enumerate(choices, start=1):
            self._say(f"  {number}. {label}")
        return _resolve_choice(self.input("> "), choices)

    def prompt_variant(self) -> Variant:
        """Ask for a variant until a known one is chosen."""
        while True:
            variant = self._prompt_menu("Select the type:", VARIANT_CHOICES)
            if variant is not None:
                return variant
            self._say("Invalid type, try again")

    # =========================================================================
    # Actions
    # =========================================================================

    def view(self) -> None:
        notifications = self.store.list()
        if not notifications:
            self._say("No notifications")
            return
        for notification in notifications:
            notification.display()

    def create(self) -> None:
        message = self.input("Write the notification: ")
        variant = self.prompt_variant()
        self.create_notification(message, variant)

    def create_notification(self, message: str, variant) -> None:
        """Create, show and deliver a notification."""
        try:
            notification = self.store.create(message, variant)
        except InvalidVariantError as e:
            logger.error(f"Create aborted: {e}")
            self._say(f"Error: {e}")
            return
        notification.display()
        notification.deliver()
        self.channel.confirm("✅ Notification created", notification_id=notification.id)

    def mark_read(self) -> None:
        if self.store.is_empty:
            self._say("Nothing to mark")
            return
        notification_id = parse_id(self.input("Enter the ID to mark as read: "))
        try:
            self.store.mark_read(notification_id)
        except NotificationNotFoundError:
            self._say("Notification not found")

    def delete(self) -> None:
        if self.store.is_empty:
            self._say("Nothing to delete")
            return
        notification_id = parse_id(self.input("Enter the ID to delete: "))
        if self.store.delete(notification_id):
            self.channel.confirm(f"Notification {notification_id} deleted", notification_id=notification_id)
        else:
            self._say("Notification not found")

    def exit(self) -> None:
        self._say("Goodbye 👋")
        self.running = False

    # =========================================================================
    # Loop
    # =========================================================================

    def handle(self, choice: str) -> None:
        """Dispatch one main-menu choice."""
        actions = {
            "view": self.view,
            "create": self.create,
            "read": self.mark_read,
            "delete": self.delete,
            "exit": self.exit,
        }
        action = actions.get(choice)
        if action is None:
            self._say("Invalid option")
            return
        logger.debug(f"Menu choice: {choice}")
        action()

    def run(self, username: Optional[str] = None) -> None:
        """
        Run the session until the user exits or input ends.

        Args:
            username: Skip the username prompt when given (and non-blank)
        """
        try:
            if username is not None and username.strip():
                self.user = SessionUser.from_input(username)
                self._say(f"Welcome {self.user.username}")
            else:
                self.user = self.prompt_username()

            self.running = True
            while self.running:
                choice = self._prompt_menu("Choose an option:", MENU_CHOICES)
                self.handle(choice)
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, ending session")
            self.running = False
