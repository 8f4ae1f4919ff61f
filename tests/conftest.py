"""
Shared pytest fixtures for the notification manager tests.

Every test gets a fresh channel writing into an in-memory buffer and a fresh
store, so nothing leaks between tests.
"""

import io
from typing import Callable

import pytest

from notifications.channels import ConsoleChannel
from notifications.store import NotificationStore


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory buffer standing in for stdout."""
    return io.StringIO()


@pytest.fixture
def channel(stream: io.StringIO) -> ConsoleChannel:
    """Fresh ConsoleChannel writing into the buffer."""
    return ConsoleChannel(stream=stream)


@pytest.fixture
def store(channel: ConsoleChannel) -> NotificationStore:
    """Fresh, empty NotificationStore bound to the test channel."""
    return NotificationStore(channel=channel)


@pytest.fixture
def scripted_input() -> Callable[..., Callable[[str], str]]:
    """
    Build an input function that replays the given answers in order.

    Raises EOFError once the answers run out, like input() at end of stdin.
    The prompts that were shown are collected on the function's `prompts` list.
    """
    def factory(*answers: str) -> Callable[[str], str]:
        remaining = list(answers)
        prompts: list[str] = []

        def fake_input(prompt: str = "") -> str:
            prompts.append(prompt)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        fake_input.prompts = prompts
        return fake_input

    return factory
