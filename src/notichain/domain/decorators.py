"""Concrete wrapper links.

Each decorator applies ONE transformation before forwarding:

- TimestampDecorator → ``"[01/15/2024, 10:30:00] message"``
- UrgentDecorator    → ``"URGENT: MESSAGE"``
- EmojiDecorator     → ``"🔔 message"``

Nesting order changes the output: the outermost decorator transforms
first, so ``UrgentDecorator(TimestampDecorator(...))`` uppercases the
message before the timestamp is added, while
``TimestampDecorator(UrgentDecorator(...))`` uppercases the timestamped
text.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import ClassVar

from notichain.domain.notifier import Notifier, NotifierDecorator

DEFAULT_TIMESTAMP_FORMAT = "%m/%d/%Y, %H:%M:%S"
DEFAULT_EMOJI = "\U0001f514"  # bell
URGENT_MARKER = "URGENT:"

Clock = Callable[[], datetime]


class TimestampDecorator(NotifierDecorator):
    """Prefix the payload with ``[<now>]`` rendered through *fmt*.

    Args:
        wrapped: Successor link.
        fmt: ``strftime`` format for the prefix.
        clock: Zero-argument callable returning the current time.
    """

    label: ClassVar[str] = "TimestampDecorator"
    primary_option: ClassVar[str] = "fmt"

    def __init__(
        self,
        wrapped: Notifier | None,
        *,
        fmt: str = DEFAULT_TIMESTAMP_FORMAT,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(wrapped)
        self._fmt = fmt
        self._clock: Clock = clock or datetime.now

    @property
    def fmt(self) -> str:
        return self._fmt

    def transform(self, message: str) -> str:
        stamp = self._clock().strftime(self._fmt)
        return f"[{stamp}] {message}"


class UrgentDecorator(NotifierDecorator):
    """Uppercase the payload and prefix it with ``URGENT:``."""

    label: ClassVar[str] = "UrgentDecorator"

    def transform(self, message: str) -> str:
        return f"{URGENT_MARKER} {message.upper()}"


class EmojiDecorator(NotifierDecorator):
    """Prefix the payload with a marker string (a bell by default)."""

    label: ClassVar[str] = "EmojiDecorator"
    primary_option: ClassVar[str] = "emoji"

    def __init__(self, wrapped: Notifier | None, emoji: str = DEFAULT_EMOJI) -> None:
        super().__init__(wrapped)
        self._emoji = emoji

    @property
    def emoji(self) -> str:
        return self._emoji

    def transform(self, message: str) -> str:
        return f"{self._emoji} {message}"
