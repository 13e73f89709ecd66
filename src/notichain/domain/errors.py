"""Exception hierarchy for chain construction and lookup."""

from __future__ import annotations


class NotifierError(Exception):
    """Base class for all notichain domain errors."""


class ChainConstructionError(NotifierError, TypeError):
    """A link was built without a valid successor, or a chain is malformed."""


class UnknownDecoratorError(NotifierError, KeyError):
    """No decorator is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown decorator: {self.name!r}"
