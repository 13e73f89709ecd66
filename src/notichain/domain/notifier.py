"""Notifier interface, terminal notifier, and the wrapper base.

A chain is built bottom-up: a terminal :class:`SimpleNotifier` first, then
each :class:`NotifierDecorator` wraps the previous result.  Calling
``send()`` on the outermost link transforms the payload outside-in; the
terminal delivers last.

INVARIANT: every wrapper forwards exactly once through ``wrapped.send``.
Subclasses customise :meth:`NotifierDecorator.transform`, never ``send``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import ClassVar

import click

from notichain.domain.errors import ChainConstructionError

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]

# Methods that carry the forwarding contract and may not be overridden.
_SEALED_METHODS = ("send", "describe")


class Notifier(ABC):
    """Capability shared by every link: send a message, describe the chain."""

    @abstractmethod
    def send(self, message: str) -> None:
        """Perform this link's effect on *message*."""

    @abstractmethod
    def describe(self) -> str:
        """Label of the chain from this link inward."""


class SimpleNotifier(Notifier):
    """Terminal link that hands the payload verbatim to an output sink.

    Args:
        sink: Callable receiving the final message.  Defaults to
            :func:`click.echo`.  Exceptions raised by the sink propagate
            to the caller untouched.
    """

    label: ClassVar[str] = "SimpleNotifier"

    def __init__(self, sink: Sink | None = None) -> None:
        self._sink: Sink = sink if sink is not None else click.echo

    def send(self, message: str) -> None:
        self._sink(message)

    def describe(self) -> str:
        return self.label


class NotifierDecorator(Notifier):
    """Base wrapper holding exactly one successor.

    ``send`` applies :meth:`transform` and forwards the result; the default
    transform is the identity.  ``describe`` wraps the successor's label as
    ``"Label(inner)"`` when the class declares ``label``, otherwise it is
    transparent.

    Raises:
        ChainConstructionError: *wrapped* is missing, is not a
            :class:`Notifier`, or heads a malformed chain.
    """

    label: ClassVar[str | None] = None
    # Constructor keyword filled by the "name:value" spec shorthand.
    primary_option: ClassVar[str | None] = None

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        for name in _SEALED_METHODS:
            if name in cls.__dict__:
                msg = (
                    f"{cls.__name__} overrides {name}(); "
                    "override transform() or set label instead"
                )
                raise ChainConstructionError(msg)

    def __init__(self, wrapped: Notifier | None) -> None:
        if wrapped is None:
            msg = f"{type(self).__name__} requires a successor notifier"
            raise ChainConstructionError(msg)
        if not isinstance(wrapped, Notifier):
            msg = (
                f"{type(self).__name__} successor must be a Notifier, "
                f"got {type(wrapped).__name__}"
            )
            raise ChainConstructionError(msg)
        # Walk the successor once so malformed chains fail here, not at send().
        for _link in iter_chain(wrapped):
            pass
        self._wrapped = wrapped

    @property
    def wrapped(self) -> Notifier:
        """The successor link (read-only)."""
        return self._wrapped

    def transform(self, message: str) -> str:
        """Return the payload to forward.  Identity by default."""
        return message

    def send(self, message: str) -> None:
        forwarded = self.transform(message)
        logger.debug("%s forwarding payload", type(self).__name__)
        self._wrapped.send(forwarded)

    def describe(self) -> str:
        inner = self._wrapped.describe()
        if self.label is None:
            return inner
        return f"{self.label}({inner})"


def iter_chain(notifier: Notifier) -> Iterator[Notifier]:
    """Yield links from *notifier* inward, ending with the terminal.

    Raises:
        ChainConstructionError: a link repeats by reference or the walk
            reaches something that is not a :class:`Notifier`.
    """
    seen: set[int] = set()
    link: object = notifier
    while isinstance(link, NotifierDecorator):
        if id(link) in seen:
            msg = f"Cycle detected at {type(link).__name__}"
            raise ChainConstructionError(msg)
        seen.add(id(link))
        yield link
        link = link.wrapped
    if not isinstance(link, Notifier):
        msg = f"Chain does not end in a Notifier (found {type(link).__name__})"
        raise ChainConstructionError(msg)
    yield link


def chain_depth(notifier: Notifier) -> int:
    """Number of wrapper links above the terminal."""
    return sum(1 for _ in iter_chain(notifier)) - 1


def terminal_of(notifier: Notifier) -> Notifier:
    """Return the innermost link of the chain."""
    link = notifier
    for link in iter_chain(notifier):
        pass
    return link
