"""Decorator registry and declarative chain assembly.

Built-in decorators are reserved names.  Plugins add their own through
:func:`register_decorator` (see :mod:`notichain.plugins.manager`).

Spec strings use ``name`` or ``name:value`` where *value* fills the
decorator's ``primary_option`` (``emoji:🚨``, ``timestamp:%H:%M``).
Specs are listed innermost first, matching how chains are built.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field

from notichain.domain.decorators import EmojiDecorator, TimestampDecorator, UrgentDecorator
from notichain.domain.errors import ChainConstructionError, UnknownDecoratorError
from notichain.domain.notifier import Notifier, NotifierDecorator

logger = logging.getLogger(__name__)


def _builtin_decorator_map() -> dict[str, type[NotifierDecorator]]:
    return {
        "timestamp": TimestampDecorator,
        "urgent": UrgentDecorator,
        "emoji": EmojiDecorator,
    }


DECORATOR_REGISTRY: dict[str, type[NotifierDecorator]] = _builtin_decorator_map()


def is_builtin(name: str) -> bool:
    return name in _builtin_decorator_map()


def register_decorator(name: str, decorator_cls: type[NotifierDecorator]) -> None:
    """Register a custom decorator class under *name*.

    Built-in names are reserved.  Registering the same class twice under
    the same name is a no-op.
    """
    normalized_name = name.strip()
    if not normalized_name:
        msg = "Decorator name must not be empty"
        raise ValueError(msg)

    if not isinstance(decorator_cls, type) or not issubclass(decorator_cls, NotifierDecorator):
        msg = f"Decorator {normalized_name!r} must extend NotifierDecorator"
        raise TypeError(msg)

    if is_builtin(normalized_name):
        msg = f"Decorator {normalized_name!r} conflicts with a built-in registration"
        raise ValueError(msg)

    existing = DECORATOR_REGISTRY.get(normalized_name)
    if existing is decorator_cls:
        return
    if existing is not None:
        msg = f"Decorator {normalized_name!r} is already registered to {existing.__name__}"
        raise ValueError(msg)

    DECORATOR_REGISTRY[normalized_name] = decorator_cls
    logger.debug("Registered decorator %s -> %s", normalized_name, decorator_cls.__name__)


def unregister_decorator(name: str) -> None:
    """Remove a custom decorator.  Built-ins cannot be removed."""
    if is_builtin(name):
        msg = f"Cannot unregister built-in decorator {name!r}"
        raise ValueError(msg)
    DECORATOR_REGISTRY.pop(name, None)


def get_decorator(name: str) -> type[NotifierDecorator]:
    try:
        return DECORATOR_REGISTRY[name]
    except KeyError:
        raise UnknownDecoratorError(name) from None


class DecoratorSpec(BaseModel):
    """One requested chain link: registry name plus constructor options."""

    model_config = {"frozen": True}

    name: str
    options: dict[str, Any] = Field(default_factory=dict)


def parse_decorator_spec(text: str) -> DecoratorSpec:
    """Parse ``"name"`` or ``"name:value"`` into a :class:`DecoratorSpec`.

    Only the first colon splits, so ``timestamp:%H:%M`` keeps its format.

    Raises:
        UnknownDecoratorError: *name* is not registered.
        ChainConstructionError: a value was given for a decorator that
            takes no option, or the value after the colon is empty.
    """
    name, sep, value = text.partition(":")
    name = name.strip()
    decorator_cls = get_decorator(name)
    if not sep:
        return DecoratorSpec(name=name)
    option = decorator_cls.primary_option
    if option is None:
        msg = f"Decorator {name!r} does not accept an argument (got {value!r})"
        raise ChainConstructionError(msg)
    if not value:
        msg = f"Decorator {name!r} needs a value after ':'"
        raise ChainConstructionError(msg)
    return DecoratorSpec(name=name, options={option: value})


def build_chain(
    terminal: Notifier,
    specs: Iterable[DecoratorSpec | str],
    *,
    defaults: Mapping[str, Mapping[str, Any]] | None = None,
) -> Notifier:
    """Wrap *terminal* with each spec in turn, innermost first.

    Args:
        terminal: The innermost link.
        specs: Decorator specs (or spec strings) in bottom-up order.
        defaults: Per-decorator-name constructor options applied beneath
            each spec's own options.

    Returns:
        The outermost link (or *terminal* itself when *specs* is empty).
    """
    chain = terminal
    for raw in specs:
        spec = parse_decorator_spec(raw) if isinstance(raw, str) else raw
        decorator_cls = get_decorator(spec.name)
        options = {**(defaults or {}).get(spec.name, {}), **spec.options}
        try:
            chain = decorator_cls(chain, **options)
        except TypeError as exc:
            if isinstance(exc, ChainConstructionError):
                raise
            msg = f"Invalid options for decorator {spec.name!r}: {exc}"
            raise ChainConstructionError(msg) from exc
        logger.debug("Wrapped chain with %s", spec.name)
    return chain
