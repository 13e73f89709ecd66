"""NotifyService — build chains from specs, send, describe, list.

Every operation returns a :class:`ServiceResult`.  Chain construction
errors become error results; delivery failures other than ``OSError``
propagate unchanged to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any

from notichain.domain.chain import DECORATOR_REGISTRY, build_chain, is_builtin
from notichain.domain.errors import ChainConstructionError, UnknownDecoratorError
from notichain.domain.notifier import Notifier, SimpleNotifier, chain_depth, iter_chain
from notichain.services.result import ServiceResult

if TYPE_CHECKING:
    from notichain.config.settings import NotichainSettings
    from notichain.domain.notifier import Sink
    from notichain.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class NotifyService:
    """Chain operations configured by :class:`NotichainSettings`.

    Args:
        settings: Supplies the default chain and decorator defaults.
        plugins: Loaded plugin manager; ``post_send`` is dispatched to it.
        sink: Extra destination for delivered messages.  Messages are
            always recorded in the result's ``delivered`` list.
        clock: Clock injected into timestamp decorators.
    """

    def __init__(
        self,
        settings: NotichainSettings,
        plugins: PluginManager | None = None,
        *,
        sink: Sink | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._settings = settings
        self._plugins = plugins
        self._sink = sink
        self._clock = clock

    def _defaults(self) -> dict[str, dict[str, Any]]:
        defaults = self._settings.decorator_defaults()
        if self._clock is not None:
            defaults["timestamp"] = {**defaults["timestamp"], "clock": self._clock}
        return defaults

    def _assemble(self, op: str, decorators: Sequence[str], sink: Sink) -> Notifier | ServiceResult:
        specs = list(decorators) or list(self._settings.chain.default)
        try:
            return build_chain(SimpleNotifier(sink), specs, defaults=self._defaults())
        except UnknownDecoratorError as exc:
            return ServiceResult.failure(
                op,
                "UNKNOWN_DECORATOR",
                str(exc),
                name=exc.name,
                available=sorted(DECORATOR_REGISTRY),
            )
        except ChainConstructionError as exc:
            return ServiceResult.failure(op, "INVALID_CHAIN", str(exc), specs=specs)

    def send(self, message: str, decorators: Sequence[str] = ()) -> ServiceResult:
        """Send *message* through a chain built from *decorators* (innermost first)."""
        op = "send"
        delivered: list[str] = []

        def record(text: str) -> None:
            delivered.append(text)
            if self._sink is not None:
                self._sink(text)

        chain = self._assemble(op, decorators, record)
        if isinstance(chain, ServiceResult):
            return chain

        description = chain.describe()
        try:
            chain.send(message)
        except OSError as exc:
            logger.debug("Delivery failed through %s", description, exc_info=True)
            return ServiceResult.failure(op, "DELIVERY_FAILED", str(exc), chain=description)

        warnings: list[str] = []
        self._dispatch_post_send(description, message, delivered, warnings)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "chain": description,
                "depth": chain_depth(chain),
                "message": message,
                "delivered": delivered,
            },
            warnings=warnings,
        )

    def describe(self, decorators: Sequence[str] = ()) -> ServiceResult:
        """Describe the chain *decorators* would build, without sending."""
        op = "describe"
        chain = self._assemble(op, decorators, lambda _text: None)
        if isinstance(chain, ServiceResult):
            return chain
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "chain": chain.describe(),
                "depth": chain_depth(chain),
                "links": [type(link).__name__ for link in iter_chain(chain)],
            },
        )

    def list_decorators(self) -> ServiceResult:
        """List every registered decorator name."""
        items = [
            {
                "name": name,
                "class": cls.__name__,
                "builtin": is_builtin(name),
                "option": cls.primary_option or "",
            }
            for name, cls in sorted(DECORATOR_REGISTRY.items())
        ]
        return ServiceResult(
            ok=True,
            op="list_decorators",
            data={"items": items, "count": len(items)},
        )

    def _dispatch_post_send(
        self,
        chain: str,
        message: str,
        delivered: list[str],
        warnings: list[str],
    ) -> None:
        """Notify plugins of a delivery.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._plugins is None:
            return
        try:
            self._plugins.hook.post_send(chain=chain, message=message, delivered=list(delivered))
        except Exception:
            logger.debug("post_send hook failed", exc_info=True)
            warnings.append("post_send plugin hook failed")
