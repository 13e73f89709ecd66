"""Pluggy hook specifications for notichain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from notichain.domain.notifier import NotifierDecorator

hookspec = pluggy.HookspecMarker("notichain")


class NotichainHookSpec:
    """Hook specifications for the notichain plugin system."""

    @hookspec
    def register_decorators(self) -> dict[str, type[NotifierDecorator]] | None:
        """Return name -> decorator class mappings to extend the registry."""

    @hookspec
    def post_send(self, chain: str, message: str, delivered: list[str]) -> None:
        """Called after a chain delivered *message* through the terminal."""
