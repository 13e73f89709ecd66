"""Command: show the structure of a decorator chain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notichain.commands._base import NotichainCommand, decorator_option

if TYPE_CHECKING:
    from notichain.commands._context import AppContext


@click.command(
    cls=NotichainCommand,
    examples="""\
  notichain describe -d timestamp -d urgent
  notichain -q describe -d urgent -d timestamp
  notichain --json describe -d "emoji:⚡" -d emoji""",
)
@decorator_option()
@click.pass_obj
def describe(app: AppContext, decorators: tuple[str, ...]) -> None:
    """Describe the chain the given decorators would build."""
    app.emit(app.notify_service().describe(decorators))
