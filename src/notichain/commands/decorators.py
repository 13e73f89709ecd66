"""Command: list registered decorators."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notichain.commands._base import NotichainCommand

if TYPE_CHECKING:
    from notichain.commands._context import AppContext


@click.command(
    cls=NotichainCommand,
    examples="""\
  notichain decorators
  notichain --json decorators""",
)
@click.pass_obj
def decorators(app: AppContext) -> None:
    """List built-in and plugin-provided decorators."""
    app.emit(app.notify_service().list_decorators())
