"""Command: send a message through a decorator chain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from notichain.commands._base import NotichainCommand, decorator_option

if TYPE_CHECKING:
    from notichain.commands._context import AppContext


@click.command(
    cls=NotichainCommand,
    examples="""\
  notichain send "Server is running."
  notichain send "Deploy failed." -d timestamp -d urgent
  notichain send "Database connection lost!" -d timestamp -d urgent -d "emoji:🚨"
  notichain -q send "New user signed up." -d "emoji:🔔" -d "emoji:⚡"
  notichain --json send "Backup complete." -d timestamp""",
)
@click.argument("message")
@decorator_option()
@click.pass_obj
def send(app: AppContext, message: str, decorators: tuple[str, ...]) -> None:
    """Send MESSAGE through the chain (terminal first, then each -d wrapper)."""
    app.emit(app.notify_service().send(message, decorators))
