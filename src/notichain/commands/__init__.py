"""Subcommand modules for notichain.

``register_commands()`` imports lazily so ``notichain --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach every standalone command to the root group."""
    from notichain.commands.decorators import decorators
    from notichain.commands.describe import describe
    from notichain.commands.send import send

    cli.add_command(send)
    cli.add_command(describe)
    cli.add_command(decorators)
