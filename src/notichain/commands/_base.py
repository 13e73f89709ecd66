"""Click command class with an eager ``--examples`` flag.

``--help`` stays short; ``--examples`` prints usage examples and exits.
"""

from __future__ import annotations

from typing import Any

import click

DECORATOR_OPTION_HELP = (
    "Decorator spec (repeatable, innermost first), e.g. "
    "'timestamp', 'urgent', 'emoji:🚨'."
)


def _show_examples(examples: str) -> Any:
    def callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return callback


class NotichainCommand(click.Command):
    """Click Command that accepts an ``examples`` keyword."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_show_examples(examples),
                    help="Show usage examples.",
                )
            )


def decorator_option() -> Any:
    """The shared ``-d/--decorator`` option."""
    return click.option(
        "-d",
        "--decorator",
        "decorators",
        multiple=True,
        metavar="SPEC",
        help=DECORATOR_OPTION_HELP,
    )
