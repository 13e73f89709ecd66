"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from notichain.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from notichain.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: just the payload a script would want."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"
    if result.op == "send":
        return "\n".join(result.data.get("delivered", []))
    if result.op == "describe":
        return str(result.data.get("chain", ""))
    if result.op == "list_decorators":
        return "\n".join(item["name"] for item in result.data.get("items", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="nc.ok"), Text(f"  {result.op}", style="nc.op"))


def _field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (dict, list)):
        value = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    console.print(Text(f"  {key}: ", style="nc.key"), Text(str(value)), sep="")


def _chain_tree(links: list[str]) -> Tree:
    """Nest link names outermost first; the terminal is the deepest leaf."""
    *wrappers, terminal = links
    if not wrappers:
        return Tree(Text(terminal, style="nc.terminal"))
    tree = Tree(Text(wrappers[0], style="nc.link"))
    node = tree
    for name in wrappers[1:]:
        node = node.add(Text(name, style="nc.link"))
    node.add(Text(terminal, style="nc.terminal"))
    return tree


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="nc.error"),
        Text(f"  {result.op}: ", style="nc.op"),
        Text(msg),
        sep="",
    )
    if err and err.detail and verbose:
        for key, value in err.detail.items():
            _field(console, key, value)


def _render_send(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "chain", result.data.get("chain", ""))
    if verbose:
        _field(console, "depth", result.data.get("depth", 0))
    for line in result.data.get("delivered", []):
        console.print(Text(f"  {line}", style="nc.message"))


def _render_describe(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "chain", result.data.get("chain", ""))
    _field(console, "depth", result.data.get("depth", 0))
    links = result.data.get("links") or []
    if links:
        console.print(_chain_tree(links))


def _render_decorators(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Name", style="nc.link", no_wrap=True)
    table.add_column("Class")
    table.add_column("Option", style="nc.key")
    table.add_column("Built-in")
    for item in result.data.get("items", []):
        table.add_row(
            Text(item["name"]),
            Text(item["class"]),
            Text(item["option"] or "-"),
            "yes" if item["builtin"] else "no",
        )
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "send": _render_send,
    "describe": _render_describe,
    "list_decorators": _render_decorators,
}
