"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from rangectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from rangectl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="rc.ok"), Text(f"  {result.op}", style="rc.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="rc.key"), Text(str(value)), sep="")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_document(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    """Print the document text alone so the output can be piped back in."""
    console.print(Text(result.data["text"]), soft_wrap=True)


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    console.print(Text("  Document is valid", style="rc.ok"))
    if verbose:
        config = result.data.get("config") or {}
        _field(console, "config keys", ", ".join(config) or "(none)")
        cards = result.data.get("cards")
        _field(console, "board cards", "unchanged" if cards is None else len(cards))


def _render_import(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    _status_line(console, result)
    console.print(Text(f"  {result.data.get('message', 'Imported')}", style="rc.ok"))
    if verbose:
        console.print(Text(result.data["text"]), soft_wrap=True)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    """Print the single surfaced error verbatim, in red."""
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(
        Text("ERROR", style="rc.error"),
        Text(f"  {result.op}", style="rc.op"),
    )
    console.print(Text(f"  {message}", style="rc.error"))
    if verbose and error is not None:
        _field(console, "code", error.code)
        for key, value in error.detail.items():
            _field(console, key, value)
    for warning in result.warnings:
        console.print(Text(f"  WARNING: {warning}", style="rc.warning"))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "export_document": _render_document,
    "validate_document": _render_validate,
    "import_document": _render_import,
}
