"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from modgit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from modgit.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode: bare values, one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "list_modules":
        return "\n".join(item["name"] for item in data.get("items", []))
    if result.op in ("plan", "switch"):
        return "\n".join(data.get("patterns", []))
    if result.op in ("classify", "status"):
        return "\n".join(data.get("inside", []))
    if result.op == "check":
        return str(data.get("count", 0))
    if "paths" in data:
        return "\n".join(data["paths"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="modgit.ok")
    op = Text(f"  {result.op}", style="modgit.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="modgit.key")
    if key in ("module", "parent"):
        v = Text(str(value), style="modgit.module")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _path_list(console: Console, heading: str, paths: list[str], style: str) -> None:
    console.print(Text(f"  {heading} ({len(paths)}):", style="modgit.key"))
    for path in paths:
        console.print(Text(f"    {path}", style=style))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span_data.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="modgit.error")
    op = Text(f"  {result.op}", style="modgit.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if err and "hint" in err.detail:
        console.print(Text(f"  hint: {err.detail['hint']}"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Catalog renderers ─────────────────────────────────────────────────


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_modules as a table."""
    items = result.data.get("items", [])
    if not items:
        console.print("No modules found.")
        console.print("hint: Create a .modgit file in the repository root to define modules.")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Module", style="modgit.module", no_wrap=True)
    table.add_column("Paths", style="modgit.path")
    table.add_column("Depends")
    table.add_column("Role", style="modgit.role")
    if verbose:
        table.add_column("Flags", style="dim")

    for item in items:
        row = [
            item["name"],
            "\n".join(item["paths"]),
            ", ".join(item["depends_on"]),
            item.get("role") or "",
        ]
        if verbose:
            flags = [f for f in ("read_only", "owners_only") if item.get(f)]
            row.append(", ".join(flags))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} modules")


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render show_module as a panel."""
    d = result.data
    lines: list[str] = []
    if d.get("parent"):
        lines.append(f"parent: {d['parent']}")
    lines.append("paths:")
    lines.extend(f"  {p}" for p in d.get("paths", []))
    if d.get("depends_on"):
        lines.append(f"depends: {', '.join(d['depends_on'])}")
    if d.get("role"):
        lines.append(f"role: {d['role']}")
    flags = [f for f in ("read_only", "owners_only") if d.get(f)]
    if flags:
        lines.append(f"flags: {', '.join(flags)}")
    console.print(Panel(Text("\n".join(lines)), title=escape(str(d.get("name", "?"))), expand=False))


# ── Resolution renderers ──────────────────────────────────────────────


def _render_resolve(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "module", result.data.get("module", ""))
    _path_list(console, "paths", result.data.get("paths", []), "modgit.path")
    if verbose:
        _render_meta(console, result)


def _render_context(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text(result.data.get("text", "")))


def _render_plan(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "module", result.data.get("module", ""))
    _path_list(console, "include", result.data.get("include", []), "modgit.path")
    _path_list(console, "exclude", result.data.get("exclude", []), "modgit.excluded")
    if verbose:
        _render_meta(console, result)


def _render_partition(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render classify/status: files inside and outside the module."""
    _status_line(console, result)
    _field(console, "module", result.data.get("module", ""))
    _path_list(console, "inside", result.data.get("inside", []), "modgit.path")
    _path_list(console, "outside", result.data.get("outside", []), "modgit.warning")
    if verbose:
        _render_meta(console, result)


def _render_switch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    if d.get("dry_run"):
        console.print(Text(f"Would switch to module '{d.get('module')}' ({d.get('mode')} view)"))
    else:
        console.print(Text(f"Switched to module '{d.get('module')}' ({d.get('mode')} view)"))
    _path_list(console, "patterns", d.get("patterns", []), "modgit.path")
    if verbose:
        _render_meta(console, result)


# ── Check renderer ────────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render check results with issues grouped by category."""
    issues = result.data.get("issues", [])
    count = result.data.get("count", len(issues))

    if count == 0:
        console.print("[modgit.ok]OK[/modgit.ok]  No issues found.")
        return

    severity_styles = {"error": "modgit.error", "warning": "modgit.warning"}

    by_category: dict[str, list[dict[str, Any]]] = {}
    for issue in issues:
        by_category.setdefault(str(issue.get("category", "unknown")), []).append(issue)

    for cat, cat_issues in by_category.items():
        console.print(f"\n[bold]{cat}[/bold]")
        for issue in cat_issues:
            sev = str(issue.get("severity", "warning"))
            style = severity_styles.get(sev, "")
            prefix = f"[{style}]{sev}[/{style}]" if style else sev
            module = issue.get("module")
            tag = escape(f" [{module}]") if module else ""
            console.print(f"  {prefix}{tag}: {escape(str(issue.get('message', '')))}")

    errors = sum(1 for i in issues if i.get("severity") == "error")
    console.print(f"\n{errors} errors, {count - errors} warnings")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "list_modules": _render_list,
    "show_module": _render_show,
    "resolve": _render_resolve,
    "context": _render_context,
    "plan": _render_plan,
    "classify": _render_partition,
    "status": _render_partition,
    "switch": _render_switch,
    "check": _render_check,
}
