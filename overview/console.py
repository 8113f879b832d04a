"""Terminal preview of a built layout.

Debug aid only: the dashboard client does the real rendering. Each layout
section becomes a tree branch; members show their width and a compact view of
the component.
"""
from __future__ import annotations

import io
from datetime import UTC, datetime

from rich.console import Console
from rich.table import Table as RichTable
from rich.text import Text as RichText
from rich.tree import Tree

from .component import Component, FlexLayout, Labels, Summary, Table, Text, Timestamp

__all__ = ["layout_tree", "render_text"]


def _fmt_ts(ts: int) -> str:
    return datetime.fromtimestamp(ts, tz=UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def _inline(view: Component | None) -> str:
    if view is None:
        return ""
    if isinstance(view, Text):
        return view.value
    if isinstance(view, Timestamp):
        return _fmt_ts(view.timestamp)
    if isinstance(view, Labels):
        return ", ".join(f"{k}={v}" for k, v in sorted(view.labels.items()))
    return f"<{view.kind}>"


def _add_view(parent: Tree, label: str, view: Component) -> None:
    if isinstance(view, Summary):
        node = parent.add(RichText(f"{label} summary: {view.title}", style="bold"))
        for s in view.sections:
            if isinstance(s.content, (Summary, Table)):
                _add_view(node, s.header, s.content)
            else:
                node.add(RichText(f"{s.header}: {_inline(s.content)}"))
    elif isinstance(view, Table):
        tbl = RichTable(title=view.title, show_lines=False)
        for c in view.columns:
            tbl.add_column(c)
        for row in view.rows:
            tbl.add_row(*(_inline(row.get(c)) for c in view.columns))
        if not view.rows and view.empty_content:
            parent.add(RichText(f"{label} table: {view.title} ({view.empty_content})"))
        else:
            parent.add(tbl)
    else:
        parent.add(RichText(f"{label} {view.kind}: {_inline(view)}"))


def layout_tree(layout: FlexLayout) -> Tree:
    tree = Tree(RichText(layout.title, style="bold cyan"))
    for i, section in enumerate(layout.sections):
        branch = tree.add(RichText(f"section {i}"))
        for item in section:
            _add_view(branch, f"[w={int(item.width)}]", item.view)
    return tree


def render_text(layout: FlexLayout, *, width: int = 120) -> str:
    """Plain-text rendering (no ANSI codes), handy for logs and tests."""
    buf = io.StringIO()
    console = Console(file=buf, width=width, color_system=None, force_terminal=False)
    console.print(layout_tree(layout))
    return buf.getvalue()
