"""Render helpers for the embedclient CLI."""

from __future__ import annotations

import json
from typing import Any, Mapping, Sequence

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from embedclient.embeddings.types import EmbeddingsResponse
from embedclient.ui.console import get_console


def render_banner(title: str, subtitle: str) -> None:
    console = get_console(stderr=True)
    panel = Panel(
        Group(Text(subtitle, style="subtitle")),
        title=Text(title, style="title"),
        title_align="left",
        box=box.ROUNDED,
        border_style="border",
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_info(text: str) -> None:
    get_console(stderr=True).print(text, style="info", markup=False)


def render_success(text: str) -> None:
    get_console(stderr=True).print(text, style="success", markup=False)


def render_error(text: str) -> None:
    console = get_console(stderr=True)
    panel = Panel(
        Text(text, style="error"),
        box=box.ROUNDED,
        border_style="error",
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_json(payload: Any) -> None:
    data = json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)
    get_console().print(data, markup=False, emoji=False, soft_wrap=True)


def render_summary_table(rows: Mapping[str, str] | Sequence[tuple[str, str]], title: str = "Summary") -> None:
    console = get_console()
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column(style="label", no_wrap=True, justify="right")
    table.add_column(style="value")

    items = rows.items() if hasattr(rows, "items") else rows
    for key, value in items:
        table.add_row(Text(str(key), style="label"), Text(str(value), style="value"))

    panel = Panel(
        table,
        title=Text(title, style="title"),
        title_align="left",
        border_style="border",
        box=box.ROUNDED,
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_embeddings_table(response: EmbeddingsResponse, texts: Sequence[str], *, preview: int = 4) -> None:
    console = get_console()
    table = Table(show_header=True, box=box.SIMPLE, pad_edge=False)
    table.add_column("#", style="label", justify="right", no_wrap=True)
    table.add_column("input", style="value")
    table.add_column("dims", style="label", justify="right", no_wrap=True)
    table.add_column("vector", style="vector", no_wrap=True)

    for datum in sorted(response.data, key=lambda item: item.index):
        text = texts[datum.index] if 0 <= datum.index < len(texts) else ""
        head = ", ".join(f"{value:+.4f}" for value in datum.embedding[:preview])
        if len(datum.embedding) > preview:
            head = f"{head}, …"
        table.add_row(str(datum.index), _clip(text), str(len(datum.embedding)), f"[{head}]")
    console.print(table)


def _clip(text: str, limit: int = 48) -> str:
    flat = " ".join(text.split())
    if len(flat) <= limit:
        return flat
    return flat[: limit - 1] + "…"
