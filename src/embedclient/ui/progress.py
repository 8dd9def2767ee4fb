"""Status helpers for the embedclient CLI."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from embedclient.ui.console import get_console


@contextmanager
def status_spinner(message: str, *, enabled: bool = True) -> Iterator[object | None]:
    if not enabled:
        yield None
        return
    console = get_console(stderr=True)
    with console.status(message, spinner="dots", spinner_style="accent") as status:
        yield status
