"""Shared consoles for the embedclient CLI."""

from __future__ import annotations

from rich.console import Console

from embedclient.ui.theme import THEME

# Diagnostics go to stderr so stdout stays parseable.
_CONSOLES = {
    False: Console(theme=THEME, highlight=False),
    True: Console(theme=THEME, highlight=False, stderr=True),
}


def get_console(*, stderr: bool = False) -> Console:
    return _CONSOLES[stderr]
