"""Rich theme for the embedclient CLI."""

from __future__ import annotations

from rich.theme import Theme

THEME = Theme(
    {
        "accent": "bright_blue",
        "title": "bold bright_blue",
        "subtitle": "dim",
        "border": "bright_black",
        "info": "dim",
        "success": "green3",
        "error": "bold red3",
        "label": "dim",
        "value": "white",
        "vector": "cyan",
    }
)
