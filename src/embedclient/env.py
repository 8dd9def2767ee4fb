"""Minimal .env loader for the embedclient CLI."""

from __future__ import annotations

import os
from pathlib import Path


def load_dotenv(path: str | Path = ".env", *, override: bool = False) -> list[str]:
    """Load ``KEY=VALUE`` lines into ``os.environ`` and return the keys that were set.

    Existing variables win unless ``override`` is true. Blank values, comments
    and lines without ``=`` are skipped; an ``export`` prefix is accepted.
    """
    env_path = Path(path)
    try:
        text = env_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    except OSError:
        return []

    loaded: list[str] = []
    for line in text.splitlines():
        key, value = _parse_line(line)
        if not key or value == "":
            continue
        if key in os.environ and not override:
            continue
        os.environ[key] = value
        loaded.append(key)
    return loaded


def _parse_line(line: str) -> tuple[str, str]:
    stripped = line.strip()
    if not stripped or stripped.startswith("#") or "=" not in stripped:
        return "", ""
    if stripped.startswith("export "):
        stripped = stripped[len("export ") :].lstrip()
    key, value = stripped.split("=", 1)
    key = key.strip()
    value = value.strip()
    if value and value[0] == value[-1] and value[0] in {"'", '"'} and len(value) >= 2:
        return key, value[1:-1]
    # Unquoted values may carry a trailing comment.
    if " #" in value:
        value = value.split(" #", 1)[0].rstrip()
    return key, value
