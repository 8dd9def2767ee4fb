"""Storage helpers for embedding results."""

from __future__ import annotations

import json
from pathlib import Path

from embedclient.embeddings.types import EmbeddingsResponse


def write_json(path: Path, payload: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    data = json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)
    path.write_text(f"{data}\n", encoding="utf-8")


def write_response(path: Path, response: EmbeddingsResponse, *, texts: list[str] | None = None) -> None:
    payload = response.to_dict()
    if texts is not None:
        payload["input"] = texts
    write_json(path, payload)
