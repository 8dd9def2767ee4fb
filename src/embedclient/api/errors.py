"""Errors raised by the shared HTTP helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ApiError(RuntimeError):
    status_code: int
    response_text: str
    request_id: str | None
    request: dict[str, Any]

    def __str__(self) -> str:
        return f"ApiError(status={self.status_code}, request_id={self.request_id})"
