"""Client settings resolved from keyword overrides and the environment."""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from typing import Any

DEFAULT_MODEL = "text-embedding-ada-002"
DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_TIMEOUT_S = 60.0
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ClientSettings:
    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    organization: str | None = None
    timeout_s: float = DEFAULT_TIMEOUT_S
    debug: bool = False
    default_model: str = DEFAULT_MODEL

    @classmethod
    def from_env(cls, **overrides: Any) -> "ClientSettings":
        settings = cls(
            api_key=os.getenv("OPENAI_API_KEY") or None,
            base_url=os.getenv("OPENAI_BASE_URL") or DEFAULT_BASE_URL,
            organization=os.getenv("OPENAI_ORGANIZATION") or None,
            timeout_s=_env_float("EMBEDCLIENT_TIMEOUT_S", DEFAULT_TIMEOUT_S),
            debug=_env_flag("EMBEDCLIENT_DEBUG"),
            default_model=os.getenv("EMBEDCLIENT_DEFAULT_MODEL") or DEFAULT_MODEL,
        )
        explicit = {key: value for key, value in overrides.items() if value is not None}
        return replace(settings, **explicit)

    def to_dict(self) -> dict:
        return {
            "api_key_present": bool(self.api_key),
            "base_url": self.base_url,
            "organization": self.organization,
            "timeout_s": self.timeout_s,
            "debug": self.debug,
            "default_model": self.default_model,
        }


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}.") from exc
