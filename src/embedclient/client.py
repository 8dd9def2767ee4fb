"""API client owning the HTTP transport shared by every endpoint."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import httpx

from embedclient.embeddings.endpoint import EmbeddingsEndpoint
from embedclient.log import ensure_debug_logging
from embedclient.settings import ClientSettings


class ApiClient:
    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **overrides: Any,
    ) -> None:
        if settings is None:
            resolved = ClientSettings.from_env(**overrides)
        else:
            explicit = {key: value for key, value in overrides.items() if value is not None}
            resolved = replace(settings, **explicit)
        if not resolved.api_key and transport is None:
            raise ValueError("OPENAI_API_KEY is required for ApiClient.")
        if resolved.debug:
            ensure_debug_logging()
        self.settings = resolved
        self.http = httpx.AsyncClient(
            base_url=resolved.base_url,
            timeout=resolved.timeout_s,
            headers=_default_headers(resolved),
            transport=transport,
        )
        self.embeddings = EmbeddingsEndpoint(self)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


def _default_headers(settings: ClientSettings) -> dict[str, str]:
    headers = {"Accept": "application/json"}
    if settings.api_key:
        headers["Authorization"] = f"Bearer {settings.api_key}"
    if settings.organization:
        headers["OpenAI-Organization"] = settings.organization
    return headers
