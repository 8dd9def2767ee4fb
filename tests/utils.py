from __future__ import annotations

import copy
from typing import Any

import httpx

from embedclient.client import ApiClient
from embedclient.settings import ClientSettings

EMBEDDINGS_PAYLOAD: dict[str, Any] = {
    "object": "list",
    "data": [
        {"object": "embedding", "index": 0, "embedding": [0.0023064255, -0.009327292, 0.015797347]},
    ],
    "model": "text-embedding-ada-002",
    "usage": {"prompt_tokens": 8, "total_tokens": 8},
}

RESPONSE_HEADERS = {
    "x-request-id": "req_123",
    "openai-organization": "org-test",
    "openai-processing-ms": "42",
}


def recording_transport(
    *,
    payload: Any = None,
    status_code: int = 200,
    content: bytes | None = None,
    headers: dict[str, str] | None = None,
) -> tuple[httpx.MockTransport, list[httpx.Request]]:
    seen: list[httpx.Request] = []
    body = copy.deepcopy(EMBEDDINGS_PAYLOAD) if payload is None else payload

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        response_headers = dict(RESPONSE_HEADERS if headers is None else headers)
        if content is not None:
            return httpx.Response(status_code, content=content, headers=response_headers)
        return httpx.Response(status_code, json=body, headers=response_headers)

    return httpx.MockTransport(handler), seen


def make_client(transport: httpx.AsyncBaseTransport, **overrides: Any) -> ApiClient:
    settings = ClientSettings(
        api_key=overrides.pop("api_key", "sk-test"),
        base_url=overrides.pop("base_url", "https://api.example.test/v1"),
        **overrides,
    )
    return ApiClient(settings, transport=transport)
