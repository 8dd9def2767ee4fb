"""Mock embeddings transport for offline use."""

from __future__ import annotations

import hashlib
import json
import math
import random

import httpx

from embedclient.embeddings.types import encode_embedding
from embedclient.settings import DEFAULT_MODEL


def mock_vector(model: str, text: str, dims: int) -> list[float]:
    seed = int(hashlib.sha256((model + "|" + text).encode("utf-8")).hexdigest(), 16) % (2**32)
    rng = random.Random(seed)
    vec = [rng.gauss(0, 1) for _ in range(dims)]
    norm = math.sqrt(sum(value * value for value in vec)) or 1.0
    return [value / norm for value in vec]


def mock_transport(dims: int = 1536) -> httpx.MockTransport:
    """Answer ``POST /embeddings`` with deterministic unit vectors."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.method != "POST" or not request.url.path.endswith("/embeddings"):
            return httpx.Response(404, json={"error": {"message": "Not found", "type": "invalid_request_error"}})
        body = json.loads(request.content or b"{}")
        raw_input = body.get("input")
        if raw_input is None:
            return httpx.Response(
                400,
                json={"error": {"message": "'input' is a required property", "type": "invalid_request_error"}},
            )
        texts = [raw_input] if isinstance(raw_input, str) else list(raw_input)
        model = body.get("model") or DEFAULT_MODEL
        size = int(body.get("dimensions") or dims)
        encoding_format = body.get("encoding_format") or "float"

        data = []
        for index, text in enumerate(texts):
            vector = mock_vector(model, str(text), size)
            embedding = encode_embedding(vector) if encoding_format == "base64" else vector
            data.append({"object": "embedding", "index": index, "embedding": embedding})

        prompt_tokens = sum(max(1, len(str(text)) // 4) for text in texts)
        payload = {
            "object": "list",
            "data": data,
            "model": model,
            "usage": {"prompt_tokens": prompt_tokens, "total_tokens": prompt_tokens},
        }
        return httpx.Response(
            200,
            json=payload,
            headers={"x-request-id": "mock", "openai-processing-ms": "0"},
        )

    return httpx.MockTransport(handler)
