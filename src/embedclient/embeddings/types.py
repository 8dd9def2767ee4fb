"""Embedding request/response types."""

from __future__ import annotations

import base64
from array import array
from dataclasses import dataclass, field
import sys
from typing import Any, Sequence

import httpx

ENCODING_FORMATS = {"float", "base64"}


@dataclass(frozen=True)
class EmbeddingsRequest:
    """Body of a single ``POST /embeddings`` call.

    ``input`` is either one string or an ordered sequence of strings. Each input
    must not exceed 8192 tokens; the remote service enforces that limit.
    ``user`` is an end-user identifier forwarded for abuse monitoring.
    """

    input: str | tuple[str, ...]
    model: str | None = None
    user: str | None = None
    encoding_format: str | None = None
    dimensions: int | None = None

    def __post_init__(self) -> None:
        if self.input is None:
            raise ValueError("Embedding input is required.")
        if not isinstance(self.input, str):
            # Freeze caller sequences so the request cannot change after construction.
            object.__setattr__(self, "input", tuple(self.input))
        if self.encoding_format is not None and self.encoding_format not in ENCODING_FORMATS:
            raise ValueError(f"Unsupported encoding_format: {self.encoding_format}")
        if self.dimensions is not None and self.dimensions <= 0:
            raise ValueError("dimensions must be a positive integer.")

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "input": self.input if isinstance(self.input, str) else list(self.input),
        }

        def add_optional(key: str, value: Any) -> None:
            if value is not None:
                body[key] = value

        add_optional("model", self.model)
        add_optional("user", self.user)
        add_optional("encoding_format", self.encoding_format)
        add_optional("dimensions", self.dimensions)
        return body


@dataclass(frozen=True)
class Usage:
    prompt_tokens: int
    total_tokens: int
    completion_tokens: int | None = None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Usage":
        completion = payload.get("completion_tokens")
        return cls(
            prompt_tokens=int(payload.get("prompt_tokens", 0)),
            total_tokens=int(payload.get("total_tokens", 0)),
            completion_tokens=int(completion) if completion is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "prompt_tokens": self.prompt_tokens,
            "total_tokens": self.total_tokens,
        }
        if self.completion_tokens is not None:
            data["completion_tokens"] = self.completion_tokens
        return data


@dataclass(frozen=True)
class Datum:
    index: int
    embedding: list[float]
    object: str = "embedding"

    @classmethod
    def from_dict(cls, payload: dict[str, Any], fallback_index: int = 0) -> "Datum":
        index = payload.get("index")
        if index is None:
            index = fallback_index
        return cls(
            index=int(index),
            embedding=decode_embedding(payload.get("embedding")),
            object=str(payload.get("object", "embedding")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "object": self.object,
            "index": self.index,
            "embedding": self.embedding,
        }


@dataclass(frozen=True)
class EmbeddingsResponse:
    data: list[Datum]
    model: str
    usage: Usage | None = None
    object: str = "list"
    organization: str | None = None
    request_id: str | None = None
    processing_time_ms: int | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(
        cls,
        payload: dict[str, Any],
        headers: httpx.Headers | dict[str, str] | None = None,
    ) -> "EmbeddingsResponse":
        if not isinstance(payload, dict):
            raise ValueError("Embeddings response must be a JSON object.")
        data = [Datum.from_dict(item, fallback_index) for fallback_index, item in enumerate(payload.get("data") or [])]
        usage = payload.get("usage")
        organization, request_id, processing_time_ms = _response_metadata(headers)
        return cls(
            data=data,
            model=str(payload.get("model", "")),
            usage=Usage.from_dict(usage) if isinstance(usage, dict) else None,
            object=str(payload.get("object", "list")),
            organization=organization,
            request_id=request_id,
            processing_time_ms=processing_time_ms,
            raw=payload,
        )

    @property
    def embeddings(self) -> list[list[float]]:
        return [datum.embedding for datum in sorted(self.data, key=lambda datum: datum.index)]

    @property
    def first(self) -> list[float] | None:
        embeddings = self.embeddings
        return embeddings[0] if embeddings else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "object": self.object,
            "model": self.model,
            "data": [datum.to_dict() for datum in self.data],
            "usage": self.usage.to_dict() if self.usage is not None else None,
            "organization": self.organization,
            "request_id": self.request_id,
            "processing_time_ms": self.processing_time_ms,
        }


def decode_embedding(raw: Any) -> list[float]:
    if isinstance(raw, list):
        return [float(value) for value in raw]
    if isinstance(raw, str):
        data = base64.b64decode(raw)
        arr = array("f")
        arr.frombytes(data)
        if sys.byteorder != "little":
            arr.byteswap()
        return list(arr)
    raise ValueError("Unsupported embedding format")


def encode_embedding(values: Sequence[float]) -> str:
    arr = array("f", values)
    if sys.byteorder != "little":
        arr.byteswap()
    return base64.b64encode(arr.tobytes()).decode("ascii")


def _response_metadata(
    headers: httpx.Headers | dict[str, str] | None,
) -> tuple[str | None, str | None, int | None]:
    if headers is None:
        return None, None, None
    headers = httpx.Headers(headers)
    processing = headers.get("openai-processing-ms")
    processing_time_ms: int | None = None
    if processing:
        try:
            processing_time_ms = int(float(processing))
        except ValueError:
            processing_time_ms = None
    return headers.get("openai-organization"), headers.get("x-request-id"), processing_time_ms
