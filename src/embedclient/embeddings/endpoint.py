"""Embeddings endpoint.

Get a vector representation of a given input that can be easily consumed by
machine learning models and algorithms.
"""

from __future__ import annotations

import asyncio
from typing import Sequence

from embedclient.api.endpoint import BaseEndpoint
from embedclient.embeddings.types import EmbeddingsRequest, EmbeddingsResponse


class EmbeddingsEndpoint(BaseEndpoint):
    root = "embeddings"

    async def create_embedding(
        self,
        input: str | Sequence[str] | EmbeddingsRequest,
        model: str | None = None,
        user: str | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> EmbeddingsResponse:
        """Create embedding vectors representing the input text.

        ``input`` is a single string, a sequence of strings embedded in one
        request, or a prebuilt :class:`EmbeddingsRequest` (in which case
        ``model`` and ``user`` must not be passed). When ``model`` is omitted
        the provider default is used. Setting ``cancel`` aborts the in-flight
        request and raises :class:`asyncio.CancelledError`.
        """
        if isinstance(input, EmbeddingsRequest):
            if model is not None or user is not None:
                raise ValueError("Pass model and user on the EmbeddingsRequest itself.")
            request = input
        else:
            request = EmbeddingsRequest(input=input, model=model, user=user)

        payload, response = await self._post_json(self.get_url(), request.to_dict(), cancel=cancel)
        return EmbeddingsResponse.from_dict(payload, response.headers)
