"""Embeddings endpoint and wire types."""

from embedclient.embeddings.endpoint import EmbeddingsEndpoint
from embedclient.embeddings.mock import mock_transport
from embedclient.embeddings.types import Datum, EmbeddingsRequest, EmbeddingsResponse, Usage

__all__ = [
    "Datum",
    "EmbeddingsEndpoint",
    "EmbeddingsRequest",
    "EmbeddingsResponse",
    "Usage",
    "mock_transport",
]
