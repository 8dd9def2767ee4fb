"""Async client for the text embeddings endpoint."""

from embedclient.api.errors import ApiError
from embedclient.client import ApiClient
from embedclient.embeddings.types import Datum, EmbeddingsRequest, EmbeddingsResponse, Usage
from embedclient.settings import ClientSettings

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "ApiError",
    "ClientSettings",
    "Datum",
    "EmbeddingsRequest",
    "EmbeddingsResponse",
    "Usage",
]
