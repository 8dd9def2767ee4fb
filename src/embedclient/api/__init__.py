"""Shared HTTP exchange used by the API endpoints."""

from embedclient.api.endpoint import BaseEndpoint
from embedclient.api.errors import ApiError

__all__ = ["ApiError", "BaseEndpoint"]
