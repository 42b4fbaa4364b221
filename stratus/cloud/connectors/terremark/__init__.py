"""Terremark vCloud Express connector implementation."""

from .auth import VCloudSession
from .client import TerremarkCatalogClient
from .provider import TerremarkCatalogAsyncClient

__all__ = [
    "TerremarkCatalogAsyncClient",
    "TerremarkCatalogClient",
    "VCloudSession",
]
