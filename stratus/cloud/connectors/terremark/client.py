"""Synchronous access to Terremark vCloud Express catalogs."""

from __future__ import annotations

from stratus.cloud.runtime.sync import SyncClient

from .provider import TerremarkCatalogAsyncClient


class TerremarkCatalogClient(SyncClient):
    """Blocking twin of ``TerremarkCatalogAsyncClient``."""

    _async_client_cls = TerremarkCatalogAsyncClient
