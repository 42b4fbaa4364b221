"""Synchronous access to the Chef platform REST API."""

from __future__ import annotations

from stratus.cloud.runtime.sync import SyncClient

from .provider import ChefAsyncClient


class ChefClient(SyncClient):
    """Blocking twin of ``ChefAsyncClient``; same constructor and methods."""

    _async_client_cls = ChefAsyncClient
