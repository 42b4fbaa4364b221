"""Synchronous access to GleSYS server management."""

from __future__ import annotations

from stratus.cloud.runtime.sync import SyncClient

from .provider import ServerAsyncClient


class ServerClient(SyncClient):
    """Blocking twin of ``ServerAsyncClient``; same constructor and methods."""

    _async_client_cls = ServerAsyncClient
