"""Synchronous access to Route 53 hosted zones."""

from __future__ import annotations

from stratus.cloud.runtime.sync import SyncClient

from .provider import ZoneAsyncClient


class ZoneClient(SyncClient):
    """Blocking twin of ``ZoneAsyncClient``.

    ``list_all_zones`` returns a list instead of an async iterator.
    """

    _async_client_cls = ZoneAsyncClient
