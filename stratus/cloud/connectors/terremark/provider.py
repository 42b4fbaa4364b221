"""Asynchronous access to Terremark vCloud Express catalogs.

Architecture:
    ``login`` authenticates with basic auth; the ``VCloudSession`` response
    hook captures the session cookie and, as a request filter, replays it on
    every later request. Catalog lookups before ``login`` log in lazily.

See Also:
    - TerremarkCatalogClient: blocking twin of this client
"""

from __future__ import annotations

import asyncio

from stratus.cloud.models import Catalog, ReferenceType, TerremarkCatalogItem
from stratus.cloud.runtime.rest import RESTProvider, RESTTransport

from .auth import VCloudSession
from .config import BASE_URL, DEFAULT_TIMEOUT
from .endpoints import ENDPOINTS


class TerremarkCatalogAsyncClient(RESTProvider):
    """Provides asynchronous access to Terremark catalogs and catalog items."""

    def __init__(
        self,
        user: str,
        password: str,
        *,
        endpoint: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        transport = RESTTransport(base_url=endpoint, timeout=timeout)
        self._session = VCloudSession()
        self._credentials = {"user": user, "password": password}
        self._login_lock = asyncio.Lock()
        transport.add_response_hook(self._session.capture)
        super().__init__("terremark", transport, ENDPOINTS, filters=[self._session])

    @property
    def session(self) -> VCloudSession:
        return self._session

    async def login(self) -> dict[str, ReferenceType]:
        """Start a session and return the organizations visible to the user."""
        return await self.fetch("login", dict(self._credentials))

    async def _ensure_session(self) -> None:
        if self._session.authenticated:
            return
        async with self._login_lock:
            if not self._session.authenticated:
                await self.login()

    async def get_catalog(self, href: str) -> Catalog | None:
        """Return the catalog at ``href``, or None if it does not exist."""
        await self._ensure_session()
        return await self.fetch("catalog", {"href": href})

    async def get_catalog_item(self, href: str) -> TerremarkCatalogItem | None:
        """Return the catalog item at ``href``, or None if it does not exist."""
        await self._ensure_session()
        return await self.fetch("catalog_item", {"href": href})
