"""Asynchronous access to Route 53 hosted zones.

See Also:
    - ZoneClient: blocking twin of this client
    - predicates.name_equals: filter zones by name
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

from stratus.cloud.models import Change, NewZone, Zone, ZonePage
from stratus.cloud.runtime.rest import RESTProvider, RESTTransport

from .auth import RestAuthentication
from .config import BASE_URL, DEFAULT_TIMEOUT
from .endpoints import ENDPOINTS


class ZoneAsyncClient(RESTProvider):
    """Provides asynchronous access to Route 53 hosted zones."""

    def __init__(
        self,
        access_key_id: str,
        secret_access_key: str,
        session_token: str | None = None,
        *,
        endpoint: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the Route 53 client.

        Args:
            access_key_id: AWS access key id
            secret_access_key: AWS secret access key
            session_token: STS session token for temporary credentials
            endpoint: API base URL
            timeout: Total request timeout in seconds
        """
        transport = RESTTransport(base_url=endpoint, timeout=timeout)
        signer = RestAuthentication(
            access_key_id, secret_access_key, session_token, endpoint=endpoint
        )
        super().__init__("route53", transport, ENDPOINTS, filters=[signer])

    async def list_zones(self, marker: str | None = None, max_items: int | None = None) -> ZonePage:
        """One page of zones, starting after ``marker``."""
        return await self.fetch("list_zones", {"marker": marker, "max_items": max_items})

    async def list_all_zones(self) -> AsyncIterator[Zone]:
        """Every zone on the account, following markers across pages."""
        params: dict[str, Any] = {"marker": None}
        async for page in self.iterate("list_zones", params):
            for zone in page.zones:
                yield zone

    async def get_zone(self, id: str) -> Zone | None:
        """Return the zone, or None if it does not exist."""
        return await self.fetch("get_zone", {"id": self.validate_id(id)})

    async def create_zone(
        self, name: str, caller_reference: str, comment: str | None = None
    ) -> NewZone:
        """Create a zone.

        Args:
            name: Fully qualified domain name, e.g. ``example.com.``
            caller_reference: Unique string identifying this request
            comment: Optional comment stored with the zone
        """
        params = {"name": name, "caller_reference": caller_reference, "comment": comment}
        return await self.fetch("create_zone", params)

    async def delete_zone(self, id: str) -> Change | None:
        """Delete a zone; None if it did not exist."""
        return await self.fetch("delete_zone", {"id": self.validate_id(id)})

    async def get_change(self, id: str) -> Change | None:
        return await self.fetch("get_change", {"id": self.validate_id(id)})
