"""Base class for REST provider clients.

Architecture:
    A concrete client owns a ``RESTTransport`` configured for its provider
    (base URL, auth, default headers) and a ``RestRunner`` carrying the
    provider's request filters. Public methods collect call arguments into a
    params dict and hand them to ``fetch`` with an endpoint id; the endpoint
    registry supplies the spec and adapter for that id.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from typing import Any

from ...core.base import BaseClient
from .runner import RequestFilter, ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport

logger = logging.getLogger(__name__)

EndpointRegistry = Mapping[str, tuple[RestEndpointSpec, type[ResponseAdapter]]]


class RESTProvider(BaseClient):
    """REST client resolving endpoint ids through a registry."""

    def __init__(
        self,
        name: str,
        transport: RESTTransport,
        endpoints: EndpointRegistry,
        *,
        filters: list[RequestFilter] | None = None,
    ) -> None:
        super().__init__(name)
        self._transport = transport
        self._endpoints = endpoints
        self._runner = RestRunner(transport, filters or [])

    def _resolve(self, endpoint_id: str) -> tuple[RestEndpointSpec, ResponseAdapter]:
        entry = self._endpoints.get(endpoint_id)
        if entry is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        spec, adapter_cls = entry
        return spec, adapter_cls()

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Run a single endpoint and return the adapter's result.

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec, adapter = self._resolve(endpoint_id)
        logger.debug("Fetching", extra={"provider": self.name, "endpoint": endpoint_id})
        return await self._runner.run(spec=spec, adapter=adapter, params=params)

    async def iterate(self, endpoint_id: str, params: dict[str, Any]) -> AsyncIterator[Any]:
        """Yield every page of a paginated endpoint."""
        spec, adapter = self._resolve(endpoint_id)
        async for page in self._runner.paginate(spec=spec, adapter=adapter, params=params):
            yield page

    async def close(self) -> None:
        """Close underlying HTTP resources."""
        await self._transport.close()
