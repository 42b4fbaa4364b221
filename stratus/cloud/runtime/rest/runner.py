"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from ...core.enums import HttpMethod
from ...core.exceptions import ProviderError
from .transport import RESTTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST" | "PUT" | "DELETE" | "HEAD"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    # Request body binders; at most one of these is set per endpoint
    build_body: Callable[[dict[str, Any]], Any] | None = None
    build_form: Callable[[dict[str, Any]], dict[str, str]] | None = None
    build_content: Callable[[dict[str, Any]], str] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    # Returns the params to merge for the next page, or None on the last page
    next_cursor: Callable[[Any], dict[str, Any] | None] | None = None
    # Exception parser: maps a provider error to a return value or re-raises
    on_error: Callable[[ProviderError], Any] | None = None


@dataclass
class RestRequest:
    """A bound request, as seen by request filters."""

    method: str
    path: str
    query: dict[str, Any] | None = None
    json_body: Any = None
    data: Any = None
    headers: dict[str, str] = field(default_factory=dict)


RequestFilter = Callable[[RestRequest], RestRequest]


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class RestRunner:
    def __init__(self, transport: RESTTransport, filters: Sequence[RequestFilter] = ()) -> None:
        self._t = transport
        self._filters = list(filters)

    def add_filter(self, request_filter: RequestFilter) -> None:
        self._filters.append(request_filter)

    def bind(self, spec: RestEndpointSpec, params: dict[str, Any]) -> RestRequest:
        """Apply the spec's binders to ``params`` and run request filters."""
        data: Any = None
        if spec.build_form:
            data = spec.build_form(params)
        elif spec.build_content:
            data = spec.build_content(params)

        request = RestRequest(
            method=spec.method.upper(),
            path=spec.build_path(params),
            query=spec.build_query(params) if spec.build_query else None,
            json_body=spec.build_body(params) if spec.build_body else None,
            data=data,
            headers=dict(spec.build_headers(params)) if spec.build_headers else {},
        )
        for request_filter in self._filters:
            request = request_filter(request)
        return request

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        request = self.bind(spec, params)
        logger.debug(
            "Running endpoint",
            extra={"endpoint": spec.id, "method": request.method, "path": request.path},
        )
        try:
            data = await self._dispatch(request)
        except ProviderError as exc:
            if spec.on_error is None:
                raise
            logger.debug(
                "Endpoint error handed to exception parser",
                extra={"endpoint": spec.id, "status": exc.status_code},
            )
            return spec.on_error(exc)
        return adapter.parse(data, params)

    async def paginate(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> AsyncIterator[Any]:
        """Yield parsed pages, following ``spec.next_cursor`` until exhausted."""
        while True:
            page = await self.run(spec=spec, adapter=adapter, params=params)
            if page is None:
                return
            yield page
            cursor = spec.next_cursor(page) if spec.next_cursor else None
            if not cursor:
                return
            params = {**params, **cursor}

    async def _dispatch(self, request: RestRequest) -> Any:
        headers = request.headers or None
        method = request.method
        if method == HttpMethod.GET:
            return await self._t.get(request.path, params=request.query, headers=headers)
        if method == HttpMethod.HEAD:
            return await self._t.head(request.path, params=request.query, headers=headers)
        if method == HttpMethod.DELETE:
            return await self._t.delete(request.path, params=request.query, headers=headers)
        if method == HttpMethod.PUT:
            return await self._t.put(
                request.path,
                params=request.query,
                json_body=request.json_body,
                data=request.data,
                headers=headers,
            )
        if method == HttpMethod.POST:
            return await self._t.post(
                request.path,
                params=request.query,
                json_body=request.json_body,
                data=request.data,
                headers=headers,
            )
        raise ValueError(f"Unsupported HTTP method: {method}")
