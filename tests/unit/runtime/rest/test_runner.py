"""Precise unit tests for RestRunner.

Tests focus on binding, request filters, exception parsers and pagination.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from stratus.cloud.core.exceptions import ProviderError, ResourceNotFoundError
from stratus.cloud.runtime.rest import (
    ResponseAdapter,
    RestEndpointSpec,
    RestRequest,
    RestRunner,
    RESTTransport,
    return_none_on_not_found,
)


class TestRestRunner:
    """Test RestRunner endpoint execution."""

    @pytest.fixture
    def mock_transport(self):
        """Create mock REST transport."""
        transport = MagicMock(spec=RESTTransport)
        transport.get = AsyncMock(return_value={"data": "test"})
        transport.head = AsyncMock(return_value=True)
        transport.delete = AsyncMock(return_value=None)
        transport.post = AsyncMock(return_value={"data": "created"})
        transport.put = AsyncMock(return_value={"data": "updated"})
        return transport

    @pytest.fixture
    def runner(self, mock_transport):
        """Create RestRunner with mock transport."""
        return RestRunner(mock_transport)

    @pytest.fixture
    def mock_adapter(self):
        """Create mock response adapter."""
        adapter = MagicMock(spec=ResponseAdapter)
        adapter.parse = MagicMock(return_value={"parsed": "data"})
        return adapter

    @pytest.mark.asyncio
    async def test_run_get_endpoint(self, runner, mock_transport, mock_adapter):
        """Test running GET endpoint."""
        spec = RestEndpointSpec(
            id="test",
            method="GET",
            build_path=lambda p: f"/test/{p['id']}",
            build_query=lambda p: {"param": p.get("param")},
        )

        result = await runner.run(
            spec=spec, adapter=mock_adapter, params={"id": "123", "param": "value"}
        )

        assert result == {"parsed": "data"}
        mock_transport.get.assert_called_once_with(
            "/test/123", params={"param": "value"}, headers=None
        )
        mock_adapter.parse.assert_called_once_with(
            {"data": "test"}, {"id": "123", "param": "value"}
        )

    @pytest.mark.asyncio
    async def test_run_post_with_json_body(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="create",
            method="POST",
            build_path=lambda p: "/things",
            build_body=lambda p: {"name": p["name"]},
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={"name": "a"})

        mock_transport.post.assert_called_once_with(
            "/things", params=None, json_body={"name": "a"}, data=None, headers=None
        )

    @pytest.mark.asyncio
    async def test_run_post_with_form(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="form",
            method="POST",
            build_path=lambda p: "/server/start",
            build_form=lambda p: {"serverid": p["id"]},
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={"id": "vz1"})

        mock_transport.post.assert_called_once_with(
            "/server/start",
            params=None,
            json_body=None,
            data={"serverid": "vz1"},
            headers=None,
        )

    @pytest.mark.asyncio
    async def test_run_put_with_content_and_headers(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="xml",
            method="PUT",
            build_path=lambda p: "/doc",
            build_content=lambda p: "<Doc/>",
            build_headers=lambda p: {"Content-Type": "application/xml"},
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={})

        mock_transport.put.assert_called_once_with(
            "/doc",
            params=None,
            json_body=None,
            data="<Doc/>",
            headers={"Content-Type": "application/xml"},
        )

    @pytest.mark.asyncio
    async def test_run_post_forwards_query(self, runner, mock_transport, mock_adapter):
        spec = RestEndpointSpec(
            id="create_in_zone",
            method="POST",
            build_path=lambda p: "/records",
            build_query=lambda p: {"zone": p["zone"]},
            build_body=lambda p: {"name": p["name"]},
        )

        await runner.run(spec=spec, adapter=mock_adapter, params={"zone": "z1", "name": "a"})

        mock_transport.post.assert_called_once_with(
            "/records", params={"zone": "z1"}, json_body={"name": "a"}, data=None, headers=None
        )

    @pytest.mark.asyncio
    async def test_run_head_and_delete(self, runner, mock_transport):
        head = RestEndpointSpec(id="exists", method="HEAD", build_path=lambda p: "/x")
        delete = RestEndpointSpec(id="delete", method="delete", build_path=lambda p: "/x")

        assert await runner.run(spec=head, adapter=ResponseAdapter(), params={}) is True
        assert await runner.run(spec=delete, adapter=ResponseAdapter(), params={}) is None
        mock_transport.head.assert_called_once()
        mock_transport.delete.assert_called_once()

    @pytest.mark.asyncio
    async def test_unsupported_method_raises(self, runner, mock_adapter):
        spec = RestEndpointSpec(id="patch", method="PATCH", build_path=lambda p: "/x")
        with pytest.raises(ValueError, match="Unsupported HTTP method"):
            await runner.run(spec=spec, adapter=mock_adapter, params={})

    @pytest.mark.asyncio
    async def test_filters_rewrite_request(self, mock_transport, mock_adapter):
        def add_header(request: RestRequest) -> RestRequest:
            request.headers["X-Signed"] = "yes"
            return request

        runner = RestRunner(mock_transport, [add_header])
        spec = RestEndpointSpec(id="t", method="GET", build_path=lambda p: "/x")

        await runner.run(spec=spec, adapter=mock_adapter, params={})

        mock_transport.get.assert_called_once_with("/x", params=None, headers={"X-Signed": "yes"})

    def test_add_filter_runs_in_order(self, runner):
        order = []

        def first(request):
            order.append("first")
            return request

        def second(request):
            order.append("second")
            return request

        runner.add_filter(first)
        runner.add_filter(second)
        runner.bind(RestEndpointSpec(id="t", method="GET", build_path=lambda p: "/x"), {})

        assert order == ["first", "second"]

    @pytest.mark.asyncio
    async def test_error_propagates_without_exception_parser(
        self, runner, mock_transport, mock_adapter
    ):
        mock_transport.get.side_effect = ResourceNotFoundError("missing")
        spec = RestEndpointSpec(id="t", method="GET", build_path=lambda p: "/x")

        with pytest.raises(ResourceNotFoundError):
            await runner.run(spec=spec, adapter=mock_adapter, params={})
        mock_adapter.parse.assert_not_called()

    @pytest.mark.asyncio
    async def test_exception_parser_result_returned(self, runner, mock_transport, mock_adapter):
        mock_transport.get.side_effect = ResourceNotFoundError("missing")
        spec = RestEndpointSpec(
            id="t", method="GET", build_path=lambda p: "/x", on_error=return_none_on_not_found
        )

        assert await runner.run(spec=spec, adapter=mock_adapter, params={}) is None
        mock_adapter.parse.assert_not_called()

    @pytest.mark.asyncio
    async def test_exception_parser_may_reraise(self, runner, mock_transport, mock_adapter):
        mock_transport.get.side_effect = ProviderError("boom", status_code=500)
        spec = RestEndpointSpec(
            id="t", method="GET", build_path=lambda p: "/x", on_error=return_none_on_not_found
        )

        with pytest.raises(ProviderError, match="boom"):
            await runner.run(spec=spec, adapter=mock_adapter, params={})

    @pytest.mark.asyncio
    async def test_paginate_follows_cursor(self, runner, mock_transport):
        mock_transport.get.side_effect = [
            {"items": [1, 2], "next": "b"},
            {"items": [3], "next": None},
        ]
        spec = RestEndpointSpec(
            id="pages",
            method="GET",
            build_path=lambda p: "/items",
            build_query=lambda p: {"marker": p["marker"]} if p.get("marker") else None,
            next_cursor=lambda page: {"marker": page["next"]} if page["next"] else None,
        )

        pages = [
            page
            async for page in runner.paginate(spec=spec, adapter=ResponseAdapter(), params={})
        ]

        assert [page["items"] for page in pages] == [[1, 2], [3]]
        assert mock_transport.get.call_args_list[1].kwargs["params"] == {"marker": "b"}

    @pytest.mark.asyncio
    async def test_paginate_without_cursor_yields_one_page(self, runner, mock_transport):
        spec = RestEndpointSpec(id="one", method="GET", build_path=lambda p: "/x")

        pages = [
            page
            async for page in runner.paginate(spec=spec, adapter=ResponseAdapter(), params={})
        ]

        assert pages == [{"data": "test"}]
