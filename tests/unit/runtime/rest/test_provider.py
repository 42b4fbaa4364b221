"""Unit tests for RESTProvider endpoint resolution."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from stratus.cloud.runtime.rest import (
    ResponseAdapter,
    RESTProvider,
    RestEndpointSpec,
    RESTTransport,
)


class _UpperAdapter(ResponseAdapter):
    def parse(self, response, params):
        return response.upper()


_ENDPOINTS = {
    "echo": (
        RestEndpointSpec(id="echo", method="GET", build_path=lambda p: f"/echo/{p['word']}"),
        _UpperAdapter,
    ),
}


@pytest.fixture
def provider():
    return RESTProvider("test", RESTTransport(base_url="https://api.example.com"), _ENDPOINTS)


@pytest.mark.asyncio
async def test_fetch_resolves_endpoint(provider):
    provider._transport.get = AsyncMock(return_value="hello")

    assert await provider.fetch("echo", {"word": "hi"}) == "HELLO"
    provider._transport.get.assert_called_once_with("/echo/hi", params=None, headers=None)


@pytest.mark.asyncio
async def test_fetch_unknown_endpoint_raises(provider):
    with pytest.raises(ValueError, match="Unknown REST endpoint: nope"):
        await provider.fetch("nope", {})


@pytest.mark.asyncio
async def test_iterate_yields_pages(provider):
    provider._transport.get = AsyncMock(return_value="page")

    pages = [page async for page in provider.iterate("echo", {"word": "x"})]

    assert pages == ["PAGE"]


@pytest.mark.asyncio
async def test_close_closes_transport(provider):
    provider._transport.close = AsyncMock()
    async with provider:
        pass
    provider._transport.close.assert_awaited_once()
