"""Route 53 REST endpoint registry."""

from __future__ import annotations

from stratus.cloud.runtime.rest import ResponseAdapter, RestEndpointSpec

from . import changes, zones
from .parsers import ChangeAdapter, NewZoneAdapter, ZoneAdapter, ZonePageAdapter

_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "list_zones": (zones.LIST_SPEC, ZonePageAdapter),
    "get_zone": (zones.GET_SPEC, ZoneAdapter),
    "create_zone": (zones.CREATE_SPEC, NewZoneAdapter),
    "delete_zone": (zones.DELETE_SPEC, ChangeAdapter),
    "get_change": (changes.GET_SPEC, ChangeAdapter),
}

ENDPOINTS = _ENDPOINT_REGISTRY
