"""Terremark vCloud REST endpoint registry."""

from __future__ import annotations

from stratus.cloud.runtime.rest import ResponseAdapter, RestEndpointSpec

from . import catalog
from .parsers import CatalogAdapter, CatalogItemAdapter, OrgListAdapter

_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "login": (catalog.LOGIN_SPEC, OrgListAdapter),
    "catalog": (catalog.CATALOG_SPEC, CatalogAdapter),
    "catalog_item": (catalog.CATALOG_ITEM_SPEC, CatalogItemAdapter),
}

ENDPOINTS = _ENDPOINT_REGISTRY
