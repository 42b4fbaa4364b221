"""Chef REST endpoint registry.

Maps endpoint ids to their specification and the adapter that parses the
response.
"""

from __future__ import annotations

from stratus.cloud.runtime.rest import ResponseAdapter, RestEndpointSpec

from . import clients, organizations, users
from .parsers import (
    ExistsAdapter,
    KeyAdapter,
    KeySetAdapter,
    NoContentAdapter,
    OrganizationAdapter,
    UserAdapter,
)

_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "create_client": (clients.CREATE_SPEC, KeyAdapter),
    "generate_client_key": (clients.GENERATE_KEY_SPEC, KeyAdapter),
    "client_exists": (clients.EXISTS_SPEC, ExistsAdapter),
    "delete_client": (clients.DELETE_SPEC, NoContentAdapter),
    "list_clients": (clients.LIST_SPEC, KeySetAdapter),
    "create_user": (users.CREATE_SPEC, KeyAdapter),
    "update_user": (users.UPDATE_SPEC, UserAdapter),
    "get_user": (users.GET_SPEC, UserAdapter),
    "delete_user": (users.DELETE_SPEC, UserAdapter),
    "create_org": (organizations.CREATE_SPEC, KeyAdapter),
    "update_org": (organizations.UPDATE_SPEC, OrganizationAdapter),
    "get_org": (organizations.GET_SPEC, OrganizationAdapter),
    "delete_org": (organizations.DELETE_SPEC, OrganizationAdapter),
}

ENDPOINTS = _ENDPOINT_REGISTRY
