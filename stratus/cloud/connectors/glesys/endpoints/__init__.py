"""GleSYS REST endpoint registry."""

from __future__ import annotations

from stratus.cloud.runtime.rest import ResponseAdapter, RestEndpointSpec

from . import lifecycle, servers
from .parsers import (
    AllowedArgumentsAdapter,
    NoContentAdapter,
    ResourceUsageAdapter,
    ServerConsoleAdapter,
    ServerDetailsAdapter,
    ServerLimitsAdapter,
    ServersAdapter,
    ServerStatusAdapter,
    TemplatesAdapter,
)

_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "list_servers": (servers.LIST_SPEC, ServersAdapter),
    "server_details": (servers.DETAILS_SPEC, ServerDetailsAdapter),
    "server_status": (servers.STATUS_SPEC, ServerStatusAdapter),
    "server_limits": (servers.LIMITS_SPEC, ServerLimitsAdapter),
    "server_console": (servers.CONSOLE_SPEC, ServerConsoleAdapter),
    "reset_server_limit": (servers.RESET_LIMIT_SPEC, ServerLimitsAdapter),
    "templates": (servers.TEMPLATES_SPEC, TemplatesAdapter),
    "allowed_arguments": (servers.ALLOWED_ARGUMENTS_SPEC, AllowedArgumentsAdapter),
    "resource_usage": (servers.RESOURCE_USAGE_SPEC, ResourceUsageAdapter),
    "reboot_server": (lifecycle.REBOOT_SPEC, ServerDetailsAdapter),
    "start_server": (lifecycle.START_SPEC, ServerDetailsAdapter),
    "stop_server": (lifecycle.STOP_SPEC, NoContentAdapter),
    "create_server": (lifecycle.CREATE_SPEC, ServerDetailsAdapter),
    "edit_server": (lifecycle.EDIT_SPEC, ServerDetailsAdapter),
    "clone_server": (lifecycle.CLONE_SPEC, ServerDetailsAdapter),
    "destroy_server": (lifecycle.DESTROY_SPEC, ServerDetailsAdapter),
    "reset_password": (lifecycle.RESET_PASSWORD_SPEC, NoContentAdapter),
}

ENDPOINTS = _ENDPOINT_REGISTRY
