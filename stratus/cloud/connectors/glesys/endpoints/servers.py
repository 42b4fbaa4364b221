"""GleSYS server inspection endpoints."""

from __future__ import annotations

from typing import Any

from stratus.cloud.connectors.glesys.config import api_path
from stratus.cloud.connectors.glesys.errors import return_none_on_missing
from stratus.cloud.connectors.glesys.options import options_form
from stratus.cloud.runtime.rest import RestEndpointSpec
from stratus.cloud.runtime.rest.binders import bind_form


def bind_server_id(params: dict[str, Any]) -> dict[str, str]:
    return bind_form(serverid=params["id"])


def bind_status(params: dict[str, Any]) -> dict[str, str]:
    return {**bind_server_id(params), **options_form(params.get("options"))}


def bind_reset_limit(params: dict[str, Any]) -> dict[str, str]:
    return bind_form(serverid=params["id"], type=params["type"])


LIST_SPEC = RestEndpointSpec(
    id="list_servers",
    method="POST",
    build_path=lambda _params: api_path("server/list"),
)

DETAILS_SPEC = RestEndpointSpec(
    id="server_details",
    method="POST",
    build_path=lambda _params: api_path("server/details"),
    build_form=bind_server_id,
    on_error=return_none_on_missing,
)

STATUS_SPEC = RestEndpointSpec(
    id="server_status",
    method="POST",
    build_path=lambda _params: api_path("server/status"),
    build_form=bind_status,
    on_error=return_none_on_missing,
)

LIMITS_SPEC = RestEndpointSpec(
    id="server_limits",
    method="POST",
    build_path=lambda _params: api_path("server/limits"),
    build_form=bind_server_id,
    on_error=return_none_on_missing,
)

CONSOLE_SPEC = RestEndpointSpec(
    id="server_console",
    method="POST",
    build_path=lambda _params: api_path("server/console"),
    build_form=bind_server_id,
    on_error=return_none_on_missing,
)

RESET_LIMIT_SPEC = RestEndpointSpec(
    id="reset_server_limit",
    method="POST",
    build_path=lambda _params: api_path("server/resetlimit"),
    build_form=bind_reset_limit,
)

TEMPLATES_SPEC = RestEndpointSpec(
    id="templates",
    method="GET",
    build_path=lambda _params: api_path("server/templates"),
)

ALLOWED_ARGUMENTS_SPEC = RestEndpointSpec(
    id="allowed_arguments",
    method="GET",
    build_path=lambda _params: api_path("server/allowedarguments"),
)

RESOURCE_USAGE_SPEC = RestEndpointSpec(
    id="resource_usage",
    method="POST",
    build_path=lambda _params: api_path("server/resourceusage"),
    build_form=lambda params: bind_form(
        serverid=params["id"], resource=params["resource"], resolution=params["resolution"]
    ),
)
