"""Chef API client registration endpoints, scoped to an organization."""

from __future__ import annotations

from typing import Any

from stratus.cloud.runtime.rest import RestEndpointSpec
from stratus.cloud.runtime.rest.binders import bind_path_param
from stratus.cloud.runtime.rest.fallbacks import (
    return_false_on_not_found,
    return_none_on_not_found,
)


def build_clients_path(params: dict[str, Any]) -> str:
    return f"/organizations/{bind_path_param(params['orgname'])}/clients"


def build_client_path(params: dict[str, Any]) -> str:
    return f"{build_clients_path(params)}/{bind_path_param(params['clientname'])}"


def bind_clientname(params: dict[str, Any]) -> dict[str, Any]:
    return {"clientname": params["clientname"]}


def bind_generate_key(params: dict[str, Any]) -> dict[str, Any]:
    return {"clientname": params["clientname"], "private_key": True}


CREATE_SPEC = RestEndpointSpec(
    id="create_client",
    method="POST",
    build_path=build_clients_path,
    build_body=bind_clientname,
)

GENERATE_KEY_SPEC = RestEndpointSpec(
    id="generate_client_key",
    method="PUT",
    build_path=build_client_path,
    build_body=bind_generate_key,
)

EXISTS_SPEC = RestEndpointSpec(
    id="client_exists",
    method="HEAD",
    build_path=build_client_path,
    on_error=return_false_on_not_found,
)

DELETE_SPEC = RestEndpointSpec(
    id="delete_client",
    method="DELETE",
    build_path=build_client_path,
    on_error=return_none_on_not_found,
)

LIST_SPEC = RestEndpointSpec(
    id="list_clients",
    method="GET",
    build_path=build_clients_path,
)
