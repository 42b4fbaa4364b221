"""Chef user endpoints."""

from __future__ import annotations

from typing import Any

from stratus.cloud.models import User
from stratus.cloud.runtime.rest import RestEndpointSpec
from stratus.cloud.runtime.rest.binders import bind_path_param, bind_to_json
from stratus.cloud.runtime.rest.fallbacks import return_none_on_not_found


def build_user_path(params: dict[str, Any]) -> str:
    """Path for one user; a ``User`` argument contributes its username."""
    user: User | None = params.get("user")
    username = user.username if user is not None else params["username"]
    return f"/users/{bind_path_param(username)}"


def bind_user(params: dict[str, Any]) -> dict[str, Any]:
    return bind_to_json(params["user"])


CREATE_SPEC = RestEndpointSpec(
    id="create_user",
    method="POST",
    build_path=lambda _params: "/users",
    build_body=bind_user,
)

UPDATE_SPEC = RestEndpointSpec(
    id="update_user",
    method="PUT",
    build_path=build_user_path,
    build_body=bind_user,
)

GET_SPEC = RestEndpointSpec(
    id="get_user",
    method="GET",
    build_path=build_user_path,
    on_error=return_none_on_not_found,
)

DELETE_SPEC = RestEndpointSpec(
    id="delete_user",
    method="DELETE",
    build_path=build_user_path,
)
