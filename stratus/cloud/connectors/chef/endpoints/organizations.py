"""Chef organization endpoints."""

from __future__ import annotations

from typing import Any

from stratus.cloud.models import Organization
from stratus.cloud.runtime.rest import RestEndpointSpec
from stratus.cloud.runtime.rest.binders import bind_path_param, bind_to_json
from stratus.cloud.runtime.rest.fallbacks import return_none_on_not_found


def build_org_path(params: dict[str, Any]) -> str:
    """Path for one organization; an ``Organization`` argument contributes its name."""
    org: Organization | None = params.get("org")
    orgname = org.name if org is not None else params["orgname"]
    return f"/organizations/{bind_path_param(orgname)}"


def bind_org(params: dict[str, Any]) -> dict[str, Any]:
    return bind_to_json(params["org"])


CREATE_SPEC = RestEndpointSpec(
    id="create_org",
    method="POST",
    build_path=lambda _params: "/organizations",
    build_body=bind_org,
)

UPDATE_SPEC = RestEndpointSpec(
    id="update_org",
    method="PUT",
    build_path=build_org_path,
    build_body=bind_org,
)

GET_SPEC = RestEndpointSpec(
    id="get_org",
    method="GET",
    build_path=build_org_path,
    on_error=return_none_on_not_found,
)

DELETE_SPEC = RestEndpointSpec(
    id="delete_org",
    method="DELETE",
    build_path=build_org_path,
)
