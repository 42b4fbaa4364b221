"""Route 53 change status endpoint."""

from __future__ import annotations

from typing import Any

from stratus.cloud.connectors.route53.config import CHANGE_ID_PREFIX, api_path
from stratus.cloud.runtime.rest import RestEndpointSpec
from stratus.cloud.runtime.rest.binders import bind_path_param
from stratus.cloud.runtime.rest.fallbacks import return_none_on_not_found


def build_change_path(params: dict[str, Any]) -> str:
    change_id = str(params["id"])
    if change_id.startswith(CHANGE_ID_PREFIX):
        change_id = change_id[len(CHANGE_ID_PREFIX) :]
    return api_path(f"change/{bind_path_param(change_id)}")


GET_SPEC = RestEndpointSpec(
    id="get_change",
    method="GET",
    build_path=build_change_path,
    on_error=return_none_on_not_found,
)
