"""GleSYS server lifecycle endpoints: create, change, power and destroy."""

from __future__ import annotations

from typing import Any

from stratus.cloud.connectors.glesys.config import api_path
from stratus.cloud.connectors.glesys.options import options_form
from stratus.cloud.runtime.rest import RestEndpointSpec
from stratus.cloud.runtime.rest.binders import bind_form


def bind_server_id(params: dict[str, Any]) -> dict[str, str]:
    return {**bind_form(serverid=params["id"]), **options_form(params.get("options"))}


def bind_create(params: dict[str, Any]) -> dict[str, str]:
    form = bind_form(
        datacenter=params["datacenter"],
        platform=params["platform"],
        hostname=params["hostname"],
        templatename=params["template_name"],
        disksize=params["disk_size"],
        memorysize=params["memory_size"],
        cpucores=params["cpu_cores"],
        rootpassword=params["root_password"],
        transfer=params["transfer"],
    )
    return {**form, **options_form(params.get("options"))}


def bind_clone(params: dict[str, Any]) -> dict[str, str]:
    form = bind_form(serverid=params["id"], hostname=params["hostname"])
    return {**form, **options_form(params.get("options"))}


def bind_reset_password(params: dict[str, Any]) -> dict[str, str]:
    return bind_form(serverid=params["id"], rootpassword=params["password"])


def _post(endpoint_id: str, resource: str, binder) -> RestEndpointSpec:
    return RestEndpointSpec(
        id=endpoint_id,
        method="POST",
        build_path=lambda _params: api_path(resource),
        build_form=binder,
    )


REBOOT_SPEC = _post("reboot_server", "server/reboot", bind_server_id)
START_SPEC = _post("start_server", "server/start", bind_server_id)
STOP_SPEC = _post("stop_server", "server/stop", bind_server_id)
CREATE_SPEC = _post("create_server", "server/create", bind_create)
EDIT_SPEC = _post("edit_server", "server/edit", bind_server_id)
CLONE_SPEC = _post("clone_server", "server/clone", bind_clone)
DESTROY_SPEC = _post("destroy_server", "server/destroy", bind_server_id)
RESET_PASSWORD_SPEC = _post("reset_password", "server/resetpassword", bind_reset_password)
