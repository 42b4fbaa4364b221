"""Route 53 hosted zone endpoints."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

from stratus.cloud.connectors.route53.config import (
    XML_HEADERS,
    XML_NAMESPACE,
    ZONE_ID_PREFIX,
    api_path,
)
from stratus.cloud.models import ZonePage
from stratus.cloud.runtime.rest import RestEndpointSpec
from stratus.cloud.runtime.rest.binders import bind_path_param
from stratus.cloud.runtime.rest.fallbacks import return_none_on_not_found


def build_zone_path(params: dict[str, Any]) -> str:
    zone_id = str(params["id"])
    if zone_id.startswith(ZONE_ID_PREFIX):
        zone_id = zone_id[len(ZONE_ID_PREFIX) :]
    return api_path(f"hostedzone/{bind_path_param(zone_id)}")


def build_list_query(params: dict[str, Any]) -> dict[str, Any] | None:
    query: dict[str, Any] = {}
    if params.get("marker"):
        query["marker"] = params["marker"]
    if params.get("max_items"):
        query["maxitems"] = int(params["max_items"])
    return query or None


def next_page(page: ZonePage) -> dict[str, Any] | None:
    return {"marker": page.next_marker} if page.next_marker else None


def bind_create_zone(params: dict[str, Any]) -> str:
    root = ET.Element("CreateHostedZoneRequest", xmlns=XML_NAMESPACE)
    ET.SubElement(root, "Name").text = params["name"]
    ET.SubElement(root, "CallerReference").text = params["caller_reference"]
    if params.get("comment"):
        config = ET.SubElement(root, "HostedZoneConfig")
        ET.SubElement(config, "Comment").text = params["comment"]
    return '<?xml version="1.0" encoding="UTF-8"?>' + ET.tostring(root, encoding="unicode")


LIST_SPEC = RestEndpointSpec(
    id="list_zones",
    method="GET",
    build_path=lambda _params: api_path("hostedzone"),
    build_query=build_list_query,
    next_cursor=next_page,
)

GET_SPEC = RestEndpointSpec(
    id="get_zone",
    method="GET",
    build_path=build_zone_path,
    on_error=return_none_on_not_found,
)

CREATE_SPEC = RestEndpointSpec(
    id="create_zone",
    method="POST",
    build_path=lambda _params: api_path("hostedzone"),
    build_content=bind_create_zone,
    build_headers=lambda _params: XML_HEADERS,
)

DELETE_SPEC = RestEndpointSpec(
    id="delete_zone",
    method="DELETE",
    build_path=build_zone_path,
    on_error=return_none_on_not_found,
)
