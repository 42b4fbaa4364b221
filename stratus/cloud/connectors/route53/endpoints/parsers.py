"""Response adapters for Route 53 XML documents."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from stratus.cloud.connectors.route53.config import CHANGE_ID_PREFIX, ZONE_ID_PREFIX
from stratus.cloud.core.exceptions import ValidationError
from stratus.cloud.models import Change, NewZone, Zone, ZonePage
from stratus.cloud.runtime.rest import ResponseAdapter


def strip_prefix(value: str, prefix: str) -> str:
    return value[len(prefix) :] if value.startswith(prefix) else value


def parse_document(response: Any) -> ET.Element:
    if not isinstance(response, str | bytes) or not response:
        raise ValidationError("Route 53 returned an empty document")
    try:
        return ET.fromstring(response)
    except ET.ParseError as exc:
        raise ValidationError(f"Route 53 returned malformed XML: {exc}") from exc


def child_text(element: ET.Element, path: str) -> str | None:
    """Text of the element at ``path`` (``/``-separated, any namespace)."""
    found = element.find("/".join(f"{{*}}{tag}" for tag in path.split("/")))
    if found is None or found.text is None:
        return None
    return found.text.strip()


def required(element: ET.Element, path: str) -> ET.Element:
    found = element.find("/".join(f"{{*}}{tag}" for tag in path.split("/")))
    if found is None:
        raise ValidationError(f"Route 53 document has no {path} element")
    return found


def parse_zone(element: ET.Element) -> Zone:
    try:
        return Zone(
            id=strip_prefix(child_text(element, "Id") or "", ZONE_ID_PREFIX),
            name=child_text(element, "Name") or "",
            caller_reference=child_text(element, "CallerReference") or "",
            comment=child_text(element, "Config/Comment"),
            resource_record_set_count=int(child_text(element, "ResourceRecordSetCount") or 0),
        )
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid HostedZone element: {exc}") from exc


def parse_change(element: ET.Element) -> Change:
    try:
        return Change(
            id=strip_prefix(child_text(element, "Id") or "", CHANGE_ID_PREFIX),
            status=child_text(element, "Status"),
            submitted_at=child_text(element, "SubmittedAt"),
        )
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid ChangeInfo element: {exc}") from exc


def parse_name_servers(root: ET.Element) -> list[str]:
    return [
        ns.text.strip()
        for ns in root.iterfind("{*}DelegationSet/{*}NameServers/{*}NameServer")
        if ns.text
    ]


class ZonePageAdapter(ResponseAdapter):
    """``ListHostedZonesResponse`` -> ``ZonePage``."""

    def parse(self, response: Any, params: dict[str, Any]) -> ZonePage:
        root = parse_document(response)
        zones = [parse_zone(el) for el in root.iterfind("{*}HostedZones/{*}HostedZone")]
        truncated = (child_text(root, "IsTruncated") or "false").lower() == "true"
        next_marker = child_text(root, "NextMarker") if truncated else None
        return ZonePage(zones=zones, next_marker=next_marker)


class ZoneAdapter(ResponseAdapter):
    """``GetHostedZoneResponse`` -> ``Zone``."""

    def parse(self, response: Any, params: dict[str, Any]) -> Zone:
        return parse_zone(required(parse_document(response), "HostedZone"))


class NewZoneAdapter(ResponseAdapter):
    """``CreateHostedZoneResponse`` -> ``NewZone``."""

    def parse(self, response: Any, params: dict[str, Any]) -> NewZone:
        root = parse_document(response)
        return NewZone(
            zone=parse_zone(required(root, "HostedZone")),
            change=parse_change(required(root, "ChangeInfo")),
            name_servers=parse_name_servers(root),
        )


class ChangeAdapter(ResponseAdapter):
    """Any response carrying a ``ChangeInfo`` element -> ``Change``."""

    def parse(self, response: Any, params: dict[str, Any]) -> Change:
        return parse_change(required(parse_document(response), "ChangeInfo"))
