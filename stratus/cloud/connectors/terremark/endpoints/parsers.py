"""Response adapters for vCloud 0.8 XML documents."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

from stratus.cloud.connectors.terremark.config import (
    COMPUTE_OPTIONS_NAME,
    COMPUTE_OPTIONS_TYPE,
    CUSTOMIZATION_OPTIONS_NAME,
    CUSTOMIZATION_OPTIONS_TYPE,
)
from stratus.cloud.core.exceptions import ValidationError
from stratus.cloud.models import Catalog, ReferenceType, TerremarkCatalogItem
from stratus.cloud.runtime.rest import ResponseAdapter


def parse_document(response: Any) -> ET.Element:
    if not isinstance(response, str | bytes) or not response:
        raise ValidationError("vCloud returned an empty document")
    try:
        return ET.fromstring(response)
    except ET.ParseError as exc:
        raise ValidationError(f"vCloud returned malformed XML: {exc}") from exc


def parse_reference(element: ET.Element) -> ReferenceType:
    href = element.get("href")
    if not href:
        raise ValidationError(f"vCloud {element.tag} element has no href")
    return ReferenceType(href=href, name=element.get("name"), type=element.get("type"))


def description(element: ET.Element) -> str | None:
    found = element.find("{*}Description")
    return found.text.strip() if found is not None and found.text else None


class OrgListAdapter(ResponseAdapter):
    """``OrgList`` -> organization references keyed by name."""

    def parse(self, response: Any, params: dict[str, Any]) -> dict[str, ReferenceType]:
        root = parse_document(response)
        orgs = (parse_reference(el) for el in root.iterfind("{*}Org"))
        return {org.name or org.href: org for org in orgs}


class CatalogAdapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> Catalog:
        root = parse_document(response)
        items = (
            parse_reference(el) for el in root.iterfind("{*}CatalogItems/{*}CatalogItem")
        )
        return Catalog(
            name=root.get("name", ""),
            href=root.get("href", params.get("href", "")),
            type=root.get("type"),
            description=description(root),
            items={item.name or item.href: item for item in items},
        )


class CatalogItemAdapter(ResponseAdapter):
    """``CatalogItem`` -> ``TerremarkCatalogItem``.

    Terremark advertises compute and customization options as ``down``
    links, told apart by name. Links carrying the vCloud option media
    types are recognised too.
    """

    def parse(self, response: Any, params: dict[str, Any]) -> TerremarkCatalogItem:
        root = parse_document(response)
        compute_options = customization_options = None
        for link in root.iterfind("{*}Link"):
            name, link_type = link.get("name"), link.get("type")
            if name == COMPUTE_OPTIONS_NAME or link_type == COMPUTE_OPTIONS_TYPE:
                compute_options = parse_reference(link)
            elif name == CUSTOMIZATION_OPTIONS_NAME or link_type == CUSTOMIZATION_OPTIONS_TYPE:
                customization_options = parse_reference(link)

        entity = root.find("{*}Entity")
        properties = {
            prop.get("key", ""): (prop.text or "").strip()
            for prop in root.iterfind("{*}Property")
            if prop.get("key")
        }
        return TerremarkCatalogItem(
            name=root.get("name", ""),
            href=root.get("href", params.get("href", "")),
            type=root.get("type"),
            description=description(root),
            entity=parse_reference(entity) if entity is not None else None,
            properties=properties,
            compute_options=compute_options,
            customization_options=customization_options,
        )
