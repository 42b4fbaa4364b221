"""vCloud catalog domain models, including Terremark's catalog item extension."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ReferenceType(BaseModel):
    """A typed link to another vCloud resource."""

    href: str
    name: str | None = None
    type: str | None = None

    model_config = ConfigDict(frozen=True)


class CatalogItem(BaseModel):
    """An entry of a vCloud catalog pointing at an instantiable entity."""

    name: str
    href: str
    type: str | None = None
    description: str | None = None
    entity: ReferenceType | None = None
    properties: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class TerremarkCatalogItem(CatalogItem):
    """Catalog item with Terremark's compute and customization option links."""

    compute_options: ReferenceType | None = None
    customization_options: ReferenceType | None = None


class Catalog(BaseModel):
    """A catalog: item references keyed by item name."""

    name: str
    href: str
    type: str | None = None
    description: str | None = None
    items: dict[str, ReferenceType] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
