"""Route 53 hosted-zone domain models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Zone(BaseModel):
    """A hosted zone. ``id`` is the bare id, without the ``/hostedzone/`` prefix."""

    id: str = Field(..., min_length=1)
    name: str
    caller_reference: str
    comment: str | None = None
    resource_record_set_count: int = 0

    model_config = ConfigDict(frozen=True)


class ChangeStatus(str, Enum):
    PENDING = "PENDING"
    INSYNC = "INSYNC"


class Change(BaseModel):
    """Propagation status of a change submitted to Route 53."""

    id: str = Field(..., min_length=1)
    status: ChangeStatus
    submitted_at: datetime

    model_config = ConfigDict(frozen=True)


class ZonePage(BaseModel):
    """One page of ``ListHostedZones``; ``next_marker`` is None on the last page."""

    zones: list[Zone] = Field(default_factory=list)
    next_marker: str | None = None

    model_config = ConfigDict(frozen=True)


class NewZone(BaseModel):
    """Result of creating a zone: the zone, its change and its name servers."""

    zone: Zone
    change: Change
    name_servers: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
