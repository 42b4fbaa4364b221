"""GleSYS server domain models.

Models mirror the JSON objects GleSYS places inside its response envelope.
Wire names are the lowercase run-together keys GleSYS uses; Python
attributes use snake_case with aliases.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.enums import ServerState

_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Server(BaseModel):
    """Summary of a server, as returned by the server list."""

    id: str = Field(..., alias="serverid", min_length=1)
    hostname: str
    datacenter: str | None = None
    platform: str | None = None

    model_config = _CONFIG


class Cost(BaseModel):
    amount: Decimal
    currency: str
    time_period: str | None = Field(None, alias="timeperiod")

    model_config = _CONFIG


class Ip(BaseModel):
    address: str = Field(..., alias="ipaddress")
    version: int = 4
    cost: Decimal | None = None

    model_config = _CONFIG


class ServerDetails(Server):
    """Full description of a server: hardware, template, cost and addresses."""

    description: str | None = None
    template_name: str | None = Field(None, alias="templatename")
    cpu_cores: int | None = Field(None, alias="cpucores")
    memory_size: int | None = Field(None, alias="memorysize")
    disk_size: int | None = Field(None, alias="disksize")
    transfer: int | None = None
    cost: Cost | None = None
    ips: list[Ip] = Field(default_factory=list, alias="iplist")


class ResourceStatus(BaseModel):
    """Usage of one resource against its maximum."""

    usage: Decimal | None = None
    max: Decimal | None = None
    unit: str | None = None

    model_config = _CONFIG


class Uptime(BaseModel):
    current: int = 0
    unit: str = "seconds"

    model_config = _CONFIG


class ServerStatus(BaseModel):
    """Live status of a server. Sections absent from the response stay None."""

    state: ServerState = ServerState.UNRECOGNIZED
    cpu: ResourceStatus | None = None
    memory: ResourceStatus | None = None
    disk: ResourceStatus | None = None
    transfer: ResourceStatus | None = None
    uptime: Uptime | None = None

    model_config = _CONFIG

    @field_validator("state", mode="before")
    @classmethod
    def parse_state(cls, v: object) -> ServerState:
        if isinstance(v, ServerState):
            return v
        return ServerState.from_value(v if isinstance(v, str) else None)


class ServerLimit(BaseModel):
    """An OpenVZ bean-counter limit."""

    held: int
    max_held: int = Field(..., alias="maxheld")
    barrier: int
    limit: int
    fail_count: int = Field(..., alias="failcnt")
    fresh_fail_count: int = Field(0, alias="freshfailcnt")

    model_config = _CONFIG


class ServerConsole(BaseModel):
    """Connection details for a server's VNC console."""

    host: str
    port: int
    protocol: str | None = None
    password: str

    model_config = _CONFIG


class ServerTemplate(BaseModel):
    """An operating system template servers can be created from."""

    name: str
    min_disk_size: int = Field(..., alias="minimumdisksize")
    min_mem_size: int = Field(..., alias="minimummemorysize")
    os: str = Field(..., alias="operatingsystem")
    platform: str

    model_config = _CONFIG


class ServerAllowedArguments(BaseModel):
    """Values accepted by ``create_server`` for one platform."""

    disk_sizes: list[int] = Field(default_factory=list, alias="disksize")
    memory_sizes: list[int] = Field(default_factory=list, alias="memorysize")
    cpu_cores: list[int] = Field(default_factory=list, alias="cpucores")
    templates: list[str] = Field(default_factory=list, alias="template")
    transfers: list[int] = Field(default_factory=list, alias="transfer")
    datacenters: list[str] = Field(default_factory=list, alias="datacenter")

    model_config = _CONFIG

    @field_validator(
        "disk_sizes",
        "memory_sizes",
        "cpu_cores",
        "templates",
        "transfers",
        "datacenters",
        mode="before",
    )
    @classmethod
    def unwrap_platform_lists(cls, v: object) -> object:
        # Some platforms nest the list under a unit or platform key
        if isinstance(v, dict):
            for item in v.values():
                if isinstance(item, list):
                    return item
            return []
        return v


class ResourceUsageValue(BaseModel):
    timestamp: datetime
    value: Decimal

    model_config = _CONFIG


class ResourceUsage(BaseModel):
    """Usage samples of one resource over time."""

    resource: str
    resolution: str
    unit: str | None = None
    values: list[ResourceUsageValue] = Field(default_factory=list)

    model_config = _CONFIG
