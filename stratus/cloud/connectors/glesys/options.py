"""Optional arguments of GleSYS server operations.

Each options model renders itself as the form fields GleSYS expects.
Unset fields are left out of the request.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from stratus.cloud.runtime.rest.binders import bind_form


class _Options(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def as_form(self) -> dict[str, str]:
        return bind_form(**self.model_dump(by_alias=True, mode="json"))


class StatusType(str, Enum):
    STATE = "state"
    CPU = "cpu"
    MEMORY = "memory"
    DISK = "disk"
    BANDWIDTH = "bandwidth"
    UPTIME = "uptime"


class ServerStatusOptions(_Options):
    """Restrict a status request to one section."""

    status_type: StatusType | None = Field(None, alias="statustype")


class StopType(str, Enum):
    SOFT = "soft"
    HARD = "hard"


class ServerStopOptions(_Options):
    stop_type: StopType | None = Field(None, alias="type")

    @classmethod
    def hard(cls) -> ServerStopOptions:
        return cls(stop_type=StopType.HARD)

    @classmethod
    def soft(cls) -> ServerStopOptions:
        return cls(stop_type=StopType.SOFT)


class ServerCreateOptions(_Options):
    description: str | None = None
    ip: str | None = None


class ServerEditOptions(_Options):
    disk_size: int | None = Field(None, alias="disksize")
    memory_size: int | None = Field(None, alias="memorysize")
    cpu_cores: int | None = Field(None, alias="cpucores")
    transfer: int | None = None
    hostname: str | None = None
    description: str | None = None


class ServerCloneOptions(_Options):
    disk_size: int | None = Field(None, alias="disksize")
    memory_size: int | None = Field(None, alias="memorysize")
    cpu_cores: int | None = Field(None, alias="cpucores")
    transfer: int | None = None
    description: str | None = None
    datacenter: str | None = None


class ServerDestroyOptions(_Options):
    """``keep_ip=True`` keeps the server's addresses on the account."""

    keep_ip: bool = Field(False, alias="keepip")

    @classmethod
    def keep_ip_address(cls, keep: bool = True) -> ServerDestroyOptions:
        return cls(keep_ip=keep)


def options_form(options: _Options | None) -> dict[str, str]:
    return options.as_form() if options is not None else {}
