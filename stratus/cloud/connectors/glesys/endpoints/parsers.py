"""Response adapters for GleSYS endpoints.

GleSYS wraps every payload in an envelope::

    {"response": {"status": {"code": 200, "text": "OK"}, "<key>": ...}}

Adapters select ``<key>`` and map it onto a domain model.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from stratus.cloud.core.exceptions import ValidationError
from stratus.cloud.models import (
    ResourceUsage,
    Server,
    ServerAllowedArguments,
    ServerConsole,
    ServerDetails,
    ServerLimit,
    ServerStatus,
    ServerTemplate,
)
from stratus.cloud.runtime.rest import ResponseAdapter


def select(response: Any, key: str) -> Any:
    """Return ``response["response"][key]``."""
    if not isinstance(response, dict) or not isinstance(response.get("response"), dict):
        raise ValidationError("GleSYS response is missing its envelope")
    body = response["response"]
    if key not in body:
        raise ValidationError(f"GleSYS response has no {key!r} section")
    return body[key]


class _SectionAdapter(ResponseAdapter):
    key: str

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        section = select(response, self.key)
        try:
            return self.convert(section)
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid GleSYS {self.key!r} section: {exc}") from exc

    def convert(self, section: Any) -> Any:
        return section


class ServersAdapter(_SectionAdapter):
    key = "servers"

    def convert(self, section: Any) -> set[Server]:
        return {Server.model_validate(item) for item in section or []}


class ServerDetailsAdapter(_SectionAdapter):
    key = "server"

    def convert(self, section: Any) -> ServerDetails:
        return ServerDetails.model_validate(section)


class ServerStatusAdapter(_SectionAdapter):
    key = "server"

    def convert(self, section: Any) -> ServerStatus:
        return ServerStatus.model_validate(section)


class ServerLimitsAdapter(_SectionAdapter):
    key = "limits"

    def convert(self, section: Any) -> dict[str, ServerLimit]:
        return {name: ServerLimit.model_validate(limit) for name, limit in (section or {}).items()}


class ServerConsoleAdapter(_SectionAdapter):
    key = "console"

    def convert(self, section: Any) -> ServerConsole:
        return ServerConsole.model_validate(section)


class TemplatesAdapter(_SectionAdapter):
    """Templates arrive grouped by platform; the grouping is flattened."""

    key = "templates"

    def convert(self, section: Any) -> set[ServerTemplate]:
        groups = section.values() if isinstance(section, dict) else [section or []]
        return {ServerTemplate.model_validate(item) for group in groups for item in group}


class AllowedArgumentsAdapter(_SectionAdapter):
    key = "argumentslist"

    def convert(self, section: Any) -> dict[str, ServerAllowedArguments]:
        return {
            platform: ServerAllowedArguments.model_validate(arguments)
            for platform, arguments in (section or {}).items()
        }


class ResourceUsageAdapter(_SectionAdapter):
    key = "usage"

    def convert(self, section: Any) -> ResourceUsage:
        info = section.get("info", {})
        return ResourceUsage.model_validate({**info, "values": section.get("values", [])})


class NoContentAdapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> None:
        return None
