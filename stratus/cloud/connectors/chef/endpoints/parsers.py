"""Response adapters shared by Chef endpoints."""

from __future__ import annotations

from typing import Any

from stratus.cloud.core.exceptions import ValidationError
from stratus.cloud.models import Organization, User
from stratus.cloud.runtime.rest import ResponseAdapter


class KeyAdapter(ResponseAdapter):
    """Extract the ``private_key`` issued for a new client, user or org."""

    def parse(self, response: Any, params: dict[str, Any]) -> str:
        if not isinstance(response, dict) or not response.get("private_key"):
            raise ValidationError("Chef response carries no private_key")
        return str(response["private_key"])


class KeySetAdapter(ResponseAdapter):
    """Chef lists resources as ``{name: url}``; keep the names."""

    def parse(self, response: Any, params: dict[str, Any]) -> set[str]:
        if not response:
            return set()
        if not isinstance(response, dict):
            raise ValidationError(f"Expected a JSON object, got {type(response).__name__}")
        return set(response)


class UserAdapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> User:
        return User.model_validate(response)


class OrganizationAdapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> Organization:
        return Organization.model_validate(response)


class ExistsAdapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> bool:
        return bool(response)


class NoContentAdapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> None:
        return None
