"""Asynchronous access to GleSYS server management.

Architecture:
    GleSYS takes form-encoded POSTs and answers with a JSON envelope. The
    client authenticates with HTTP basic auth (account id and API key) and
    resolves each method through the endpoint registry in ``endpoints``.

See Also:
    - ServerClient: blocking twin of this client
    - https://github.com/GleSYS/API/wiki/API-Documentation
"""

from __future__ import annotations

from typing import Any

import aiohttp

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
from stratus.cloud.runtime.rest import RESTProvider, RESTTransport

from .config import BASE_URL, DEFAULT_HEADERS, DEFAULT_TIMEOUT
from .endpoints import ENDPOINTS
from .options import (
    ServerCloneOptions,
    ServerCreateOptions,
    ServerDestroyOptions,
    ServerEditOptions,
    ServerStatusOptions,
    ServerStopOptions,
)


class ServerAsyncClient(RESTProvider):
    """Provides asynchronous access to GleSYS servers."""

    def __init__(
        self,
        account: str,
        api_key: str,
        *,
        endpoint: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the GleSYS server client.

        Args:
            account: GleSYS account id (e.g. ``CL12345``)
            api_key: API key created for the account
            endpoint: API base URL
            timeout: Total request timeout in seconds
        """
        transport = RESTTransport(
            base_url=endpoint,
            timeout=timeout,
            auth=aiohttp.BasicAuth(account, api_key),
            headers=DEFAULT_HEADERS,
        )
        super().__init__("glesys", transport, ENDPOINTS)

    async def list_servers(self) -> set[Server]:
        """Get a list of all servers on this account."""
        return await self.fetch("list_servers", {})

    async def get_server_details(self, id: str) -> ServerDetails | None:
        """Hostname, hardware, addresses, cost and template of a server.

        Returns:
            The server, or None if not found
        """
        return await self.fetch("server_details", {"id": self.validate_id(id)})

    async def get_server_status(
        self, id: str, options: ServerStatusOptions | None = None
    ) -> ServerStatus | None:
        """Up-time and hardware usage of a server, or None if not found."""
        return await self.fetch("server_status", {"id": self.validate_id(id), "options": options})

    async def get_server_limits(self, id: str) -> dict[str, ServerLimit] | None:
        """OpenVZ resource limits of a server, keyed by limit name."""
        return await self.fetch("server_limits", {"id": self.validate_id(id)})

    async def get_server_console(self, id: str) -> ServerConsole | None:
        """How to reach the server's VNC console, or None if not found."""
        return await self.fetch("server_console", {"id": self.validate_id(id)})

    async def get_templates(self) -> set[ServerTemplate]:
        """OS templates available across all platforms."""
        return await self.fetch("templates", {})

    async def get_server_allowed_arguments(self) -> dict[str, ServerAllowedArguments]:
        """Values ``create_server`` accepts, keyed by platform."""
        return await self.fetch("allowed_arguments", {})

    async def reset_server_limit(self, id: str, type: str) -> dict[str, ServerLimit]:
        """Reset the fail count of one OpenVZ limit."""
        return await self.fetch("reset_server_limit", {"id": self.validate_id(id), "type": type})

    async def reboot_server(self, id: str) -> ServerDetails:
        return await self.fetch("reboot_server", {"id": self.validate_id(id)})

    async def start_server(self, id: str) -> ServerDetails:
        return await self.fetch("start_server", {"id": self.validate_id(id)})

    async def stop_server(self, id: str, options: ServerStopOptions | None = None) -> None:
        await self.fetch("stop_server", {"id": self.validate_id(id), "options": options})

    async def create_server(
        self,
        datacenter: str,
        platform: str,
        hostname: str,
        template_name: str,
        disk_size: int,
        memory_size: int,
        cpu_cores: int,
        root_password: str,
        transfer: int,
        options: ServerCreateOptions | None = None,
    ) -> ServerDetails:
        """Create a new server.

        Args:
            datacenter: Data center to create the server in
            platform: ``Xen`` or ``OpenVZ``
            hostname: Host name of the new server
            template_name: Template to install
            disk_size: Disk space in GB
            memory_size: Memory in MB
            cpu_cores: Number of CPU cores
            root_password: Root password
            transfer: Monthly transfer in GB
            options: Description and IP address
        """
        params: dict[str, Any] = {
            "datacenter": datacenter,
            "platform": platform,
            "hostname": hostname,
            "template_name": template_name,
            "disk_size": disk_size,
            "memory_size": memory_size,
            "cpu_cores": cpu_cores,
            "root_password": root_password,
            "transfer": transfer,
            "options": options,
        }
        return await self.fetch("create_server", params)

    async def edit_server(
        self, id: str, options: ServerEditOptions | None = None
    ) -> ServerDetails:
        """Change the configuration of a server."""
        return await self.fetch("edit_server", {"id": self.validate_id(id), "options": options})

    async def clone_server(
        self, id: str, hostname: str, options: ServerCloneOptions | None = None
    ) -> ServerDetails:
        """Clone a server under a new host name."""
        params = {"id": self.validate_id(id), "hostname": hostname, "options": options}
        return await self.fetch("clone_server", params)

    async def destroy_server(
        self, id: str, options: ServerDestroyOptions | None = None
    ) -> ServerDetails:
        """Destroy a server; ``ServerDestroyOptions(keep_ip=True)`` keeps its addresses."""
        options = options or ServerDestroyOptions()
        return await self.fetch("destroy_server", {"id": self.validate_id(id), "options": options})

    async def reset_password(self, id: str, password: str) -> None:
        """Reset the root password of a server."""
        await self.fetch("reset_password", {"id": self.validate_id(id), "password": password})

    async def resource_usage(self, id: str, resource: str, resolution: str) -> ResourceUsage:
        """Usage of ``resource`` (e.g. ``cpuusage``) sampled at ``resolution``."""
        params = {"id": self.validate_id(id), "resource": resource, "resolution": resolution}
        return await self.fetch("resource_usage", params)
