"""RealIP — instance-based proxy configuration and entry point."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from ipaddress import IPv4Address, IPv6Address
from typing import TYPE_CHECKING

from realip.config import IPNetwork, RealIPConfig
from realip.resolver import real_ip

if TYPE_CHECKING:
    from collections.abc import Callable


class RealIP:
    """Holds the trusted proxy config and resolves client IPs against it.

    Args:
        trusted_proxies: IPs or CIDR ranges of the reverse proxies allowed to
            set forwarding headers (e.g. ``["10.0.0.1", "172.18.0.0/16"]``).
            Empty (the default) = headers are never trusted.

    Raises:
        ValueError: If an entry in trusted_proxies is not a valid IP or CIDR.
    """

    def __init__(
        self,
        trusted_proxies: Iterable[str | IPv4Address | IPv6Address | IPNetwork] = (),
    ) -> None:
        self._config = RealIPConfig(trusted_proxy_networks=tuple(trusted_proxies))

    @property
    def config(self) -> RealIPConfig:
        """Read-only access to the internal config."""
        return self._config

    def resolve(
        self,
        headers: Mapping,
        peer_address: IPv4Address | IPv6Address | str | None,
    ) -> IPv4Address | IPv6Address | None:
        """Resolve the client IP from request headers and the connecting peer address."""
        return real_ip(headers, peer_address, self._config.trusted_proxy_networks)

    def fastapi_dependency(self) -> Callable:
        """Get a FastAPI dependency yielding the client IP of the current request.

        Usage:
            realip = RealIP(trusted_proxies=["10.0.0.0/8"])

            @app.get("/")
            async def index(ip=Depends(realip.fastapi_dependency())):
                ...
        """
        from realip.integrations.fastapi import create_client_ip_dep

        return create_client_ip_dep(self._config)
