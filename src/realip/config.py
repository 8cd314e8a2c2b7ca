"""realip configuration — trusted proxy networks."""

from collections.abc import Iterable
from dataclasses import dataclass
from ipaddress import IPv4Address, IPv4Network, IPv6Address, IPv6Network, ip_network

IPNetwork = IPv4Network | IPv6Network


def parse_trusted_proxies(
    values: Iterable[str | IPv4Address | IPv6Address | IPNetwork],
) -> tuple[IPNetwork, ...]:
    """Parse trusted proxy entries into networks.

    Each entry is a single IP (``"10.0.0.1"`` becomes ``10.0.0.1/32``), a CIDR
    range (``"172.18.0.0/16"``), or an ``ipaddress`` address/network object.
    Host bits in a CIDR are ignored (``"10.0.0.5/8"`` is ``10.0.0.0/8``).

    Raises ValueError on an entry that is neither.
    """
    if isinstance(values, str):
        values = [values]

    networks = []
    for value in values:
        if isinstance(value, (IPv4Network, IPv6Network)):
            networks.append(value)
            continue
        try:
            networks.append(ip_network(value.strip() if isinstance(value, str) else value, strict=False))
        except (TypeError, ValueError):
            raise ValueError(f"Invalid IP/CIDR in trusted_proxies: '{value}'") from None
    return tuple(networks)


@dataclass(frozen=True, slots=True)
class RealIPConfig:
    """Resolved configuration built by the RealIP constructor."""

    trusted_proxy_networks: tuple[IPNetwork, ...] = ()

    def __post_init__(self) -> None:
        """Accept any iterable of networks or strings, validated at construction time."""
        object.__setattr__(
            self, "trusted_proxy_networks", parse_trusted_proxies(self.trusted_proxy_networks),
        )
