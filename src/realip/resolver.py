"""Resolve the real client IP of a request from its proxy-chain headers.

Trusted proxies
---------------
To stop clients from spoofing their address, only proxies inside the trusted
networks may vouch for the hop before them. Note that with nested reverse
proxies, every proxy in the chain has to be trusted for the address it
received to be taken.

Example: a request from 192.0.2.1, proxied through 10.10.10.10 and then
10.0.0.1 before reaching the app::

    trusted = parse_trusted_proxies(["10.0.0.1", "10.10.10.0/24"])
    real_ip({"x-forwarded-for": "192.0.2.1, 10.10.10.10"}, "10.0.0.1", trusted)
    # IPv4Address('192.0.2.1')

If 10.10.10.10 were not trusted, the result would be 10.10.10.10 instead:
anything it claims about earlier hops is unverified.
"""

import logging
from collections.abc import Iterable, Mapping
from ipaddress import IPv4Address, IPv4Network, IPv6Address, IPv6Network, ip_address

from realip.headers import (
    IPAddress,
    extract_forwarded_header,
    extract_real_ip_header,
    extract_x_forwarded_for_header,
)

logger = logging.getLogger("realip.resolver")

# Checked in priority order; the first header present wins.
_EXTRACTORS = (
    ("forwarded", extract_forwarded_header),
    ("x-forwarded-for", extract_x_forwarded_for_header),
    ("x-real-ip", extract_real_ip_header),
)


def real_ip(
    headers: Mapping,
    peer_address: IPAddress | str | None,
    trusted_networks: Iterable[IPv4Network | IPv6Network],
) -> IPAddress | None:
    """Get the real IP of an incoming request.

    Args:
        headers: Case-insensitive request headers. Starlette ``Headers`` (or
            anything with ``getlist``) or a plain mapping of name to value(s).
        peer_address: The address of the directly connected peer.
        trusted_networks: Networks of the reverse proxies allowed to set
            forwarding headers. Empty means no proxy is trusted.

    Returns:
        The first address, walking back from the peer, that is not a trusted
        proxy. If every hop is trusted, the earliest one. None only when the
        peer address is missing or not a valid IP.
    """
    peer = _coerce_peer(peer_address)
    if peer is None:
        logger.debug("Unknown peer address %r, cannot resolve client IP", peer_address)
        return None

    networks = tuple(trusted_networks)
    hops = [*get_forwarded_for(headers), peer]

    for hop in reversed(hops):
        if not any(hop in net for net in networks):
            if hop is peer and len(hops) > 1:
                logger.debug("Peer %s is not a trusted proxy, ignoring forwarding headers", peer)
            return hop

    # All hops were trusted, take the one closest to the client
    return hops[0]


def get_forwarded_for(headers: Mapping) -> list[IPAddress]:
    """Extract the IP addresses from the forwarding chain of a request.

    Only the highest-priority header present is read (``Forwarded``, then
    ``X-Forwarded-For``, then ``X-Real-IP``), even if it yields no address.

    Note that this doesn't perform any validation against clients forging
    the headers.
    """
    for name, extract in _EXTRACTORS:
        values = header_values(headers, name)
        if values:
            chain = extract(", ".join(values))
            if not chain:
                logger.debug("No usable address in %s header %r", name, values)
            return chain
    return []


def header_values(headers: Mapping, name: str) -> list[str]:
    """Return every value of header ``name``, looked up case-insensitively.

    ``bytes`` names and values in a plain mapping are decoded as latin-1, as
    Starlette does for raw ASGI headers.
    """
    if hasattr(headers, "getlist"):
        return [_to_str(value) for value in headers.getlist(name)]

    values: list[str] = []
    for key, value in headers.items():
        if _to_str(key).lower() != name:
            continue
        if isinstance(value, (str, bytes)):
            values.append(_to_str(value))
        else:
            values.extend(_to_str(v) for v in value)
    return values


def _to_str(value: str | bytes) -> str:
    return value.decode("latin-1") if isinstance(value, bytes) else value


def _coerce_peer(peer_address: IPAddress | str | None) -> IPAddress | None:
    if isinstance(peer_address, (IPv4Address, IPv6Address)):
        return peer_address
    if not isinstance(peer_address, str):
        return None
    try:
        return ip_address(peer_address.strip())
    except ValueError:
        return None
