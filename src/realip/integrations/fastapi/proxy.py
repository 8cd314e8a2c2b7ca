"""Reverse proxy IP extraction for FastAPI requests."""

from fastapi import Request

from realip.config import RealIPConfig
from realip.headers import IPAddress
from realip.resolver import real_ip


def get_client_ip(request: Request, config: RealIPConfig) -> IPAddress | None:
    """Extract the real client IP, respecting the trusted proxy configuration.

    Resolution order:
    1. No client on the request (e.g. a unix socket) → None.
    2. Direct IP not in a trusted network → direct IP, headers ignored.
    3. Header priority: Forwarded > X-Forwarded-For > X-Real-IP, walked back
       from the direct IP to the first untrusted hop.
    """
    if request.client is None:
        return None
    return real_ip(request.headers, request.client.host, config.trusted_proxy_networks)
