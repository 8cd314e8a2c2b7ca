"""realip — Get the real client IP of a request behind reverse proxies."""

__version__ = "0.1.0"

from realip.config import RealIPConfig, parse_trusted_proxies
from realip.headers import (
    extract_forwarded_header,
    extract_real_ip_header,
    extract_x_forwarded_for_header,
)
from realip.realip import RealIP
from realip.resolver import get_forwarded_for, real_ip

__all__ = [
    "RealIP",
    "RealIPConfig",
    "extract_forwarded_header",
    "extract_real_ip_header",
    "extract_x_forwarded_for_header",
    "get_forwarded_for",
    "parse_trusted_proxies",
    "real_ip",
]
