"""FastAPI integration for realip."""

from realip.integrations.fastapi.deps import create_client_ip_dep
from realip.integrations.fastapi.proxy import get_client_ip

__all__ = [
    "create_client_ip_dep",
    "get_client_ip",
]
