"""FastAPI dependencies — factory functions bound to a RealIP config."""

from fastapi import Request

from realip.config import RealIPConfig
from realip.headers import IPAddress
from realip.integrations.fastapi.proxy import get_client_ip


def create_client_ip_dep(config: RealIPConfig):
    """Factory: create a FastAPI dependency that resolves the client IP of the request.

    Usage:
        client_ip = create_client_ip_dep(config)

        @app.get("/whoami")
        async def whoami(ip: IPAddress | None = Depends(client_ip)):
            return {"ip": str(ip) if ip else None}
    """

    async def client_ip(request: Request) -> IPAddress | None:
        return get_client_ip(request, config)

    return client_ip
