"""Test fixtures for realip FastAPI integration tests."""

import pytest_asyncio
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient

from realip import RealIP


def create_app(realip: RealIP) -> FastAPI:
    """App with a single endpoint echoing the resolved client IP."""
    app = FastAPI()

    @app.get("/whoami")
    async def whoami(ip=Depends(realip.fastapi_dependency())):
        return {"ip": str(ip) if ip is not None else None}

    return app


@pytest_asyncio.fixture
async def trusted_client():
    """Client whose connection (127.0.0.1) is a trusted proxy."""
    app = create_app(RealIP(trusted_proxies=["127.0.0.0/8"]))
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest_asyncio.fixture
async def untrusted_client():
    """Client whose connection (127.0.0.1) is not trusted."""
    app = create_app(RealIP(trusted_proxies=["10.0.0.0/8"]))
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
