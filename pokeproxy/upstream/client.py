# pokeproxy/upstream/client.py

from typing import Optional

import httpx
from fastapi import Request

from pokeproxy.config import Settings, get_settings


def build_async_client(settings: Optional[Settings] = None) -> httpx.AsyncClient:
    settings = settings or get_settings()
    # httpx.Timeout(None) disables every timeout
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.upstream_timeout_seconds),
        headers={"Accept": "application/json"},
    )


def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    FastAPI dependency: the client opened by the application lifespan.
    """
    return request.app.state.http_client
