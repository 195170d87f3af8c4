from typing import AsyncGenerator

import httpx
from fastapi import Request

from config import settings


async def get_http_client(request: Request) -> AsyncGenerator[httpx.AsyncClient, None]:
    client = getattr(request.app.state, "http_client", None)
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(timeout=settings.image_fetch_timeout, follow_redirects=False) as client:
        yield client
