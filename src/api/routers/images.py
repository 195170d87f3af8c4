"""API router for image re-encoding and the merchant image proxy."""

import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from api.dependencies import get_http_client
from config import settings
from services.import_pipeline import compress_image_if_needed, is_allowed_image_host, sniff_content_type
from services.import_pipeline.errors import ImageDecodeError
from services.import_pipeline.image_fetch import BROWSER_HEADERS

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/images/compress")
async def compress_image(
    request: Request,
    max_size_bytes: Optional[int] = Query(default=None, gt=0),
) -> Response:
    """Re-encode the request body so it fits ``max_size_bytes``."""
    body = await request.body()
    if not body:
        raise HTTPException(status_code=400, detail="Empty image body")
    try:
        data = await compress_image_if_needed(body, max_size_bytes)
    except ImageDecodeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return Response(content=data, media_type=sniff_content_type(data))


@router.get("/proxy")
async def proxy_image(
    url: Optional[str] = None,
    client: httpx.AsyncClient = Depends(get_http_client),
) -> Response:
    """Fetch a product image from an allowed merchant CDN on the caller's behalf."""
    if not url:
        raise HTTPException(status_code=400, detail="Missing url parameter")
    if not is_allowed_image_host(url):
        raise HTTPException(status_code=403, detail="Domain not allowed")

    target = httpx.URL(url)
    headers = dict(BROWSER_HEADERS)
    headers["Referer"] = f"{target.scheme}://{target.host}/"
    try:
        async with client.stream("GET", url, headers=headers, follow_redirects=False) as upstream:
            if not upstream.is_success:
                raise HTTPException(
                    status_code=upstream.status_code,
                    detail=f"Failed to fetch image: {upstream.status_code}",
                )

            content_type = upstream.headers.get("content-type", "image/jpeg")
            if not content_type.startswith("image/"):
                raise HTTPException(status_code=400, detail="URL does not point to an image")

            content = await _read_capped(upstream, settings.proxy_max_bytes)
    except httpx.HTTPError as e:
        logger.warning(f"Proxy fetch failed for {url}: {e}")
        raise HTTPException(status_code=502, detail="Failed to fetch image")

    return Response(
        content=content,
        media_type=content_type,
        headers={"Cache-Control": "public, max-age=86400"},
    )


async def _read_capped(upstream: httpx.Response, max_bytes: int) -> bytes:
    """Read the upstream body, refusing anything over ``max_bytes``."""
    too_large = HTTPException(status_code=413, detail="Image too large to proxy")

    declared = upstream.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > max_bytes:
        raise too_large

    body = bytearray()
    async for chunk in upstream.aiter_bytes():
        body.extend(chunk)
        if len(body) > max_bytes:
            raise too_large
    return bytes(body)
