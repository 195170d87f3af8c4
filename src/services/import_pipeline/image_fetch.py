import asyncio
import logging
from typing import Optional
from urllib.parse import quote, urlparse

import httpx

from config import settings
from constants import ALLOWED_IMAGE_DOMAINS
from services.import_pipeline.errors import ImageDecodeError
from services.import_pipeline.image_normalizer import compress_image_if_needed, to_data_url

logger = logging.getLogger(__name__)

BROWSER_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "image/avif,image/webp,image/apng,image/*,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


def is_allowed_image_host(url: Optional[str]) -> bool:
    if not url:
        return False
    try:
        host = (urlparse(url).hostname or "").lower()
    except ValueError:
        return False
    return any(host == domain or host.endswith("." + domain) for domain in ALLOWED_IMAGE_DOMAINS)


def proxy_url_for(url: str, sync_api_url: Optional[str] = None) -> Optional[str]:
    base = sync_api_url if sync_api_url is not None else settings.sync_api_url
    if not base:
        return None
    return f"{base.rstrip('/')}/proxy?url={quote(url, safe='')}"


async def _get_image(client: httpx.AsyncClient, url: str) -> httpx.Response:
    try:
        return await client.get(url, headers=BROWSER_HEADERS)
    except httpx.TransportError:
        proxied = proxy_url_for(url)
        if not proxied:
            raise
        logger.debug(f"Direct download failed, retrying through proxy: {url}")
        return await client.get(proxied)


async def download_and_process_image(
    image_url: str,
    client: httpx.AsyncClient,
    max_retries: Optional[int] = None,
    retry_delay: float = 1.0,
    max_size_bytes: Optional[int] = None,
) -> str:
    """
    Download a product image and return it as a size-capped data URL.

    Falls back to returning ``image_url`` itself when the image cannot be
    fetched or decoded, so the item can still be imported with a remote link.
    """
    retries = settings.image_fetch_retries if max_retries is None else max_retries

    for attempt in range(retries):
        try:
            response = await _get_image(client, image_url)
            if not response.is_success:
                logger.info(f"Image download returned {response.status_code} for {image_url}")
                if attempt < retries - 1:
                    await asyncio.sleep(retry_delay * (attempt + 1))
                    continue
                return image_url

            compressed = await compress_image_if_needed(response.content, max_size_bytes)
            content_type = response.headers.get("content-type", "").split(";")[0].strip()
            if compressed is not response.content or not content_type.startswith("image/"):
                content_type = None
            return to_data_url(compressed, content_type)
        except ImageDecodeError as e:
            logger.warning(f"Downloaded image is unreadable, keeping URL {image_url}: {e}")
            return image_url
        except httpx.HTTPError as e:
            if attempt == retries - 1:
                logger.warning(f"Failed to process image {image_url}: {e}")
                return image_url
            await asyncio.sleep(retry_delay * (attempt + 1))

    return image_url
