"""
Bookmarklet generation for the merchant scraper payloads.

Each merchant maps to a payload template. The rendered payload is stripped of
``//`` comments, wrapped in an immediately-invoked function, and either
percent-encoded into a ``javascript:`` link or returned as plain text for
pasting into the browser console.
"""

import logging
from typing import Dict, Union
from urllib.parse import quote

from config import settings
from models.domain import StoreId
from models.schemas import StoreInstructions, VersionedBookmarklet
from services.import_pipeline.errors import UnsupportedStoreError
from services.import_pipeline.stores import coerce_store_id, get_store_by_id
from services.scrapers.loader import ScraperPayload, load_payload

logger = logging.getLogger(__name__)

STORE_PAYLOADS: Dict[StoreId, str] = {
    StoreId.MYNTRA: "myntra",
    StoreId.AJIO: "ajio",
    StoreId.AMAZON: "coming_soon",
    StoreId.FLIPKART: "coming_soon",
    StoreId.HM: "coming_soon",
    StoreId.ZARA: "coming_soon",
}

# Characters encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"


def strip_comments(code: str) -> str:
    """
    Remove ``//`` line comments and join the remaining lines.

    A ``//`` is only treated as a comment when the text before it holds an
    even number of both single and double quotes, so URLs inside string
    literals survive. Statements must end with ``;`` or ``}`` because lines
    are joined without separators.
    """
    cleaned = []
    for line in code.split("\n"):
        index = line.find("//")
        if index >= 0:
            before = line[:index]
            if before.count("'") % 2 == 0 and before.count('"') % 2 == 0:
                line = before
        line = line.strip()
        if line:
            cleaned.append(line)
    return "".join(cleaned)


def _payload_for(store_id: Union[StoreId, str]) -> tuple[StoreId, ScraperPayload]:
    key = coerce_store_id(store_id)
    payload_id = STORE_PAYLOADS.get(key) if key else None
    if not payload_id:
        raise UnsupportedStoreError(store_id)
    return key, load_payload(payload_id)


def _template_context(key: StoreId) -> dict:
    store = get_store_by_id(key)
    return {
        "app_name": settings.app_name,
        "store_id": key.value,
        "store_name": store.name if store else key.value.title(),
        "brand_color": store.color if store else "#000000",
        "transport_version": settings.transport_version,
    }


def render_store_payload(store_id: Union[StoreId, str]) -> str:
    key, payload = _payload_for(store_id)
    return payload.render(**_template_context(key))


def generate_bookmarklet_code(store_id: Union[StoreId, str]) -> str:
    clean_code = strip_comments(render_store_payload(store_id))
    code = f"(function(){{{clean_code}}})();"
    return "javascript:" + quote(code, safe=_URI_COMPONENT_SAFE)


def generate_console_script(store_id: Union[StoreId, str]) -> str:
    """Plain-text variant for pages that block ``javascript:`` bookmarks."""
    key, payload = _payload_for(store_id)
    context = _template_context(key)
    clean_code = strip_comments(payload.render(**context))
    store_name = context["store_name"]
    header = f"// {settings.app_name} {store_name} Scraper - Paste in Console (F12)"
    return f"{header}\n(function(){{{clean_code}}})();"


def generate_versioned_bookmarklet(store_id: Union[StoreId, str]) -> VersionedBookmarklet:
    return VersionedBookmarklet(
        code=generate_bookmarklet_code(store_id),
        version=settings.scraper_version,
    )


def get_store_instructions(store_id: Union[StoreId, str]) -> StoreInstructions:
    try:
        key, payload = _payload_for(store_id)
    except UnsupportedStoreError:
        logger.info(f"No instructions for unsupported store: {store_id}")
        return StoreInstructions(order_url="", steps=["This store is not yet supported"], tips=[])

    context = _template_context(key)
    store = get_store_by_id(key)
    return StoreInstructions(
        order_url=store.order_history_url if store else "",
        steps=payload.render_steps(**context),
        tips=payload.render_tips(**context),
    )
