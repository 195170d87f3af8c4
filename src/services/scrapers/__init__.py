"""
Merchant scraper payloads and the bookmarklet generator.

Payloads are page-executed scripts kept as text templates; the pipeline never
interprets them, it only renders, strips, wraps and encodes them.
"""

from services.scrapers.bookmarklet import (
    STORE_PAYLOADS,
    generate_bookmarklet_code,
    generate_console_script,
    generate_versioned_bookmarklet,
    get_store_instructions,
    render_store_payload,
    strip_comments,
)
from services.scrapers.loader import ScraperPayload, load_payload

__all__ = [
    "STORE_PAYLOADS",
    "generate_bookmarklet_code",
    "generate_console_script",
    "generate_versioned_bookmarklet",
    "get_store_instructions",
    "render_store_payload",
    "strip_comments",
    "ScraperPayload",
    "load_payload",
]
