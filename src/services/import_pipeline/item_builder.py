import logging
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from config import settings
from constants import COMMON_BRANDS, KNOWN_COLORS
from models.schemas import ImportedItem, ScrapedItemData, TransportEnvelope
from services.import_pipeline.attributes import extract_brand, extract_color
from services.import_pipeline.classification import detect_category
from services.import_pipeline.size_detection import detect_size_type
from services.import_pipeline.stores import get_store_currency

logger = logging.getLogger(__name__)


def process_scraped_items(
    envelope: TransportEnvelope,
    now: Optional[datetime] = None,
    brands: Sequence[str] = COMMON_BRANDS,
    colors: Sequence[str] = KNOWN_COLORS,
) -> List[ImportedItem]:
    """
    Turn the raw items of an envelope into review candidates.

    Args:
        envelope: Parsed clipboard envelope
        now: Clock used for the session-scoped temp ids
        brands: Brand vocabulary used when the merchant gave no brand
        colors: Color vocabulary used when the merchant gave no color

    Returns:
        One ``ImportedItem`` per scraped item, in scrape order
    """
    stamp = int((now or datetime.now(timezone.utc)).timestamp() * 1000)
    store = envelope.store.value
    currency = get_store_currency(envelope.store) or settings.default_currency

    items = [
        build_imported_item(raw, f"import-{store}-{stamp}-{index}", currency, brands, colors)
        for index, raw in enumerate(envelope.items)
    ]
    logger.info(f"Built {len(items)} import candidates from {store}")
    return items


def build_imported_item(
    raw: ScrapedItemData,
    temp_id: str,
    native_currency: str,
    brands: Sequence[str] = COMMON_BRANDS,
    colors: Sequence[str] = KNOWN_COLORS,
) -> ImportedItem:
    match = detect_category(raw.name)
    currency = raw.currency
    if raw.price is not None and not currency:
        currency = native_currency

    return ImportedItem(
        temp_id=temp_id,
        image_url=raw.image_url,
        name=raw.name,
        brand=raw.brand or extract_brand(raw.name, brands),
        price=raw.price,
        currency=currency,
        order_date=raw.order_date,
        size=raw.size,
        color=raw.color or extract_color(raw.name, colors),
        product_url=raw.product_url,
        category=match.category,
        subcategory=match.subcategory,
        size_info=detect_size_type(raw.size, match.category),
    )
