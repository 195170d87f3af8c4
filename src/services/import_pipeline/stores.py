from typing import Dict, List, Optional, Union
from urllib.parse import urlparse

from models.domain import StoreId
from models.schemas import StoreConfig, StoreSelectors

_GENERIC_SELECTORS = StoreSelectors(
    order_container=".order-item",
    product_image="img.product-image",
    product_name=".product-name",
    price=".product-price",
    order_date=".order-date",
)

SUPPORTED_STORES: Dict[StoreId, StoreConfig] = {
    StoreId.MYNTRA: StoreConfig(
        id=StoreId.MYNTRA,
        name="Myntra",
        logo="🛍️",
        order_history_url="https://www.myntra.com/my/orders",
        color="#ff3f6c",
        domain="myntra.com",
        enabled=True,
        selectors=StoreSelectors(
            order_container='.order-item, .past-order-item, [class*="orderItem"]',
            product_image='img[class*="product"], img[class*="image"], .order-item img',
            product_name='[class*="productName"], [class*="product-name"], .order-item-name',
            brand_name='[class*="brandName"], [class*="brand-name"]',
            price='[class*="price"], [class*="amount"]',
            order_date='[class*="date"], [class*="orderDate"]',
            size='[class*="size"]',
            color='[class*="color"]',
            product_link='a[href*="/buy/"]',
        ),
    ),
    StoreId.AJIO: StoreConfig(
        id=StoreId.AJIO,
        name="Ajio",
        logo="👗",
        order_history_url="https://www.ajio.com/my-account/orders",
        color="#3f51b5",
        domain="ajio.com",
        enabled=True,
        selectors=StoreSelectors(
            order_container='.order-prod-details, [class*="order-item"], [class*="orderItem"]',
            product_image='img[class*="prod"], img[class*="product"], .order-prod-details img',
            product_name='[class*="prod-name"], [class*="productName"], [class*="product-name"]',
            brand_name='[class*="brand"], [class*="brandName"]',
            price='[class*="price"], [class*="amount"]',
            order_date='[class*="date"]',
            size='[class*="size"]',
            color='[class*="color"]',
            product_link='a[href*="/p/"]',
        ),
    ),
    StoreId.AMAZON: StoreConfig(
        id=StoreId.AMAZON,
        name="Amazon Fashion",
        logo="📦",
        order_history_url="https://www.amazon.in/gp/css/order-history",
        color="#ff9900",
        domain="amazon.in",
        enabled=False,
        selectors=StoreSelectors(
            order_container=".order-card",
            product_image=".product-image img",
            product_name=".product-title",
            price=".product-price",
            order_date=".order-date",
        ),
    ),
    StoreId.FLIPKART: StoreConfig(
        id=StoreId.FLIPKART,
        name="Flipkart Fashion",
        logo="🛒",
        order_history_url="https://www.flipkart.com/account/orders",
        color="#2874f0",
        domain="flipkart.com",
        enabled=False,
        selectors=StoreSelectors(
            order_container=".order-item",
            product_image='img[class*="product"]',
            product_name='[class*="product-name"]',
            price='[class*="price"]',
            order_date='[class*="date"]',
        ),
    ),
    StoreId.HM: StoreConfig(
        id=StoreId.HM,
        name="H&M",
        logo="👔",
        order_history_url="https://www2.hm.com/en_in/my-account/orders",
        color="#e50010",
        domain="hm.com",
        enabled=False,
        selectors=_GENERIC_SELECTORS,
    ),
    StoreId.ZARA: StoreConfig(
        id=StoreId.ZARA,
        name="Zara",
        logo="🧥",
        order_history_url="https://www.zara.com/in/en/user/orders",
        color="#000000",
        domain="zara.com",
        enabled=False,
        selectors=_GENERIC_SELECTORS,
    ),
}


def coerce_store_id(store_id: Union[StoreId, str, None]) -> Optional[StoreId]:
    if isinstance(store_id, StoreId):
        return store_id
    try:
        return StoreId(str(store_id).lower())
    except ValueError:
        return None


def get_store_by_id(store_id: Union[StoreId, str]) -> Optional[StoreConfig]:
    key = coerce_store_id(store_id)
    return SUPPORTED_STORES.get(key) if key else None


def get_enabled_stores() -> List[StoreConfig]:
    return [store for store in SUPPORTED_STORES.values() if store.enabled]


def get_store_currency(store_id: Union[StoreId, str]) -> Optional[str]:
    store = get_store_by_id(store_id)
    return store.currency if store else None


def validate_store_url(url: str, store_id: Union[StoreId, str]) -> bool:
    """True when ``url`` points at the merchant's own domain or a subdomain of it."""
    store = get_store_by_id(store_id)
    if not store or not url:
        return False
    host = (urlparse(url).hostname or "").lower()
    return host == store.domain or host.endswith("." + store.domain)
