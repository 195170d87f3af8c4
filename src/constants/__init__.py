from constants.category_patterns import (
    CATEGORY_PATTERNS,
    FALLBACK_CATEGORY,
    FALLBACK_CONFIDENCE,
)
from constants.image_hosts import ALLOWED_IMAGE_DOMAINS
from constants.known_brands import COMMON_BRANDS
from constants.known_colors import KNOWN_COLORS
from constants.size_patterns import (
    CAPACITY_RE,
    DECIMAL_RE,
    DEFAULT_SHOE_SYSTEM,
    INTEGER_RE,
    LETTER_SIZE_RE,
    LETTER_SIZES,
    WAIST_INSEAM_RE,
    WATCH_CASE_RE,
)

__all__ = [
    "CATEGORY_PATTERNS",
    "FALLBACK_CATEGORY",
    "FALLBACK_CONFIDENCE",
    "ALLOWED_IMAGE_DOMAINS",
    "COMMON_BRANDS",
    "KNOWN_COLORS",
    "LETTER_SIZES",
    "LETTER_SIZE_RE",
    "DECIMAL_RE",
    "INTEGER_RE",
    "WATCH_CASE_RE",
    "CAPACITY_RE",
    "WAIST_INSEAM_RE",
    "DEFAULT_SHOE_SYSTEM",
]
