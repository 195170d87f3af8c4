import re
from typing import Optional, Sequence

from constants import COMMON_BRANDS, KNOWN_COLORS


def _find_first_term(text: Optional[str], vocabulary: Sequence[str], whole_words: bool = False) -> Optional[str]:
    """First vocabulary entry (in vocabulary order) found in ``text``, case-insensitively."""
    if not text:
        return None
    lowered = text.lower()
    for term in vocabulary:
        needle = term.lower().strip()
        if not needle:
            continue
        if whole_words:
            if re.search(rf"(?<!\w){re.escape(needle)}(?!\w)", lowered):
                return term
        elif needle in lowered:
            return term
    return None


def extract_color(
    product_name: Optional[str],
    colors: Sequence[str] = KNOWN_COLORS,
    whole_words: bool = False,
) -> Optional[str]:
    """Return the first vocabulary color contained in the product name, capitalized."""
    color = _find_first_term(product_name, colors, whole_words)
    if color is None:
        return None
    color = color.strip()
    return color[:1].upper() + color[1:].lower()


def extract_brand(
    product_name: Optional[str],
    brands: Sequence[str] = COMMON_BRANDS,
    whole_words: bool = False,
) -> Optional[str]:
    """Return the first vocabulary brand contained in the product name, as spelled in the vocabulary."""
    return _find_first_term(product_name, brands, whole_words)
