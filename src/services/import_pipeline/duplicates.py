"""
Fuzzy duplicate detection against the user's inventory.

Names and brands are compared in normalized form (see ``normalize_string``).
A brand mismatch is a hard veto. Identical names match when the brands agree
(including both absent). Near-identical names match only when both sides
carry the same non-empty brand: one name must contain the other, and the
shorter must exceed the threshold share of the longer in characters or reach
it in words. The word-count test is a deliberate widening of the character
rule so that one appended word (a color, a pack size) still matches.
"""

import logging
from typing import List, Optional, Sequence

from config import settings
from models.schemas import ExistingItem, ImportedItem
from services.import_pipeline.text_utils import normalize_string, normalized_tokens

logger = logging.getLogger(__name__)


def is_probable_duplicate(
    name: str,
    brand: Optional[str],
    existing: ExistingItem,
    length_ratio: Optional[float] = None,
) -> bool:
    threshold = settings.duplicate_length_ratio if length_ratio is None else length_ratio

    candidate_name = normalize_string(name)
    candidate_brand = normalize_string(brand) if brand else ""
    existing_name = normalize_string(existing.name)
    existing_brand = normalize_string(existing.brand) if existing.brand else ""

    brands_match = candidate_brand == existing_brand
    if not brands_match and candidate_brand and existing_brand:
        return False

    if brands_match and candidate_name == existing_name:
        return True

    if brands_match and candidate_brand:
        return _is_near_identical(name, existing.name, threshold)

    return False


def _is_near_identical(name: str, other: str, threshold: float) -> bool:
    shorter, longer = sorted((normalize_string(name), normalize_string(other)), key=len)
    if not longer or shorter not in longer:
        return False
    if len(shorter) / len(longer) > threshold:
        return True
    # A title with one extra word (color, pack size) stays within the ratio by word count.
    word_counts = sorted((len(normalized_tokens(name)), len(normalized_tokens(other))))
    return word_counts[1] > 0 and word_counts[0] / word_counts[1] >= threshold


def find_duplicate_of(
    item: ImportedItem,
    existing_items: Sequence[ExistingItem],
    length_ratio: Optional[float] = None,
) -> Optional[str]:
    """Return the id of the first existing item that ``item`` duplicates."""
    for existing in existing_items:
        if is_probable_duplicate(item.name, item.brand, existing, length_ratio):
            return existing.id
    return None


def check_for_duplicates(
    imported_items: Sequence[ImportedItem],
    existing_items: Sequence[ExistingItem],
    length_ratio: Optional[float] = None,
) -> List[int]:
    duplicate_indices = [
        index
        for index, item in enumerate(imported_items)
        if find_duplicate_of(item, existing_items, length_ratio) is not None
    ]
    if duplicate_indices:
        logger.info(f"{len(duplicate_indices)} of {len(imported_items)} candidates may already be in the inventory")
    return duplicate_indices


def mark_duplicates(
    imported_items: Sequence[ImportedItem],
    existing_items: Sequence[ExistingItem],
    length_ratio: Optional[float] = None,
) -> List[ImportedItem]:
    """Copies of ``imported_items`` with ``is_duplicate``/``duplicate_of`` filled in."""
    marked = []
    for item in imported_items:
        marked_item = item.model_copy(update={"is_duplicate": False, "duplicate_of": None})
        duplicate_of = find_duplicate_of(item, existing_items, length_ratio)
        if duplicate_of is not None:
            marked_item.mark_duplicate(duplicate_of)
        marked.append(marked_item)
    return marked
