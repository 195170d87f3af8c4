"""
Heuristic size-format inference.

The checks run in a fixed order: category-specific formats first (shoe,
watch case, bag capacity), then the letter alphabet, bare integers, waist x
inseam pairs, and finally an opaque letter-style fallback. Every non-empty
string ends up in some variant.
"""

from typing import Optional

from config import settings
from constants import (
    CAPACITY_RE,
    DECIMAL_RE,
    DEFAULT_SHOE_SYSTEM,
    INTEGER_RE,
    LETTER_SIZE_RE,
    WAIST_INSEAM_RE,
    WATCH_CASE_RE,
)
from models.schemas import (
    DimensionsSize,
    LetterSize,
    NumericSize,
    ShoeSize,
    SizeInfo,
    WaistInseamSize,
    WatchSize,
)


def detect_size_type(raw_size: Optional[str], category: Optional[str]) -> Optional[SizeInfo]:
    if not raw_size or not raw_size.strip():
        return None

    size = raw_size.strip()

    if category == "footwear" and DECIMAL_RE.match(size):
        return ShoeSize(value=size, system=DEFAULT_SHOE_SYSTEM)

    if category == "accessories":
        match = WATCH_CASE_RE.match(size)
        if match:
            return WatchSize(value=match.group(1))

    if category == "bags":
        match = CAPACITY_RE.match(size)
        if match:
            return DimensionsSize(capacity=int(match.group(1)))

    if LETTER_SIZE_RE.match(size):
        return LetterSize(value=size.upper())

    if INTEGER_RE.match(size):
        numeric = int(size)
        if settings.numeric_size_min <= numeric <= settings.numeric_size_max:
            return NumericSize(value=size)
        if settings.shoe_size_min <= numeric <= settings.shoe_size_max:
            return ShoeSize(value=size, system=DEFAULT_SHOE_SYSTEM)

    match = WAIST_INSEAM_RE.match(size)
    if match:
        return WaistInseamSize(waist=match.group(1), inseam=match.group(2))

    return LetterSize(value=size)
