import enum
import re
from dataclasses import dataclass
from typing import Optional, Pattern


class StoreId(str, enum.Enum):
    MYNTRA = "myntra"
    AJIO = "ajio"
    AMAZON = "amazon"
    FLIPKART = "flipkart"
    HM = "hm"
    ZARA = "zara"


class ImportStatus(str, enum.Enum):
    PENDING = "pending"
    IMPORTING = "importing"
    IMPORTED = "imported"
    FAILED = "failed"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class CategoryRule:
    """One row of the classification table."""
    pattern: Pattern[str]
    category: str
    subcategory: Optional[str]
    priority: int

    @classmethod
    def compile(cls, pattern: str, category: str, subcategory: Optional[str], priority: int) -> "CategoryRule":
        return cls(re.compile(pattern, re.IGNORECASE), category, subcategory, priority)


@dataclass(frozen=True)
class CategoryMatch:
    category: str
    subcategory: Optional[str] = None
    confidence: float = 0.0
