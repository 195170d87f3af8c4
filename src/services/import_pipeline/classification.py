"""
Rule-table product classification.

Every rule in the table is evaluated against the product name. Matches are
ranked by descending priority and then by the position of their first
occurrence, so "Running Shoes" resolves to Sneakers (priority 10) instead of
the generic footwear rule (priority 5).
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from constants import CATEGORY_PATTERNS, FALLBACK_CATEGORY, FALLBACK_CONFIDENCE
from models.domain import CategoryMatch, CategoryRule

logger = logging.getLogger(__name__)


def compile_rules(patterns: Iterable[Tuple[str, str, Optional[str], int]]) -> List[CategoryRule]:
    return [CategoryRule.compile(*row) for row in patterns]


DEFAULT_RULES: List[CategoryRule] = compile_rules(CATEGORY_PATTERNS)


def detect_category(product_name: Optional[str], rules: Sequence[CategoryRule] = DEFAULT_RULES) -> CategoryMatch:
    """Classify a product name. Never raises; unmatched names get the fallback."""
    normalized = (product_name or "").strip().lower()

    matches = _collect_matches(normalized, rules)
    if not matches:
        return CategoryMatch(category=FALLBACK_CATEGORY, confidence=FALLBACK_CONFIDENCE)

    matches.sort(key=lambda m: (-m[0].priority, m[1]))
    best, position = matches[0]
    logger.debug(
        "Classified %r as %s/%s (priority %d at %d, %d candidates)",
        product_name, best.category, best.subcategory, best.priority, position, len(matches),
    )
    return CategoryMatch(
        category=best.category,
        subcategory=best.subcategory,
        confidence=best.priority / 10,
    )


def _collect_matches(text: str, rules: Sequence[CategoryRule]) -> List[Tuple[CategoryRule, int]]:
    found = []
    for rule in rules:
        match = rule.pattern.search(text)
        if match:
            found.append((rule, match.start()))
    return found
