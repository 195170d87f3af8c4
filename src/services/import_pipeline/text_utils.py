import re
from typing import List

_SEPARATORS_RE = re.compile(r"[\s\-_]+")
_NON_WORD_RE = re.compile(r"[^\w]")


def normalize_string(value: str) -> str:
    """Lowercase and drop whitespace, separators and punctuation."""
    if not value:
        return ""
    lowered = value.lower()
    lowered = _SEPARATORS_RE.sub("", lowered)
    return _NON_WORD_RE.sub("", lowered).strip()


def normalized_tokens(value: str) -> List[str]:
    """Words of ``value`` after the same normalization as ``normalize_string``."""
    if not value:
        return []
    words = (_NON_WORD_RE.sub("", word) for word in _SEPARATORS_RE.split(value.lower()))
    return [word for word in words if word]
