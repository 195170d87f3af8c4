"""Loader for per-merchant scraper payload templates."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import yaml
from jinja2 import BaseLoader, Environment

logger = logging.getLogger(__name__)

PAYLOADS_DIR = Path(__file__).parent / "payloads"

_ENV = Environment(loader=BaseLoader(), keep_trailing_newline=False)


class ScraperPayload:
    def __init__(self, payload_id: str, content: str, metadata: Dict[str, Any]):
        self.id = payload_id
        self.content = content
        self.version = str(metadata.get("version", "1.0.0"))
        self.description = metadata.get("description", "")
        self.steps: List[str] = list(metadata.get("steps") or [])
        self.tips: List[str] = list(metadata.get("tips") or [])

    def render(self, **kwargs) -> str:
        return _ENV.from_string(self.content).render(**kwargs)

    def render_steps(self, **kwargs) -> List[str]:
        return [_ENV.from_string(step).render(**kwargs) for step in self.steps]

    def render_tips(self, **kwargs) -> List[str]:
        return [_ENV.from_string(tip).render(**kwargs) for tip in self.tips]


def get_payload_path(payload_id: str) -> Path:
    return PAYLOADS_DIR / f"{payload_id}.js"


@lru_cache(maxsize=16)
def load_payload(payload_id: str) -> ScraperPayload:
    path = get_payload_path(payload_id)
    if not path.exists():
        raise FileNotFoundError(f"Scraper payload not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    metadata, body = _parse_frontmatter(content)
    return ScraperPayload(payload_id, body, metadata)


def _parse_frontmatter(content: str) -> tuple[Dict[str, Any], str]:
    if not content.startswith("---"):
        return {}, content

    parts = content.split("---", 2)
    if len(parts) < 3:
        return {}, content

    try:
        metadata = yaml.safe_load(parts[1]) or {}
    except yaml.YAMLError:
        logger.warning("Failed to parse YAML frontmatter")
        metadata = {}

    return metadata, parts[2].strip()
