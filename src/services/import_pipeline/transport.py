"""
Clipboard transport codec.

The merchant payload serializes a ``TransportEnvelope`` as JSON and writes it
to the clipboard; this module reads it back. Structurally invalid input yields
``None`` so callers can ask the user to copy again.
"""

import json
import logging
from typing import Optional

from pydantic import ValidationError

from config import settings
from models.schemas import TransportEnvelope

logger = logging.getLogger(__name__)


def parse_clipboard_data(text: Optional[str]) -> Optional[TransportEnvelope]:
    if not text or not text.strip():
        return None

    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError, ValueError):
        logger.info("Clipboard text is not valid JSON")
        return None

    if not _has_required_shape(data):
        logger.info("Clipboard JSON is missing version, store or items")
        return None

    if str(data["version"]) != settings.transport_version:
        logger.warning("Unknown import data version: %s", data["version"])

    try:
        return TransportEnvelope.model_validate(data)
    except ValidationError as e:
        logger.info(f"Clipboard envelope failed validation: {e.error_count()} errors")
        return None


def _has_required_shape(data) -> bool:
    if not isinstance(data, dict):
        return False
    return bool(data.get("version")) and bool(data.get("store")) and isinstance(data.get("items"), list)


def serialize_envelope(envelope: TransportEnvelope) -> str:
    """Render an envelope as the camelCase JSON a merchant payload produces."""
    return envelope.model_dump_json(by_alias=True, exclude_none=True)
