"""
Byte-budget image re-encoding.

Images over budget are scaled so neither side exceeds the configured maximum
dimension and re-encoded as JPEG at descending quality levels until one fits.
"""

import asyncio
import base64
import logging
from io import BytesIO
from typing import Optional, Sequence

from PIL import Image, UnidentifiedImageError

from config import settings
from services.import_pipeline.errors import ImageDecodeError

logger = logging.getLogger(__name__)

_SIGNATURES = (
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"BM", "image/bmp"),
)


async def compress_image_if_needed(
    image_data: bytes,
    max_size_bytes: Optional[int] = None,
    max_dimension: Optional[int] = None,
    qualities: Optional[Sequence[int]] = None,
) -> bytes:
    """
    Return ``image_data`` re-encoded to fit ``max_size_bytes`` when it does not already.

    The first quality level whose encoding fits wins; if none fits, the
    lowest-quality encoding is returned. Raises ``ImageDecodeError`` only
    when the input cannot be read as an image.
    """
    budget = settings.image_max_bytes if max_size_bytes is None else max_size_bytes
    if len(image_data) <= budget:
        return image_data

    return await asyncio.to_thread(
        _reencode,
        image_data,
        budget,
        max_dimension or settings.image_max_dimension,
        list(qualities or settings.image_qualities),
    )


def _reencode(image_data: bytes, budget: int, max_dimension: int, qualities: Sequence[int]) -> bytes:
    image = _decode(image_data)
    width, height = fit_within(image.width, image.height, max_dimension)
    if (width, height) != image.size:
        image = image.resize((width, height), Image.LANCZOS)

    smallest = None
    for quality in qualities:
        try:
            encoded = _encode_jpeg(image, quality)
        except OSError as e:
            logger.warning(f"JPEG encoding unavailable, keeping original image: {e}")
            return image_data
        if len(encoded) <= budget:
            logger.debug(f"Re-encoded image at quality {quality}: {len(image_data)} -> {len(encoded)} bytes")
            return encoded
        smallest = encoded

    logger.info(f"No quality level fits {budget} bytes; returning quality {qualities[-1]} encoding")
    return smallest if smallest is not None else image_data


def _decode(image_data: bytes) -> Image.Image:
    try:
        image = Image.open(BytesIO(image_data))
        image.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise ImageDecodeError(f"Unreadable image data: {e}") from e
    if image.mode != "RGB":
        image = image.convert("RGB")
    return image


def _encode_jpeg(image: Image.Image, quality: int) -> bytes:
    buffer = BytesIO()
    image.save(buffer, format="JPEG", quality=quality, optimize=True)
    return buffer.getvalue()


def fit_within(width: int, height: int, max_dimension: int) -> tuple[int, int]:
    """Uniformly scale ``width`` x ``height`` so neither side exceeds ``max_dimension``."""
    if width <= max_dimension and height <= max_dimension:
        return width, height
    ratio = min(max_dimension / width, max_dimension / height)
    return max(1, round(width * ratio)), max(1, round(height * ratio))


def sniff_content_type(image_data: bytes, default: str = "image/jpeg") -> str:
    for signature, content_type in _SIGNATURES:
        if image_data.startswith(signature):
            return content_type
    if image_data[:4] == b"RIFF" and image_data[8:12] == b"WEBP":
        return "image/webp"
    return default


def to_data_url(image_data: bytes, content_type: Optional[str] = None) -> str:
    """Encode bytes as a ``data:<type>;base64,...`` URL."""
    kind = content_type or sniff_content_type(image_data)
    return f"data:{kind};base64,{base64.b64encode(image_data).decode('ascii')}"
