"""
Order-import normalization pipeline.

Clipboard text from a merchant payload is parsed into an envelope, each
scraped item is classified and enriched, candidates are checked against the
existing inventory, and reviewed items are committed with their images
re-encoded to fit the storage budget.
"""

from services.import_pipeline.attributes import extract_brand, extract_color
from services.import_pipeline.classification import DEFAULT_RULES, compile_rules, detect_category
from services.import_pipeline.commit import (
    CommitResult,
    InventoryStore,
    commit_items,
    to_inventory_record,
)
from services.import_pipeline.duplicates import (
    check_for_duplicates,
    find_duplicate_of,
    is_probable_duplicate,
    mark_duplicates,
)
from services.import_pipeline.errors import (
    ImageDecodeError,
    ImportPipelineError,
    UnsupportedStoreError,
)
from services.import_pipeline.image_fetch import download_and_process_image, is_allowed_image_host
from services.import_pipeline.image_normalizer import (
    compress_image_if_needed,
    fit_within,
    sniff_content_type,
    to_data_url,
)
from services.import_pipeline.item_builder import build_imported_item, process_scraped_items
from services.import_pipeline.size_detection import detect_size_type
from services.import_pipeline.stores import (
    SUPPORTED_STORES,
    get_enabled_stores,
    get_store_by_id,
    validate_store_url,
)
from services.import_pipeline.text_utils import normalize_string
from services.import_pipeline.transport import parse_clipboard_data, serialize_envelope

__all__ = [
    # Attribute extraction
    "detect_category",
    "compile_rules",
    "DEFAULT_RULES",
    "extract_brand",
    "extract_color",
    "detect_size_type",
    "normalize_string",

    # Transport and item building
    "parse_clipboard_data",
    "serialize_envelope",
    "process_scraped_items",
    "build_imported_item",

    # Duplicates
    "check_for_duplicates",
    "find_duplicate_of",
    "is_probable_duplicate",
    "mark_duplicates",

    # Images
    "compress_image_if_needed",
    "download_and_process_image",
    "fit_within",
    "is_allowed_image_host",
    "sniff_content_type",
    "to_data_url",

    # Commit
    "CommitResult",
    "InventoryStore",
    "commit_items",
    "to_inventory_record",

    # Stores
    "SUPPORTED_STORES",
    "get_enabled_stores",
    "get_store_by_id",
    "validate_store_url",

    # Errors
    "ImportPipelineError",
    "UnsupportedStoreError",
    "ImageDecodeError",
]
