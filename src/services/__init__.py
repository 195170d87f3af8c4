from services.import_pipeline import (
    check_for_duplicates,
    commit_items,
    compress_image_if_needed,
    detect_category,
    parse_clipboard_data,
    process_scraped_items,
)
from services.scrapers import generate_bookmarklet_code, generate_console_script, get_store_instructions

__all__ = [
    "check_for_duplicates",
    "commit_items",
    "compress_image_if_needed",
    "detect_category",
    "parse_clipboard_data",
    "process_scraped_items",
    "generate_bookmarklet_code",
    "generate_console_script",
    "get_store_instructions",
]
