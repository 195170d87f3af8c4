"""API router for turning pasted clipboard data into import candidates."""

import logging

from fastapi import APIRouter, HTTPException

from models.schemas import ParseRequest, ParseResponse
from services.import_pipeline import (
    check_for_duplicates,
    mark_duplicates,
    parse_clipboard_data,
    process_scraped_items,
)

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_DATA_MESSAGE = "Invalid data format. Please copy the data from the import script again."


@router.post("/parse", response_model=ParseResponse)
async def parse_import(request: ParseRequest) -> ParseResponse:
    """
    Parse pasted clipboard text and flag probable duplicates.

    Args:
        request: Clipboard text plus the user's existing inventory

    Returns:
        Normalized candidates and the indices of likely duplicates

    Raises:
        HTTPException: If the text is not a valid import envelope or holds no items
    """
    envelope = parse_clipboard_data(request.text)
    if envelope is None:
        raise HTTPException(status_code=422, detail=INVALID_DATA_MESSAGE)

    items = process_scraped_items(envelope)
    if not items:
        raise HTTPException(status_code=422, detail="The copied data did not contain any items.")

    duplicate_indices = check_for_duplicates(items, request.existing_items)
    items = mark_duplicates(items, request.existing_items)

    return ParseResponse(
        store=envelope.store,
        scraped_at=envelope.scraped_at,
        items=items,
        duplicate_indices=duplicate_indices,
    )
