"""API router for merchant metadata and scraper bookmarklets."""

from typing import List

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from models.schemas import StoreConfig, StoreInstructions, VersionedBookmarklet
from services.import_pipeline import SUPPORTED_STORES, get_enabled_stores
from services.import_pipeline.errors import UnsupportedStoreError
from services.scrapers import (
    generate_console_script,
    generate_versioned_bookmarklet,
    get_store_instructions,
)

router = APIRouter()


@router.get("", response_model=List[StoreConfig])
async def list_stores(enabled_only: bool = False) -> List[StoreConfig]:
    """
    List supported merchants.

    Args:
        enabled_only: Only return merchants with a working scraper

    Returns:
        Store configurations in declaration order
    """
    if enabled_only:
        return get_enabled_stores()
    return list(SUPPORTED_STORES.values())


@router.get("/{store_id}/bookmarklet", response_model=VersionedBookmarklet)
async def get_bookmarklet(store_id: str) -> VersionedBookmarklet:
    try:
        return generate_versioned_bookmarklet(store_id)
    except UnsupportedStoreError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{store_id}/console-script", response_class=PlainTextResponse)
async def get_console_script(store_id: str) -> str:
    try:
        return generate_console_script(store_id)
    except UnsupportedStoreError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{store_id}/instructions", response_model=StoreInstructions)
async def get_instructions(store_id: str) -> StoreInstructions:
    return get_store_instructions(store_id)
