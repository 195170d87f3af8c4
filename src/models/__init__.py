from models.domain import CategoryMatch, CategoryRule, ImportStatus, StoreId
from models.schemas import (
    DimensionsSize,
    ExistingItem,
    ImportedItem,
    ImportProgress,
    InventoryRecord,
    LetterSize,
    NoSize,
    NumericSize,
    ScrapedItemData,
    ShoeSize,
    SizeInfo,
    StoreConfig,
    StoreInstructions,
    StoreSelectors,
    TransportEnvelope,
    VersionedBookmarklet,
    WaistInseamSize,
    WatchSize,
)

__all__ = [
    "CategoryMatch",
    "CategoryRule",
    "ImportStatus",
    "StoreId",
    "ScrapedItemData",
    "TransportEnvelope",
    "ImportedItem",
    "ExistingItem",
    "InventoryRecord",
    "ImportProgress",
    "StoreConfig",
    "StoreSelectors",
    "StoreInstructions",
    "VersionedBookmarklet",
    "SizeInfo",
    "LetterSize",
    "NumericSize",
    "ShoeSize",
    "WatchSize",
    "DimensionsSize",
    "WaistInseamSize",
    "NoSize",
]
