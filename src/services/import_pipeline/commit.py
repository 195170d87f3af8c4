"""
Hand reviewed candidates to the inventory store.

Selected items are committed one at a time. Each item's outcome is recorded
on the item itself (``imported`` or ``failed`` with the error message); a
failure never stops the rest of the batch.
"""

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional, Protocol, Sequence

from models.domain import ImportStatus
from models.schemas import ImportedItem, ImportProgress, InventoryRecord

logger = logging.getLogger(__name__)

ImageFetcher = Callable[[str], Awaitable[Optional[str]]]
ProgressCallback = Callable[[ImportProgress], None]


class InventoryStore(Protocol):
    async def add_item(self, record: InventoryRecord) -> str:
        """Persist one record and return its inventory id."""
        ...


@dataclass
class CommitResult:
    items: List[ImportedItem]
    progress: ImportProgress
    failed_images: List[str] = field(default_factory=list)

    @property
    def imported(self) -> List[ImportedItem]:
        return [item for item in self.items if item.status == ImportStatus.IMPORTED]

    @property
    def failed(self) -> List[ImportedItem]:
        return [item for item in self.items if item.status == ImportStatus.FAILED]


def to_inventory_record(item: ImportedItem, image_data: Optional[str] = None) -> InventoryRecord:
    return InventoryRecord(
        name=item.name,
        category=item.category,
        subcategory=item.subcategory,
        brand=item.brand,
        color=item.color,
        purchase_date=item.order_date,
        cost=item.price,
        currency=item.currency,
        size=item.size,
        image_data=image_data,
    )


def is_inline_image(value: Optional[str]) -> bool:
    return bool(value) and value.startswith("data:image/")


async def commit_items(
    items: Sequence[ImportedItem],
    store: InventoryStore,
    fetch_image: Optional[ImageFetcher] = None,
    on_progress: Optional[ProgressCallback] = None,
) -> CommitResult:
    selected = [item for item in items if item.selected]
    progress = ImportProgress(total=len(selected))
    failed_images: List[str] = []

    for item in selected:
        progress.current = item.name
        item.mark_importing()
        try:
            image_data = None
            if item.image_url and fetch_image is not None:
                image_data = await fetch_image(item.image_url)
                if not is_inline_image(image_data):
                    failed_images.append(item.name)
                    progress.failed_images += 1

            external_id = await store.add_item(to_inventory_record(item, image_data))
            item.external_id = external_id
            item.mark_imported()
        except Exception as e:
            logger.warning(f"Failed to import item {item.name!r}: {e}")
            item.mark_failed(str(e) or type(e).__name__)
            progress.failed += 1
        progress.completed += 1
        if on_progress:
            on_progress(progress.model_copy())

    progress.current = None
    logger.info(
        f"Committed {progress.completed - progress.failed}/{progress.total} items "
        f"({progress.failed} failed, {progress.failed_images} without a stored image)"
    )
    return CommitResult(items=list(selected), progress=progress, failed_images=failed_images)
