from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from models.domain import ImportStatus, StoreId


class WireModel(BaseModel):
    """Base for records that travel as camelCase JSON (clipboard, HTTP)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def _coerce_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return None


def _coerce_price(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        cleaned = value.replace(",", "").replace("₹", "").strip()
        try:
            return float(cleaned)
        except ValueError:
            return None
    return None


class ScrapedItemData(WireModel):
    """One raw item as produced by a merchant payload. Any field may be junk."""

    image_url: str = ""
    name: str = ""
    brand: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    order_date: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None
    product_url: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _require_mapping(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return {}
        return data

    @field_validator("image_url", "name", mode="before")
    @classmethod
    def _required_text(cls, value: Any) -> str:
        return _coerce_text(value) or ""

    @field_validator("brand", "currency", "order_date", "size", "color", "product_url", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> Optional[str]:
        return _coerce_text(value)

    @field_validator("price", mode="before")
    @classmethod
    def _price(cls, value: Any) -> Optional[float]:
        return _coerce_price(value)


class TransportEnvelope(WireModel):
    version: str
    store: StoreId
    scraped_at: str = ""
    url: str = ""
    items: List[ScrapedItemData]

    @field_validator("version", mode="before")
    @classmethod
    def _version_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("scraped_at", "url", mode="before")
    @classmethod
    def _loose_text(cls, value: Any) -> str:
        return _coerce_text(value) or ""


class LetterSize(WireModel):
    type: Literal["letter"] = "letter"
    value: str


class NumericSize(WireModel):
    type: Literal["numeric"] = "numeric"
    value: str


class ShoeSize(WireModel):
    type: Literal["shoe"] = "shoe"
    value: str
    system: str = "us"


class WatchSize(WireModel):
    type: Literal["watch"] = "watch"
    value: str


class DimensionsSize(WireModel):
    type: Literal["dimensions"] = "dimensions"
    length: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    capacity: Optional[int] = None


class WaistInseamSize(WireModel):
    type: Literal["waist-inseam"] = "waist-inseam"
    waist: str
    inseam: str


class NoSize(WireModel):
    type: Literal["none"] = "none"


SizeInfo = Annotated[
    Union[LetterSize, NumericSize, ShoeSize, WatchSize, DimensionsSize, WaistInseamSize, NoSize],
    Field(discriminator="type"),
]


class ImportedItem(WireModel):
    """A normalized candidate awaiting user review."""

    temp_id: str
    external_id: Optional[str] = None
    image_url: str = ""
    name: str = ""
    brand: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    order_date: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None
    product_url: Optional[str] = None

    category: str
    subcategory: Optional[str] = None
    size_info: Optional[SizeInfo] = None

    selected: bool = True
    status: ImportStatus = ImportStatus.PENDING
    error: Optional[str] = None

    is_duplicate: Optional[bool] = None
    duplicate_of: Optional[str] = None

    def toggle_selected(self) -> None:
        self.selected = not self.selected

    def mark_importing(self) -> None:
        self.status = ImportStatus.IMPORTING
        self.error = None

    def mark_imported(self) -> None:
        self.status = ImportStatus.IMPORTED
        self.error = None

    def mark_duplicate(self, existing_id: str) -> None:
        self.status = ImportStatus.DUPLICATE
        self.is_duplicate = True
        self.duplicate_of = existing_id

    def mark_failed(self, message: str) -> None:
        self.status = ImportStatus.FAILED
        self.error = message


class ExistingItem(WireModel):
    """The duplicate detector's view of an inventory item."""

    id: str
    name: str
    brand: Optional[str] = None


class InventoryRecord(WireModel):
    """What the inventory store receives for each committed item."""

    name: str
    category: str
    subcategory: Optional[str] = None
    brand: Optional[str] = None
    color: Optional[str] = None
    purchase_date: Optional[str] = None
    cost: Optional[float] = None
    currency: Optional[str] = None
    size: Optional[str] = None
    image_data: Optional[str] = None


class ImportProgress(WireModel):
    total: int
    completed: int = 0
    failed: int = 0
    failed_images: int = 0
    current: Optional[str] = None


class StoreSelectors(WireModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    order_container: str
    product_image: str
    product_name: str
    brand_name: Optional[str] = None
    price: Optional[str] = None
    order_date: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None
    product_link: Optional[str] = None


class StoreConfig(WireModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: StoreId
    name: str
    logo: str
    order_history_url: str
    color: str
    domain: str
    currency: str = "INR"
    selectors: StoreSelectors
    enabled: bool


class StoreInstructions(WireModel):
    order_url: str = ""
    steps: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)


class VersionedBookmarklet(WireModel):
    code: str
    version: str


class ParseRequest(WireModel):
    text: str
    existing_items: List[ExistingItem] = Field(default_factory=list)


class ParseResponse(WireModel):
    store: StoreId
    scraped_at: str
    items: List[ImportedItem]
    duplicate_indices: List[int]
