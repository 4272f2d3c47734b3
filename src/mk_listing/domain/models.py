"""Listing domain model — pure dataclass, no pydantic dependency."""
from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.mk_common.enums import ListingStatus


@dataclass
class Listing:
    id: int
    seller: str
    item_id: int  # item id in the ownership registry
    price: int  # per unit
    quantity: int  # remaining sellable units
    status: str = ListingStatus.ACTIVE.value
    # Quantity tracking
    sold_quantity: int = 0  # units sold through orders, never reset
    listed_quantity: int = field(init=False)  # quantity + sold_quantity as of last create/update
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        self.listed_quantity = self.quantity + self.sold_quantity

    def overwrite(self, price: int, quantity: int) -> None:
        """Replace price and remaining quantity; sold units are unaffected."""
        self.price = price
        self.quantity = quantity
        self.listed_quantity = quantity + self.sold_quantity
        self.updated_at = datetime.now(UTC)

    def take(self, quantity: int) -> None:
        """Move ``quantity`` units from remaining to sold. Caller checks availability."""
        self.quantity -= quantity
        self.sold_quantity += quantity
        self.updated_at = datetime.now(UTC)
