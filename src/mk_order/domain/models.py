"""Order domain model — pure dataclass, no pydantic dependency."""
from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.mk_common.enums import OrderStatus


@dataclass
class Order:
    id: int
    buyer: str
    listing_id: int
    quantity: int
    total_price: int  # listing price x quantity, frozen at creation
    status: str = OrderStatus.CREATED.value
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    fulfilled_at: datetime | None = None

    @property
    def is_fulfilled(self) -> bool:
        return self.status == OrderStatus.FULFILLED.value

    def mark_fulfilled(self) -> None:
        self.status = OrderStatus.FULFILLED.value
        self.fulfilled_at = datetime.now(UTC)
