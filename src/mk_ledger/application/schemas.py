"""Read-side snapshot schemas for the ledger.

Snapshots are frozen pydantic models built from domain dataclasses, so no
caller ever holds a mutable alias into ledger state.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from src.mk_account.domain.models import LedgerEntry
from src.mk_listing.domain.models import Listing
from src.mk_order.domain.models import Order


class ListingView(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    seller: str
    item_id: int
    price: int
    quantity: int
    status: str
    sold_quantity: int
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, listing: Listing) -> "ListingView":
        return cls(
            id=listing.id,
            seller=listing.seller,
            item_id=listing.item_id,
            price=listing.price,
            quantity=listing.quantity,
            status=listing.status,
            sold_quantity=listing.sold_quantity,
            created_at=listing.created_at,
            updated_at=listing.updated_at,
        )


class OrderView(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    buyer: str
    listing_id: int
    quantity: int
    total_price: int
    status: str
    created_at: datetime
    fulfilled_at: datetime | None = None

    @classmethod
    def from_domain(cls, order: Order) -> "OrderView":
        return cls(
            id=order.id,
            buyer=order.buyer,
            listing_id=order.listing_id,
            quantity=order.quantity,
            total_price=order.total_price,
            status=order.status,
            created_at=order.created_at,
            fulfilled_at=order.fulfilled_at,
        )


class LedgerEntryView(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    identity: str
    entry_type: str
    amount: int
    balance_after: int
    reference_type: str | None = None
    reference_id: int | None = None
    created_at: datetime

    @classmethod
    def from_domain(cls, entry: LedgerEntry) -> "LedgerEntryView":
        return cls(
            id=entry.id,
            identity=entry.identity,
            entry_type=entry.entry_type,
            amount=entry.amount,
            balance_after=entry.balance_after,
            reference_type=entry.reference_type,
            reference_id=entry.reference_id,
            created_at=entry.created_at,
        )
