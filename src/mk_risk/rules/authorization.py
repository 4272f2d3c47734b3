"""Principal checks gating every ledger mutation.

Listing creation requires the registry-reported item owner; update and
fulfill require the listing's seller. Identities compare as exact strings.
"""
from src.mk_common.errors import NotAuthorizedError
from src.mk_listing.domain.models import Listing


def check_item_owner(sender: str, item_id: int, owner: str) -> None:
    if sender != owner:
        raise NotAuthorizedError(sender, f"not the current owner of item {item_id}")


def check_listing_seller(sender: str, listing: Listing) -> None:
    if sender != listing.seller:
        raise NotAuthorizedError(sender, f"not the seller of listing {listing.id}")
