from src.mk_common.errors import InsufficientQuantityError
from src.mk_listing.domain.models import Listing


def check_quantity_available(listing: Listing, quantity: int) -> None:
    """Raise InsufficientQuantityError(103) if the listing cannot cover ``quantity``."""
    if quantity > listing.quantity:
        raise InsufficientQuantityError(quantity, listing.quantity)
