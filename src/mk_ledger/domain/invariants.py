# src/mk_ledger/domain/invariants.py
"""Ledger invariant audit.

INV-Q: listing.quantity >= 0 and quantity + sold_quantity == listed_quantity
INV-S: sum of order quantities against a listing == listing.sold_quantity
INV-R: every order references an existing listing
INV-B: no balance is negative
INV-Z: sum of balances == sum of initial balances (transfers are zero-sum)
INV-J: balance == initial balance + sum of the identity's journal entries
"""
import logging
from collections import defaultdict
from collections.abc import Mapping

from src.mk_account.domain.models import BalanceBook
from src.mk_listing.domain.models import Listing
from src.mk_order.domain.models import Order

logger = logging.getLogger(__name__)


def verify_ledger_invariants(
    listings: Mapping[int, Listing],
    orders: Mapping[int, Order],
    balances: BalanceBook,
) -> list[str]:
    """Return a list of violation strings; empty when the ledger is consistent."""
    violations: list[str] = []

    sold_by_listing: dict[int, int] = defaultdict(int)
    for order in orders.values():
        if order.listing_id not in listings:
            violations.append(
                f"INV-R violated: order {order.id} references missing listing {order.listing_id}"
            )
            continue
        sold_by_listing[order.listing_id] += order.quantity

    for listing in listings.values():
        if listing.quantity < 0:
            violations.append(
                f"INV-Q violated: listing {listing.id} quantity={listing.quantity} < 0"
            )
        if listing.quantity + listing.sold_quantity != listing.listed_quantity:
            violations.append(
                f"INV-Q violated: listing {listing.id} quantity({listing.quantity}) + "
                f"sold({listing.sold_quantity}) != listed({listing.listed_quantity})"
            )
        ordered = sold_by_listing.get(listing.id, 0)
        if ordered != listing.sold_quantity:
            violations.append(
                f"INV-S violated: listing {listing.id} orders total {ordered} "
                f"!= sold_quantity {listing.sold_quantity}"
            )

    for identity in sorted(balances.identities()):
        balance = balances.get(identity)
        if balance < 0:
            violations.append(f"INV-B violated: balance of {identity} = {balance} < 0")
        journal = sum(e.amount for e in balances.entries_for(identity))
        if balances.initial(identity) + journal != balance:
            violations.append(
                f"INV-J violated: {identity} initial({balances.initial(identity)}) + "
                f"journal({journal}) != balance({balance})"
            )

    if balances.total != balances.initial_total:
        violations.append(
            f"INV-Z violated: balances total {balances.total} "
            f"!= initial total {balances.initial_total}"
        )

    for msg in violations:
        logger.error(msg)
    if not violations:
        logger.debug(
            "Invariants OK: listings=%d, orders=%d, total_balance=%d",
            len(listings), len(orders), balances.total,
        )
    return violations
