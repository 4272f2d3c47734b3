"""Ledger — stateful owner of listings, orders and balances.

Public operations never raise for domain failures: each returns Ok(value)
or Err(kind, code, message). Internally the ``_*_inner`` methods raise
AppError subclasses and the public wrapper converts them.

Locking:
  - ``_lock`` guards every read and write of ledger state.
  - ``_fulfilling[order_id]`` marks an order whose registry transfer is in
    flight outside ``_lock``; entries exist only while a transfer runs.
"""
import asyncio
import logging
from collections.abc import Mapping

from config.settings import Settings, settings as default_settings
from src.mk_account.domain.models import BalanceBook
from src.mk_common.errors import (
    AppError,
    InternalError,
    ListingNotFoundError,
    OrderAlreadyFulfilledError,
    OrderNotFoundError,
)
from src.mk_common.id_generator import SequentialIdGenerator
from src.mk_common.result import Result, error_result, ok_result
from src.mk_ledger.application.schemas import LedgerEntryView, ListingView, OrderView
from src.mk_ledger.domain.invariants import verify_ledger_invariants
from src.mk_listing.domain.models import Listing
from src.mk_order.domain.models import Order
from src.mk_registry.domain.registry import OwnershipRegistryProtocol
from src.mk_registry.infrastructure.gateway import RegistryGateway
from src.mk_risk.rules.amounts import check_non_negative, check_positive
from src.mk_risk.rules.authorization import check_item_owner, check_listing_seller
from src.mk_risk.rules.balance_check import calc_total_price, check_sufficient_funds
from src.mk_risk.rules.quantity_check import check_quantity_available

logger = logging.getLogger(__name__)


class Ledger:
    def __init__(
        self,
        registry: OwnershipRegistryProtocol,
        initial_balances: Mapping[str, int] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or default_settings
        self._registry = RegistryGateway(registry, self._settings.REGISTRY_TIMEOUT_SECONDS)
        self._listings: dict[int, Listing] = {}
        self._orders: dict[int, Order] = {}
        self._balances = BalanceBook(initial_balances)
        self._listing_ids = SequentialIdGenerator()
        self._order_ids = SequentialIdGenerator()
        self._lock = asyncio.Lock()
        self._fulfilling: dict[int, asyncio.Event] = {}

    # ------------------------------------------------------------------
    # Mutating operations
    # ------------------------------------------------------------------

    async def create_listing(
        self, sender: str, item_id: int, price: int, quantity: int
    ) -> Result[int]:
        try:
            listing_id = await self._create_listing_inner(sender, item_id, price, quantity)
        except AppError as exc:
            return self._rejected("create_listing", sender, exc)
        return ok_result(listing_id)

    async def update_listing(
        self, sender: str, listing_id: int, new_price: int, new_quantity: int
    ) -> Result[None]:
        try:
            await self._update_listing_inner(sender, listing_id, new_price, new_quantity)
        except AppError as exc:
            return self._rejected("update_listing", sender, exc)
        return ok_result(None)

    async def create_order(self, sender: str, listing_id: int, quantity: int) -> Result[int]:
        try:
            order_id = await self._create_order_inner(sender, listing_id, quantity)
        except AppError as exc:
            return self._rejected("create_order", sender, exc)
        return ok_result(order_id)

    async def fulfill_order(self, sender: str, order_id: int) -> Result[None]:
        try:
            await self._fulfill_order_inner(sender, order_id)
        except AppError as exc:
            return self._rejected("fulfill_order", sender, exc)
        return ok_result(None)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_listing(self, listing_id: int) -> ListingView | None:
        async with self._lock:
            listing = self._listings.get(listing_id)
            return ListingView.from_domain(listing) if listing is not None else None

    async def get_order(self, order_id: int) -> OrderView | None:
        async with self._lock:
            order = self._orders.get(order_id)
            return OrderView.from_domain(order) if order is not None else None

    async def get_balance(self, identity: str) -> int:
        async with self._lock:
            return self._balances.get(identity)

    async def list_ledger_entries(self, identity: str) -> list[LedgerEntryView]:
        async with self._lock:
            return [LedgerEntryView.from_domain(e) for e in self._balances.entries_for(identity)]

    async def verify_invariants(self) -> list[str]:
        async with self._lock:
            return verify_ledger_invariants(self._listings, self._orders, self._balances)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _create_listing_inner(
        self, sender: str, item_id: int, price: int, quantity: int
    ) -> int:
        check_non_negative("price", price)
        check_non_negative("quantity", quantity)

        # Registry lookup happens before taking the ledger lock
        owner = await self._registry.get_owner(item_id)
        check_item_owner(sender, item_id, owner)

        async with self._lock:
            listing_id = self._listing_ids.next_id()
            self._listings[listing_id] = Listing(
                id=listing_id,
                seller=sender,
                item_id=item_id,
                price=price,
                quantity=quantity,
            )
            self._after_mutation()

        logger.info(
            "Listing created: id=%d seller=%s item=%d price=%d qty=%d",
            listing_id, sender, item_id, price, quantity,
        )
        return listing_id

    async def _update_listing_inner(
        self, sender: str, listing_id: int, new_price: int, new_quantity: int
    ) -> None:
        check_non_negative("price", new_price)
        check_non_negative("quantity", new_quantity)

        async with self._lock:
            listing = self._get_listing_or_raise(listing_id)
            check_listing_seller(sender, listing)
            listing.overwrite(new_price, new_quantity)
            self._after_mutation()

        logger.info(
            "Listing updated: id=%d price=%d qty=%d", listing_id, new_price, new_quantity
        )

    async def _create_order_inner(self, sender: str, listing_id: int, quantity: int) -> int:
        check_positive("quantity", quantity)

        async with self._lock:
            listing = self._get_listing_or_raise(listing_id)
            check_quantity_available(listing, quantity)
            total_price = calc_total_price(listing.price, quantity)
            check_sufficient_funds(self._balances.get(sender), total_price)

            # All checks passed; nothing below can fail
            order_id = self._order_ids.next_id()
            self._balances.transfer(sender, listing.seller, total_price, order_id)
            listing.take(quantity)
            self._orders[order_id] = Order(
                id=order_id,
                buyer=sender,
                listing_id=listing_id,
                quantity=quantity,
                total_price=total_price,
            )
            self._after_mutation()

        logger.info(
            "Order created: id=%d buyer=%s listing=%d qty=%d total=%d",
            order_id, sender, listing_id, quantity, total_price,
        )
        return order_id

    async def _fulfill_order_inner(self, sender: str, order_id: int) -> None:
        # A concurrent attempt on the same order is awaited, then the checks rerun
        while True:
            async with self._lock:
                order = self._orders.get(order_id)
                if order is None:
                    raise OrderNotFoundError(order_id)
                listing = self._listings.get(order.listing_id)
                if listing is None:
                    raise InternalError(
                        f"Order {order_id} references missing listing {order.listing_id}"
                    )
                check_listing_seller(sender, listing)
                in_flight = self._fulfilling.get(order_id)
                if in_flight is None:
                    if order.is_fulfilled and not self._settings.ALLOW_REFULFILL:
                        raise OrderAlreadyFulfilledError(order_id)
                    done = asyncio.Event()
                    self._fulfilling[order_id] = done
                    item_id, buyer = listing.item_id, order.buyer
                    break
            await in_flight.wait()

        try:
            # Order stays CREATED if the registry transfer fails
            await self._registry.transfer_ownership(item_id, buyer)
            # No await between the transfer returning and the status change
            order.mark_fulfilled()
            self._after_mutation()
        finally:
            del self._fulfilling[order_id]
            done.set()

        logger.info("Order fulfilled: id=%d item=%d new_owner=%s", order_id, item_id, buyer)

    def _get_listing_or_raise(self, listing_id: int) -> Listing:
        listing = self._listings.get(listing_id)
        if listing is None:
            raise ListingNotFoundError(listing_id)
        return listing

    def _after_mutation(self) -> None:
        """Optional full audit, run before any await. Violations are logged, not raised."""
        if self._settings.VERIFY_INVARIANTS:
            verify_ledger_invariants(self._listings, self._orders, self._balances)

    @staticmethod
    def _rejected(op: str, sender: str, exc: AppError) -> Result:
        logger.info("%s rejected: sender=%s code=%d %s", op, sender, exc.code, exc.message)
        return error_result(exc)
