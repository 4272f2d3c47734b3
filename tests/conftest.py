"""Shared test fixtures."""

import pytest

from config.settings import Settings
from src.mk_ledger.engine.ledger import Ledger

SELLER = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
BUYER = "ST2JHG361ZXG51QTKY2NQCVBPPRRE2KZB1HR05NNC"
STRANGER = "ST3NBRSFKX28FQ2ZJ1MAKX58HKHSDGNV5N7R21XCP"


class FakeOwnershipRegistry:
    """In-memory ownership registry recording every transfer call."""

    def __init__(self, owners: dict[int, str] | None = None) -> None:
        self.owners: dict[int, str] = dict(owners or {})
        self.transfers: list[tuple[int, str]] = []

    async def get_owner(self, item_id: int) -> str:
        if item_id not in self.owners:
            raise KeyError(f"unknown item {item_id}")
        return self.owners[item_id]

    async def transfer_ownership(self, item_id: int, new_owner: str) -> None:
        self.transfers.append((item_id, new_owner))
        self.owners[item_id] = new_owner


@pytest.fixture
def registry() -> FakeOwnershipRegistry:
    return FakeOwnershipRegistry({1: SELLER, 2: SELLER, 3: STRANGER})


@pytest.fixture
def test_settings() -> Settings:
    return Settings(VERIFY_INVARIANTS=True, REGISTRY_TIMEOUT_SECONDS=1.0)


@pytest.fixture
def ledger(registry: FakeOwnershipRegistry, test_settings: Settings) -> Ledger:
    """Ledger seeded with the seller (10000) and buyer (5000) balances."""
    return Ledger(registry, initial_balances={SELLER: 10000, BUYER: 5000}, settings=test_settings)
