"""Domain models for mk_account — balance book and its journal."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime

from src.mk_common.enums import LedgerEntryType, ReferenceType
from src.mk_common.id_generator import SequentialIdGenerator


@dataclass
class LedgerEntry:
    id: int
    identity: str
    entry_type: str                  # LedgerEntryType value
    amount: int                      # positive=income negative=expense
    balance_after: int               # balance snapshot after op
    reference_type: str | None = None
    reference_id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class BalanceBook:
    """Identity -> balance mapping with implicit zero for unknown identities.

    Balances only move through ``transfer``, which writes a paired
    TRANSFER_PAYMENT / TRANSFER_RECEIPT journal entry. The caller is
    responsible for the funds check and for holding the ledger lock.
    """

    def __init__(self, initial_balances: Mapping[str, int] | None = None) -> None:
        self._initial: dict[str, int] = {}
        for identity, amount in (initial_balances or {}).items():
            if amount < 0:
                raise ValueError(f"Initial balance for {identity} must be >= 0, got {amount}")
            self._initial[identity] = amount
        self._balances: dict[str, int] = dict(self._initial)
        self._entries: list[LedgerEntry] = []
        self._entry_ids = SequentialIdGenerator()

    def get(self, identity: str) -> int:
        return self._balances.get(identity, 0)

    def initial(self, identity: str) -> int:
        return self._initial.get(identity, 0)

    def identities(self) -> set[str]:
        return set(self._initial) | set(self._balances)

    @property
    def initial_total(self) -> int:
        return sum(self._initial.values())

    @property
    def total(self) -> int:
        return sum(self._balances.values())

    def entries_for(self, identity: str) -> list[LedgerEntry]:
        return [e for e in self._entries if e.identity == identity]

    def transfer(
        self, payer: str, payee: str, amount: int, order_id: int
    ) -> tuple[LedgerEntry, LedgerEntry]:
        """Debit payer and credit payee by ``amount`` for the given order."""
        payer_after = self.get(payer) - amount
        self._balances[payer] = payer_after
        debit = self._write(
            payer, LedgerEntryType.TRANSFER_PAYMENT, -amount, payer_after, order_id
        )
        # Read payee after the debit so a self-purchase nets to zero
        payee_after = self.get(payee) + amount
        self._balances[payee] = payee_after
        credit = self._write(
            payee, LedgerEntryType.TRANSFER_RECEIPT, amount, payee_after, order_id
        )
        return debit, credit

    def _write(
        self,
        identity: str,
        entry_type: LedgerEntryType,
        amount: int,
        balance_after: int,
        order_id: int,
    ) -> LedgerEntry:
        entry = LedgerEntry(
            id=self._entry_ids.next_id(),
            identity=identity,
            entry_type=entry_type.value,
            amount=amount,
            balance_after=balance_after,
            reference_type=ReferenceType.ORDER.value,
            reference_id=order_id,
        )
        self._entries.append(entry)
        return entry
