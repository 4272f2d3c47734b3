"""Unit tests for the balance book and its journal."""

import pytest

from src.mk_account.domain.models import BalanceBook


class TestBalanceBook:
    def test_unknown_identity_is_zero(self) -> None:
        book = BalanceBook({"alice": 100})
        assert book.get("nobody") == 0
        assert book.initial("nobody") == 0

    def test_negative_initial_balance_rejected(self) -> None:
        with pytest.raises(ValueError):
            BalanceBook({"alice": -1})

    def test_transfer_moves_amount(self) -> None:
        book = BalanceBook({"alice": 100, "bob": 50})
        book.transfer("alice", "bob", 30, order_id=1)
        assert book.get("alice") == 70
        assert book.get("bob") == 80
        assert book.total == book.initial_total == 150

    def test_transfer_credits_new_identity(self) -> None:
        book = BalanceBook({"alice": 100})
        book.transfer("alice", "carol", 40, order_id=1)
        assert book.get("carol") == 40
        assert book.identities() == {"alice", "carol"}

    def test_transfer_writes_paired_entries(self) -> None:
        book = BalanceBook({"alice": 100})
        debit, credit = book.transfer("alice", "bob", 25, order_id=9)
        assert (debit.entry_type, debit.amount, debit.balance_after) == ("TRANSFER_PAYMENT", -25, 75)
        assert (credit.entry_type, credit.amount, credit.balance_after) == ("TRANSFER_RECEIPT", 25, 25)
        assert debit.reference_type == credit.reference_type == "ORDER"
        assert debit.reference_id == credit.reference_id == 9
        assert credit.id == debit.id + 1

    def test_self_transfer_nets_to_zero(self) -> None:
        book = BalanceBook({"alice": 100})
        book.transfer("alice", "alice", 60, order_id=1)
        assert book.get("alice") == 100
        assert [e.amount for e in book.entries_for("alice")] == [-60, 60]
