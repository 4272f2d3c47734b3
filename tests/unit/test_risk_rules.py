import pytest

from src.mk_common.errors import AppError
from src.mk_listing.domain.models import Listing
from src.mk_risk.rules.amounts import check_non_negative, check_positive
from src.mk_risk.rules.authorization import check_item_owner, check_listing_seller
from src.mk_risk.rules.balance_check import calc_total_price, check_sufficient_funds
from src.mk_risk.rules.quantity_check import check_quantity_available


def _make_listing(**kwargs: object) -> Listing:
    defaults: dict[str, object] = dict(id=1, seller="seller", item_id=1, price=100, quantity=10)
    defaults.update(kwargs)
    return Listing(**defaults)  # type: ignore[arg-type]


class TestAmounts:
    def test_zero_is_non_negative(self) -> None:
        check_non_negative("price", 0)

    def test_negative_raises(self) -> None:
        with pytest.raises(AppError) as exc_info:
            check_non_negative("price", -1)
        assert exc_info.value.code == 106

    @pytest.mark.parametrize("value", [1.5, "3", True, None])
    def test_non_int_raises(self, value: object) -> None:
        with pytest.raises(AppError) as exc_info:
            check_non_negative("quantity", value)
        assert exc_info.value.code == 106

    def test_positive(self) -> None:
        check_positive("quantity", 1)

    def test_zero_not_positive(self) -> None:
        with pytest.raises(AppError) as exc_info:
            check_positive("quantity", 0)
        assert exc_info.value.code == 106


class TestAuthorization:
    def test_owner_passes(self) -> None:
        check_item_owner("alice", 1, "alice")

    def test_non_owner_raises(self) -> None:
        with pytest.raises(AppError) as exc_info:
            check_item_owner("mallory", 1, "alice")
        assert exc_info.value.code == 102

    def test_seller_passes(self) -> None:
        check_listing_seller("seller", _make_listing())

    def test_non_seller_raises(self) -> None:
        with pytest.raises(AppError) as exc_info:
            check_listing_seller("buyer", _make_listing())
        assert exc_info.value.code == 102

    def test_identity_compare_is_exact(self) -> None:
        with pytest.raises(AppError):
            check_listing_seller("SELLER", _make_listing())


class TestQuantityCheck:
    def test_exact_remaining_passes(self) -> None:
        check_quantity_available(_make_listing(quantity=10), 10)

    def test_over_remaining_raises(self) -> None:
        with pytest.raises(AppError) as exc_info:
            check_quantity_available(_make_listing(quantity=10), 15)
        assert exc_info.value.code == 103


class TestBalanceCheck:
    def test_total_price(self) -> None:
        assert calc_total_price(100, 2) == 200

    def test_exact_balance_passes(self) -> None:
        check_sufficient_funds(6000, 6000)

    def test_short_balance_raises(self) -> None:
        with pytest.raises(AppError) as exc_info:
            check_sufficient_funds(5000, 6000)
        assert exc_info.value.code == 104
