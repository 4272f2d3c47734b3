from src.mk_common.errors import InsufficientFundsError


def calc_total_price(price: int, quantity: int) -> int:
    """Order cost, frozen on the order at creation time."""
    return price * quantity


def check_sufficient_funds(balance: int, total_price: int) -> None:
    """Raise InsufficientFundsError(104) if balance cannot cover total_price."""
    if balance < total_price:
        raise InsufficientFundsError(total_price, balance)
