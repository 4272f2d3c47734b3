"""Unified error codes and custom exceptions.

Codes keep the numbering of the original marketplace contract:
  101: listing / order not found
  102: caller not authorized
  103: insufficient listing quantity
  104: insufficient buyer funds
  105: ownership registry failure
  106-107: argument and lifecycle errors
  9xx: internal consistency faults
"""

from src.mk_common.enums import ErrorKind


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        kind: ErrorKind = ErrorKind.INTERNAL,
    ) -> None:
        self.code = code
        self.message = message
        self.kind = kind
        super().__init__(message)


# --- 101: Not found ---

class ListingNotFoundError(AppError):
    def __init__(self, listing_id: int) -> None:
        super().__init__(101, f"Listing not found: {listing_id}", ErrorKind.NOT_FOUND)


class OrderNotFoundError(AppError):
    def __init__(self, order_id: int) -> None:
        super().__init__(101, f"Order not found: {order_id}", ErrorKind.NOT_FOUND)


# --- 102: Authorization ---

class NotAuthorizedError(AppError):
    def __init__(self, sender: str, detail: str) -> None:
        super().__init__(
            102, f"Sender {sender} is not authorized: {detail}", ErrorKind.NOT_AUTHORIZED
        )


# --- 103 / 104: Quantity and funds ---

class InsufficientQuantityError(AppError):
    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            103,
            f"Insufficient quantity: requested {requested}, available {available}",
            ErrorKind.INSUFFICIENT_QUANTITY,
        )


class InsufficientFundsError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            104,
            f"Insufficient funds: required {required}, available {available}",
            ErrorKind.INSUFFICIENT_FUNDS,
        )


# --- 105: Ownership registry ---

class RegistryError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(105, f"Ownership registry error: {detail}", ErrorKind.REGISTRY_ERROR)


# --- 106 / 107: Arguments and lifecycle ---

class InvalidArgumentError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(106, f"Invalid argument: {detail}", ErrorKind.INVALID_ARGUMENT)


class OrderAlreadyFulfilledError(AppError):
    def __init__(self, order_id: int) -> None:
        super().__init__(
            107, f"Order {order_id} is already fulfilled", ErrorKind.ALREADY_FULFILLED
        )


# --- 9xx: Internal ---

class InternalError(AppError):
    def __init__(self, detail: str = "Internal ledger error") -> None:
        super().__init__(900, detail, ErrorKind.INTERNAL)
