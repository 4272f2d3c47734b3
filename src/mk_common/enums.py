"""Global enums. Status values match the lowercase strings of the original contract."""

from enum import Enum


class ListingStatus(str, Enum):
    ACTIVE = "active"


class OrderStatus(str, Enum):
    CREATED = "created"
    FULFILLED = "fulfilled"


class LedgerEntryType(str, Enum):
    # Order payment (buyer side / seller side, always paired)
    TRANSFER_PAYMENT = "TRANSFER_PAYMENT"
    TRANSFER_RECEIPT = "TRANSFER_RECEIPT"


class ReferenceType(str, Enum):
    ORDER = "ORDER"


class ErrorKind(str, Enum):
    """Discriminator carried by every failed Result."""
    NOT_FOUND = "NOT_FOUND"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"
    INSUFFICIENT_QUANTITY = "INSUFFICIENT_QUANTITY"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    REGISTRY_ERROR = "REGISTRY_ERROR"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    ALREADY_FULFILLED = "ALREADY_FULFILLED"
    INTERNAL = "INTERNAL"
