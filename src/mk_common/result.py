"""Tagged operation result returned across the ledger boundary.

Every mutating ledger operation returns either:
    Ok(value=...)                        on success
    Err(kind=..., code=..., message=...) on a domain failure

Callers branch on ``result.success`` (or ``isinstance``) instead of catching
exceptions.
"""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar, Union

from src.mk_common.enums import ErrorKind
from src.mk_common.errors import AppError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    success: Literal[True] = True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    code: int
    message: str
    success: Literal[False] = False


Result = Union[Ok[T], Err]


def ok_result(value: T) -> Ok[T]:
    return Ok(value=value)


def error_result(exc: AppError) -> Err:
    return Err(kind=exc.kind, code=exc.code, message=exc.message)
