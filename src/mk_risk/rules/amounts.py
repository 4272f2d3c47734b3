from src.mk_common.errors import InvalidArgumentError


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_non_negative(name: str, value: object) -> None:
    """Raise InvalidArgumentError(106) unless value is an int >= 0."""
    if not _is_int(value) or value < 0:  # type: ignore[operator]
        raise InvalidArgumentError(f"{name} must be a non-negative integer, got {value!r}")


def check_positive(name: str, value: object) -> None:
    """Raise InvalidArgumentError(106) unless value is an int >= 1."""
    if not _is_int(value) or value < 1:  # type: ignore[operator]
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
