from typing import Any, TypeVar

T = TypeVar('T')


def in_values(current: T, *values: T) -> bool:
    """Like SQL's IN: whether `current` is one of `values`."""
    return current in values


def between(current: T, left: T, right: T) -> bool:
    """Inclusive on both ends."""
    return left <= current <= right


def greater_than(left: T, right: T) -> bool:
    return left > right


def less_than(left: T, right: T) -> bool:
    return left < right


def equal(left: Any, right: Any) -> bool:
    return left == right


def greater_than_or_equal(left: T, right: T) -> bool:
    return left >= right


def less_than_or_equal(left: T, right: T) -> bool:
    return left <= right
