from __future__ import annotations

from typing import Any, Callable, TypeVar, Union


__all__: list[str] = [
    "compare",
    "resolve_callable",
    "default_of",
]

T = TypeVar("T")


def compare(left: Any, right: Any) -> int:
    """
    Default three-way comparer.

    Returns -1, 0 or 1. Values that are neither ordered nor equal to each other
    (e.g. two distinct exceptions) compare as 0 only when ``==`` holds,
    otherwise the TypeError from the rich comparison propagates.
    """
    if left == right:
        return 0
    if left < right:
        return -1
    return 1


def resolve_callable(value_or_callable: Union[T, Callable[[], T]]) -> T:
    """
    Return the value, or invoke it once when it is a zero-argument callable.

    Classes are callable too but are returned as values: ``resolve_callable(int)``
    is ``int``, not ``0``.
    """
    if not callable(value_or_callable) or isinstance(value_or_callable, type):
        return value_or_callable
    return value_or_callable()


def default_of(type_: Callable[[], T] | None) -> T | None:
    """
    Zero-equivalent of a type.

    ``default_of(int) == 0``, ``default_of(str) == ""``, ``default_of(None) is None``.
    """
    if type_ is None:
        return None
    return type_()
