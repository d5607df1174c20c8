from __future__ import annotations

from typing import Any, Optional


__all__: list[str] = [
    "ApophisError",
    "NullArgumentError",
    "NullPayloadError",
    "NotFoundError",
    "OptionNotFoundError",
    "EitherNotFoundError",
    "TryNotFoundError",
    "ExceptionUtility",
]


class ApophisError(Exception):
    """Base class for every error raised by the library itself."""


class NullArgumentError(ApophisError, TypeError):
    """A callback, predicate or factory passed to a combinator was None."""

    def __init__(self, message: str = "Function for handler not be None") -> None:
        super().__init__(message)


class NullPayloadError(ApophisError, ValueError):
    """An attempt to store None as a Left/Right payload or as a Try failure."""

    def __init__(self, message: str = "Payload must not be None") -> None:
        super().__init__(message)


class NotFoundError(ApophisError, LookupError):
    """A throwing accessor was used on the tag that does not hold the requested side."""


class OptionNotFoundError(NotFoundError):
    def __init__(self, message: str = "Option is empty") -> None:
        super().__init__(message)


class EitherNotFoundError(NotFoundError):
    def __init__(self, message: str = "Either does not hold the requested side") -> None:
        super().__init__(message)


class TryNotFoundError(NotFoundError):
    def __init__(self, message: str = "Try holds an error, not a value") -> None:
        super().__init__(message)


class ExceptionUtility:
    """Guard helpers shared by the check policies and constructors."""

    @staticmethod
    def throw_if_true(cond: bool, exc_type: type[Exception], *args: Any) -> None:
        if cond:
            raise exc_type(*args)

    @staticmethod
    def throw_if_false(cond: bool, exc_type: type[Exception], *args: Any) -> None:
        ExceptionUtility.throw_if_true(not cond, exc_type, *args)

    @staticmethod
    def null_handler_check(func: Optional[Any], msg: str = "Function for handler not be None") -> None:
        if func is None:
            raise NullArgumentError(msg)

    @staticmethod
    def null_predicate_check(func: Optional[Any], msg: str = "Function for check not be None") -> None:
        if func is None:
            raise NullArgumentError(msg)
