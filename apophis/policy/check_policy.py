from __future__ import annotations

from abc import ABC
from typing import Any, Callable, ClassVar, Optional

from apophis.core.exceptions import ExceptionUtility


__all__: list[str] = [
    "ICheckPolicy",
    "SafePolicy",
    "UnsafePolicy",
]


def _skip(func: Optional[Any], msg: str = "") -> None:
    return None


class ICheckPolicy(ABC):
    """
    Validation policy for combinator arguments.

    A policy is a type-level switch: it is never instantiated and never stored
    on a value. Each monad family is specialised per policy (see
    ``CheckPolicyRegistry.bind``) and the specialised class carries the policy
    as a class attribute.

    ``need_check`` selects the guards a subclass gets when it does not define
    them itself: ``True`` installs the raising null checks of
    ``ExceptionUtility``, ``False`` installs no-op guards, so an unchecked
    policy branches on nothing at call time.

    Example:
        class HandlersOnly(ICheckPolicy):
            name = "HANDLERS_ONLY"
            need_check = True
            check_predicate = staticmethod(lambda func, msg="": None)
    """

    name: ClassVar[str]
    need_check: ClassVar[bool] = True

    check_handler: ClassVar[Callable[..., None]]
    check_predicate: ClassVar[Callable[..., None]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "check_handler" not in cls.__dict__:
            guard = ExceptionUtility.null_handler_check if cls.need_check else _skip
            cls.check_handler = staticmethod(guard)
        if "check_predicate" not in cls.__dict__:
            guard = ExceptionUtility.null_predicate_check if cls.need_check else _skip
            cls.check_predicate = staticmethod(guard)


class SafePolicy(ICheckPolicy):
    """Raise NullArgumentError when a callback or predicate is None."""

    name = "SAFE"
    need_check = True


class UnsafePolicy(ICheckPolicy):
    """
    Skip argument validation.

    Passing None where a callback is required is outside the contract; the
    call only succeeds when the callback is never reached.
    """

    name = "UNSAFE"
    need_check = False
