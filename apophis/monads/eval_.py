from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, Optional, TypeVar, Union

from apophis.core._enums import EvalType
from apophis.core._logging import get_logger, safe_log
from apophis.core._unit import UNIT, Unit
from apophis.core.exceptions import ExceptionUtility
from apophis.i_type_class import ITypeClass
from apophis.monads.option import Option
from apophis.registry.policy_registry import CheckPolicyRegistry
from apophis.utils._utils import compare, resolve_callable

if TYPE_CHECKING:
    from apophis.monads.either import Either
    from apophis.monads.try_ import Try


__all__: list[str] = [
    "Eval",
    "UnsafeEval",
]

T = TypeVar("T")
R = TypeVar("R")
O = TypeVar("O")


@dataclass(slots=True, eq=False, repr=False, match_args=False)
class Eval(ITypeClass[EvalType], Generic[T]):
    """
    A computation with one of three evaluation strategies.

    - ``Eval.now``: value computed at construction and cached
    - ``Eval.later``: factory invoked once on the first ``value`` read, the
      result is cached and the factory reference dropped
    - ``Eval.always``: factory invoked on every ``value`` read

    The Later memoization cell is plain mutable state and is not thread-safe:
    concurrent first reads of the same instance may run the factory more
    than once. Eval is therefore unhashable.

    Example:
        >>> ev = Eval.later(lambda: expensive())
        >>> ev.is_computed
        False
        >>> ev.value          # runs expensive() once
        >>> ev.value          # cached
    """

    _factory: Optional[Callable[[], T]]
    _value: Any
    _type: EvalType

    # Constructors

    @classmethod
    def now(cls, value_or_factory: Union[T, Callable[[], T]]) -> Eval[T]:
        """
        Evaluate immediately.

        A callable argument is invoked right away, exactly once; to hold a
        function as the value, wrap it: ``Eval.now(lambda: fn)``. Classes are
        stored as values, so ``Eval.now(int).value is int``.
        """
        return cls(None, resolve_callable(value_or_factory), EvalType.NOW)

    @classmethod
    def later(cls, factory: Callable[[], T]) -> Eval[T]:
        """
        Defer evaluation to the first ``value`` read and memoize the result.

        Raises:
            NullArgumentError: If factory is None, under every check policy
        """
        ExceptionUtility.null_handler_check(factory, "Factory for Eval not be None")
        return cls(factory, None, EvalType.LATER)

    @classmethod
    def always(cls, factory: Callable[[], T]) -> Eval[T]:
        """
        Defer evaluation and repeat it on every ``value`` read.

        Raises:
            NullArgumentError: If factory is None, under every check policy
        """
        ExceptionUtility.null_handler_check(factory, "Factory for Eval not be None")
        return cls(factory, None, EvalType.ALWAYS)

    # Properties

    @property
    def type(self) -> EvalType:
        return self._type

    @property
    def value(self) -> T:
        if self._type is EvalType.ALWAYS:
            return self._factory()
        if self._type is EvalType.LATER and self._factory is not None:
            self._value = self._factory()
            # memoization is one-shot: the factory is never called again
            self._factory = None
            safe_log(get_logger(), "debug", "Later Eval memoized")
        return self._value

    @property
    def is_computed(self) -> bool:
        """True once ``value`` no longer needs to call the factory."""
        if self._type is EvalType.LATER:
            return self._factory is None
        return self._type is EvalType.NOW

    def __iter__(self) -> Iterator[T]:
        yield self.value

    # Operators

    def flat_map(self, handler: Callable[[T], Eval[R]]) -> Eval[R]:
        """
        Apply handler to the forced value and return its Eval as is.
        """
        self._policy.check_handler(handler)
        return handler(self.value)

    def map(self, handler: Callable[[T], R]) -> Eval[R]:
        """
        Force the value, apply handler and wrap the result as Now.
        """
        self._policy.check_handler(handler)
        return type(self)(None, handler(self.value), EvalType.NOW)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        self._policy.check_predicate(predicate)
        option = CheckPolicyRegistry.bind(Option, self._policy)
        value = self.value
        return option.some(value) if predicate(value) else option.none()

    def filter_not(self, predicate: Callable[[T], bool]) -> Option[T]:
        self._policy.check_predicate(predicate)
        option = CheckPolicyRegistry.bind(Option, self._policy)
        value = self.value
        return option.some(value) if not predicate(value) else option.none()

    def fold(self, init: T, handler: Callable[[T, T], T]) -> T:
        """Returns ``handler(init, value)``."""
        self._policy.check_handler(handler)
        return handler(init, self.value)

    def contain(self, value: T) -> bool:
        return self.value == value

    def contain_with(self, value: O, predicate: Callable[[T, O], bool]) -> bool:
        """Compare the forced value against ``value`` with a custom comparator."""
        self._policy.check_predicate(predicate)
        return bool(predicate(self.value, value))

    # Pattern matching

    def match(
        self,
        now: Callable[[T], R],
        later: Callable[[T], R],
        always: Callable[[T], R],
    ) -> R:
        """
        Pattern matching on the evaluation strategy.

        The value is forced and passed to the callback of the matching
        strategy; the result of that callback is returned.
        """
        self._policy.check_handler(now, "Function for match not be None")
        self._policy.check_handler(later, "Function for match not be None")
        self._policy.check_handler(always, "Function for match not be None")
        if self._type is EvalType.NOW:
            return now(self.value)
        if self._type is EvalType.LATER:
            return later(self.value)
        return always(self.value)

    def match_value(self, matcher: Callable[[T], Any]) -> Unit:
        self._policy.check_handler(matcher, "Function for match not be None")
        matcher(self.value)
        return UNIT

    # Conversion

    def to_left(self) -> Either[T, Unit]:
        from apophis.monads.either import Either

        return CheckPolicyRegistry.bind(Either, self._policy).left(self.value)

    def to_right(self) -> Either[Unit, T]:
        from apophis.monads.either import Either

        return CheckPolicyRegistry.bind(Either, self._policy).right(self.value)

    def to_option(self) -> Option[T]:
        return CheckPolicyRegistry.bind(Option, self._policy).some(self.value)

    def to_try(self) -> Try[T]:
        """
        Convert keeping the strategy's failure semantics.

        Now and an already computed Later wrap the cached value as Ok. A pending
        Later or an Always goes through ``Try.attempt``, so a raising factory
        becomes an Error instead of propagating; a pending Later is memoized
        when its factory succeeds.
        """
        from apophis.monads.try_ import Try

        try_cls = CheckPolicyRegistry.bind(Try, self._policy)
        if self.is_computed:
            return try_cls.ok(self._value)
        if self._type is EvalType.LATER:
            return try_cls.attempt(lambda: self.value)
        return try_cls.attempt(self._factory)

    # Equality and ordering

    def compare_to(self, other: Any) -> int:
        if self._is_foreign(other):
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}")
        if isinstance(other, Eval):
            return compare(self.value, other.value)
        return compare(self.value, other)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Eval):
            return self.value == other.value
        if self._is_foreign(other):
            return False
        return self.value == other

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __lt__(self, other: Any) -> bool:
        if self._is_foreign(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if self._is_foreign(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if self._is_foreign(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if self._is_foreign(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._type is EvalType.NOW:
            return f"Now({self._value!r})"
        return "Later" if self._type is EvalType.LATER else "Always"

    def __str__(self) -> str:
        if self._type is EvalType.NOW:
            return f"Now({self._value})"
        return "Later" if self._type is EvalType.LATER else "Always"


Eval._root = Eval
UnsafeEval = Eval.with_policy("UNSAFE")
