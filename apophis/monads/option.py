from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, Optional, TypeVar

from apophis.core._enums import OptionType
from apophis.core._unit import UNIT, Unit
from apophis.core.exceptions import NullPayloadError, OptionNotFoundError
from apophis.i_type_class import ITypeClass
from apophis.registry.policy_registry import CheckPolicyRegistry
from apophis.utils._utils import compare, default_of

if TYPE_CHECKING:
    from apophis.monads.either import Either
    from apophis.monads.try_ import Try


__all__: list[str] = [
    "Option",
    "UnsafeOption",
    "to_option",
]

T = TypeVar("T")
R = TypeVar("R")
L = TypeVar("L")


@dataclass(frozen=True, slots=True, eq=False, repr=False, match_args=False)
class Option(ITypeClass[OptionType], Generic[T]):
    """
    Optional value: either Some(value) or None.

    ``None`` is never stored inside Some: ``Option.some(None)`` is the empty
    Option. Values are immutable; every combinator returns a new Option.

    Example:
        >>> Option.some(5).map(lambda x: x * 2).filter(lambda x: x > 9)
        Some(10)
        >>> Option.none().map(lambda x: x * 2)
        None
    """

    _value: Any = None
    _has_value: bool = False

    # Constructors

    @classmethod
    def some(cls, value: Optional[T]) -> Option[T]:
        """Wrap a value; None becomes the empty Option."""
        return cls(value, value is not None)

    @classmethod
    def none(cls) -> Option[T]:
        return cls(None, False)

    @classmethod
    def of(cls, value: Optional[T]) -> Option[T]:
        """Explicit form of the raw value to Option conversion."""
        return cls.some(value)

    # Properties

    @property
    def type(self) -> OptionType:
        return OptionType.SOME if self._has_value else OptionType.NONE

    @property
    def empty(self) -> bool:
        return not self._has_value

    @property
    def non_empty(self) -> bool:
        return self._has_value

    def __bool__(self) -> bool:
        return self._has_value

    def __iter__(self) -> Iterator[T]:
        if self._has_value:
            yield self._value

    # Operators

    def flat_map(self, handler: Callable[[T], Option[R]]) -> Option[R]:
        """
        Returns the result of applying handler to this Option's value if
        this Option is nonempty. Returns None if this Option is empty.

        Slightly different from ``map`` in that handler is expected to
        return an Option (which could be None).
        """
        self._policy.check_handler(handler)
        return handler(self._value) if self._has_value else type(self).none()

    def map(self, handler: Callable[[T], R]) -> Option[R]:
        """
        Apply handler to the value if the Option is nonempty.

        Args:
            handler: Function for applying, never called on an empty Option

        Returns:
            None if empty, otherwise Some of the handler result
            (a None result collapses to the empty Option)
        """
        self._policy.check_handler(handler)
        return type(self).some(handler(self._value)) if self._has_value else type(self).none()

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep this Option only if it is nonempty and the predicate holds."""
        self._policy.check_predicate(predicate)
        return self if self._has_value and predicate(self._value) else type(self).none()

    def filter_not(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep this Option only if it is nonempty and the predicate does not hold."""
        self._policy.check_predicate(predicate)
        return self if self._has_value and not predicate(self._value) else type(self).none()

    def exist(self, predicate: Callable[[T], bool]) -> bool:
        """False for None, otherwise the predicate result."""
        self._policy.check_predicate(predicate)
        return self._has_value and bool(predicate(self._value))

    def forall(self, predicate: Callable[[T], bool]) -> bool:
        """True for None (vacuous truth), otherwise the predicate result."""
        self._policy.check_predicate(predicate)
        return not self._has_value or bool(predicate(self._value))

    def contain(self, value: T) -> bool:
        return self._has_value and self._value == value

    def fold(self, init: T, handler: Callable[[T, T], T]) -> T:
        """
        Returns ``handler(value, init)`` if the Option is nonempty.
        Otherwise, returns init.
        """
        self._policy.check_handler(handler)
        return handler(self._value, init) if self._has_value else init

    def fold_with(self, if_empty: Callable[[], R], if_some: Callable[[T], R]) -> R:
        """
        Returns the result of applying if_some to the value if the Option is
        nonempty. Otherwise, evaluates if_empty.
        """
        self._policy.check_handler(if_some)
        self._policy.check_handler(if_empty)
        return if_some(self._value) if self._has_value else if_empty()

    def fold_left(self, init: R, handler: Callable[[T, R], R]) -> R:
        """Applies ``handler(value, init)``, going left to right."""
        self._policy.check_handler(handler)
        return handler(self._value, init) if self._has_value else init

    def fold_right(self, init: R, handler: Callable[[R, T], R]) -> R:
        """Applies ``handler(init, value)``, going right to left."""
        self._policy.check_handler(handler)
        return handler(init, self._value) if self._has_value else init

    def flatten(self) -> Option[Any]:
        """Collapse ``Option[Option[T]]`` into ``Option[T]``."""
        if self._has_value and isinstance(self._value, Option):
            return self._value
        return self

    # Extraction

    def or_else(self, value: T) -> T:
        return self._value if self._has_value else value

    def or_else_get(self, factory: Callable[[], T]) -> T:
        """Returns the value, or the result of factory if the Option is empty."""
        self._policy.check_handler(factory, "Factory function not be None")
        return self._value if self._has_value else factory()

    def or_default(self, type_: Optional[Callable[[], T]] = None) -> Optional[T]:
        """
        Returns the value, or the zero-equivalent of ``type_`` if the Option is empty.

        Example:
            >>> Option.none().or_default(int)
            0
            >>> Option.none().or_default() is None
            True
        """
        return self._value if self._has_value else default_of(type_)

    def or_throw(self) -> T:
        """
        Returns the value.

        Raises:
            OptionNotFoundError: If the Option is empty
        """
        if not self._has_value:
            raise OptionNotFoundError()
        return self._value

    # Pattern matching

    def match(self, some: Callable[[T], R], none: Callable[[], R]) -> R:
        """
        Pattern matching for Option.

        Args:
            some: Called with the value if nonempty
            none: Called with no arguments if empty

        Returns:
            The result of whichever callback ran
        """
        self._policy.check_handler(some, "Function for some match not be None")
        self._policy.check_handler(none, "Function for none match not be None")
        return some(self._value) if self._has_value else none()

    def match_or(self, some: Callable[[T], R], none: R) -> R:
        self._policy.check_handler(some, "Function for some match not be None")
        return some(self._value) if self._has_value else none

    def match_some(self, some: Callable[[T], Any]) -> Unit:
        """Call some with the value if nonempty; an empty Option skips it."""
        self._policy.check_handler(some, "Function for some match not be None")
        if self._has_value:
            some(self._value)
        return UNIT

    def match_none(self, none: Callable[[], Any]) -> Unit:
        """Call none if empty; a nonempty Option skips it."""
        self._policy.check_handler(none, "Function for none match not be None")
        if not self._has_value:
            none()
        return UNIT

    # Conversion

    def to_left(self, right: Any = UNIT) -> Either[T, Any]:
        """Some(v) -> Left(v); None -> Right(right)."""
        from apophis.monads.either import Either

        either = CheckPolicyRegistry.bind(Either, self._policy)
        return either.left(self._value) if self._has_value else either.right(right)

    def to_right(self, left: Any = UNIT) -> Either[Any, T]:
        """Some(v) -> Right(v); None -> Left(left)."""
        from apophis.monads.either import Either

        either = CheckPolicyRegistry.bind(Either, self._policy)
        return either.right(self._value) if self._has_value else either.left(left)

    def to_try(self) -> Try[T]:
        """Some(v) -> Ok(v); None -> Error(NullPayloadError)."""
        from apophis.monads.try_ import Try

        try_cls = CheckPolicyRegistry.bind(Try, self._policy)
        if self._has_value:
            return try_cls.ok(self._value)
        return try_cls.error(NullPayloadError("Option is empty"))

    # Equality and ordering

    def compare_to(self, other: Any) -> int:
        """
        Three-way comparison: None sorts before Some, Somes compare their values.
        A raw value is compared as an implicit Some.

        Raises:
            TypeError: If other is a value of another monad family
        """
        if self._is_foreign(other):
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}")
        if isinstance(other, Option):
            if self._has_value:
                return compare(self._value, other._value) if other._has_value else 1
            return -1 if other._has_value else 0
        return compare(self._value, other) if self._has_value else -1

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Option):
            if self._has_value and other._has_value:
                return self._value == other._value
            return self._has_value == other._has_value
        if other is None or self._is_foreign(other):
            return False
        return self._has_value and self._value == other

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __lt__(self, other: Any) -> bool:
        if other is None or self._is_foreign(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if other is None or self._is_foreign(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if other is None or self._is_foreign(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if other is None or self._is_foreign(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        return hash(self._value) if self._has_value else hash(OptionType.NONE)

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._has_value else "None"

    def __str__(self) -> str:
        return f"Some({self._value})" if self._has_value else "None"


Option._root = Option
UnsafeOption = Option.with_policy("UNSAFE")


def to_option(value: Optional[T]) -> Option[T]:
    """Raw value to Option conversion: None -> None, anything else -> Some."""
    return Option.some(value)
