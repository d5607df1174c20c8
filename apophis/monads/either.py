from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from apophis.core._enums import EitherType
from apophis.core._unit import UNIT, Unit
from apophis.core.exceptions import EitherNotFoundError, ExceptionUtility, NullPayloadError
from apophis.i_type_class import ITypeClass
from apophis.monads.option import Option
from apophis.registry.policy_registry import CheckPolicyRegistry
from apophis.utils._utils import compare, default_of


__all__: list[str] = [
    "Either",
    "UnsafeEither",
    "to_left",
    "to_right",
]

TLeft = TypeVar("TLeft")
TRight = TypeVar("TRight")
L = TypeVar("L")
R = TypeVar("R")
A = TypeVar("A")


@dataclass(frozen=True, slots=True, eq=False, repr=False, match_args=False)
class Either(ITypeClass[EitherType], Generic[TLeft, TRight]):
    """
    A value that is exclusively one of two alternatives: Left or Right.

    The payload lives in a single slot next to the tag, so only the populated
    side is ever stored. Neither side may hold None; both constructors reject
    it eagerly with NullPayloadError.

    Example:
        >>> def parse(s: str) -> Either[ValueError, int]:
        ...     return Either.right(int(s)) if s.isdigit() else Either.left(ValueError(s))
        >>> parse("41").map_right(lambda x: x + 1)
        Right(42)
        >>> parse("abc").match_left_or(lambda e: "err", "ok")
        'err'
    """

    _value: Any
    _type: EitherType

    # Constructors

    @classmethod
    def left(cls, value: TLeft) -> Either[TLeft, Any]:
        """
        Create a Left.

        Raises:
            NullPayloadError: If value is None
        """
        ExceptionUtility.throw_if_true(value is None, NullPayloadError, "Left payload must not be None")
        return cls(value, EitherType.LEFT)

    @classmethod
    def right(cls, value: TRight) -> Either[Any, TRight]:
        """
        Create a Right.

        Raises:
            NullPayloadError: If value is None
        """
        ExceptionUtility.throw_if_true(value is None, NullPayloadError, "Right payload must not be None")
        return cls(value, EitherType.RIGHT)

    # Properties

    @property
    def type(self) -> EitherType:
        return self._type

    @property
    def is_left(self) -> bool:
        return self._type is EitherType.LEFT

    @property
    def is_right(self) -> bool:
        return self._type is EitherType.RIGHT

    @property
    def left_option(self) -> Option[TLeft]:
        option = CheckPolicyRegistry.bind(Option, self._policy)
        return option.some(self._value) if self.is_left else option.none()

    @property
    def right_option(self) -> Option[TRight]:
        option = CheckPolicyRegistry.bind(Option, self._policy)
        return option.some(self._value) if self.is_right else option.none()

    @property
    def swap(self) -> Either[TRight, TLeft]:
        """Exchange sides: Left(x) becomes Right(x) and vice versa."""
        other = EitherType.RIGHT if self.is_left else EitherType.LEFT
        return type(self)(self._value, other)

    def __iter__(self) -> Iterator[Either[TLeft, TRight]]:
        yield self

    def iter_left(self) -> Iterator[TLeft]:
        if self.is_left:
            yield self._value

    def iter_right(self) -> Iterator[TRight]:
        if self.is_right:
            yield self._value

    # Folds

    def fold_left(self, init: A, left: Callable[[TLeft, A], A]) -> A:
        """
        Returns ``left(value, init)`` if the Either holds a Left.
        Otherwise, returns init.
        """
        self._policy.check_handler(left)
        return left(self._value, init) if self.is_left else init

    def fold_right(self, init: A, right: Callable[[TRight, A], A]) -> A:
        """
        Returns ``right(value, init)`` if the Either holds a Right.
        Otherwise, returns init.
        """
        self._policy.check_handler(right)
        return right(self._value, init) if self.is_right else init

    def fold(self, init: A, left: Callable[[TLeft, A], A], right: Callable[[TRight, A], A]) -> A:
        """
        Collapse to a value, applying the handler of the populated side to
        that side's value and init.
        """
        self._policy.check_handler(left)
        self._policy.check_handler(right)
        return left(self._value, init) if self.is_left else right(self._value, init)

    # Flat maps

    def flat_map_left(self, left: Callable[[TLeft], Either[L, TRight]]) -> Either[L, TRight]:
        """
        Returns the result of applying left to the value if this Either holds a
        Left. Returns this Either unchanged if it holds a Right.
        """
        self._policy.check_handler(left)
        return left(self._value) if self.is_left else self

    def flat_map_right(self, right: Callable[[TRight], Either[TLeft, R]]) -> Either[TLeft, R]:
        """
        Returns the result of applying right to the value if this Either holds
        a Right. Returns this Either unchanged if it holds a Left.
        """
        self._policy.check_handler(right)
        return right(self._value) if self.is_right else self

    def flat_map(
        self,
        left: Callable[[TLeft], Either[L, R]],
        right: Callable[[TRight], Either[L, R]],
    ) -> Either[L, R]:
        self._policy.check_handler(left)
        self._policy.check_handler(right)
        return left(self._value) if self.is_left else right(self._value)

    # Maps

    def map_left(self, handler: Callable[[TLeft], L]) -> Either[L, TRight]:
        """Transform a Left value, pass a Right through."""
        self._policy.check_handler(handler)
        return type(self).left(handler(self._value)) if self.is_left else self

    def map_right(self, handler: Callable[[TRight], R]) -> Either[TLeft, R]:
        """Transform a Right value, pass a Left through."""
        self._policy.check_handler(handler)
        return type(self).right(handler(self._value)) if self.is_right else self

    def map(self, left: Callable[[TLeft], L], right: Callable[[TRight], R]) -> Either[L, R]:
        """
        Transform whichever side is populated, keeping the tag.

        Returns:
            Left(left(value)) or Right(right(value))
        """
        self._policy.check_handler(left)
        self._policy.check_handler(right)
        if self.is_left:
            return type(self).left(left(self._value))
        return type(self).right(right(self._value))

    # Predicates

    def exist_left(self, predicate: Callable[[TLeft], bool]) -> bool:
        self._policy.check_predicate(predicate)
        return self.is_left and bool(predicate(self._value))

    def exist_right(self, predicate: Callable[[TRight], bool]) -> bool:
        self._policy.check_predicate(predicate)
        return self.is_right and bool(predicate(self._value))

    def exist(self, predicate_left: Callable[[TLeft], bool], predicate_right: Callable[[TRight], bool]) -> bool:
        """Test the populated side with its own predicate."""
        self._policy.check_predicate(predicate_left)
        self._policy.check_predicate(predicate_right)
        if self.is_left:
            return bool(predicate_left(self._value))
        return bool(predicate_right(self._value))

    def forall_left(self, predicate: Callable[[TLeft], bool]) -> bool:
        """True for a Right (vacuous truth), otherwise the predicate result."""
        self._policy.check_predicate(predicate)
        return self.is_right or bool(predicate(self._value))

    def forall_right(self, predicate: Callable[[TRight], bool]) -> bool:
        """True for a Left (vacuous truth), otherwise the predicate result."""
        self._policy.check_predicate(predicate)
        return self.is_left or bool(predicate(self._value))

    def contain_left(self, value: TLeft) -> bool:
        return self.is_left and self._value == value

    def contain_right(self, value: TRight) -> bool:
        return self.is_right and self._value == value

    def contain(self, left_value: TLeft, right_value: TRight) -> bool:
        """Compare the populated side against the literal given for that side."""
        return self.contain_left(left_value) if self.is_left else self.contain_right(right_value)

    # Filters

    def filter_left(self, predicate: Callable[[TLeft], bool]) -> Option[TLeft]:
        """Some(value) if this is a Left and the predicate holds, otherwise None."""
        self._policy.check_predicate(predicate)
        option = CheckPolicyRegistry.bind(Option, self._policy)
        return option.some(self._value) if self.is_left and predicate(self._value) else option.none()

    def filter_right(self, predicate: Callable[[TRight], bool]) -> Option[TRight]:
        """Some(value) if this is a Right and the predicate holds, otherwise None."""
        self._policy.check_predicate(predicate)
        option = CheckPolicyRegistry.bind(Option, self._policy)
        return option.some(self._value) if self.is_right and predicate(self._value) else option.none()

    def filter(
        self,
        predicate_left: Callable[[TLeft], bool],
        predicate_right: Callable[[TRight], bool],
    ) -> Option[Either[TLeft, TRight]]:
        """
        Some(self) if the populated side passes its predicate, otherwise None.
        """
        self._policy.check_predicate(predicate_left)
        self._policy.check_predicate(predicate_right)
        option = CheckPolicyRegistry.bind(Option, self._policy)
        passed = predicate_left(self._value) if self.is_left else predicate_right(self._value)
        return option.some(self) if passed else option.none()

    # Extraction

    def left_or(self, default: TLeft) -> TLeft:
        return self._value if self.is_left else default

    def left_or_else(self, factory: Callable[[], TLeft]) -> TLeft:
        self._policy.check_handler(factory, "Factory function not be None")
        return self._value if self.is_left else factory()

    def left_or_default(self, type_: Optional[Callable[[], TLeft]] = None) -> Optional[TLeft]:
        return self._value if self.is_left else default_of(type_)

    def left_or_throw(self) -> TLeft:
        """
        Returns the Left value.

        Raises:
            EitherNotFoundError: If this Either holds a Right
        """
        if not self.is_left:
            raise EitherNotFoundError("Either holds a Right, not a Left")
        return self._value

    def right_or(self, default: TRight) -> TRight:
        return self._value if self.is_right else default

    def right_or_else(self, factory: Callable[[], TRight]) -> TRight:
        self._policy.check_handler(factory, "Factory function not be None")
        return self._value if self.is_right else factory()

    def right_or_default(self, type_: Optional[Callable[[], TRight]] = None) -> Optional[TRight]:
        return self._value if self.is_right else default_of(type_)

    def right_or_throw(self) -> TRight:
        """
        Returns the Right value.

        Raises:
            EitherNotFoundError: If this Either holds a Left
        """
        if not self.is_right:
            raise EitherNotFoundError("Either holds a Left, not a Right")
        return self._value

    # Pattern matching

    def match(self, left: Callable[[TLeft], A], right: Callable[[TRight], A]) -> A:
        """
        Pattern matching for Either.

        Args:
            left: Called with the value if this is a Left
            right: Called with the value if this is a Right

        Returns:
            The result of whichever callback ran
        """
        self._policy.check_handler(left)
        self._policy.check_handler(right)
        return left(self._value) if self.is_left else right(self._value)

    def match_left(self, left: Callable[[TLeft], Any]) -> Unit:
        self._policy.check_handler(left)
        if self.is_left:
            left(self._value)
        return UNIT

    def match_left_or(self, left: Callable[[TLeft], A], non_left: A) -> A:
        self._policy.check_handler(left)
        return left(self._value) if self.is_left else non_left

    def match_left_or_else(self, left: Callable[[TLeft], A], non_left: Callable[[], A]) -> A:
        """Returns left(value) for a Left, otherwise the result of non_left()."""
        self._policy.check_handler(left)
        self._policy.check_handler(non_left)
        return left(self._value) if self.is_left else non_left()

    def match_right(self, right: Callable[[TRight], Any]) -> Unit:
        self._policy.check_handler(right)
        if self.is_right:
            right(self._value)
        return UNIT

    def match_right_or(self, right: Callable[[TRight], A], non_right: A) -> A:
        self._policy.check_handler(right)
        return right(self._value) if self.is_right else non_right

    def match_right_or_else(self, right: Callable[[TRight], A], non_right: Callable[[], A]) -> A:
        """Returns right(value) for a Right, otherwise the result of non_right()."""
        self._policy.check_handler(right)
        self._policy.check_handler(non_right)
        return right(self._value) if self.is_right else non_right()

    # Flatten

    def flatten_left(self) -> Either[Any, Any]:
        """``Either[Either[L, R], R]`` -> ``Either[L, R]``."""
        if self.is_left and isinstance(self._value, Either):
            return self._value
        return self

    def flatten_right(self) -> Either[Any, Any]:
        """``Either[L, Either[L, R]]`` -> ``Either[L, R]``."""
        if self.is_right and isinstance(self._value, Either):
            return self._value
        return self

    def flatten(self) -> Either[Any, Any]:
        """
        Collapse a nested Either on whichever side is populated, covering
        ``Either[Either[L, R], Either[L, R]]`` as well as the one-sided forms.
        """
        if isinstance(self._value, Either):
            return self._value
        return self

    # Equality and ordering

    def mirrors(self, other: Any) -> bool:
        """
        Cross-type equality against the swapped form.

        ``Either.left(x).mirrors(Either.right(x))`` is True: a Left of an
        ``Either[L, R]`` equals the Right of the mirrored ``Either[R, L]``.
        """
        return isinstance(other, Either) and self == other.swap

    def compare_to(self, other: Any, mirrored: bool = False) -> int:
        """
        Three-way comparison. Left sorts before Right; values on the same side
        are compared directly. A raw value is compared with the populated side.

        Args:
            other: Either or raw value
            mirrored: Treat ``other`` as the mirrored ``Either[R, L]`` and
                compare against its swapped form

        Raises:
            TypeError: If other is a value of another monad family
        """
        if self._is_foreign(other):
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}")
        if isinstance(other, Either):
            if mirrored:
                other = other.swap
            if self._type is other._type:
                return compare(self._value, other._value)
            return -1 if self.is_left else 1
        return compare(self._value, other)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Either):
            return self._type is other._type and self._value == other._value
        if other is None or self._is_foreign(other):
            return False
        return self._value == other

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
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{'Left' if self.is_left else 'Right'}({self._value!r})"

    def __str__(self) -> str:
        return f"{'Left' if self.is_left else 'Right'}({self._value})"


Either._root = Either
UnsafeEither = Either.with_policy("UNSAFE")


def to_left(value: TLeft) -> Either[TLeft, Any]:
    return Either.left(value)


def to_right(value: TRight) -> Either[Any, TRight]:
    return Either.right(value)
