from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, Optional, TypeVar, Union

from apophis.core._enums import TryType
from apophis.core._logging import get_logger, safe_log
from apophis.core._unit import UNIT, Unit
from apophis.core.exceptions import ExceptionUtility, NullPayloadError, TryNotFoundError
from apophis.i_type_class import ITypeClass
from apophis.monads.option import Option
from apophis.policy.check_policy import ICheckPolicy
from apophis.registry.policy_registry import CheckPolicyRegistry
from apophis.utils._utils import compare, default_of

if TYPE_CHECKING:
    from apophis.monads.either import Either


__all__: list[str] = [
    "Try",
    "UnsafeTry",
    "to_try",
]

T = TypeVar("T")
R = TypeVar("R")
A = TypeVar("A")


def _failure_key(error: BaseException) -> tuple[str, str, str]:
    return (type(error).__module__, type(error).__qualname__, repr(error.args))


@dataclass(frozen=True, slots=True, eq=False, repr=False, match_args=False)
class Try(ITypeClass[TryType], Generic[T]):
    """
    Result of a computation: Ok(value) or Error(failure).

    ``Try.attempt(factory)`` is the one place in the library where an
    exception is caught: whatever the factory raises is stored in the Error
    tag. Every other combinator lets exceptions from user callbacks propagate.

    Example:
        >>> t = Try.attempt(lambda: 10 / 0)
        >>> t.is_error
        True
        >>> t.value_or(-1)
        -1
    """

    _value: Any = None
    _error: Optional[BaseException] = None

    # Constructors

    @classmethod
    def ok(cls, value: T) -> Try[T]:
        return cls(value, None)

    @classmethod
    def error(cls, error: Union[BaseException, type[BaseException]]) -> Try[Any]:
        """
        Create an Error.

        Args:
            error: Exception instance, or an exception class instantiated
                with no arguments

        Raises:
            NullPayloadError: If error is None
            TypeError: If error is not an exception
        """
        if error is None:
            raise NullPayloadError("Try failure must not be None")
        if isinstance(error, type) and issubclass(error, BaseException):
            error = error()
        ExceptionUtility.throw_if_false(
            isinstance(error, BaseException),
            TypeError,
            f"Try.error expects an exception, got {type(error).__name__}",
        )
        return cls(None, error)

    @classmethod
    def attempt(cls, factory: Callable[[], T]) -> Try[T]:
        """
        Invoke factory and capture any Exception it raises into the Error tag.

        BaseException subclasses that are not Exception (KeyboardInterrupt,
        SystemExit) are not captured.
        """
        cls._policy.check_handler(factory, "Factory function not be None")
        try:
            value = factory()
        except Exception as exc:
            safe_log(get_logger(), "debug", f"Try captured {type(exc).__name__}: {exc}")
            return cls(None, exc)
        return cls(value, None)

    # Properties

    @property
    def type(self) -> TryType:
        return TryType.ERROR if self._error is not None else TryType.OK

    @property
    def is_ok(self) -> bool:
        return self._error is None

    @property
    def is_error(self) -> bool:
        return self._error is not None

    @property
    def value_option(self) -> Option[T]:
        option = CheckPolicyRegistry.bind(Option, self._policy)
        return option.some(self._value) if self.is_ok else option.none()

    @property
    def error_option(self) -> Option[BaseException]:
        option = CheckPolicyRegistry.bind(Option, self._policy)
        return option.some(self._error) if self.is_error else option.none()

    def __iter__(self) -> Iterator[T]:
        if self.is_ok:
            yield self._value

    # Operators

    def fold_ok(self, init: A, ok_handler: Callable[[T, A], A]) -> A:
        """
        Returns ``ok_handler(value, init)`` if the Try is Ok.
        Otherwise, returns init.
        """
        self._policy.check_handler(ok_handler)
        return ok_handler(self._value, init) if self.is_ok else init

    def fold_error(self, init: A, error_handler: Callable[[BaseException, A], A]) -> A:
        """
        Returns ``error_handler(error, init)`` if the Try holds an error.
        Otherwise, returns init.
        """
        self._policy.check_handler(error_handler)
        return error_handler(self._error, init) if self.is_error else init

    def flat_map(self, handler: Callable[[T], Try[R]]) -> Try[R]:
        """
        Returns the result of applying handler to the value if this Try is Ok.
        An Error is passed through without calling handler.
        """
        self._policy.check_handler(handler)
        return handler(self._value) if self.is_ok else self

    def map(self, ok: Callable[[T], R]) -> Try[R]:
        """
        Transform an Ok value, pass an Error through unchanged.

        An exception raised by ``ok`` propagates; use ``flat_map`` with
        ``Try.attempt`` to capture it instead.
        """
        self._policy.check_handler(ok)
        return type(self).ok(ok(self._value)) if self.is_ok else self

    def exist(self, predicate: Callable[[T], bool]) -> bool:
        self._policy.check_predicate(predicate)
        return self.is_ok and bool(predicate(self._value))

    def forall(self, predicate: Callable[[T], bool]) -> bool:
        """True for an Error (vacuous truth), otherwise the predicate result."""
        self._policy.check_predicate(predicate)
        return self.is_error or bool(predicate(self._value))

    def contain(self, value: T) -> bool:
        return self.is_ok and self._value == value

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Some(value) if Ok and the predicate holds, otherwise None."""
        self._policy.check_predicate(predicate)
        option = CheckPolicyRegistry.bind(Option, self._policy)
        return option.some(self._value) if self.is_ok and predicate(self._value) else option.none()

    # Extraction

    def value_or(self, default: T) -> T:
        return self._value if self.is_ok else default

    def value_or_default(self, type_: Optional[Callable[[], T]] = None) -> Optional[T]:
        return self._value if self.is_ok else default_of(type_)

    def value_or_else(self, factory: Callable[[], T]) -> T:
        self._policy.check_handler(factory, "Factory function not be None")
        return self._value if self.is_ok else factory()

    def value_or_throw(self) -> T:
        """
        Returns the Ok value.

        Raises:
            TryNotFoundError: If the Try holds an error, chained from that error
        """
        if self.is_error:
            raise TryNotFoundError() from self._error
        return self._value

    # Pattern matching

    def match(self, ok: Callable[[T], A], error: Callable[[BaseException], A]) -> A:
        """
        Pattern matching for Try.

        Returns:
            ok(value) for an Ok, error(failure) for an Error
        """
        self._policy.check_handler(ok)
        self._policy.check_handler(error)
        return ok(self._value) if self.is_ok else error(self._error)

    def match_ok(self, ok: Callable[[T], Any]) -> Unit:
        self._policy.check_handler(ok)
        if self.is_ok:
            ok(self._value)
        return UNIT

    def match_ok_or(self, ok: Callable[[T], A], error: A) -> A:
        self._policy.check_handler(ok)
        return ok(self._value) if self.is_ok else error

    def match_ok_or_else(self, ok: Callable[[T], A], error: Callable[[], A]) -> A:
        self._policy.check_handler(ok)
        self._policy.check_handler(error)
        return ok(self._value) if self.is_ok else error()

    def match_error(self, error: Callable[[BaseException], Any]) -> Unit:
        self._policy.check_handler(error)
        if self.is_error:
            error(self._error)
        return UNIT

    def match_error_or(self, error: Callable[[BaseException], A], ok: A) -> A:
        self._policy.check_handler(error)
        return error(self._error) if self.is_error else ok

    def match_error_or_else(self, error: Callable[[BaseException], A], ok: Callable[[], A]) -> A:
        self._policy.check_handler(error)
        self._policy.check_handler(ok)
        return error(self._error) if self.is_error else ok()

    # Conversion

    def to_either(self) -> Either[BaseException, T]:
        """
        Error -> Left(failure), Ok -> Right(value).

        Raises:
            NullPayloadError: For ``Ok(None)``, since an Either side cannot be None
        """
        from apophis.monads.either import Either

        either = CheckPolicyRegistry.bind(Either, self._policy)
        return either.left(self._error) if self.is_error else either.right(self._value)

    def to_option(self) -> Option[T]:
        """Error -> None, Ok -> Some(value)."""
        return self.value_option

    def to_try(self, policy: Union[str, type[ICheckPolicy]]) -> Try[T]:
        """Re-wrap this Try under another check policy."""
        bound = CheckPolicyRegistry.bind(Try, policy)
        safe_log(get_logger(), "debug", f"Re-wrapping {type(self).__name__} as {bound.__name__}")
        return bound(self._value, self._error)

    # Equality and ordering

    def compare_to(self, other: Any) -> int:
        """
        Three-way comparison. Error sorts before Ok; Ok values are compared
        directly; Errors are ordered by failure type and arguments.
        A raw value is compared as an implicit Ok.
        """
        if self._is_foreign(other):
            raise TypeError(f"Cannot compare {type(self).__name__} with {type(other).__name__}")
        if isinstance(other, Try):
            if self.is_error:
                if other.is_ok:
                    return -1
                return compare(_failure_key(self._error), _failure_key(other._error))
            return compare(self._value, other._value) if other.is_ok else 1
        return compare(self._value, other) if self.is_ok else -1

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Try):
            if self.is_ok and other.is_ok:
                return self._value == other._value
            if self.is_error and other.is_error:
                return _failure_key(self._error) == _failure_key(other._error)
            return False
        if self._is_foreign(other):
            return False
        if isinstance(other, BaseException):
            return self.is_error and _failure_key(self._error) == _failure_key(other)
        return self.is_ok and self._value == other

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

    def __hash__(self) -> int:
        return hash(self._value) if self.is_ok else hash(_failure_key(self._error))

    def __repr__(self) -> str:
        return f"Ok({self._value!r})" if self.is_ok else f"Error({self._error!r})"

    def __str__(self) -> str:
        return f"Ok({self._value})" if self.is_ok else f"Error({self._error!r})"


Try._root = Try
UnsafeTry = Try.with_policy("UNSAFE")


def to_try(value: T) -> Try[T]:
    return Try.ok(value)
