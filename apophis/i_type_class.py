from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar, Union

from apophis.policy.check_policy import ICheckPolicy, SafePolicy
from apophis.registry.policy_registry import CheckPolicyRegistry


__all__: list[str] = [
    "ITypeClass",
]

TTag = TypeVar("TTag")
TSelf = TypeVar("TSelf", bound="ITypeClass")


class ITypeClass(ABC, Generic[TTag]):
    """
    Interface shared by Option, Either, Try and Eval.

    Every value exposes its state tag through ``type`` and every class is bound
    to exactly one check policy through the ``_policy`` class attribute.
    Family roots are bound to SafePolicy.
    """

    __slots__ = ()

    _policy: ClassVar[type[ICheckPolicy]] = SafePolicy
    _root: ClassVar[type]

    @property
    @abstractmethod
    def type(self) -> TTag:
        """State tag of this value."""

    @classmethod
    def policy(cls) -> type[ICheckPolicy]:
        return cls._policy

    @classmethod
    def with_policy(cls: type[TSelf], policy: Union[str, type[ICheckPolicy]]) -> type[TSelf]:
        """Return this family's class specialised for ``policy``."""
        return CheckPolicyRegistry.bind(cls, policy)

    def _is_foreign(self, other: object) -> bool:
        """True when ``other`` is a value of a different monad family."""
        return isinstance(other, ITypeClass) and not isinstance(other, self._root)
