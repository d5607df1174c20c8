from __future__ import annotations

from typing import Optional, TypeVar, Union

from apophis.core._logging import get_logger, safe_log
from apophis.policy.check_policy import ICheckPolicy, SafePolicy, UnsafePolicy


__all__: list[str] = [
    "CheckPolicyRegistry",
]

M = TypeVar("M")

_BUILTIN: dict[str, type[ICheckPolicy]] = {
    SafePolicy.name: SafePolicy,
    UnsafePolicy.name: UnsafePolicy,
}


class CheckPolicyRegistry:
    """
    Registry of check policies and of the monad classes specialised for them.

    ``SAFE`` and ``UNSAFE`` are always present. Custom policies can be added,
    e.g. a policy that validates handlers but not predicates.

    Example:
        from apophis import CheckPolicyRegistry, ICheckPolicy, Option

        class HandlersOnly(ICheckPolicy):
            name = "HANDLERS_ONLY"
            need_check = True
            check_predicate = staticmethod(lambda func, msg="": None)

        CheckPolicyRegistry.register("HANDLERS_ONLY", HandlersOnly)

        HandlersOnlyOption = Option.with_policy("HANDLERS_ONLY")
        HandlersOnlyOption.none().filter(None)   # predicate not validated
        HandlersOnlyOption.none().map(None)      # raises NullArgumentError
    """

    _registry: dict[str, type[ICheckPolicy]] = dict(_BUILTIN)
    _bound: dict[tuple[type, type[ICheckPolicy]], type] = {}

    @classmethod
    def register(cls, name: str, policy: type[ICheckPolicy]) -> None:
        """
        Register a custom check policy.

        Args:
            name: Unique name for the policy (e.g., "STRICT", "HANDLERS_ONLY")
            policy: ICheckPolicy subclass

        Raises:
            ValueError: If policy name already exists
        """
        name_upper: str = name.upper()
        if name_upper in cls._registry:
            raise ValueError(
                f"Policy '{name_upper}' already registered. "
                f"Use update() to modify existing policies."
            )
        cls._registry[name_upper] = policy
        safe_log(get_logger(), "debug", f"Registered check policy '{name_upper}'")

    @classmethod
    def update(cls, name: str, policy: type[ICheckPolicy]) -> None:
        """
        Update an existing custom policy or register a new one.

        Built-in policies cannot be replaced.

        Raises:
            ValueError: If name refers to a built-in policy
        """
        name_upper: str = name.upper()
        if name_upper in _BUILTIN:
            raise ValueError(f"Built-in policy '{name_upper}' cannot be updated")
        previous = cls._registry.get(name_upper)
        if previous is not None and previous is not policy:
            cls._drop_bindings(previous)
        cls._registry[name_upper] = policy
        safe_log(get_logger(), "debug", f"Updated check policy '{name_upper}'")

    @classmethod
    def get(cls, name: str) -> Optional[type[ICheckPolicy]]:
        """
        Get a check policy by name.

        Returns:
            The policy class if found, None otherwise
        """
        return cls._registry.get(name.upper())

    @classmethod
    def exists(cls, name: str) -> bool:
        """Check if a policy exists."""
        return name.upper() in cls._registry

    @classmethod
    def list_policies(cls) -> list[str]:
        """List all registered policy names."""
        return list(cls._registry.keys())

    @classmethod
    def unregister(cls, name: str) -> bool:
        """
        Remove a custom policy.

        Returns:
            True if removed, False if not found or built-in
        """
        name_upper: str = name.upper()
        if name_upper in _BUILTIN or name_upper not in cls._registry:
            return False
        cls._drop_bindings(cls._registry.pop(name_upper))
        safe_log(get_logger(), "debug", f"Unregistered check policy '{name_upper}'")
        return True

    @classmethod
    def clear(cls) -> None:
        """Remove all custom policies, keeping SAFE and UNSAFE."""
        for name in [n for n in cls._registry if n not in _BUILTIN]:
            cls.unregister(name)

    @classmethod
    def resolve(cls, policy: Union[str, type[ICheckPolicy]]) -> type[ICheckPolicy]:
        """
        Turn a policy name or class into a registered policy class.

        Raises:
            ValueError: If the policy is not registered
        """
        if isinstance(policy, str):
            found = cls.get(policy)
            if found is None:
                raise ValueError(
                    f"Unknown check policy '{policy}'. "
                    f"Registered: {cls.list_policies()}"
                )
            return found
        if policy not in cls._registry.values():
            raise ValueError(f"Check policy {policy!r} is not registered")
        return policy

    @classmethod
    def bind(cls, family: type[M], policy: Union[str, type[ICheckPolicy]]) -> type[M]:
        """
        Return the class of ``family`` specialised for ``policy``.

        The family root (``Option``, ``Either``, ``Try``, ``Eval``) is returned
        for its own policy; other policies get a cached subclass that only
        overrides the ``_policy`` class attribute.
        """
        policy_cls = cls.resolve(policy)
        root: type = getattr(family, "_root")
        if root._policy is policy_cls:
            return root

        key = (root, policy_cls)
        bound = cls._bound.get(key)
        if bound is None:
            name = f"{policy_cls.name.capitalize()}{root.__name__}"
            bound = type(root)(
                name,
                (root,),
                {
                    "__slots__": (),
                    "__module__": root.__module__,
                    "__qualname__": name,
                    "_policy": policy_cls,
                },
            )
            cls._bound[key] = bound
            safe_log(get_logger(), "debug", f"Bound {root.__name__} to policy '{policy_cls.name}' as {name}")
        return bound

    @classmethod
    def _drop_bindings(cls, policy: type[ICheckPolicy]) -> None:
        for key in [k for k in cls._bound if k[1] is policy]:
            del cls._bound[key]
