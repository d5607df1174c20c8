from typing import List

# Monads
from apophis.monads.option import Option, UnsafeOption, to_option
from apophis.monads.either import Either, UnsafeEither, to_left, to_right
from apophis.monads.try_ import Try, UnsafeTry, to_try
from apophis.monads.eval_ import Eval, UnsafeEval

# Interfaces
from apophis.i_type_class import ITypeClass

# Check policies and registry
from apophis.policy.check_policy import ICheckPolicy, SafePolicy, UnsafePolicy
from apophis.registry.policy_registry import CheckPolicyRegistry

# Core types
from apophis.core._unit import Unit, UNIT
from apophis.core._enums import (
    OptionType,
    EitherType,
    TryType,
    EvalType,
)

# Exceptions
from apophis.core.exceptions import (
    ApophisError,
    NullArgumentError,
    NullPayloadError,
    NotFoundError,
    OptionNotFoundError,
    EitherNotFoundError,
    TryNotFoundError,
    ExceptionUtility,
)

__all__: List[str] = [
    # Version
    "__version__",
    # Monads
    "Option",
    "UnsafeOption",
    "to_option",
    "Either",
    "UnsafeEither",
    "to_left",
    "to_right",
    "Try",
    "UnsafeTry",
    "to_try",
    "Eval",
    "UnsafeEval",
    # Interfaces
    "ITypeClass",
    # Policies
    "ICheckPolicy",
    "SafePolicy",
    "UnsafePolicy",
    "CheckPolicyRegistry",
    # Core types
    "Unit",
    "UNIT",
    "OptionType",
    "EitherType",
    "TryType",
    "EvalType",
    # Exceptions
    "ApophisError",
    "NullArgumentError",
    "NullPayloadError",
    "NotFoundError",
    "OptionNotFoundError",
    "EitherNotFoundError",
    "TryNotFoundError",
    "ExceptionUtility",
]

__version__ = "0.1.0"
