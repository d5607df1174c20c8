from __future__ import annotations

from enum import Enum


class OptionType(str, Enum):
    """
    State tag of an Option.

    - SOME: a value is present
    - NONE: no value is present
    """
    SOME = "some"
    NONE = "none"


class EitherType(str, Enum):
    """
    State tag of an Either.

    Exactly one side is populated at any time:
    - LEFT: the left alternative (conventionally the failure/alternate branch)
    - RIGHT: the right alternative (conventionally the success branch)
    """
    LEFT = "left"
    RIGHT = "right"


class TryType(str, Enum):
    """
    State tag of a Try.

    - OK: the computation produced a value
    - ERROR: the computation raised, the failure is stored as data
    """
    OK = "ok"
    ERROR = "error"


class EvalType(str, Enum):
    """
    Evaluation strategy of an Eval.

    - NOW: value computed at construction and cached
    - LATER: factory invoked at most once on first access, result cached
    - ALWAYS: factory invoked on every access, nothing cached

    Example:
        >>> ev = Eval.later(lambda: expensive())
        >>> ev.type == EvalType.LATER
        True
    """
    NOW = "now"
    LATER = "later"
    ALWAYS = "always"
