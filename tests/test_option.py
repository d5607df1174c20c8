import pytest

from apophis import (
    UNIT,
    Either,
    NullArgumentError,
    NullPayloadError,
    Option,
    OptionNotFoundError,
    OptionType,
    Try,
    Unit,
    UnsafeEither,
    UnsafeOption,
    UnsafeTry,
    to_option,
)


def test_some_and_none_construction():
    """Some holds a value, none() is empty."""
    some = Option.some(3)
    assert some.non_empty
    assert some.type == OptionType.SOME
    assert bool(some)
    none = Option.none()
    assert none.empty
    assert none.type == OptionType.NONE
    assert not bool(none)


def test_some_of_none_is_empty():
    """None is never stored inside Some."""
    assert Option.some(None).empty
    assert to_option(None) == Option.none()
    assert Option.of(0).non_empty


def test_map_identity_law():
    """Mapping with the identity function yields an equal Option."""
    assert Option.some(7).map(lambda x: x) == Option.some(7)
    assert Option.none().map(lambda x: x) == Option.none()


def test_map_short_circuits_on_none(counting):
    """map never calls its handler on an empty Option."""
    handler = counting(1)
    assert Option.none().map(handler).empty
    assert handler.calls == 0


def test_map_to_none_collapses():
    assert Option.some(1).map(lambda _: None).empty


def test_flat_map():
    assert Option.some(4).flat_map(lambda x: Option.some(x + 1)) == Option.some(5)
    assert Option.some(4).flat_map(lambda x: Option.none()).empty
    assert Option.none().flat_map(lambda x: Option.some(x)).empty


def test_filter_and_filter_not():
    some = Option.some(10)
    assert some.filter(lambda x: x > 5) is some
    assert some.filter(lambda x: x > 50).empty
    assert some.filter_not(lambda x: x > 50) is some
    assert some.filter_not(lambda x: x > 5).empty
    assert Option.none().filter(lambda x: True).empty


def test_exist_and_forall():
    """Forall is vacuously true on None, Exist is false."""
    assert Option.some(2).exist(lambda x: x == 2)
    assert not Option.none().exist(lambda x: True)
    assert Option.none().forall(lambda x: False)
    assert not Option.some(2).forall(lambda x: x > 2)


def test_contain():
    assert Option.some("a").contain("a")
    assert not Option.some("a").contain("b")
    assert not Option.none().contain(None)


def test_folds():
    assert Option.some(3).fold(10, lambda v, acc: v + acc) == 13
    assert Option.none().fold(10, lambda v, acc: v + acc) == 10
    assert Option.some(3).fold_with(lambda: "empty", lambda v: f"got {v}") == "got 3"
    assert Option.none().fold_with(lambda: "empty", lambda v: f"got {v}") == "empty"
    assert Option.some("b").fold_left("a", lambda v, acc: acc + v) == "ab"
    assert Option.some("b").fold_right("a", lambda acc, v: v + acc) == "ba"
    assert Option.none().fold_right("a", lambda acc, v: v + acc) == "a"


def test_flatten():
    assert Option.some(Option.some(1)).flatten() == Option.some(1)
    assert Option.some(Option.none()).flatten().empty
    assert Option.none().flatten().empty


def test_extraction():
    assert Option.some(1).or_else(2) == 1
    assert Option.none().or_else(2) == 2
    assert Option.none().or_else_get(lambda: 3) == 3
    assert Option.none().or_default(int) == 0
    assert Option.none().or_default(str) == ""
    assert Option.none().or_default() is None
    assert Option.some(5).or_throw() == 5


def test_or_throw_on_none():
    with pytest.raises(OptionNotFoundError):
        Option.none().or_throw()


def test_or_else_get_does_not_call_factory_on_some(counting):
    factory = counting(0)
    assert Option.some(1).or_else_get(factory) == 1
    assert factory.calls == 0


def test_match_variants():
    seen = []
    assert Option.some(1).match(lambda v: v * 10, lambda: -1) == 10
    assert Option.none().match(lambda v: v * 10, lambda: -1) == -1
    assert Option.none().match_or(lambda v: v, "fallback") == "fallback"
    assert Option.some(2).match_some(seen.append) == UNIT
    assert Option.none().match_some(seen.append) == UNIT
    assert Option.some(3).match_none(lambda: seen.append("none")) == UNIT
    assert Option.none().match_none(lambda: seen.append("none")) == UNIT
    assert seen == [2, "none"]


def test_conversion_to_either():
    """Some goes to the requested side, None puts Unit on the other side."""
    assert Option.some(1).to_left() == Either.left(1)
    assert Option.none().to_left() == Either.right(Unit())
    assert Option.some(1).to_right() == Either.right(1)
    assert Option.none().to_right("missing") == Either.left("missing")


def test_conversion_to_try():
    assert Option.some(1).to_try() == Try.ok(1)
    failed = Option.none().to_try()
    assert failed.is_error
    assert isinstance(failed.error_option.or_throw(), NullPayloadError)


def test_equality_and_ordering():
    """None sorts before Some and a raw value is an implicit Some."""
    assert Option.none() == Option.none()
    assert Option.some(1) != Option.none()
    assert Option.some(1) == 1
    assert Option.none() != 1
    assert Option.none() != None  # noqa: E711
    assert Option.none() < Option.some(0)
    assert Option.some(1) < Option.some(2)
    assert Option.some(2) >= 2
    assert Option.none() < 100
    assert sorted([Option.some(3), Option.none(), Option.some(1)]) == [
        Option.none(),
        Option.some(1),
        Option.some(3),
    ]


def test_hash_follows_payload():
    assert hash(Option.some("x")) == hash("x")
    assert len({Option.some(1), Option.some(1), Option.none(), Option.none()}) == 2


def test_rendering():
    assert str(Option.some(5)) == "Some(5)"
    assert repr(Option.some("a")) == "Some('a')"
    assert str(Option.none()) == "None"


def test_iteration():
    assert list(Option.some(1)) == [1]
    assert list(Option.none()) == []


def test_safe_policy_rejects_none_callbacks():
    """Under the Safe policy a None callback fails even when it would be skipped."""
    with pytest.raises(NullArgumentError):
        Option.none().map(None)
    with pytest.raises(NullArgumentError):
        Option.some(1).filter(None)
    with pytest.raises(NullArgumentError):
        Option.some(1).match(lambda v: v, None)


def test_unsafe_policy_skips_validation():
    """Under the Unsafe policy a never-reached None callback is not an error."""
    assert UnsafeOption.none().map(None).empty
    assert UnsafeOption.none().flat_map(None).empty
    assert UnsafeOption.none().fold(1, None) == 1
    assert UnsafeOption.none().match_some(None) == UNIT


def test_unsafe_option_conversions_keep_policy():
    opt = UnsafeOption.some(1)
    assert isinstance(opt.map(lambda x: x + 1), UnsafeOption)
    assert isinstance(opt.to_left(), UnsafeEither)
    assert isinstance(opt.to_try(), UnsafeTry)
    assert opt == Option.some(1)
