import pytest

from apophis import (
    UNIT,
    Either,
    EitherNotFoundError,
    EitherType,
    NullArgumentError,
    NullPayloadError,
    Option,
    UnsafeEither,
    UnsafeOption,
    to_left,
    to_right,
)


def test_left_and_right_construction():
    left = Either.left("boom")
    assert left.is_left and not left.is_right
    assert left.type == EitherType.LEFT
    right = to_right(1)
    assert right.is_right
    assert right.type == EitherType.RIGHT
    assert to_left("boom") == left


@pytest.mark.parametrize("factory", [Either.left, Either.right, UnsafeEither.left, UnsafeEither.right])
def test_none_payload_rejected(factory):
    """Neither side can hold None, whatever the check policy."""
    with pytest.raises(NullPayloadError):
        factory(None)


def test_side_accessors():
    assert Either.left(1).left_option == Option.some(1)
    assert Either.left(1).right_option.empty
    assert Either.right(2).right_option == Option.some(2)
    assert list(Either.left(1).iter_left()) == [1]
    assert list(Either.left(1).iter_right()) == []


def test_swap_is_an_involution():
    either = Either.left("x")
    assert either.swap == Either.right("x")
    assert either.swap.swap == either


def test_mirrors():
    """A Left mirrors the Right holding the same value."""
    assert Either.left(3).mirrors(Either.right(3))
    assert not Either.left(3).mirrors(Either.left(3))
    assert not Either.left(3).mirrors(3)
    assert Either.left(3).compare_to(Either.right(3), mirrored=True) == 0


def test_folds():
    assert Either.left(2).fold_left(10, lambda v, acc: v + acc) == 12
    assert Either.right(2).fold_left(10, lambda v, acc: v + acc) == 10
    assert Either.right(2).fold_right(10, lambda v, acc: v * acc) == 20
    assert Either.left("a").fold("!", lambda v, acc: v + acc, lambda v, acc: acc) == "a!"


def test_fold_skips_the_other_side(counting):
    left = counting("left")
    right = counting("right")
    assert Either.right(1).fold(0, left, right) == "right"
    assert left.calls == 0
    assert right.calls == 1


def test_flat_maps():
    def half(x):
        return Either.right(x // 2) if x % 2 == 0 else Either.left(f"{x} is odd")

    assert Either.right(8).flat_map_right(half) == Either.right(4)
    assert Either.right(3).flat_map_right(half) == Either.left("3 is odd")
    left = Either.left("err")
    assert left.flat_map_right(half) is left
    assert left.flat_map_left(lambda e: Either.right(len(e))) == Either.right(3)
    assert Either.right(5).flat_map(lambda e: Either.right(0), half) == Either.left("5 is odd")


def test_maps():
    assert Either.left(1).map_left(lambda x: x + 1) == Either.left(2)
    right = Either.right(1)
    assert right.map_left(lambda x: x + 1) is right
    assert right.map_right(str) == Either.right("1")
    assert Either.left(2).map(lambda x: -x, str) == Either.left(-2)
    assert Either.right(2).map(lambda x: -x, str) == Either.right("2")


def test_map_identity_law():
    for either in (Either.left(1), Either.right(1)):
        assert either.map(lambda x: x, lambda x: x) == either


def test_map_to_none_is_rejected():
    with pytest.raises(NullPayloadError):
        Either.right(1).map_right(lambda _: None)


def test_predicates():
    assert Either.left(1).exist_left(lambda x: x == 1)
    assert not Either.right(1).exist_left(lambda x: True)
    assert Either.left(1).forall_right(lambda x: False)
    assert not Either.right(1).forall_right(lambda x: x > 1)
    assert Either.right(1).forall_left(lambda x: False)
    assert Either.right(2).exist(lambda x: False, lambda x: x == 2)


def test_contain():
    assert Either.left(1).contain_left(1)
    assert not Either.left(1).contain_right(1)
    assert Either.right("r").contain("l", "r")
    assert not Either.left("r").contain("l", "r")


def test_filters():
    assert Either.left(4).filter_left(lambda x: x > 3) == Option.some(4)
    assert Either.left(4).filter_right(lambda x: True).empty
    either = Either.right(1)
    assert either.filter(lambda x: False, lambda x: x == 1) == Option.some(either)
    assert either.filter(lambda x: True, lambda x: False).empty


def test_extraction():
    assert Either.left(1).left_or(0) == 1
    assert Either.right(1).left_or(0) == 0
    assert Either.right(1).left_or_else(lambda: 9) == 9
    assert Either.right(1).left_or_default(int) == 0
    assert Either.left(1).right_or_default() is None
    assert Either.left(1).right_or_default(list) == []
    assert Either.right(7).right_or_throw() == 7
    assert Either.left(7).left_or_throw() == 7


def test_or_throw_on_wrong_side():
    with pytest.raises(EitherNotFoundError):
        Either.right(1).left_or_throw()
    with pytest.raises(EitherNotFoundError):
        Either.left(1).right_or_throw()


def test_match_variants():
    seen = []
    assert Either.left(1).match(lambda v: ("L", v), lambda v: ("R", v)) == ("L", 1)
    assert Either.right(1).match_left(seen.append) == UNIT
    assert Either.left(1).match_left(seen.append) == UNIT
    assert Either.left(2).match_right(seen.append) == UNIT
    assert Either.right(3).match_right(seen.append) == UNIT
    assert seen == [1, 3]
    assert Either.right(1).match_left_or(lambda v: v, "no left") == "no left"
    assert Either.left(1).match_right_or(lambda v: v, "no right") == "no right"
    assert Either.left(1).match_right_or_else(lambda v: v, lambda: "lazy") == "lazy"


def test_flatten():
    inner = Either.right(1)
    assert Either.left(inner).flatten_left() == inner
    assert Either.right(inner).flatten_right() == inner
    assert Either.right(inner).flatten_left() == Either.right(inner)
    assert Either.left(Either.left("e")).flatten() == Either.left("e")
    plain = Either.left("e")
    assert plain.flatten() is plain


def test_equality_ordering_and_hash():
    """Left sorts before Right, same-side values compare directly."""
    assert Either.left(1) == Either.left(1)
    assert Either.left(1) != Either.right(1)
    assert Either.right(1) == 1
    assert Either.right(1) != None  # noqa: E711
    assert Either.left(100) < Either.right(0)
    assert Either.right(1) < Either.right(2)
    assert Either.right(3) > 2
    assert hash(Either.left("a")) == hash(Either.left("a"))


def test_rendering():
    assert str(Either.left(1)) == "Left(1)"
    assert repr(Either.right("a")) == "Right('a')"


def test_safe_policy_rejects_none_callbacks():
    with pytest.raises(NullArgumentError):
        Either.right(1).map_left(None)
    with pytest.raises(NullArgumentError):
        Either.left(1).exist_right(None)
    with pytest.raises(NullArgumentError):
        Either.left(1).match(lambda v: v, None)


def test_unsafe_policy_skips_validation():
    right = UnsafeEither.right(1)
    assert right.map_left(None) is right
    assert right.fold_left(0, None) == 0
    assert right.match_left(None) == UNIT
    assert isinstance(right.left_option, UnsafeOption)
    assert isinstance(right.swap, UnsafeEither)
