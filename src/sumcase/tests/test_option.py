"""Tests for the Option type.

Validates:
- Functor and monad laws
- Combinator semantics on both variants
- In-place mutation (insert, take, replace, get_or_insert*)
- Panic messages
- Conversions to and from Result
"""

from __future__ import annotations

from typing import Callable

import pytest

from sumcase import Err, Nothing, Ok, Option, Panic, Some


# ═════════════════════════════════════════════════════════════════════════════
# Property Tests - Functor & Monad Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    """Functor law: fmap id = id"""
    assert Some(42).map(lambda x: x) == Some(42)
    assert Nothing().map(lambda x: x) == Nothing()


def test_functor_composition() -> None:
    """Functor law: fmap (g . f) = fmap g . fmap f"""
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2

    assert Some(5).map(f).map(g) == Some(5).map(lambda x: g(f(x)))


def test_monad_left_identity() -> None:
    """Monad law: return a >>= f = f a"""
    f: Callable[[int], Option[int]] = lambda x: Some(x * 2)
    assert Some(21).and_then(f) == f(21)


def test_monad_right_identity() -> None:
    """Monad law: m >>= return = m"""
    assert Some(7).and_then(Some) == Some(7)
    assert Nothing().and_then(Some) == Nothing()


def test_and_then_on_nothing_skips_callback() -> None:
    calls: list[int] = []

    def f(x: int) -> Option[int]:
        calls.append(x)
        return Some(x)

    assert Nothing().and_then(f) == Nothing()
    assert calls == []


# ═════════════════════════════════════════════════════════════════════════════
# Construction & Introspection
# ═════════════════════════════════════════════════════════════════════════════


def test_some_construction() -> None:
    opt = Some(1)
    assert opt.is_some()
    assert not opt.is_none()


def test_nothing_construction() -> None:
    opt: Option[int] = Nothing()
    assert opt.is_none()
    assert not opt.is_some()


def test_some_none_is_present() -> None:
    """Python None is a legitimate payload, distinct from Nothing."""
    opt = Some(None)
    assert opt.is_some()
    assert opt.unwrap() is None
    assert opt != Nothing()


def test_from_nullable() -> None:
    assert Option.from_nullable(3) == Some(3)
    assert Option.from_nullable(0) == Some(0)
    assert Option.from_nullable(None) == Nothing()


def test_is_some_and() -> None:
    assert Some(4).is_some_and(lambda x: x > 3)
    assert not Some(2).is_some_and(lambda x: x > 3)
    assert not Nothing().is_some_and(lambda x: True)


def test_contains() -> None:
    assert Some(2).contains(2)
    assert not Some(3).contains(2)
    assert not Nothing().contains(2)


def test_contains_uses_plain_equality() -> None:
    payload = ["a"]
    assert Some(payload).contains(payload)
    assert Some(1).contains(1.0)


# ═════════════════════════════════════════════════════════════════════════════
# Value Extraction & Panics
# ═════════════════════════════════════════════════════════════════════════════


def test_unwrap_some() -> None:
    assert Some("air").unwrap() == "air"


def test_unwrap_nothing_panics() -> None:
    with pytest.raises(Panic, match=r"called `Option.unwrap\(\)` on a `None` value"):
        Nothing().unwrap()


def test_expect_message_is_exact() -> None:
    with pytest.raises(Panic) as exc_info:
        Nothing().expect("fruits are healthy")
    assert exc_info.value.message == "fruits are healthy"
    assert str(exc_info.value) == "fruits are healthy"


def test_expect_some() -> None:
    assert Some("value").expect("unused") == "value"


def test_unwrap_or() -> None:
    assert Some("car").unwrap_or("bike") == "car"
    assert Nothing().unwrap_or("bike") == "bike"


def test_unwrap_or_else_is_lazy() -> None:
    calls: list[str] = []

    def fallback() -> int:
        calls.append("called")
        return 20

    assert Some(4).unwrap_or_else(fallback) == 4
    assert calls == []
    assert Nothing().unwrap_or_else(fallback) == 20
    assert calls == ["called"]


# ═════════════════════════════════════════════════════════════════════════════
# Transformations
# ═════════════════════════════════════════════════════════════════════════════


def test_map() -> None:
    assert Some("Hello, World!").map(len) == Some(13)
    assert Nothing().map(len) == Nothing()


def test_map_or() -> None:
    assert Some("foo").map_or(42, len) == 3
    assert Nothing().map_or(42, len) == 42


def test_map_or_else() -> None:
    k = 21
    assert Some("foo").map_or_else(lambda: 2 * k, len) == 3
    assert Nothing().map_or_else(lambda: 2 * k, len) == 42


def test_map_does_not_touch_source() -> None:
    src = Some(3)
    mapped = src.map(lambda x: x + 1)
    mapped.insert(100)
    assert src == Some(3)


def test_inspect() -> None:
    seen: list[int] = []
    assert Some(5).inspect(seen.append) == Some(5)
    assert Nothing().inspect(seen.append) == Nothing()
    assert seen == [5]


def test_filter() -> None:
    is_even: Callable[[int], bool] = lambda n: n % 2 == 0
    assert Nothing().filter(is_even) == Nothing()
    assert Some(3).filter(is_even) == Nothing()
    assert Some(4).filter(is_even) == Some(4)


def test_and() -> None:
    assert Some(2).and_(Nothing()) == Nothing()
    assert Nothing().and_(Some("foo")) == Nothing()
    assert Some(2).and_(Some("foo")) == Some("foo")
    assert Nothing().and_(Nothing()) == Nothing()


def test_or() -> None:
    assert Some(2).or_(Nothing()) == Some(2)
    assert Nothing().or_(Some(100)) == Some(100)
    assert Some(2).or_(Some(100)) == Some(2)
    assert Nothing().or_(Nothing()) == Nothing()


def test_or_returns_fresh_option() -> None:
    src = Some(2)
    out = src.or_(Nothing())
    out.take()
    assert src == Some(2)


def test_or_else() -> None:
    calls: list[str] = []

    def vikings() -> Option[str]:
        calls.append("vikings")
        return Some("vikings")

    assert Some("barbarians").or_else(vikings) == Some("barbarians")
    assert calls == []
    assert Nothing().or_else(vikings) == Some("vikings")
    assert Nothing().or_else(Nothing) == Nothing()


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        (Some(1), Nothing(), Some(1)),
        (Nothing(), Some(2), Some(2)),
        (Some(1), Some(2), Nothing()),
        (Nothing(), Nothing(), Nothing()),
    ],
)
def test_xor(left: Option[int], right: Option[int], expected: Option[int]) -> None:
    assert left.xor(right) == expected


def test_zip() -> None:
    assert Some(1).zip(Some("hi")) == Some((1, "hi"))
    assert Some(1).zip(Nothing()) == Nothing()
    assert Nothing().zip(Some("hi")) == Nothing()


def test_zip_with() -> None:
    point = lambda x, y: {"x": x, "y": y}
    assert Some(17.5).zip_with(Some(42.7), point) == Some({"x": 17.5, "y": 42.7})
    assert Some(17.5).zip_with(Nothing(), point) == Nothing()


def test_match() -> None:
    assert Some(3).match(some=lambda x: f"got {x}", nothing=lambda: "empty") == "got 3"
    assert Nothing().match(some=lambda x: f"got {x}", nothing=lambda: "empty") == "empty"


# ═════════════════════════════════════════════════════════════════════════════
# Flatten
# ═════════════════════════════════════════════════════════════════════════════


def test_flatten_one_level() -> None:
    assert Some(Some(6)).flatten() == Some(6)
    assert Some(Nothing()).flatten() == Nothing()
    assert Nothing().flatten() == Nothing()


def test_flatten_removes_only_one_level() -> None:
    nested = Some(Some(Some(6)))
    once = nested.flatten()
    assert isinstance(once.unwrap(), Option)
    assert once.unwrap() == Some(6)
    assert nested.flatten().flatten().unwrap() == 6


def test_flatten_non_nested_is_rewrap() -> None:
    src = Some(6)
    flat = src.flatten()
    assert flat == Some(6)
    flat.take()
    assert src == Some(6)


def test_flatten_does_not_alias_inner() -> None:
    inner = Some(1)
    flat = Some(inner).flatten()
    flat.insert(2)
    assert inner == Some(1)


# ═════════════════════════════════════════════════════════════════════════════
# In-place Mutation
# ═════════════════════════════════════════════════════════════════════════════


def test_insert_overwrites() -> None:
    opt: Option[int] = Nothing()
    assert opt.insert(1) == 1
    assert opt.unwrap() == 1
    assert opt.insert(2) == 2
    assert opt.unwrap() == 2


def test_get_or_insert_on_nothing() -> None:
    opt: Option[int] = Nothing()
    assert opt.get_or_insert(5) == 5
    assert opt == Some(5)


def test_get_or_insert_keeps_existing() -> None:
    opt = Some(5)
    assert opt.get_or_insert(9) == 5
    assert opt.unwrap() == 5


def test_get_or_insert_with() -> None:
    calls: list[str] = []

    def make() -> int:
        calls.append("made")
        return 5

    opt: Option[int] = Nothing()
    assert opt.get_or_insert_with(make) == 5
    assert opt.get_or_insert_with(make) == 5
    assert calls == ["made"]


def test_take() -> None:
    opt = Some(2)
    taken = opt.take()
    assert opt.is_none()
    assert taken.contains(2)

    empty: Option[int] = Nothing()
    assert empty.take() == Nothing()
    assert empty.is_none()


def test_replace() -> None:
    opt = Some(2)
    old = opt.replace(5)
    assert opt == Some(5)
    assert old == Some(2)

    empty: Option[int] = Nothing()
    old = empty.replace(3)
    assert empty == Some(3)
    assert old == Nothing()


def test_payload_is_shared_not_copied() -> None:
    payload: list[int] = []
    opt = Some(payload)
    opt.map(lambda xs: xs).unwrap().append(1)
    assert payload == [1]


# ═════════════════════════════════════════════════════════════════════════════
# Conversion to Result
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_or() -> None:
    assert Some("foo").ok_or(0) == Ok("foo")
    assert Nothing().ok_or(0) == Err(0)


def test_ok_or_else() -> None:
    calls: list[str] = []

    def make_err() -> int:
        calls.append("err")
        return 0

    assert Some("foo").ok_or_else(make_err) == Ok("foo")
    assert calls == []
    assert Nothing().ok_or_else(make_err) == Err(0)
    assert calls == ["err"]


def test_transpose() -> None:
    assert Some(Ok(5)).transpose() == Ok(Some(5))
    assert Some(Err("e")).transpose() == Err("e")
    assert Nothing().transpose() == Ok(Nothing())


def test_transpose_requires_result_payload() -> None:
    with pytest.raises(TypeError):
        Some(5).transpose()


# ═════════════════════════════════════════════════════════════════════════════
# Iteration & Dunder Methods
# ═════════════════════════════════════════════════════════════════════════════


def test_iteration() -> None:
    assert list(Some(4)) == [4]
    assert list(Nothing()) == []


def test_iter_is_restartable() -> None:
    opt = Some(4)
    assert list(opt.iter()) == [4]
    assert list(opt.iter()) == [4]
    assert next(opt.iter()) == 4


def test_truthiness() -> None:
    assert Some(0)
    assert Some(None)
    assert not Nothing()


def test_repr() -> None:
    assert repr(Some(5)) == "Some(5)"
    assert repr(Some("a")) == "Some('a')"
    assert repr(Nothing()) == "None"
    assert str(Some(Some(1))) == "Some(Some(1))"


def test_equality() -> None:
    assert Some(1) == Some(1)
    assert Some(1) != Some(2)
    assert Some(1) != Nothing()
    assert Nothing() == Nothing()
    assert Some(1) != 1


def test_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(Some(1))
