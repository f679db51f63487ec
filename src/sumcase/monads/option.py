"""Option type for values that may be absent.

An Option is a small owned cell: one slot that is either empty or holds a
single value. Most operations treat it as a value and return a fresh
Option; a handful (insert, take, replace, get_or_insert*) deliberately
mutate the receiver's slot, the classic "move the value out, leave a
hole" idiom.

- Functor: map
- Monad: and_then (bind)
- Alternatives: or_, or_else, xor
- Conversion to Result: ok_or, ok_or_else, transpose
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Callable,
    Final,
    Generic,
    TypeVar,
    cast,
)

from ..errors import panic

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .result import Result

T = TypeVar("T")  # Held value type
U = TypeVar("U")  # Mapped value type
R = TypeVar("R")  # zip_with output type
E = TypeVar("E")  # Error type for Result conversions


class _Empty:
    """Marker stored in the slot of an absent Option."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<empty>"


# Sentinel rather than Python's None, so Some(None) stays a present value
_EMPTY: Final = _Empty()


class Option(Generic[T]):
    """Zero or one value of type T.

    Examples:
        >>> Some(2).map(lambda x: x * 10).unwrap()
        20
        >>> Nothing().unwrap_or(7)
        7
        >>> opt = Some(3)
        >>> opt.take()
        Some(3)
        >>> opt.is_none()
        True

    Notes:
        - Uses __slots__, single payload slot
        - Combinators return a new Option and leave the receiver untouched
        - Payloads are never copied; a mutable payload is shared with the caller
    """

    __slots__ = ("_value",)

    def __init__(self, value: T | _Empty = _EMPTY) -> None:
        """Private constructor. Use Some() or Nothing() instead."""
        self._value = value

    @classmethod
    def from_nullable(cls, value: T | None) -> Option[T]:
        """Lift a Python nullable: None becomes Nothing, anything else Some."""
        return cls() if value is None else cls(value)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_some(self) -> bool:
        """Check if Option holds a value."""
        return self._value is not _EMPTY

    def is_none(self) -> bool:
        """Check if Option is empty."""
        return self._value is _EMPTY

    def is_some_and(self, predicate: Callable[[T], bool]) -> bool:
        """True if present and the held value satisfies predicate."""
        return self._value is not _EMPTY and predicate(cast(T, self._value))

    def contains(self, x: object) -> bool:
        """True if present and the held value compares equal to x."""
        return self._value is not _EMPTY and self._value == x

    # ─── Value Extraction ──────────────────────────────────────────────

    def expect(self, msg: str) -> T:
        """Extract held value. Panics with exactly msg if empty."""
        if self._value is _EMPTY:
            panic(msg)
        return cast(T, self._value)

    def unwrap(self) -> T:
        """Extract held value. Panics if empty."""
        return self.expect("called `Option.unwrap()` on a `None` value")

    def unwrap_or(self, default: T) -> T:
        """Extract held value or return default."""
        return default if self._value is _EMPTY else cast(T, self._value)

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Extract held value or compute one. f runs only when empty."""
        return f() if self._value is _EMPTY else cast(T, self._value)

    # ─── Functor Operations ──────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Option[U]:
        """Apply f to the held value, if any.

        Type signature: Option[T] -> (T -> U) -> Option[U]
        """
        if self._value is _EMPTY:
            return Option()
        return Option(f(cast(T, self._value)))

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """Fold to a plain value: f(value) if present, else default."""
        if self._value is _EMPTY:
            return default
        return f(cast(T, self._value))

    def map_or_else(self, default: Callable[[], U], f: Callable[[T], U]) -> U:
        """Fold to a plain value with a lazily computed default."""
        if self._value is _EMPTY:
            return default()
        return f(cast(T, self._value))

    def inspect(self, f: Callable[[T], None]) -> Option[T]:
        """Call f with the held value for side effects, return a copy."""
        if self._value is not _EMPTY:
            f(cast(T, self._value))
        return Option(self._value)

    # ─── Conversion to Result ────────────────────────────────────────

    def ok_or(self, error: E) -> Result[T, E]:
        """Some(v) -> Ok(v), Nothing -> Err(error)."""
        from .result import Err, Ok

        if self._value is _EMPTY:
            return Err(error)
        return Ok(cast(T, self._value))

    def ok_or_else(self, f: Callable[[], E]) -> Result[T, E]:
        """Some(v) -> Ok(v), Nothing -> Err(f()). f runs only when empty."""
        from .result import Err, Ok

        if self._value is _EMPTY:
            return Err(f())
        return Ok(cast(T, self._value))

    def transpose(self: Option[Result[U, E]]) -> Result[Option[U], E]:
        """Swap Option and Result layers.

        Option[Result[T, E]] -> Result[Option[T], E]:
            Nothing       -> Ok(Nothing)
            Some(Ok(v))   -> Ok(Some(v))
            Some(Err(e))  -> Err(e)

        Raises:
            TypeError: If the held value is not a Result
        """
        from .result import Err, Ok, Result

        if self._value is _EMPTY:
            return Ok(Option())
        inner = self._value
        if not isinstance(inner, Result):
            raise TypeError(f"transpose() needs Option[Result], got Some({inner!r})")
        if inner.is_ok():
            return Ok(Option(inner.unwrap()))
        return Err(inner.unwrap_err())

    # ─── Iteration ───────────────────────────────────────────────────

    def iter(self) -> Iterator[T]:
        """Fresh iterator over the held value (yields 0 or 1 element)."""
        return iter(self)

    def __iter__(self) -> Iterator[T]:
        if self._value is not _EMPTY:
            yield cast(T, self._value)

    # ─── Logical Combinators ─────────────────────────────────────────

    def and_(self, other: Option[U]) -> Option[U]:
        """Nothing if self is Nothing, otherwise other.

        Sequencing, not a logical AND of values: the held value is dropped.
        """
        if self._value is _EMPTY:
            return Option()
        return Option(other._value)

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Monadic bind (>>=): chain a computation that may produce nothing.

        Type signature: Option[T] -> (T -> Option[U]) -> Option[U]

        Example:
            >>> def half(n: int) -> Option[int]:
            ...     return Some(n // 2) if n % 2 == 0 else Nothing()
            >>> Some(8).and_then(half).and_then(half)
            Some(2)
            >>> Some(6).and_then(half).and_then(half)
            None
        """
        if self._value is _EMPTY:
            return Option()
        return f(cast(T, self._value))

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the held value only if predicate accepts it."""
        if self._value is _EMPTY or not predicate(cast(T, self._value)):
            return Option()
        return Option(self._value)

    def or_(self, other: Option[T]) -> Option[T]:
        """Self if present, otherwise other."""
        if self._value is not _EMPTY:
            return Option(self._value)
        return Option(other._value)

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """Self if present, otherwise f(). f runs only when empty."""
        if self._value is not _EMPTY:
            return Option(self._value)
        return f()

    def xor(self, other: Option[T]) -> Option[T]:
        """The one present Option of the two, else Nothing."""
        if self._value is not _EMPTY and other._value is _EMPTY:
            return Option(self._value)
        if self._value is _EMPTY and other._value is not _EMPTY:
            return Option(other._value)
        return Option()

    def zip(self, other: Option[U]) -> Option[tuple[T, U]]:
        """Some((v, w)) if both present, else Nothing."""
        if self._value is _EMPTY or other._value is _EMPTY:
            return Option()
        return Option((cast(T, self._value), cast(U, other._value)))

    def zip_with(self, other: Option[U], f: Callable[[T, U], R]) -> Option[R]:
        """Some(f(v, w)) if both present, else Nothing."""
        if self._value is _EMPTY or other._value is _EMPTY:
            return Option()
        return Option(f(cast(T, self._value), cast(U, other._value)))

    def flatten(self: Option[Option[U]]) -> Option[U]:
        """Remove one level of nesting.

        Some(Some(v)) -> Some(v), Some(Nothing) -> Nothing, Nothing -> Nothing.
        A non-Option payload is re-wrapped as is, so chains of
        flatten().flatten() are always safe.
        """
        inner = self._value
        if isinstance(inner, Option):
            return Option(inner._value)
        return Option(inner)

    # ─── In-place Mutation ───────────────────────────────────────────

    def insert(self, value: T) -> T:
        """Overwrite the slot with value and return it. Mutates self."""
        self._value = value
        return value

    def get_or_insert(self, value: T) -> T:
        """Insert value if empty, then return the held value."""
        if self._value is _EMPTY:
            return self.insert(value)
        return cast(T, self._value)

    def get_or_insert_with(self, f: Callable[[], T]) -> T:
        """Insert f() if empty, then return the held value."""
        if self._value is _EMPTY:
            return self.insert(f())
        return cast(T, self._value)

    def take(self) -> Option[T]:
        """Move the value out, leaving Nothing in self.

        Example:
            >>> opt = Some(2)
            >>> taken = opt.take()
            >>> (opt, taken)
            (None, Some(2))
        """
        previous = Option(self._value)
        self._value = _EMPTY
        return previous

    def replace(self, value: T) -> Option[T]:
        """Put value in the slot and return the previous state."""
        previous = Option(self._value)
        self._value = value
        return previous

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, some: Callable[[T], U], nothing: Callable[[], U]) -> U:
        """Exhaustive case analysis over both variants."""
        if self._value is _EMPTY:
            return nothing()
        return some(cast(T, self._value))

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        """Truthy iff present, regardless of the held value."""
        return self._value is not _EMPTY

    def __repr__(self) -> str:
        if self._value is _EMPTY:
            return "None"
        return f"Some({self._value!r})"

    def __str__(self) -> str:
        return repr(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if self._value is _EMPTY or other._value is _EMPTY:
            return self._value is other._value
        return bool(self._value == other._value)

    # Mutable slot
    __hash__ = None  # type: ignore[assignment]


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Some(value: T) -> Option[T]:  # noqa: N802
    """Construct a present Option.

    Type signature: T -> Option[T]
    """
    return Option(value)


def Nothing() -> Option[T]:  # noqa: N802
    """Construct an empty Option (rendered as ``None``).

    Type signature: () -> Option[T]
    """
    return Option()
