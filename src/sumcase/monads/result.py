"""Result/Either monad for type-safe error handling.

Implements a discriminated union for success/failure with full monadic operations:
- Functor: map, map_err
- Applicative: apply
- Monad: and_then / flat_map (bind)
- Bifunctor: bimap
- Conversion to Option: ok, err, transpose
- Railway-oriented composition
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Callable,
    Generic,
    TypeVar,
    cast,
)

from ..errors import panic
from .option import Nothing, Option, Some

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

# Type variables for generic Result
T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type


class Result(Generic[T, E]):
    """Discriminated union representing success (Ok) or failure (Err).

    This is a sum type that enforces exhaustive error handling at the type level.
    Inspired by Rust's Result and Haskell's Either.

    Examples:
        >>> result: Result[int, str] = Ok(42)
        >>> result.map(lambda x: x * 2).unwrap()
        84

        >>> error: Result[int, str] = Err("failed")
        >>> error.map(lambda x: x * 2).unwrap_err()
        'failed'

        Railway-oriented programming:
        >>> def validate_positive(x: int) -> Result[int, str]:
        ...     return Ok(x) if x > 0 else Err("must be positive")
        >>>
        >>> result = (
        ...     Ok(5)
        ...     .and_then(validate_positive)
        ...     .map(lambda x: x * 2)
        ... )
        >>> assert result.unwrap() == 10

    Notes:
        - Uses __slots__ for zero overhead
        - Immutable once built; combinators may return an existing Result
        - Pattern matching via is_ok()/is_err() + match()
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        """Private constructor. Use Ok() or Err() instead."""
        self._value: T | E = value
        self._is_ok: bool = is_ok

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_ok(self) -> bool:
        """Check if Result is Ok variant."""
        return self._is_ok

    def is_err(self) -> bool:
        """Check if Result is Err variant."""
        return not self._is_ok

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """True if Ok and the value satisfies predicate."""
        return self._is_ok and predicate(cast(T, self._value))

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """True if Err and the error satisfies predicate."""
        return not self._is_ok and predicate(cast(E, self._value))

    def contains(self, x: object) -> bool:
        """True if Ok and the value compares equal to x."""
        return self._is_ok and self._value == x

    def contains_err(self, x: object) -> bool:
        """True if Err and the error compares equal to x."""
        return not self._is_ok and self._value == x

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value, panic on Err.

        Raises:
            Panic: If Result is Err, message embeds the error
        """
        if self._is_ok:
            return cast(T, self._value)
        panic(f"called `Result.unwrap()` on an `Err` value: {self._value}")

    def unwrap_err(self) -> E:
        """Extract Err value, panic on Ok.

        Raises:
            Panic: If Result is Ok, message embeds the value
        """
        if not self._is_ok:
            return cast(E, self._value)
        panic(f"called `Result.unwrap_err()` on an `Ok` value: {self._value}")

    def unwrap_or(self, default: T) -> T:
        """Extract Ok value or return default."""
        return cast(T, self._value) if self._is_ok else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract Ok value or compute from error."""
        return cast(T, self._value) if self._is_ok else f(cast(E, self._value))

    def expect(self, msg: str) -> T:
        """Extract Ok value with custom panic message.

        Raises:
            Panic: If Result is Err, with message "{msg}: {error}"
        """
        if self._is_ok:
            return cast(T, self._value)
        panic(f"{msg}: {self._value}")

    def expect_err(self, msg: str) -> E:
        """Extract Err value with custom panic message.

        Raises:
            Panic: If Result is Ok, with message "{msg}: {value}"
        """
        if not self._is_ok:
            return cast(E, self._value)
        panic(f"{msg}: {self._value}")

    # ─────────────────────────────────────────────────────────────────
    # Functor Operations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Map function over Ok value (Functor).

        Applies f only if Ok, preserves Err unchanged.

        Type signature: Result[T, E] -> (T -> U) -> Result[U, E]
        """
        if self._is_ok:
            return Ok(f(cast(T, self._value)))
        return Err(cast(E, self._value))

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Map function over Err value (Error Functor).

        Useful for transforming error types while preserving Ok values.

        Type signature: Result[T, E] -> (E -> F) -> Result[T, F]
        """
        if not self._is_ok:
            return Err(f(cast(E, self._value)))
        return Ok(cast(T, self._value))

    def map_or(self, default: U, f: Callable[[T], U]) -> U:
        """Fold to a plain value: f(value) if Ok, else default."""
        if self._is_ok:
            return f(cast(T, self._value))
        return default

    def map_or_else(self, default: Callable[[E], U], f: Callable[[T], U]) -> U:
        """Fold to a plain value; the fallback receives the error."""
        if self._is_ok:
            return f(cast(T, self._value))
        return default(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Bifunctor Operations
    # ─────────────────────────────────────────────────────────────────

    def bimap(self, ok_fn: Callable[[T], U], err_fn: Callable[[E], F]) -> Result[U, F]:
        """Map both Ok and Err values (Bifunctor).

        Type signature: Result[T, E] -> (T -> U, E -> F) -> Result[U, F]
        """
        if self._is_ok:
            return Ok(ok_fn(cast(T, self._value)))
        return Err(err_fn(cast(E, self._value)))

    # ─────────────────────────────────────────────────────────────────
    # Monad Operations
    # ─────────────────────────────────────────────────────────────────

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind (>>=) - chain operations that can fail.

        This is the key operation for railway-oriented programming.
        Short-circuits on the first Err; f is never called on Err.

        Type signature: Result[T, E] -> (T -> Result[U, E]) -> Result[U, E]

        Example:
            >>> def parse_int(s: str) -> Result[int, str]:
            ...     try:
            ...         return Ok(int(s))
            ...     except ValueError:
            ...         return Err(f"invalid int: {s}")
            >>>
            >>> def validate_positive(n: int) -> Result[int, str]:
            ...     return Ok(n) if n > 0 else Err("must be positive")
            >>>
            >>> result = (
            ...     Ok("42")
            ...     .and_then(parse_int)
            ...     .and_then(validate_positive)
            ... )
            >>> assert result.unwrap() == 42
        """
        if self._is_ok:
            return f(cast(T, self._value))
        return Err(cast(E, self._value))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Alias for and_then."""
        return self.and_then(f)

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Chain alternative on Err.

        If Err, applies f to transform/recover. If Ok, passes through.

        Type signature: Result[T, E] -> (E -> Result[T, F]) -> Result[T, F]
        """
        if not self._is_ok:
            return f(cast(E, self._value))
        return Ok(cast(T, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Applicative Operations
    # ─────────────────────────────────────────────────────────────────

    def apply(self, f_result: Result[Callable[[T], U], E]) -> Result[U, E]:
        """Apply wrapped function to wrapped value (Applicative).

        Type signature: Result[T, E] -> Result[T -> U, E] -> Result[U, E]
        """
        if f_result.is_ok() and self._is_ok:
            fn = f_result.unwrap()
            return Ok(fn(cast(T, self._value)))
        if f_result.is_err():
            return Err(f_result.unwrap_err())
        return Err(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Logical Combinators
    # ─────────────────────────────────────────────────────────────────

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        """Return other if self is Ok, otherwise return self's Err.

        Short-circuit AND - useful for sequencing.
        """
        return other if self._is_ok else Err(cast(E, self._value))

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        """Return self if Ok, otherwise return other.

        Short-circuit OR - first success wins.
        """
        return Ok(cast(T, self._value)) if self._is_ok else other

    # ─────────────────────────────────────────────────────────────────
    # Inspection & Utilities
    # ─────────────────────────────────────────────────────────────────

    def ok(self) -> Option[T]:
        """Project to Option: Some(T) if Ok, Nothing if Err."""
        return Some(cast(T, self._value)) if self._is_ok else Nothing()

    def err(self) -> Option[E]:
        """Project to Option: Some(E) if Err, Nothing if Ok."""
        return Some(cast(E, self._value)) if not self._is_ok else Nothing()

    def inspect(self, f: Callable[[T], None]) -> Result[T, E]:
        """Call function with Ok value for side effects, return self."""
        if self._is_ok:
            f(cast(T, self._value))
        return self

    def inspect_err(self, f: Callable[[E], None]) -> Result[T, E]:
        """Call function with Err value for side effects, return self."""
        if not self._is_ok:
            f(cast(E, self._value))
        return self

    def iter(self) -> Iterator[T]:
        """Fresh iterator over the Ok value (yields 0 or 1 element)."""
        return iter(self)

    # ─────────────────────────────────────────────────────────────────
    # Pattern Matching
    # ─────────────────────────────────────────────────────────────────

    def match(
        self,
        *,
        ok: Callable[[T], U],
        err: Callable[[E], U],
    ) -> U:
        """Pattern match on Result variants.

        Exhaustive case analysis - forces handling both cases.

        Example:
            >>> result = Ok(42)
            >>> output = result.match(
            ...     ok=lambda x: f"success: {x}",
            ...     err=lambda e: f"failed: {e}"
            ... )
            >>> assert output == "success: 42"
        """
        if self._is_ok:
            return ok(cast(T, self._value))
        return err(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def to_tuple(self) -> tuple[T | None, E | None]:
        """Convert to (ok_value, err_value) tuple."""
        if self._is_ok:
            return (cast(T, self._value), None)
        return (None, cast(E, self._value))

    def transpose(self: Result[Option[U], E]) -> Option[Result[U, E]]:
        """Swap Result and Option layers.

        Result[Option[T], E] -> Option[Result[T, E]]:
            Ok(Nothing)  -> Nothing
            Ok(Some(v))  -> Some(Ok(v))
            Err(e)       -> Some(Err(e))

        Raises:
            TypeError: If an Ok value is not an Option
        """
        if not self._is_ok:
            return Some(Err(cast(E, self._value)))
        inner = self._value
        if not isinstance(inner, Option):
            raise TypeError(f"transpose() needs Result[Option], got Ok({inner!r})")
        if inner.is_none():
            return Nothing()
        return Some(Ok(inner.unwrap()))

    def flatten(self: Result[Result[T, E], E]) -> Result[T, E]:
        """Flatten nested Result (join in monad terms).

        Result[Result[T, E], E] -> Result[T, E]

        Removes one level only. An Ok holding a non-Result value is
        returned as an equal re-wrap, so flatten() is always safe to chain.
        """
        if self._is_ok and isinstance(self._value, Result):
            return cast(Result[T, E], self._value)
        return Result(self._value, self._is_ok)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """Enable truthiness checking (True if Ok)."""
        return self._is_ok

    def __repr__(self) -> str:
        """Debug representation."""
        variant = "Ok" if self._is_ok else "Err"
        return f"{variant}({self._value!r})"

    def __str__(self) -> str:
        """String representation."""
        return repr(self)

    def __eq__(self, other: object) -> bool:
        """Structural equality."""
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        """Make Result hashable."""
        return hash((self._is_ok, self._value))

    def __iter__(self) -> Iterator[T]:
        """Iterate over Ok value (yields 0 or 1 element).

        Enables use in for loops and comprehensions.
        """
        if self._is_ok:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Ok(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Ok variant (success).

    Type signature: T -> Result[T, E]
    """
    return Result(value, is_ok=True)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Err variant (failure).

    Type signature: E -> Result[T, E]
    """
    return Result(error, is_ok=False)


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Convert Results to a Result of list.

    Fails fast on first Err, returns Ok with all values if all succeed.

    Example:
        >>> sequence([Ok(1), Ok(2), Ok(3)]).unwrap()
        [1, 2, 3]

        >>> sequence([Ok(1), Err("fail"), Ok(3)]).unwrap_err()
        'fail'
    """
    values: list[T] = []
    for result in results:
        if result.is_err():
            return Err(result.unwrap_err())
        values.append(result.unwrap())
    return Ok(values)


def traverse(
    items: Iterable[T],
    f: Callable[[T], Result[U, E]],
) -> Result[list[U], E]:
    """Map a Result-returning function over items, collect into Result of list.

    Stops calling f at the first Err.

    Example:
        >>> def parse_int(s: str) -> Result[int, str]:
        ...     return Ok(int(s)) if s.isdigit() else Err(f"invalid: {s}")
        >>> traverse(["1", "2", "3"], parse_int).unwrap()
        [1, 2, 3]
        >>> traverse(["1", "bad", "3"], parse_int).unwrap_err()
        'invalid: bad'
    """
    return sequence(f(item) for item in items)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating all errors if any fail.

    Unlike sequence, this doesn't fail fast - it collects ALL errors.

    Example:
        >>> collect_results([Ok(1), Err("e1"), Ok(3), Err("e2")]).unwrap_err()
        ['e1', 'e2']
    """
    values: list[T] = []
    errors: list[E] = []

    for result in results:
        if result.is_ok():
            values.append(result.unwrap())
        else:
            errors.append(result.unwrap_err())

    return Ok(values) if not errors else Err(errors)
