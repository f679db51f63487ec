"""Option and Result types with their full combinator algebra.

Provides:
- Option[T]: zero or one value, with a small in-place mutation API
- Result[T, E]: success or failure, immutable once built
- Conversions between the two (ok_or, ok, err, transpose)
- resultify: the one bridge from raised exceptions to Err values

Example:
    >>> from sumcase.monads import Result, Ok, Err
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return Err("division by zero")
    ...     return Ok(a / b)
    >>>
    >>> result = (
    ...     divide(10, 2)
    ...     .map(lambda x: x * 2)
    ...     .and_then(lambda x: Ok(x + 1))
    ... )
    >>> assert result.unwrap() == 11.0
"""

# option must load before result: result imports it at module level
from .option import Nothing, Option, Some
from .result import (
    Err,
    Ok,
    Result,
    collect_results,
    sequence,
    traverse,
)
from .adapter import resultify, try_result

__all__ = [
    # Core types
    "Option",
    "Some",
    "Nothing",
    "Result",
    "Ok",
    "Err",
    # Exception bridge
    "resultify",
    "try_result",
    # Collection operations
    "sequence",
    "traverse",
    "collect_results",
]
