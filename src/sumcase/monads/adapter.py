"""Bridge from raised exceptions to Result values.

resultify is the single place in sumcase that catches exceptions. Every
other operation reports failure as an Err or Nothing value and never
raises, except the expect/unwrap family, which panics.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Callable, ParamSpec, TypeVar

from pydantic import ValidationError

from ..foundation.config import get_settings
from .result import Err, Ok, Result

P = ParamSpec("P")
T = TypeVar("T")

logger = logging.getLogger("sumcase.adapter")


def _log_captured(fn: Callable[..., object], exc: Exception) -> None:
    try:
        cfg = get_settings().adapter
    except ValidationError as e:
        # Bad SUMCASE_ADAPTER_* values skip logging only
        logger.warning(f"invalid adapter settings, captured exception not logged: {e}")
        return
    if not cfg.log_captured:
        return
    level = logging.getLevelName(cfg.log_level)
    if logger.isEnabledFor(level):
        name = getattr(fn, "__qualname__", repr(fn))
        logger.log(
            level,
            f"[{name}] captured {type(exc).__name__} as Err: {exc}",
            exc_info=exc if cfg.include_traceback else None,
        )


def resultify(fn: Callable[P, T]) -> Callable[P, Result[T, Exception]]:
    """Lift a raising callable into one that returns a Result.

    A normal return becomes Ok(value). Any Exception raised becomes
    Err(exc), the very exception object, neither wrapped nor filtered.
    Panic is an Exception too, so a panic inside fn also comes back as
    Err(panic). KeyboardInterrupt and SystemExit are not Exceptions and
    propagate.

    Usable as a decorator:
        >>> @resultify
        ... def parse(s: str) -> int:
        ...     return int(s)
        >>> parse("6")
        Ok(6)
        >>> parse("x").is_err()
        True
    """

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        try:
            return Ok(fn(*args, **kwargs))
        except Exception as e:
            _log_captured(fn, e)
            return Err(e)

    return wrapper


def try_result(fn: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
    """Call fn once, returning Ok(value) or Err(exc).

    Equivalent to ``resultify(fn)(*args, **kwargs)``.

    Example:
        >>> try_result(lambda s: int(s), "12")
        Ok(12)
    """
    return resultify(fn)(*args, **kwargs)
