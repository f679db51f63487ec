"""sumcase - Option and Result types for Python.

Represent "a value that might be absent" or "an operation that might fail
with a typed error" as composable values instead of None checks and
exceptions used for control flow.

Quick Start:
    >>> from sumcase import Some, Nothing, Ok, Err, resultify
    >>>
    >>> Some(4).filter(lambda x: x % 2 == 0).map(lambda x: x // 2)
    Some(2)
    >>> Nothing().ok_or("missing")
    Err('missing')
    >>> Ok(2).and_then(lambda x: Ok(x * x)).and_then(lambda x: Ok(x * x)).unwrap()
    16

Bridging exceptions:
    >>> safe_int = resultify(lambda s: int(s))
    >>> safe_int("6")
    Ok(6)
    >>> safe_int("six").is_err()
    True

Panics:
    >>> from sumcase import Panic
    >>> try:
    ...     Nothing().expect("config missing")
    ... except Panic as p:
    ...     p.message
    'config missing'

Configuration (environment, SUMCASE_ prefix):
    SUMCASE_LOG_LEVEL, SUMCASE_LOG_FORMAT, SUMCASE_ADAPTER_LOG_CAPTURED, ...
"""

__version__ = "0.1.0"

from .errors import Panic, panic
from .foundation import SumcaseSettings, clear_settings_cache, get_settings
from .monads import (
    Err,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
    collect_results,
    resultify,
    sequence,
    traverse,
    try_result,
)
from .observability import configure_logging, get_logger

__all__ = [
    "__version__",
    # Types
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
    # Panic contract
    "Panic",
    "panic",
    # Config & logging
    "SumcaseSettings",
    "get_settings",
    "clear_settings_cache",
    "configure_logging",
    "get_logger",
]
