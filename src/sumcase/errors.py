"""Panic contract for the Option and Result types.

A panic is an unrecoverable programmer error, raised only by the
``expect``/``unwrap`` family when called on the wrong variant. It is kept
apart from the recoverable channel (``Err`` and ``Nothing``). Only
``resultify`` catches it, turning it into ``Err`` like any other exception.
"""

from __future__ import annotations

from typing import NoReturn


class Panic(RuntimeError):
    """Unrecoverable abort of the current operation.

    Attributes:
        message: Diagnostic string, reproducible for a given call site and payload
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def panic(message: str) -> NoReturn:
    """Abort with the given diagnostic.

    Raises:
        Panic: Always
    """
    raise Panic(message)
