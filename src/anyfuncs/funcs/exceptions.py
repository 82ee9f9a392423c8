"""Exceptions raised by the function adapters and helpers.

Conversion failures at call time are reported with the conversion layer's own
exceptions (see ``anyfuncs.conversion.exceptions``); the exceptions here cover
everything that goes wrong before a call, plus the faults callers raise
deliberately through the control helpers.
"""

from typing import Any


class AnyFuncsError(Exception):
    """Base exception for anyfuncs faults."""


class ShapeMismatchError(AnyFuncsError, TypeError):
    """Raised at adaptation time when a callable cannot take the required shape.

    Each adapter reports the same message for every kind of mismatch
    (arity, result count, result type), describing the shape it requires.
    """


class NilSampleError(AnyFuncsError, ValueError):
    """Raised when a sample value carries no concrete type to adapt toward."""


class IndexOfError(AnyFuncsError, TypeError):
    """Raised when ``index_of`` is given something other than a sequence."""


class ValueOfKeyError(AnyFuncsError, TypeError):
    """Raised when ``value_of_key`` is given something other than a mapping."""


class OrderingError(AnyFuncsError, TypeError):
    """Raised when two values do not share an ordered category."""


class PanicError(AnyFuncsError):
    """Fault raised on behalf of the caller by the control helpers.

    Attributes:
        error: The caller's error, when the fault was raised from one.
    """

    def __init__(self, message: str, error: Any = None) -> None:
        self.error = error
        super().__init__(message)
