"""Converters between scalar categories: numbers and binary data.

Numbers follow the numeric tower, with widening and narrowing both allowed:

    - int, float, Fraction and Decimal convert to each other and to complex
      (Fraction -> Decimal excepted, which Decimal itself refuses)
    - complex converts only to complex
    - narrowing truncates, so 2.7 converts to int as 2
    - bool is not treated as a number; it reaches int targets only through
      the no-op rule, as a subclass of int

Binary data converts between bytes, bytearray and memoryview sources and
bytes or bytearray targets.

Text never converts to a number, nor a number to text.
"""

from decimal import Decimal
from enum import Enum, auto
from numbers import Complex, Integral, Rational, Real
from typing import Any

from anyfuncs.conversion.exceptions import ConversionError
from anyfuncs.conversion.registry import Converter, ConverterFactory, ConverterRegistry
from anyfuncs.utils.types.annotations import type_name, unwrap


class NumericKind(Enum):
    INTEGRAL = auto()
    RATIONAL = auto()
    REAL = auto()
    DECIMAL = auto()
    COMPLEX = auto()


_NON_COMPLEX = frozenset(
    {NumericKind.INTEGRAL, NumericKind.RATIONAL, NumericKind.REAL, NumericKind.DECIMAL}
)

#: Source kinds each target kind accepts
_ACCEPTED_SOURCES: dict[NumericKind, frozenset[NumericKind]] = {
    NumericKind.INTEGRAL: _NON_COMPLEX,
    NumericKind.RATIONAL: _NON_COMPLEX,
    NumericKind.REAL: _NON_COMPLEX,
    NumericKind.DECIMAL: _NON_COMPLEX - {NumericKind.RATIONAL},
    NumericKind.COMPLEX: _NON_COMPLEX | {NumericKind.COMPLEX},
}

BINARY_SOURCES = (bytes, bytearray, memoryview)
BINARY_TARGETS = (bytes, bytearray)


def numeric_kind(tp: Any) -> NumericKind | None:
    """Classify a type on the numeric tower, or None if it is not a number.

    Examples:
        >>> numeric_kind(int)
        <NumericKind.INTEGRAL: 1>
        >>> numeric_kind(bool) is None
        True
    """
    tp = unwrap(tp)
    if not isinstance(tp, type) or issubclass(tp, bool):
        return None
    if issubclass(tp, Decimal):
        return NumericKind.DECIMAL
    if issubclass(tp, Integral):
        return NumericKind.INTEGRAL
    if issubclass(tp, Rational):
        return NumericKind.RATIONAL
    if issubclass(tp, Real):
        return NumericKind.REAL
    if issubclass(tp, Complex):
        return NumericKind.COMPLEX
    return None


class ScalarConverter(Converter[Any, Any]):
    """Converter that calls a constructor on the source value.

    Constructor failures (``int(float("nan"))``, an IntEnum without the
    value) surface as ConversionError.

    Attributes:
        _target: The target type, called as the constructor.
    """

    def __init__(self, target: type) -> None:
        self._target = target

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        return True

    def convert(self, source: Any) -> Any:
        try:
            return self._target(source)
        except (TypeError, ValueError, ArithmeticError) as e:
            raise ConversionError(
                f"Cannot convert {source!r} to type {type_name(self._target)}: {e}",
                source=source,
                target_type=self._target,
            ) from e


class NumericConverterFactory(ConverterFactory[Any, Any]):
    """Factory that creates converters between numeric types."""

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        source_kind = numeric_kind(source_tp)
        target_kind = numeric_kind(target_tp)
        return (
            source_kind is not None
            and target_kind is not None
            and source_kind in _ACCEPTED_SOURCES[target_kind]
        )

    def converter(
        self, source_tp: Any, target_tp: Any, registry: ConverterRegistry
    ) -> Converter[Any, Any] | None:
        return ScalarConverter(unwrap(target_tp))


class BinaryConverterFactory(ConverterFactory[Any, Any]):
    """Factory that creates converters between binary data types."""

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        source_tp = unwrap(source_tp)
        target_tp = unwrap(target_tp)
        return (
            isinstance(source_tp, type)
            and isinstance(target_tp, type)
            and issubclass(source_tp, BINARY_SOURCES)
            and issubclass(target_tp, BINARY_TARGETS)
        )

    def converter(
        self, source_tp: Any, target_tp: Any, registry: ConverterRegistry
    ) -> Converter[Any, Any] | None:
        return ScalarConverter(unwrap(target_tp))
