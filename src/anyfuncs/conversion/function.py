"""Function-based converter for custom type transformations.

This module provides a converter that wraps a user-supplied function to
perform one specific conversion the built-in converters refuse, such as
parsing text into numbers. It is registered ahead of the defaults in a custom
registry, which is then passed to the adapters.

Example::

    registry = ConverterRegistry(FunctionConverter(int, source_tp=str, target_tp=int), *default_registry)
    map_to(lambda n: n * 2, 0, registry=registry)("21")  # Returns 42
"""

from collections.abc import Callable
from typing import Any, TypeVar

from anyfuncs.conversion.exceptions import ConversionError
from anyfuncs.conversion.registry import Converter
from anyfuncs.utils.types.annotations import type_name, unwrap

_T = TypeVar("_T")
_R = TypeVar("_R")


class FunctionConverter(Converter[Any, Any]):
    """Converter that applies a custom function to transform values.

    This converter matches exactly one source/target type pair. Failures of
    the wrapped function with TypeError or ValueError surface as
    ConversionError, so equality predicates treat them as "not equal".

    Attributes:
        _fn: The conversion function to apply.
        _source_tp: The source type this converter handles.
        _target_tp: The target type this converter produces.
    """

    def __init__(self, fn: Callable[[_T], _R], *, source_tp: Any, target_tp: Any):
        self._fn = fn
        self._source_tp = unwrap(source_tp)
        self._target_tp = unwrap(target_tp)

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        return unwrap(source_tp) is self._source_tp and unwrap(target_tp) is self._target_tp

    def convert(self, source: Any) -> Any:
        try:
            return self._fn(source)
        except (TypeError, ValueError) as e:
            raise ConversionError(
                f"Cannot convert {source!r} to type {type_name(self._target_tp)}: {e}",
                source=source,
                target_type=self._target_tp,
            ) from e
