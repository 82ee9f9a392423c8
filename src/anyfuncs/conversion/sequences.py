"""Converter for sequence types (list, tuple, set, frozenset).

This module handles conversion between sequence types, recursively converting
each element using the converter registry. It supports converting between
different sequence types (e.g., list to tuple) and parameterized types,
including fixed-length tuples.

Supported sequence types:
    - list
    - tuple (homogeneous ``tuple[X, ...]`` and fixed-length ``tuple[X, Y]``)
    - set
    - frozenset

Example:
    Converting list[str] to set[int] would convert each string element to
    an integer and collect the results into a set. A bare ``list`` source has
    element type Any, so each element is converted by its runtime type.
"""

from typing import Any, Sequence, get_args, get_origin

from anyfuncs.conversion.exceptions import ConversionError, TypeMismatchError
from anyfuncs.conversion.registry import Converter, ConverterFactory, ConverterRegistry
from anyfuncs.utils.types.annotations import type_name, unwrap
from anyfuncs.utils.types.params import element_type, fixed_tuple_params

#: Union of supported sequence types for conversion
KnownSequenceType = list | tuple | set | frozenset

#: Tuple of sequence type classes, extracted from KnownSequenceType for isinstance/issubclass checks
SEQUENCE_TYPES = get_args(KnownSequenceType)


def _get_element_type(tp: Any) -> Any:
    """Extract the element type from a parameterized sequence type.

    Args:
        tp: A sequence type annotation (e.g., list[int], tuple[str, ...]).

    Returns:
        The element type if found, otherwise Any.
    """
    origin = get_origin(tp) or tp
    for seq_type in SEQUENCE_TYPES:
        if issubclass(origin, seq_type):
            return element_type(tp, seq_type)
    return Any


class SequenceConverter(Converter[Sequence, KnownSequenceType]):
    """Converter that transforms sequence contents by converting each element.

    Attributes:
        _target: The target sequence type to construct.
        _inner: Converter for transforming individual elements.
    """

    def __init__(self, target: type[KnownSequenceType], inner: Converter[Any, Any]) -> None:
        self._target = target
        self._inner = inner

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        return True

    def convert(self, source: Sequence) -> Any:
        items = [self._inner.convert(it) for it in source]
        try:
            return self._target(items)
        except TypeError as e:
            # Unhashable elements for a set target
            raise ConversionError(
                f"Cannot convert {type(source).__name__} to type {type_name(self._target)}: {e}",
                source=source,
                target_type=self._target,
            ) from e


class TupleConverter(Converter[Sequence, tuple]):
    """Converter that builds a fixed-length tuple, converting each position.

    Attributes:
        _target_tp: The target tuple annotation (for error messages).
        _inners: One converter per target position.
    """

    def __init__(self, target_tp: Any, inners: tuple[Converter[Any, Any], ...]) -> None:
        self._target_tp = target_tp
        self._inners = inners

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        return True

    def convert(self, source: Sequence) -> tuple:
        if len(source) != len(self._inners):
            raise TypeMismatchError(
                source,
                self._target_tp,
                message=(
                    f"Expected {len(self._inners)} elements for {self._target_tp}, "
                    f"got {len(source)}"
                ),
            )
        return tuple(inner.convert(it) for inner, it in zip(self._inners, source, strict=True))


class SequenceConverterFactory(ConverterFactory[Sequence, KnownSequenceType]):
    """Factory that creates converters for sequence-to-sequence transformations.

    This factory matches when both source and target are known sequence types.
    It resolves a converter for the element type (or for each position of a
    fixed-length target tuple), allowing nested type conversions.
    """

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        source_tp = unwrap(source_tp)
        target_tp = unwrap(target_tp)
        source_origin = get_origin(source_tp) or source_tp
        target_origin = get_origin(target_tp) or target_tp

        return (
            isinstance(source_origin, type)
            and issubclass(source_origin, SEQUENCE_TYPES)
            and any(target_origin is it for it in SEQUENCE_TYPES)
        )

    def converter(
        self,
        source_tp: Any,
        target_tp: Any,
        registry: ConverterRegistry,
    ) -> Converter[Any, Any] | None:
        source_tp = unwrap(source_tp)
        target_tp = unwrap(target_tp)

        if (positions := fixed_tuple_params(target_tp)) is not None:
            return self._tuple_converter(source_tp, target_tp, positions, registry)

        target_origin = get_origin(target_tp) or target_tp
        target_elem = _get_element_type(target_tp)
        source_elem = _get_element_type(source_tp)

        inner_converter = registry.resolve(source_elem, target_elem)
        return (
            SequenceConverter(target_origin, inner_converter)
            if inner_converter is not None
            else None
        )

    def _tuple_converter(
        self,
        source_tp: Any,
        target_tp: Any,
        positions: tuple[Any, ...],
        registry: ConverterRegistry,
    ) -> Converter[Any, Any] | None:
        source_positions = fixed_tuple_params(source_tp)
        if source_positions is None:
            source_positions = (_get_element_type(source_tp),) * len(positions)
        elif len(source_positions) != len(positions):
            return None

        inners = tuple(
            registry.resolve(source_elem, target_elem)
            for source_elem, target_elem in zip(source_positions, positions, strict=True)
        )
        if any(inner is None for inner in inners):
            return None
        return TupleConverter(target_tp, inners)
