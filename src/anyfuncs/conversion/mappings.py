"""Converter for dictionary/mapping types.

This module handles conversion from any mapping to dict types, recursively
converting both keys and values using the converter registry. It supports
parameterized dict types like dict[str, int] and preserves the target dict type.

Example:
    Converting dict[str, float] to dict[str, int] would convert each value
    from float to integer while preserving the keys.
"""

from collections.abc import Mapping
from typing import Any, get_origin

from typing_extensions import is_typeddict

from anyfuncs.conversion.exceptions import ConversionError
from anyfuncs.conversion.registry import (
    Converter,
    ConverterFactory,
    ConverterRegistry,
)
from anyfuncs.utils.types.annotations import type_name, unwrap
from anyfuncs.utils.types.params import mapping_item_types


class MappingConverterFactory(ConverterFactory[Mapping, dict]):
    """Factory that creates converters for mapping-to-dict transformations.

    This factory matches when the source is a mapping type and the target is
    a dict type. It resolves converters for the key and value types
    separately, allowing nested type conversions. TypedDict targets are not
    handled.
    """

    class MappingConverter(Converter[Mapping, dict]):
        """Converter that transforms mapping contents by converting keys and values.

        Attributes:
            _target: The target dict type to construct.
            _key_converter: Converter for transforming keys.
            _value_converter: Converter for transforming values.
        """

        def __init__(
            self,
            target: type[dict],
            key_converter: Converter[Any, Any],
            value_converter: Converter[Any, Any],
        ) -> None:
            self._target = target
            self._key_converter = key_converter
            self._value_converter = value_converter

        def matches(self, source_tp: Any, target_tp: Any) -> bool:
            return True

        def convert(self, source: Mapping) -> dict:
            items = [
                (self._key_converter.convert(k), self._value_converter.convert(v))
                for k, v in source.items()
            ]
            try:
                return self._target(items)
            except TypeError as e:
                # Converted keys that are unhashable
                raise ConversionError(
                    f"Cannot convert {type(source).__name__} "
                    f"to type {type_name(self._target)}: {e}",
                    source=source,
                    target_type=self._target,
                ) from e

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        source_tp = unwrap(source_tp)
        target_tp = unwrap(target_tp)
        source_origin = get_origin(source_tp) or source_tp
        target_origin = get_origin(target_tp) or target_tp

        return (
            isinstance(source_origin, type)
            and not is_typeddict(source_tp)
            and issubclass(source_origin, Mapping)
            and target_origin is dict
            and not is_typeddict(target_tp)
        )

    def converter(
        self, source_tp: Any, target_tp: Any, registry: ConverterRegistry
    ) -> Converter[Any, Any] | None:
        source_key, source_val = mapping_item_types(unwrap(source_tp))
        target_key, target_val = mapping_item_types(unwrap(target_tp))

        key_converter = registry.resolve(source_key, target_key)
        value_converter = registry.resolve(source_val, target_val)

        return (
            self.MappingConverter(dict, key_converter, value_converter)
            if key_converter and value_converter
            else None
        )
