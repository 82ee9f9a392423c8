"""Type conversion registry and protocols.

This module defines the core abstractions for anyfuncs' value conversion
system. Adapters use it twice: once at adaptation time, to decide whether a
declared type can be converted to a required type at all, and once per call,
to convert the dynamic argument or result.

Key concepts:
    - Converter: Transforms a value from one type to another
    - ConverterFactory: Creates converters for specific type pairs
    - ConverterRegistry: Resolves the appropriate converter for a type pair

The registry is queried in order, returning the first matching converter.
Factories can recursively query the registry to handle nested types (e.g.,
list[int] needs a converter for the element type).
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

from anyfuncs.conversion.exceptions import NoConverterFoundError
from anyfuncs.utils.types.annotations import is_dynamic

_I = TypeVar("_I", contravariant=True)
_O = TypeVar("_O", covariant=True)


@runtime_checkable
class Converter(Protocol[_I, _O]):
    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        """Check if this converter can handle the given type pair.

        Args:
            source_tp: The source type.
            target_tp: The target type.

        Returns:
            True if this converter can convert from source_tp to target_tp.
        """
        ...

    def convert(self, source: _I) -> _O:
        """Convert a value from source type to target type.

        Args:
            source: The value to convert.

        Returns:
            The converted value.

        Raises:
            ConversionError: If the value cannot be converted.
        """
        ...


@runtime_checkable
class ConverterFactory(Protocol[_I, _O]):
    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        """Check if this factory can create a converter for the given type pair.

        Args:
            source_tp: The source type.
            target_tp: The target type.

        Returns:
            True if this factory can create a converter for this type pair.
        """
        ...

    def converter(
        self, source_tp: Any, target_tp: Any, registry: "ConverterRegistry"
    ) -> Converter[_I, _O] | None:
        """Create a converter for the given type pair.

        Args:
            source_tp: The source type.
            target_tp: The target type.
            registry: The converter registry for resolving nested types.

        Returns:
            A Converter that can handle the type pair, or None if the pair
            turns out not to be convertible.
        """
        ...


#: A registry entry can be either a direct Converter or a ConverterFactory
ConverterRegistryEntry = ConverterFactory[Any, Any] | Converter[Any, Any]


class ConverterRegistry:
    """Registry that resolves converters for type pairs.

    The registry holds a sequence of converters and factories. When resolving
    a type pair, it queries each entry in order and returns the first one
    that matches and successfully produces a converter.

    Factories can recursively query this registry to resolve nested types,
    enabling conversion of container types like list[int] or dict[str, float].

    Attributes:
        _converters: Ordered sequence of converters and factories to query.
    """

    def __init__(self, *converters: ConverterRegistryEntry) -> None:
        self._converters = converters

    def resolve(self, source_tp: Any, target_tp: Any) -> Converter[Any, Any] | None:
        """Find a converter for the given type pair.

        Iterates through registered converters/factories in order, returning
        the first one that matches and produces a non-None converter.

        Args:
            source_tp: The source type annotation.
            target_tp: The target type annotation.

        Returns:
            A Converter if one is found, None otherwise.
        """
        return next(
            (
                converter
                for entry in self._converters
                if entry.matches(source_tp, target_tp)
                and (
                    converter := (
                        entry
                        if isinstance(entry, Converter)
                        else entry.converter(source_tp, target_tp, self)
                    )
                )
            ),
            None,
        )

    def convertible(self, source_tp: Any, target_tp: Any) -> bool:
        """Check whether values declared as source_tp can be converted to target_tp."""
        return self.resolve(source_tp, target_tp) is not None

    def convert(self, value: Any, target_tp: Any) -> Any:
        """Convert a runtime value to target_tp.

        The converter is resolved from the value's runtime type. Targets that
        admit every value (``Any``, ``object``) pass the value through.

        Args:
            value: The value to convert.
            target_tp: The type annotation to convert to.

        Returns:
            The converted value.

        Raises:
            NoConverterFoundError: If the value's type has no route to target_tp.
            ConversionError: If the resolved converter rejects the value.
        """
        if is_dynamic(target_tp):
            return value
        # A bare object() carries no type to convert from
        if is_dynamic(type(value)):
            raise NoConverterFoundError(value, target_tp)
        converter = self.resolve(type(value), target_tp)
        if converter is None:
            raise NoConverterFoundError(value, target_tp)
        return converter.convert(value)

    def __iter__(self):
        return iter(self._converters)
