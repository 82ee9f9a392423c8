"""Converter for values declared as ``Any``.

Nothing is known about a value declared as ``Any`` (or ``object``) until it
exists, so resolution is deferred: the converter resolves from the value's
runtime type each time it converts. This is what makes an unannotated result
convertible to a concrete type, and a bare ``list`` convertible to
``list[int]`` element by element.

The factory is registered last: every more specific route for a declared
type is tried first.
"""

from typing import Any

from anyfuncs.conversion.registry import Converter, ConverterFactory, ConverterRegistry
from anyfuncs.utils.types.annotations import is_dynamic


class DynamicConverter(Converter[Any, Any]):
    """Converter that resolves by the runtime type of each value.

    Attributes:
        _target_tp: The target type annotation.
        _registry: The registry to resolve against.
    """

    def __init__(self, target_tp: Any, registry: ConverterRegistry) -> None:
        self._target_tp = target_tp
        self._registry = registry

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        return is_dynamic(source_tp)

    def convert(self, source: Any) -> Any:
        return self._registry.convert(source, self._target_tp)


class DynamicConverterFactory(ConverterFactory[Any, Any]):
    """Factory that creates DynamicConverters for ``Any`` sources."""

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        return is_dynamic(source_tp) and not is_dynamic(target_tp)

    def converter(
        self, source_tp: Any, target_tp: Any, registry: ConverterRegistry
    ) -> Converter[Any, Any] | None:
        return DynamicConverter(target_tp, registry)
