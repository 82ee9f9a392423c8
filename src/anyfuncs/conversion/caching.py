"""Resolution caching for converter factories.

Adapters resolve a converter on every call, from the runtime type of the
argument to the declared parameter type. The set of type pairs seen by a
program is small, so factories are wrapped in CachingConverterFactory and
each pair is built once per registry.
"""

from typing import Any

from anyfuncs.conversion.registry import Converter, ConverterFactory, ConverterRegistry

_MISSING = object()


class CachingConverterFactory(ConverterFactory[Any, Any]):
    """Factory wrapper that memoizes the converters an inner factory builds.

    Results are keyed by ``(source_tp, target_tp, registry)``, since nested
    converters come from the registry the factory was queried through. A
    factory that declined a pair (returned None) is remembered too. Type
    annotations that cannot be hashed bypass the cache.
    """

    def __init__(self, inner: ConverterFactory[Any, Any]) -> None:
        self._inner = inner
        self._cache: dict[tuple[Any, Any, ConverterRegistry], Converter[Any, Any] | None] = {}

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        return self._inner.matches(source_tp, target_tp)

    def converter(
        self, source_tp: Any, target_tp: Any, registry: ConverterRegistry
    ) -> Converter[Any, Any] | None:
        key = (source_tp, target_tp, registry)
        try:
            cached = self._cache.get(key, _MISSING)
        except TypeError:
            return self._inner.converter(source_tp, target_tp, registry)
        if cached is not _MISSING:
            return cached
        converter = self._inner.converter(source_tp, target_tp, registry)
        self._cache[key] = converter
        return converter
