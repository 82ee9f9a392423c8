"""Lookups in dynamic sequences and mappings with typed fallbacks.

Containers are assumed to be homogeneous: the element (or value) type is
taken from the first element. A default supplied by the caller is converted
to that type; without a default, a missing element yields the zero value of
that type (``0``, ``""``, ``[]``...), or None for an empty container.
"""

import operator
from collections.abc import Mapping, Sequence
from typing import Any

from anyfuncs.conversion import default_registry
from anyfuncs.conversion.registry import ConverterRegistry
from anyfuncs.funcs.exceptions import IndexOfError, ValueOfKeyError
from anyfuncs.funcs.values import equal_to, zero_value
from anyfuncs.utils.collections import first_type
from anyfuncs.utils.sentinels import UNSET

INDEX_OF_ERROR_MSG = "seq must be a sequence"
VALUE_OF_KEY_ERROR_MSG = "mapping must be a mapping"

_MISSING = object()


def index_of(
    seq: Any, index: int, default: Any = UNSET, *, registry: ConverterRegistry = default_registry
) -> Any:
    """Element at ``index``, or the default when the index is out of bounds.

    Negative indexes are out of bounds.

    Args:
        seq: A sequence other than ``str``.
        index: The position to read.
        default: Returned for out of bounds indexes, converted to the element type.
        registry: Registry used to convert the default.

    Raises:
        IndexOfError: If ``seq`` is not a sequence.
        ConversionError: If the default cannot be converted to the element type.

    Example:
        >>> index_of([1, 2], 5), index_of([1, 2], 5, 7.0), index_of([1, 2], 1)
        (0, 7, 2)
    """
    if not isinstance(seq, Sequence) or isinstance(seq, str):
        raise IndexOfError(INDEX_OF_ERROR_MSG)
    index = operator.index(index)

    element_tp = first_type(seq)
    if default is not UNSET and element_tp is not None:
        default = registry.convert(default, element_tp)

    if 0 <= index < len(seq):
        return seq[index]
    if default is not UNSET:
        return default
    return zero_value(element_tp)


def value_of_key(
    mapping: Any, key: Any, default: Any = UNSET, *, registry: ConverterRegistry = default_registry
) -> Any:
    """Value stored under ``key``, or the default when there is none.

    A key that is not found as given is compared with ``equal_to(key)``
    against every key, so mapping keys are converted to the type of ``key``:
    ``value_of_key({1: "a"}, 1.0)`` finds ``"a"``, ``value_of_key({1: "a"}, 1.5)``
    does not.

    Raises:
        ValueOfKeyError: If ``mapping`` is not a mapping.
        ConversionError: If the default cannot be converted to the value type.
    """
    if not isinstance(mapping, Mapping):
        raise ValueOfKeyError(VALUE_OF_KEY_ERROR_MSG)

    value_tp = first_type(mapping.values())
    if default is not UNSET and value_tp is not None:
        default = registry.convert(default, value_tp)

    if (found := _lookup(mapping, key, registry)) is not _MISSING:
        return found
    if default is not UNSET:
        return default
    return zero_value(value_tp)


def _lookup(mapping: Mapping[Any, Any], key: Any, registry: ConverterRegistry) -> Any:
    try:
        found = mapping.get(key, _MISSING)
    except TypeError:
        # Unhashable keys can only be found by comparison
        found = _MISSING
    if found is not _MISSING:
        return found

    matches = equal_to(key, registry=registry)
    return next((v for k, v in mapping.items() if matches(k)), _MISSING)
