"""Value inspection, equality and ordering helpers.

Nil values are ``None`` and dead weak references: a weak reference is a
typed handle whose referent can vanish, leaving a value that has a type but
refers to nothing. Nilable values are those that could be in that state, or
that play the role of references (callables, containers, iterators).

Equality predicates convert their argument to the type of the value they
were built with before comparing; arguments that cannot be converted are
simply not equal.
"""

import weakref
from collections.abc import (
    Callable,
    Iterator,
    Mapping,
    MutableMapping,
    MutableSequence,
    MutableSet,
    Sequence,
    Set,
)
from decimal import Decimal
from fractions import Fraction
from numbers import Real
from typing import Any

from anyfuncs.conversion import default_registry
from anyfuncs.conversion.exceptions import ConversionError
from anyfuncs.conversion.registry import ConverterRegistry
from anyfuncs.conversion.structs import struct_fields
from anyfuncs.funcs.exceptions import NilSampleError, OrderingError

#: Builtin types whose empty value stands in for a missing element
ZERO_VALUE_TYPES = frozenset(
    {bool, int, float, complex, Decimal, Fraction, str, bytes, bytearray}
    | {list, tuple, dict, set, frozenset}
)

#: Containers compared by identity in shallow equality
MUTABLE_CONTAINERS = (MutableSequence, MutableMapping, MutableSet)


def is_nil(value: Any) -> bool:
    """Check whether a value is ``None`` or a weak reference to a collected object."""
    return value is None or (isinstance(value, weakref.ref) and value() is None)


def is_nilable(value: Any) -> bool:
    """Check whether a value belongs to a category that can be nil."""
    if value is None or callable(value):
        return True
    if isinstance(value, Sequence):
        return not isinstance(value, str)
    return isinstance(value, (Mapping, Set, Iterator, weakref.ref))


def sample_type(sample: Any) -> type:
    """The concrete type a sample value stands for.

    Raises:
        NilSampleError: If the sample is nil or a bare ``object()``, which
            carries no type to adapt toward.
    """
    if is_nil(sample):
        raise NilSampleError("val cannot be nil")
    if type(sample) is object:
        raise NilSampleError("val cannot be an any-typed value")
    return type(sample)


def zero_value(tp: type | None) -> Any:
    """The empty value of a builtin value type, or None for any other type.

    Subclasses get the empty value of their builtin base, so no user code
    runs: ``zero_value(OrderedDict)`` is ``{}``.

    Example:
        >>> zero_value(int), zero_value(str), zero_value(list), zero_value(object)
        (0, '', [], None)
    """
    if not isinstance(tp, type):
        return None
    base = next((klass for klass in tp.__mro__ if klass in ZERO_VALUE_TYPES), None)
    return None if base is None else base()


def _shallow_equal(converted: Any, val: Any) -> bool:
    if isinstance(val, MUTABLE_CONTAINERS):
        return converted is val
    return bool(converted == val)


def _equality(
    val: Any, compare: Callable[[Any, Any], bool], registry: ConverterRegistry
) -> Callable[[Any], bool]:
    if val is None:

        def is_none(value: Any) -> bool:
            return value is None

        return is_none

    target = type(val)
    val_is_nil = is_nil(val)

    def equal(value: Any) -> bool:
        try:
            converted = registry.convert(value, target)
        except ConversionError:
            return False
        if val_is_nil or is_nil(value):
            return val_is_nil and is_nil(value)
        return compare(converted, val)

    return equal


def equal_to(val: Any, *, registry: ConverterRegistry = default_registry) -> Callable[[Any], bool]:
    """Predicate comparing its argument to ``val`` after converting it to ``val``'s type.

    Values compare with ``==``, except mutable containers (lists, dicts,
    sets), which compare by identity.

    Example:
        >>> is_one = equal_to(1)
        >>> is_one(1.0), is_one(2), is_one("1")
        (True, False, False)
    """
    return _equality(val, _shallow_equal, registry)


def deep_equal_to(
    val: Any, *, registry: ConverterRegistry = default_registry
) -> Callable[[Any], bool]:
    """Predicate comparing its argument to ``val`` structurally, see ``deep_equal``."""
    return _equality(val, deep_equal, registry)


def deep_equal(a: Any, b: Any) -> bool:
    """Recursive structural equality.

    Both values must have the same type. Mappings compare by keys and values,
    sequences element by element, sets with ``==``. Dataclasses and pydantic
    models compare field by field, other objects without their own ``__eq__``
    by their attributes. Self-referencing structures are handled.
    """
    return _deep_equal(a, b, set())


def _deep_equal(a: Any, b: Any, seen: set[tuple[int, int]]) -> bool:
    if a is b:
        return True
    if type(a) is not type(b):
        return False

    if (key := (id(a), id(b))) in seen:
        return True
    seen.add(key)

    match a:
        case str() | bytes() | bytearray() | Set():
            return a == b
        case Mapping():
            return a.keys() == b.keys() and all(_deep_equal(a[k], b[k], seen) for k in a)
        case Sequence():
            return len(a) == len(b) and all(_deep_equal(x, y, seen) for x, y in zip(a, b))

    if (fields := struct_fields(type(a))) is not None:
        return all(_deep_equal(getattr(a, name), getattr(b, name), seen) for name in fields)
    if type(a).__eq__ is not object.__eq__:
        return bool(a == b)
    if hasattr(a, "__dict__"):
        return _deep_equal(vars(a), vars(b), seen)
    if slots := _slot_names(type(a)):
        return all(
            _deep_equal(getattr(a, name, None), getattr(b, name, None), seen) for name in slots
        )
    return False


def _slot_names(tp: type) -> list[str]:
    names = []
    for klass in tp.__mro__:
        slots = getattr(klass, "__slots__", ())
        names.extend([slots] if isinstance(slots, str) else slots)
    return [name for name in names if name != "__weakref__"]


def convert_to(sample: Any, *, registry: ConverterRegistry = default_registry) -> Callable[[Any], Any]:
    """Function converting its argument to the type of ``sample``.

    Raises:
        NilSampleError: If ``sample`` carries no concrete type.
    """
    target = sample_type(sample)

    def convert(value: Any) -> Any:
        return registry.convert(value, target)

    return convert


# Ordering


def is_lessable_kind(tp: Any) -> bool:
    """Check whether values of a type support ordering: real numbers (not ``bool``) and text."""
    if not isinstance(tp, type) or issubclass(tp, bool):
        return False
    return issubclass(tp, (str, Real, Decimal))


def _category(value: Any) -> type | None:
    tp = type(value)
    if not is_lessable_kind(tp):
        return None
    return str if issubclass(tp, str) else Real


def _ordered(a: Any, b: Any) -> tuple[Any, Any]:
    if (category := _category(a)) is None or category is not _category(b):
        raise OrderingError(f"cannot order {type(a).__name__} and {type(b).__name__}")
    return a, b


def is_less_than(a: Any, b: Any) -> bool:
    a, b = _ordered(a, b)
    return a < b


def is_less_than_equal(a: Any, b: Any) -> bool:
    a, b = _ordered(a, b)
    return a <= b


def is_greater_than(a: Any, b: Any) -> bool:
    a, b = _ordered(a, b)
    return a > b


def is_greater_than_equal(a: Any, b: Any) -> bool:
    a, b = _ordered(a, b)
    return a >= b


def _bound(val: Any) -> None:
    if not is_lessable_kind(type(val)):
        raise OrderingError(f"{type(val).__name__} values are not ordered")


def less_than(val: Any) -> Callable[[Any], bool]:
    """Predicate checking that its argument is less than ``val``."""
    _bound(val)

    def predicate(value: Any) -> bool:
        return is_less_than(value, val)

    return predicate


def less_than_equal(val: Any) -> Callable[[Any], bool]:
    """Predicate checking that its argument is less than or equal to ``val``."""
    _bound(val)

    def predicate(value: Any) -> bool:
        return is_less_than_equal(value, val)

    return predicate


def greater_than(val: Any) -> Callable[[Any], bool]:
    """Predicate checking that its argument is greater than ``val``."""
    _bound(val)

    def predicate(value: Any) -> bool:
        return is_greater_than(value, val)

    return predicate


def greater_than_equal(val: Any) -> Callable[[Any], bool]:
    """Predicate checking that its argument is greater than or equal to ``val``."""
    _bound(val)

    def predicate(value: Any) -> bool:
        return is_greater_than_equal(value, val)

    return predicate
