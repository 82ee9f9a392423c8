"""Pass-through conversion for values that already have an acceptable type.

A declared type passes through to another when every value of the first is
already a valid value of the second:

    - the target admits everything (``Any``, ``object``)
    - the source class is the target class or a subclass of it (so ``bool``
      passes to ``int``)
    - the target is a generic that is only checked by its origin, such as
      ``Iterable[int]`` or ``Callable[[int], str]``, and the source class
      subclasses that origin

``Any`` never passes through to a concrete type: nothing about the value is
known. Containers this package rebuilds element by element (``list[int]``,
``dict[str, int]``) are left to their own converters.
"""

from typing import Any, get_origin

from typing_extensions import is_typeddict

from anyfuncs.conversion.exceptions import TypeMismatchError
from anyfuncs.conversion.registry import Converter, ConverterFactory, ConverterRegistry
from anyfuncs.utils.types.annotations import is_dynamic, unwrap

#: Generic origins whose parameters are enforced by rebuilding the value
REBUILT_ORIGINS = frozenset({list, tuple, set, frozenset, dict})


def passes_through(source_tp: Any, target_tp: Any) -> bool:
    """Check whether values declared as ``source_tp`` are valid ``target_tp`` values as they are.

    Examples:
        >>> passes_through(bool, int), passes_through(int, bool)
        (True, False)
        >>> passes_through(list, list[int])
        False
    """
    if is_dynamic(target_tp):
        return True
    source_tp = unwrap(source_tp)
    target_tp = unwrap(target_tp)
    # No isinstance checks against a TypedDict
    if is_typeddict(target_tp):
        return False
    if not isinstance(source_tp, type) or get_origin(source_tp) is not None:
        return False

    checked = get_origin(target_tp)
    if checked is None:
        checked = target_tp
    elif checked in REBUILT_ORIGINS:
        return False
    if not isinstance(checked, type):
        return False
    try:
        return issubclass(source_tp, checked)
    except TypeError:
        # Protocols that are not runtime checkable
        return False


class NoOpConverter(Converter[Any, Any]):
    """Converter returning the value itself once it is confirmed to be an instance of the target.

    A callable may return something other than its annotation says, so the
    check is made on every value.

    Attributes:
        _target_tp: The target annotation, reported on mismatch.
        _checked: The class values are checked against, or None to accept all.
    """

    def __init__(self, target_tp: Any) -> None:
        self._target_tp = target_tp
        if is_dynamic(target_tp):
            self._checked = None
        else:
            self._checked = get_origin(target_tp) or target_tp

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        return passes_through(source_tp, target_tp)

    def convert(self, source: Any) -> Any:
        if self._checked is not None and not isinstance(source, self._checked):
            raise TypeMismatchError(source, self._target_tp)
        return source


class NoOpConverterFactory(ConverterFactory[Any, Any]):
    """Factory for NoOpConverters, registered first as the common case."""

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        return passes_through(source_tp, target_tp)

    def converter(
        self, source_tp: Any, target_tp: Any, registry: ConverterRegistry
    ) -> Converter[Any, Any] | None:
        return NoOpConverter(unwrap(target_tp))
