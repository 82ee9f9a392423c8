"""Conversion to and from union annotations (``X | Y``, ``Optional[X]``).

A union source converts only if every member does: a callable declared as
``-> int | None`` is not adaptable to ``float``, since ``None`` has no route
there. Each value is dispatched on the source members it is an instance of.

A value converting to a union target keeps its own type when that is one of
the members, otherwise it takes the first member, in declaration order, that
accepts it:

    >>> from anyfuncs.conversion import default_registry
    >>> default_registry.convert(True, int | str), default_registry.convert(2.5, int | str)
    (True, 2)
"""

from types import UnionType
from typing import Any, Union, get_args, get_origin

from anyfuncs.conversion.exceptions import ConversionError, NoConverterFoundError
from anyfuncs.conversion.registry import Converter, ConverterFactory, ConverterRegistry
from anyfuncs.utils.types.annotations import is_dynamic, unwrap

#: A source member's runtime class (None when it cannot be checked) and its converter
Route = tuple[type | None, Converter[Any, Any]]


def union_members(tp: Any) -> tuple[Any, ...] | None:
    """Distinct members of a union annotation, or None if ``tp`` is not a union."""
    tp = unwrap(tp)
    if get_origin(tp) not in (Union, UnionType):
        return None
    return tuple(dict.fromkeys(unwrap(member) for member in get_args(tp)))


def _runtime_class(tp: Any) -> type | None:
    origin = get_origin(tp) or tp
    return origin if isinstance(origin, type) else None


class UnionConverter(Converter[Any, Any]):
    """Converter trying the routes of the source members a value belongs to.

    Attributes:
        _target_tp: The target annotation, reported when no route accepts a value.
        _routes: Routes in priority order.
    """

    def __init__(self, target_tp: Any, routes: tuple[Route, ...]) -> None:
        self._target_tp = target_tp
        self._routes = routes

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        return True

    def convert(self, source: Any) -> Any:
        for member_class, converter in self._routes:
            if member_class is not None and not isinstance(source, member_class):
                continue
            try:
                return converter.convert(source)
            except ConversionError:
                continue
        raise NoConverterFoundError(source, self._target_tp)


class UnionConverterFactory(ConverterFactory[Any, Any]):
    """Factory that creates UnionConverters when either side is a union.

    Dynamic sources are left to the dynamic converter, which resolves each
    value's runtime type against the whole target union.
    """

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        if is_dynamic(source_tp):
            return False
        return union_members(source_tp) is not None or union_members(target_tp) is not None

    def converter(
        self, source_tp: Any, target_tp: Any, registry: ConverterRegistry
    ) -> Converter[Any, Any] | None:
        source_members = union_members(source_tp) or (unwrap(source_tp),)
        target_members = union_members(target_tp) or (unwrap(target_tp),)

        routes: list[Route] = []
        for source_member in source_members:
            # A member that is also a target member is kept as it is
            preferred = sorted(target_members, key=lambda member: member != source_member)
            member_routes = [
                (_runtime_class(source_member), converter)
                for target_member in preferred
                if (converter := registry.resolve(source_member, target_member)) is not None
            ]
            if not member_routes:
                return None
            routes.extend(member_routes)
        return UnionConverter(target_tp, tuple(routes))
