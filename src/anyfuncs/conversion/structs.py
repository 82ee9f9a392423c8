"""Converter between struct-like classes with identical fields.

Two classes are struct-like when they are dataclasses or pydantic models.
A value of one converts to the other when both declare exactly the same field
names and every pair of field types is itself convertible. The target is
built through a pydantic ``TypeAdapter``, so it goes through the same
validation pydantic applies when the class is constructed from a dict.

Example::

    @dataclass
    class Point:
        x: int
        y: int


    class PointModel(BaseModel):
        x: float
        y: float


    registry.resolve(Point, PointModel).convert(Point(1, 2))  # PointModel(x=1.0, y=2.0)
"""

import dataclasses
from functools import cache
from typing import Any, get_type_hints

from pydantic import BaseModel, TypeAdapter, ValidationError

from anyfuncs.conversion.exceptions import ConversionError
from anyfuncs.conversion.registry import Converter, ConverterFactory, ConverterRegistry
from anyfuncs.utils.types.annotations import type_name, unwrap


def struct_fields(tp: Any) -> dict[str, Any] | None:
    """Field names and annotations of a struct-like class, or None for other types.

    Dataclass fields excluded from ``__init__`` are skipped, since the target
    could not be built from them.
    """
    tp = unwrap(tp)
    if not isinstance(tp, type):
        return None
    if issubclass(tp, BaseModel):
        return {name: info.annotation for name, info in tp.model_fields.items()}
    if dataclasses.is_dataclass(tp):
        hints = get_type_hints(tp, include_extras=True)
        return {f.name: hints.get(f.name, Any) for f in dataclasses.fields(tp) if f.init}
    return None


@cache
def _type_adapter(tp: type) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


class StructConverter(Converter[Any, Any]):
    """Converter that rebuilds a struct field by field.

    Attributes:
        _target: The target struct class.
        _field_converters: Mapping of field names to their value converters.
    """

    def __init__(self, target: type, field_converters: dict[str, Converter[Any, Any]]) -> None:
        self._target = target
        self._field_converters = field_converters

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        return True

    def convert(self, source: Any) -> Any:
        payload = {
            name: conv.convert(getattr(source, name))
            for name, conv in self._field_converters.items()
        }
        try:
            return _type_adapter(self._target).validate_python(payload)
        except ValidationError as e:
            raise ConversionError(
                f"Cannot convert {type(source).__name__} to type {type_name(self._target)}: {e}",
                source=source,
                target_type=self._target,
            ) from e


class StructConverterFactory(ConverterFactory[Any, Any]):
    """Factory that creates converters between struct-like classes.

    This factory matches when both source and target are struct-like and
    declare the same field names. Field types are resolved through the
    registry; one inconvertible field makes the pair inconvertible.
    """

    def matches(self, source_tp: Any, target_tp: Any) -> bool:
        source_fields = struct_fields(source_tp)
        target_fields = struct_fields(target_tp)
        return (
            source_fields is not None
            and target_fields is not None
            and source_fields.keys() == target_fields.keys()
        )

    def converter(
        self, source_tp: Any, target_tp: Any, registry: ConverterRegistry
    ) -> Converter[Any, Any] | None:
        source_fields = struct_fields(source_tp) or {}
        target_fields = struct_fields(target_tp) or {}

        field_converters = {
            name: conv
            for name, target_field_tp in target_fields.items()
            if (conv := registry.resolve(source_fields[name], target_field_tp)) is not None
        }
        if len(field_converters) != len(target_fields):
            return None
        return StructConverter(unwrap(target_tp), field_converters)
