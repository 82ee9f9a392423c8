import inspect
from typing import Annotated, Any, NewType, NoReturn, TypedDict, TypeVar
from uuid import UUID

import pytest

from anyfuncs.utils.types.annotations import (
    is_dynamic,
    is_no_result,
    type_name,
    unwrap,
)

UserId = NewType("UserId", int)
Bounded = TypeVar("Bounded", bound=float)
Unbounded = TypeVar("Unbounded")


class Movie(TypedDict):
    title: str


@pytest.mark.parametrize(
    ("annotation", "expected_tp"),
    [
        (str, str),
        (int, int),
        (UUID, UUID),
        (list[int], list[int]),
        (dict[str, int], dict[str, int]),
    ],
)
def test_unwrap_keeps_plain_types(annotation, expected_tp):
    assert unwrap(annotation) == expected_tp


@pytest.mark.parametrize(
    ("annotation", "expected_tp"),
    [
        (inspect.Parameter.empty, Any),
        ("SomeForwardRef", Any),
        (None, type(None)),
        (UserId, int),
        (Bounded, float),
        (Unbounded, Any),
    ],
)
def test_unwrap_resolves_special_annotations(annotation, expected_tp):
    assert unwrap(annotation) is expected_tp


def test_unwrap_sees_through_nested_wrappers():
    Name = NewType("Name", Annotated[str, "inner"])  # type: ignore
    assert unwrap(Annotated[Name, "outer"]) is str


@pytest.mark.parametrize(
    ("annotation", "expected"),
    [
        (Annotated[str, "metadata"], str),
        (Annotated[int, "a", "b"], int),
        (Annotated[UUID, 123], UUID),
        (Annotated[UserId, "meta"], int),
    ],
)
def test_unwrap_removes_annotated(annotation, expected):
    assert unwrap(annotation) is expected


@pytest.mark.parametrize(
    ("annotation", "expected"),
    [
        (Any, True),
        (object, True),
        (Annotated[Any, "meta"], True),
        (inspect.Parameter.empty, True),
        (int, False),
        (int | None, False),
    ],
)
def test_is_dynamic(annotation, expected):
    assert is_dynamic(annotation) is expected


@pytest.mark.parametrize(
    ("annotation", "expected"),
    [
        (None, True),
        (type(None), True),
        (NoReturn, True),
        (int, False),
        (Any, False),
        (int | None, False),
    ],
)
def test_is_no_result(annotation, expected):
    assert is_no_result(annotation) is expected


@pytest.mark.parametrize(
    ("annotation", "expected"),
    [
        (int, "int"),
        (Movie, "Movie"),
        (list[int], "list[int]"),
        (Any, "Any"),
        (Annotated[float, "meta"], "float"),
    ],
)
def test_type_name(annotation, expected):
    assert type_name(annotation) == expected

