from typing import Any, NoReturn

import pytest

from anyfuncs.funcs.shape import CallableShape


def unannotated(value):
    return value


def typed(value: int) -> str:
    return str(value)


def with_default(value: int, scale: int = 2) -> int:
    return value * scale


def variadic(*values: float) -> float:
    return sum(values)


def keyword_only(value, *, flag):
    return value


def keyword_with_default(value, *, flag=False):
    return value


def procedure(value) -> None:
    pass


def aborts(value) -> NoReturn:
    raise RuntimeError(value)


def forward_ref(value):
    return value


forward_ref.__annotations__ = {"value": "Undefined", "return": "AlsoUndefined"}


class Positive:
    def __call__(self, value: int) -> bool:
        return value > 0


@pytest.mark.parametrize("fn", [None, 0, "fn", [unannotated]])
def test_non_callables_have_no_shape(fn):
    assert CallableShape.of(fn) is None


def test_unannotated_callable_is_dynamic():
    shape = CallableShape.of(unannotated)
    assert shape is not None
    assert shape.params == (Any,)
    assert shape.result is Any
    assert not shape.result_declared
    assert shape.has_uniform_shape(1, Any)


def test_annotations_are_resolved():
    shape = CallableShape.of(typed)
    assert shape is not None
    assert shape.param(0) is int
    assert shape.result is str
    assert shape.result_declared


def test_unresolvable_annotations_fall_back_to_any():
    shape = CallableShape.of(forward_ref)
    assert shape is not None
    assert shape.param(0) is Any
    assert shape.result is Any


@pytest.mark.parametrize(
    ("fn", "arity", "expected"),
    [
        (unannotated, 1, True),
        (unannotated, 0, False),
        (unannotated, 2, False),
        (with_default, 1, True),
        (with_default, 2, True),
        (with_default, 3, False),
        (variadic, 0, True),
        (variadic, 1, True),
        (variadic, 5, True),
        (keyword_only, 1, False),
        (keyword_with_default, 1, True),
        (lambda: None, 0, True),
        (lambda: None, 1, False),
        (Positive(), 1, True),
    ],
)
def test_accepts_checks_positional_arity(fn, arity, expected):
    shape = CallableShape.of(fn)
    assert shape is not None
    assert shape.accepts(arity) is expected


def test_variadic_parameters_take_item_type():
    shape = CallableShape.of(variadic)
    assert shape is not None
    assert shape.param(0) is float
    assert shape.param(3) is float


@pytest.mark.parametrize(
    ("fn", "expected"),
    [
        (procedure, True),
        (aborts, True),
        (unannotated, False),
        (typed, False),
    ],
)
def test_returns_nothing(fn, expected):
    shape = CallableShape.of(fn)
    assert shape is not None
    assert shape.returns_nothing is expected


@pytest.mark.parametrize(
    ("fn", "arity", "result_tp", "expected"),
    [
        (unannotated, 1, Any, True),
        (procedure, 1, type(None), True),
        (typed, 1, str, False),
        (with_default, 1, int, False),
        (variadic, 1, float, False),
        (lambda: 1, 0, Any, True),
        (lambda: 1, 0, int, False),
    ],
)
def test_has_uniform_shape(fn, arity, result_tp, expected):
    shape = CallableShape.of(fn)
    assert shape is not None
    assert shape.has_uniform_shape(arity, result_tp) is expected
