"""Adapters from loosely-typed callables to uniform dynamic signatures.

Each adapter takes a callable with whatever annotations it happens to carry
and returns a callable with one fixed shape over ``Any`` values:

==============  ==========================  ===========================
adapter         required callable           result
==============  ==========================  ===========================
``filter_``     one argument, ``bool``      ``(value: Any) -> bool``
``map_``        one argument, one value     ``(value: Any) -> Any``
``map_to``      one argument, one value     ``(value: Any) -> X``
``supplier``    no arguments, one value     ``() -> Any``
``supplier_of`` no arguments, one value     ``() -> X``
``consumer``    one argument, no value      ``(value: Any) -> None``
==============  ==========================  ===========================

A callable that already has the target shape is returned unchanged.
Otherwise the callable is inspected once and wrapped: on each call the
dynamic argument is converted to the declared parameter type, and for
``map_to``/``supplier_of`` the result is converted to ``X`` as well.

Shape problems are reported when adapting, with ShapeMismatchError.
Argument conversion problems can only be known once the argument exists, so
they surface at call time as ConversionError.

Example::

    def double(n: int) -> int:
        return n * 2


    as_float = map_to(double, 0.0)
    as_float("2")  # ConversionError: no converter from str to int
    as_float(2.0)  # 4.0
"""

import inspect
from collections.abc import Callable
from functools import partial
from logging import getLogger
from typing import Any, TypeVar

from anyfuncs.conversion import default_registry
from anyfuncs.conversion.exceptions import TypeMismatchError
from anyfuncs.conversion.registry import ConverterRegistry
from anyfuncs.funcs.exceptions import ShapeMismatchError
from anyfuncs.funcs.shape import CallableShape
from anyfuncs.funcs.values import sample_type
from anyfuncs.utils.types.annotations import is_dynamic, type_name

logger = getLogger(__name__)

_X = TypeVar("_X")

FILTER_ERROR_MSG = "fn must be a callable of one argument of any type that returns bool"
MAP_ERROR_MSG = "fn must be a callable of one argument of any type that returns one value of any type"
MAP_TO_ERROR_MSG = (
    "fn must be a callable of one argument of any type that returns one value convertible to type {}"
)
SUPPLIER_ERROR_MSG = "fn must be a callable of no arguments that returns one value of any type"
SUPPLIER_OF_ERROR_MSG = (
    "fn must be a callable of no arguments that returns one value convertible to type {}"
)
CONSUMER_ERROR_MSG = "fn must be a callable of one argument of any type and no return values"


def filter_(fn: Any, *, registry: ConverterRegistry = default_registry) -> Callable[[Any], bool]:
    """Adapt a one-argument predicate to ``(value: Any) -> bool``.

    A predicate declaring a result other than ``bool`` is rejected. One
    without a return annotation has its result checked on every call.

    Raises:
        ShapeMismatchError: If ``fn`` cannot take one argument and return a bool.
    """
    shape = _shape(fn, 1, FILTER_ERROR_MSG)
    if shape.has_uniform_shape(1, bool):
        return _as_is(fn)
    if not (shape.result is bool or is_dynamic(shape.result)):
        raise ShapeMismatchError(FILTER_ERROR_MSG)

    argument = _argument(shape, registry)
    checked = shape.result is not bool

    def adapted(value: Any) -> bool:
        result = fn(argument(value))
        if checked and not isinstance(result, bool):
            raise TypeMismatchError(result, bool)
        return result

    return _wrapped(fn, adapted)


def map_(fn: Any, *, registry: ConverterRegistry = default_registry) -> Callable[[Any], Any]:
    """Adapt a one-argument function to ``(value: Any) -> Any``.

    Raises:
        ShapeMismatchError: If ``fn`` cannot take one argument and return a value.
    """
    shape = _shape(fn, 1, MAP_ERROR_MSG)
    if shape.has_uniform_shape(1, Any):
        return _as_is(fn)
    if shape.returns_nothing:
        raise ShapeMismatchError(MAP_ERROR_MSG)

    argument = _argument(shape, registry)

    def adapted(value: Any) -> Any:
        return fn(argument(value))

    return _wrapped(fn, adapted)


def map_to(
    fn: Any, sample: _X, *, registry: ConverterRegistry = default_registry
) -> Callable[[Any], _X]:
    """Adapt a one-argument function to ``(value: Any) -> X``, where X is the type of ``sample``.

    Only the type of ``sample`` matters; its value is not used.

    Raises:
        NilSampleError: If ``sample`` is nil or a bare ``object()``.
        ShapeMismatchError: If ``fn`` cannot take one argument, or its
            declared result cannot be converted to X.
    """
    target = sample_type(sample)
    message = MAP_TO_ERROR_MSG.format(type_name(target))
    shape = _shape(fn, 1, message)
    if shape.has_uniform_shape(1, target):
        return _as_is(fn)
    if shape.returns_nothing or (result := registry.resolve(shape.result, target)) is None:
        raise ShapeMismatchError(message)

    argument = _argument(shape, registry)

    def adapted(value: Any) -> Any:
        return result.convert(fn(argument(value)))

    return _wrapped(fn, _with_signature(adapted, target))


def supplier(fn: Any, *, registry: ConverterRegistry = default_registry) -> Callable[[], Any]:
    """Adapt a function of no arguments to ``() -> Any``.

    Raises:
        ShapeMismatchError: If ``fn`` cannot be called without arguments or
            returns nothing.
    """
    shape = _shape(fn, 0, SUPPLIER_ERROR_MSG)
    if shape.has_uniform_shape(0, Any):
        return _as_is(fn)
    if shape.returns_nothing:
        raise ShapeMismatchError(SUPPLIER_ERROR_MSG)

    def adapted() -> Any:
        return fn()

    return _wrapped(fn, adapted)


def supplier_of(
    fn: Any, sample: _X, *, registry: ConverterRegistry = default_registry
) -> Callable[[], _X]:
    """Adapt a function of no arguments to ``() -> X``, where X is the type of ``sample``.

    Raises:
        NilSampleError: If ``sample`` is nil or a bare ``object()``.
        ShapeMismatchError: If ``fn`` cannot be called without arguments, or
            its declared result cannot be converted to X.
    """
    target = sample_type(sample)
    message = SUPPLIER_OF_ERROR_MSG.format(type_name(target))
    shape = _shape(fn, 0, message)
    if shape.has_uniform_shape(0, target):
        return _as_is(fn)
    if shape.returns_nothing or (result := registry.resolve(shape.result, target)) is None:
        raise ShapeMismatchError(message)

    def adapted() -> Any:
        return result.convert(fn())

    return _wrapped(fn, _with_signature(adapted, target))


def consumer(fn: Any, *, registry: ConverterRegistry = default_registry) -> Callable[[Any], None]:
    """Adapt a one-argument function to ``(value: Any) -> None``.

    Unannotated results are discarded; a declared result other than ``None``
    is rejected.

    Raises:
        ShapeMismatchError: If ``fn`` cannot take one argument, or declares a result.
    """
    shape = _shape(fn, 1, CONSUMER_ERROR_MSG)
    if shape.has_uniform_shape(1, type(None)):
        return _as_is(fn)
    if shape.result_declared and not (shape.returns_nothing or is_dynamic(shape.result)):
        raise ShapeMismatchError(CONSUMER_ERROR_MSG)

    argument = _argument(shape, registry)

    def adapted(value: Any) -> None:
        fn(argument(value))

    return _wrapped(fn, adapted)


def _shape(fn: Any, arity: int, message: str) -> CallableShape:
    shape = CallableShape.of(fn)
    if shape is None or not shape.accepts(arity):
        raise ShapeMismatchError(message)
    return shape


def _argument(shape: CallableShape, registry: ConverterRegistry) -> Callable[[Any], Any]:
    param_tp = shape.param(0)
    if is_dynamic(param_tp):
        return _identity
    return partial(registry.convert, target_tp=param_tp)


def _identity(value: Any) -> Any:
    return value


def _as_is(fn: Any) -> Any:
    logger.debug("%r already has the required shape", fn)
    return fn


def _wrapped(fn: Any, adapted: Any) -> Any:
    logger.debug("Adapted %r", fn)
    return adapted


def _with_signature(adapted: Any, result_tp: type) -> Any:
    # Adapting the wrapper again returns it unchanged
    sig = inspect.signature(adapted)
    adapted.__signature__ = sig.replace(return_annotation=result_tp)
    adapted.__annotations__ = {**adapted.__annotations__, "return": result_tp}
    return adapted
