import inspect
import typing
from typing import Any, NewType, TypeVar, get_args, get_origin

#: Result annotations meaning "returns no value".
NO_RESULT_TYPES = (type(None), typing.NoReturn, typing.Never)


def unwrap(tp: Any) -> Any:
    """Reduce an annotation to the type values are checked against.

    ``Annotated`` metadata is dropped, a ``NewType`` resolves to its supertype
    and a ``TypeVar`` to its bound. Missing and unevaluated (string)
    annotations resolve to ``Any``, since nothing can be checked against them;
    ``None`` resolves to ``NoneType``.

    Examples:
        >>> unwrap(typing.Annotated[int, "meta"])
        <class 'int'>
        >>> unwrap("Undefined")
        typing.Any
    """
    if tp is inspect.Parameter.empty or isinstance(tp, str):
        return Any
    if tp is None:
        return type(None)
    if isinstance(tp, NewType):
        return unwrap(tp.__supertype__)
    if isinstance(tp, TypeVar):
        return Any if tp.__bound__ is None else unwrap(tp.__bound__)
    if get_origin(tp) is typing.Annotated:
        return unwrap(get_args(tp)[0])
    return tp


def is_dynamic(tp: Any) -> bool:
    """Check whether an annotation admits every value (``Any`` or ``object``)."""
    tp = unwrap(tp)
    return tp is Any or tp is object


def is_no_result(tp: Any) -> bool:
    """Check whether a return annotation declares that nothing is returned."""
    return unwrap(tp) in NO_RESULT_TYPES


def type_name(tp: Any) -> str:
    """Human-readable name of a type annotation for error messages."""
    tp = unwrap(tp)
    if isinstance(tp, type) and get_origin(tp) is None:
        return tp.__qualname__
    return repr(tp).removeprefix("typing.")
