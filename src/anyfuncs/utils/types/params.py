from collections.abc import Mapping
from typing import Any, Union, get_args, get_origin


def _get_type_params_for_base(tp: Any, base: type) -> tuple[Any, ...] | None:
    """Internal implementation of get_type_params_for_base."""
    origin = get_origin(tp) or tp
    args = get_args(tp) or ()

    if origin is base:
        return args

    params = getattr(origin, "__parameters__", ())
    substitutions = dict(zip(params, args, strict=True)) if args else {}

    for orig_base in getattr(origin, "__orig_bases__", ()):
        base_origin = get_origin(orig_base) or orig_base
        base_args = get_args(orig_base)
        resolved_base_args = tuple(substitutions.get(arg, arg) for arg in base_args)
        resolved_base = base_origin[resolved_base_args] if resolved_base_args else base_origin
        base_resolution = _get_type_params_for_base(resolved_base, base)
        if base_resolution is not None:
            return base_resolution

    return None


def get_type_params_for_base(tp: Any, base: type) -> tuple[Any, ...]:
    """Extract type parameters for a base type from a parameterized type.

    Given a potentially parameterized type and a base type, return the type
    parameters for the base type as seen from the parameterized type.

    Args:
        tp: A potentially parameterized type (e.g., list[int], MyDict[str, int]).
        base: The base type to extract parameters for (e.g., list, dict).

    Returns:
        A tuple of type parameters for the base type.

    Raises:
        TypeError: If tp is not a subclass of base.

    Examples:
        >>> get_type_params_for_base(list[int], list)
        (<class 'int'>,)

        >>> from typing import Generic, TypeVar
        >>> K = TypeVar("K")
        >>> V = TypeVar("V")
        >>> class MyDict(dict[K, V], Generic[K, V]): ...
        >>> get_type_params_for_base(MyDict[str, int], dict)
        (<class 'str'>, <class 'int'>)
    """
    result = _get_type_params_for_base(tp, base)
    if result is None:
        raise TypeError(f"Type {tp} is not a subclass of {base}")
    return result


def fixed_tuple_params(tp: Any) -> tuple[Any, ...] | None:
    """Positional element types of a fixed-length tuple annotation.

    Returns ``None`` for bare ``tuple``, homogeneous ``tuple[X, ...]`` and
    anything that is not a tuple annotation.

    Examples:
        >>> fixed_tuple_params(tuple[int, str])
        (<class 'int'>, <class 'str'>)
        >>> fixed_tuple_params(tuple[int, ...]) is None
        True
    """
    if get_origin(tp) is not tuple:
        return None
    args = get_args(tp)
    if not args or (len(args) == 2 and args[1] is Ellipsis):
        return None
    return args


def element_type(tp: Any, base: type) -> Any:
    """The single element type of a collection annotation seen as ``base``.

    Fixed-length tuples report the union of their positional types. Bare and
    unresolvable annotations report ``Any``.

    Examples:
        >>> element_type(list[int], list)
        <class 'int'>
        >>> element_type(tuple[int, ...], tuple)
        <class 'int'>
        >>> element_type(set, set)
        typing.Any
    """
    if (positions := fixed_tuple_params(tp)) is not None:
        return Union[positions] if len(set(positions)) > 1 else positions[0]  # noqa: UP007
    try:
        params = get_type_params_for_base(tp, base)
    except TypeError:
        return Any
    if not params or params[0] is Ellipsis:
        return Any
    return params[0]


def mapping_item_types(tp: Any) -> tuple[Any, Any]:
    """Key and value types of a mapping annotation, ``(Any, Any)`` when unknown."""
    origin = get_origin(tp) or tp
    if not (isinstance(origin, type) and issubclass(origin, Mapping)):
        return Any, Any
    params = get_args(tp)
    # Generic dict subclasses declare their item types on a base
    if issubclass(origin, dict) and hasattr(origin, "__orig_bases__"):
        params = _get_type_params_for_base(tp, dict) or ()
    return (params[0], params[1]) if len(params) == 2 else (Any, Any)
