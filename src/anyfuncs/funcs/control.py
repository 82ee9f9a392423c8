"""Conditional expressions and abort-on-failure helpers."""

from collections.abc import Callable
from typing import Any, TypeVar

from anyfuncs.conversion import default_registry
from anyfuncs.conversion.registry import ConverterRegistry
from anyfuncs.funcs.adapters import supplier
from anyfuncs.funcs.exceptions import PanicError

_T = TypeVar("_T")


def ternary(cond: bool, a: _T, b: _T) -> _T:
    """``a`` if ``cond`` else ``b``; both are evaluated by the caller."""
    return a if cond else b


def ternary_of(
    cond: bool,
    supplier_a: Callable[[], Any],
    supplier_b: Callable[[], Any],
    *,
    registry: ConverterRegistry = default_registry,
) -> Any:
    """Result of ``supplier_a`` if ``cond`` else of ``supplier_b``.

    Both suppliers are adapted, so a malformed one is rejected whichever
    branch is taken; only the selected one is called.
    """
    a = supplier(supplier_a, registry=registry)
    b = supplier(supplier_b, registry=registry)
    return a() if cond else b()


def panic_on_error(err: BaseException | None) -> None:
    """Raise PanicError from ``err``, unless it is None."""
    if err is not None:
        raise PanicError(str(err), err) from err


def panic_on_error2(val: _T, err: BaseException | None) -> _T:
    """Return ``val``, or raise PanicError from ``err`` when it is not None.

    Example:
        >>> panic_on_error2(8080, None)
        8080
    """
    panic_on_error(err)
    return val


def panic_on_false(ok: bool, message: str) -> None:
    """Raise PanicError with ``message`` unless ``ok``."""
    if not ok:
        raise PanicError(message)


def panic_on_false2(val: _T, ok: bool, message: str) -> _T:
    """Return ``val``, or raise PanicError with ``message`` unless ``ok``."""
    panic_on_false(ok, message)
    return val
