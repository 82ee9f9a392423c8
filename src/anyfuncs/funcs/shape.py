"""Signature inspection for adaptable callables.

A CallableShape records what an adapter needs to know about a callable:
how many positional arguments it can take, the declared type of each, and
what it returns. It is computed once, when the callable is adapted; the
wrapper built from it never inspects the callable again.

Missing annotations mean ``Any``. A missing return annotation means "one
result of unknown type", while ``-> None`` (or ``NoReturn``/``Never``) means
no result at all.
"""

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from logging import getLogger
from typing import Any, Self

from anyfuncs.utils.types.annotations import is_dynamic, is_no_result, unwrap

logger = getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


@dataclass(frozen=True, kw_only=True, slots=True)
class CallableShape:
    """The call shape of a callable, with annotations resolved to types.

    Attributes:
        params: Types of the named positional parameters, in order.
        required: How many of those parameters have no default.
        variadic: Type of ``*args`` items, or None without ``*args``.
        keyword_required: Whether some keyword-only parameter has no default.
        result: The declared result type (``Any`` when unannotated).
        result_declared: Whether the return annotation was present.
    """

    params: tuple[Any, ...]
    required: int
    variadic: Any | None
    keyword_required: bool
    result: Any
    result_declared: bool

    @classmethod
    def of(cls, fn: Any) -> Self | None:
        """Inspect a callable, returning None when it has no usable signature."""
        if fn is None or not callable(fn):
            return None
        try:
            sig = _signature(fn)
        except (TypeError, ValueError):
            logger.debug("No signature available for %r", fn)
            return None

        params: list[Any] = []
        required = 0
        variadic = None
        keyword_required = False
        for param in sig.parameters.values():
            tp = unwrap(param.annotation)
            if param.kind in _POSITIONAL:
                params.append(tp)
                required += param.default is inspect.Parameter.empty
            elif param.kind is inspect.Parameter.VAR_POSITIONAL:
                variadic = tp
            elif param.kind is inspect.Parameter.KEYWORD_ONLY:
                keyword_required |= param.default is inspect.Parameter.empty

        return cls(
            params=tuple(params),
            required=required,
            variadic=variadic,
            keyword_required=keyword_required,
            result=unwrap(sig.return_annotation),
            result_declared=sig.return_annotation is not inspect.Signature.empty,
        )

    def accepts(self, arity: int) -> bool:
        """Check whether the callable can be invoked with exactly ``arity`` positional arguments."""
        if self.keyword_required or arity < self.required:
            return False
        return self.variadic is not None or arity <= len(self.params)

    def param(self, index: int) -> Any:
        """Declared type of the positional argument at ``index``."""
        if index < len(self.params):
            return self.params[index]
        return self.variadic

    @property
    def returns_nothing(self) -> bool:
        return self.result_declared and is_no_result(self.result)

    def has_uniform_shape(self, arity: int, result_tp: Any) -> bool:
        """Check whether the callable already takes ``arity`` dynamic arguments and returns ``result_tp``.

        ``result_tp`` of ``Any`` also matches an unannotated result.
        """
        if (
            self.keyword_required
            or self.variadic is not None
            or len(self.params) != arity
            or self.required != arity
            or not all(is_dynamic(tp) for tp in self.params)
        ):
            return False
        if result_tp is Any:
            return is_dynamic(self.result)
        return self.result_declared and self.result is result_tp


def _signature(fn: Callable[..., Any]) -> inspect.Signature:
    try:
        return inspect.signature(fn, eval_str=True)
    except (NameError, AttributeError, SyntaxError):
        logger.debug("Unresolvable annotations on %r, treating them as Any", fn)
        return inspect.signature(fn)
