"""Boolean combinators over adapted predicates.

Every predicate is adapted with ``filter_`` when the combinator is built, so
one malformed predicate rejects the whole combination up front. The value
passed to a combination must convert to the parameter type of every
predicate it reaches.

Example::

    in_range = and_(greater_than_equal(0), lambda n: n < 10)
    in_range(5)  # True
"""

from collections.abc import Callable
from typing import Any

from anyfuncs.conversion import default_registry
from anyfuncs.conversion.registry import ConverterRegistry
from anyfuncs.funcs.adapters import filter_


def filter_all(
    *fns: Any, registry: ConverterRegistry = default_registry
) -> list[Callable[[Any], bool]]:
    """Adapt each predicate with ``filter_``, keeping their order."""
    return [filter_(fn, registry=registry) for fn in fns]


def and_(*fns: Any, registry: ConverterRegistry = default_registry) -> Callable[[Any], bool]:
    """Conjunction of predicates, stopping at the first that returns False.

    With no predicates the conjunction is True.
    """
    adapted = filter_all(*fns, registry=registry)

    def conjunction(value: Any) -> bool:
        return all(fn(value) for fn in adapted)

    return conjunction


def or_(*fns: Any, registry: ConverterRegistry = default_registry) -> Callable[[Any], bool]:
    """Disjunction of predicates, stopping at the first that returns True.

    With no predicates the disjunction is False.
    """
    adapted = filter_all(*fns, registry=registry)

    def disjunction(value: Any) -> bool:
        return any(fn(value) for fn in adapted)

    return disjunction


def not_(fn: Any, *, registry: ConverterRegistry = default_registry) -> Callable[[Any], bool]:
    """Negation of a predicate."""
    adapted = filter_(fn, registry=registry)

    def negation(value: Any) -> bool:
        return not adapted(value)

    return negation
