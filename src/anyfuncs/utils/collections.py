"""Collection utility functions."""

from typing import Iterable


def first_type(items: Iterable[object]) -> type | None:
    """The type of the first item, or None for an empty iterable.

    Example:
        >>> first_type([1, "a"])
        <class 'int'>
        >>> first_type([]) is None
        True
    """
    return next((type(it) for it in items), None)
