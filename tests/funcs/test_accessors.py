from collections import OrderedDict
from dataclasses import dataclass
from decimal import Decimal

import pytest

from anyfuncs.conversion.exceptions import ConversionError
from anyfuncs.funcs.accessors import (
    INDEX_OF_ERROR_MSG,
    VALUE_OF_KEY_ERROR_MSG,
    index_of,
    value_of_key,
)
from anyfuncs.funcs.exceptions import IndexOfError, ValueOfKeyError


@dataclass(frozen=True)
class Cell:
    row: int


@dataclass(frozen=True)
class Position:
    row: int


@dataclass
class Coord:
    row: int


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (([1], 0), 1),
        (([1], 1, 2), 2),
        (([1], 1), 0),
        (((1, 2), 1), 2),
        ((["a", "b"], 2), ""),
        (([[1]], 1), []),
        (([1, 2], -1), 0),
        (([1, 2], -1, 9), 9),
        (([], 0), None),
        (([], 0, 5), 5),
    ],
)
def test_index_of(args, expected):
    assert index_of(*args) == expected


def test_index_of_converts_default_to_element_type():
    result = index_of([1, 2], 5, 7.9)
    assert type(result) is int
    assert result == 7


def test_index_of_converts_default_even_when_index_is_in_bounds():
    with pytest.raises(ConversionError):
        index_of([1], 0, "x")


def test_index_of_accepts_index_like_values():
    assert index_of([1, 2], True) == 2


@pytest.mark.parametrize("seq", [None, 5, "str", {"a": 1}, {1, 2}])
def test_index_of_rejects_non_sequences(seq):
    with pytest.raises(IndexOfError) as exc_info:
        index_of(seq, 0)
    assert str(exc_info.value) == INDEX_OF_ERROR_MSG


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (({"a": 1}, "a"), 1),
        (({"a": 1}, "b"), 0),
        (({"a": 1}, "b", 2), 2),
        (({"a": "x"}, "b"), ""),
        (({}, "a"), None),
        (({}, "a", 3.5), 3.5),
        ((OrderedDict(a=[1]), "b"), []),
    ],
)
def test_value_of_key(args, expected):
    assert value_of_key(*args) == expected


def test_value_of_key_compares_mapping_keys_converted_to_key_type():
    assert value_of_key({1: "a"}, 1.0) == "a"
    assert value_of_key({Cell(1): "a"}, Position(1)) == "a"
    assert value_of_key({Cell(1): "a"}, Position(2)) == ""


def test_value_of_key_does_not_match_keys_through_truncation():
    assert value_of_key({1: "a"}, 1.5, "missing") == "missing"
    assert value_of_key({1: "a", 2: "b"}, Decimal("2.5")) == ""


def test_value_of_key_with_inconvertible_key_falls_back_to_default():
    assert value_of_key({1: "a"}, "1") == ""
    assert value_of_key({1: "a"}, "1", "z") == "z"


def test_value_of_key_finds_unhashable_keys_by_comparison():
    assert value_of_key({Cell(1): "a", Cell(2): "b"}, Coord(2)) == "b"
    assert value_of_key({Cell(1): "a"}, Coord(3), "z") == "z"
    assert value_of_key({"a": 1}, ["a"]) == 0


def test_value_of_key_converts_default_to_value_type():
    result = value_of_key({"a": 1}, "b", 2.5)
    assert type(result) is int
    assert result == 2


def test_value_of_key_rejects_inconvertible_default():
    with pytest.raises(ConversionError):
        value_of_key({"a": 1}, "a", "x")


@pytest.mark.parametrize("mapping", [None, 5, "a", [("a", 1)]])
def test_value_of_key_rejects_non_mappings(mapping):
    with pytest.raises(ValueOfKeyError) as exc_info:
        value_of_key(mapping, "a")
    assert str(exc_info.value) == VALUE_OF_KEY_ERROR_MSG
