from collections import OrderedDict, defaultdict
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, TypedDict

import pytest

from anyfuncs.conversion.exceptions import ConversionError
from anyfuncs.conversion.mappings import MappingConverterFactory
from anyfuncs.conversion.registry import ConverterRegistry
from tests.conversion.conftest import SourceItem, TargetItem


class Movie(TypedDict):
    title: str


@pytest.mark.parametrize(
    ("source_tp", "target_tp"),
    [
        (dict, dict),
        (dict[str, int], dict[str, int]),
        (dict[int, str], dict[int, str]),
        (Mapping[str, int], dict[str, float]),
        (defaultdict, dict),
        (MappingProxyType, dict[str, Any]),
    ],
)
def test_mapping_factory_matches_dict_types(source_tp, target_tp):
    mapping_factory = MappingConverterFactory()
    assert mapping_factory.matches(source_tp, target_tp)


@pytest.mark.parametrize(
    ("source_tp", "target_tp"),
    [
        (list, dict),
        (dict, list),
        (set, dict),
        (dict, Mapping),
        (dict, Movie),
        (Movie, dict),
    ],
)
def test_mapping_factory_does_not_match_non_dicts(source_tp, target_tp):
    mapping_factory = MappingConverterFactory()
    assert not mapping_factory.matches(source_tp, target_tp)


@pytest.mark.parametrize(
    ("source_tp", "target_tp", "input_value", "expected_output"),
    [
        (dict[str, int], dict[str, int], {"a": 1, "b": 2}, {"a": 1, "b": 2}),
        (dict, dict, {"a": 1, "b": 2}, {"a": 1, "b": 2}),
        (dict[str, int], dict[str, float], {"a": 1}, {"a": 1.0}),
        (OrderedDict, dict[str, float], OrderedDict(a=1), {"a": 1.0}),
        (
            dict[str, Any],
            dict[str, Any],
            {"a": None, "b": SourceItem(1)},
            {"a": None, "b": SourceItem(1)},
        ),
        (
            dict[str, SourceItem],
            dict[str, TargetItem],
            {"item": SourceItem(1)},
            {"item": TargetItem("item-1")},
        ),
        (
            dict,
            dict,
            {},
            {},
        ),
    ],
)
def test_dict_to_dict_maps_correctly(
    registry: ConverterRegistry,
    source_tp,
    target_tp,
    input_value,
    expected_output,
) -> None:
    conv = registry.resolve(source_tp, target_tp)
    assert conv is not None
    actual_output = conv.convert(input_value)
    assert type(actual_output) is dict
    assert actual_output == expected_output


def test_mapping_with_inconvertible_values_is_not_resolved(registry: ConverterRegistry) -> None:
    assert registry.resolve(dict[str, str], dict[str, int]) is None


def test_unhashable_converted_keys_raise_conversion_error(registry: ConverterRegistry) -> None:
    value = {(1,): "a"}
    with pytest.raises(ConversionError, match="Cannot convert") as exc_info:
        registry.convert(value, dict[list[int], str])
    assert exc_info.value.source == value
