import pytest

from anyfuncs.conversion.exceptions import ConversionError, TypeMismatchError
from anyfuncs.conversion.registry import ConverterRegistry
from anyfuncs.conversion.sequences import SequenceConverterFactory
from tests.conversion.conftest import SourceItem, TargetItem


@pytest.mark.parametrize(
    ("source_tp", "target_tp"),
    [
        (list, set),
        (set, frozenset),
        (frozenset, list),
        (list[int], set[int]),
        (tuple[int, ...], list[float]),
        (list, tuple[int, str]),
    ],
)
def test_sequence_factory_matches_sequence_types(source_tp, target_tp):
    sequence_factory = SequenceConverterFactory()
    assert sequence_factory.matches(source_tp, target_tp)


@pytest.mark.parametrize(
    ("source_tp", "target_tp"),
    [
        (dict, list),
        (str, list),
        (bytes, list),
        (list, dict),
        (int, list),
    ],
)
def test_sequence_factory_does_not_match_non_sequences(source_tp, target_tp):
    sequence_factory = SequenceConverterFactory()
    assert not sequence_factory.matches(source_tp, target_tp)


@pytest.mark.parametrize(
    ("source_tp", "target_tp", "input_value", "expected_output"),
    [
        (list, set, [1, 2, 3], {1, 2, 3}),
        (set, frozenset, {1, 2, 3}, frozenset({1, 2, 3})),
        (list, set, [], set()),
        (list[int], set[int], [1, 2, 3], {1, 2, 3}),
        (list[str], set[str], ["a", "b"], {"a", "b"}),
        (list[int], list[float], [1, 2], [1.0, 2.0]),
        (list, list[float], [1, 2.5], [1.0, 2.5]),
        (tuple[float, ...], list[int], (1.5, 2.5), [1, 2]),
        (list[int], tuple[float, int], [1, 2], (1.0, 2)),
        (tuple[int, str], tuple[float, str], (1, "a"), (1.0, "a")),
        (
            list[SourceItem],
            set[TargetItem],
            [SourceItem(1)],
            {TargetItem("item-1")},
        ),
    ],
)
def test_sequence_conversion_produces_correct_type(
    registry: ConverterRegistry,
    source_tp,
    target_tp,
    input_value,
    expected_output,
):
    conv = registry.resolve(source_tp, target_tp)
    assert conv is not None
    actual_output = conv.convert(input_value)
    assert type(actual_output) is type(expected_output)
    assert actual_output == expected_output


@pytest.mark.parametrize(
    ("source_tp", "target_tp"),
    [
        (list[str], list[int]),
        (tuple[int, str], tuple[int, int]),
        (tuple[int, int, int], tuple[int, int]),
    ],
)
def test_sequence_with_inconvertible_elements_is_not_resolved(
    registry: ConverterRegistry, source_tp, target_tp
):
    assert registry.resolve(source_tp, target_tp) is None


def test_fixed_tuple_target_rejects_wrong_length(registry: ConverterRegistry):
    conv = registry.resolve(list[int], tuple[int, int])
    assert conv is not None
    with pytest.raises(TypeMismatchError, match="Expected 2 elements"):
        conv.convert([1, 2, 3])


def test_untyped_source_element_failure_surfaces_at_conversion(registry: ConverterRegistry):
    conv = registry.resolve(list, list[int])
    assert conv is not None
    with pytest.raises(ConversionError):
        conv.convert([1, "two"])


@pytest.mark.parametrize(("value", "target_tp"), [([[1]], set), ([[1], [2]], frozenset[list[int]])])
def test_unhashable_elements_for_set_target_raise_conversion_error(
    registry: ConverterRegistry, value, target_tp
):
    with pytest.raises(ConversionError, match="Cannot convert") as exc_info:
        registry.convert(value, target_tp)
    assert exc_info.value.source == value
