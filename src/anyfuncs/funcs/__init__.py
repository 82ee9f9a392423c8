from anyfuncs.funcs.accessors import index_of, value_of_key
from anyfuncs.funcs.adapters import consumer, filter_, map_, map_to, supplier, supplier_of
from anyfuncs.funcs.control import (
    panic_on_error,
    panic_on_error2,
    panic_on_false,
    panic_on_false2,
    ternary,
    ternary_of,
)
from anyfuncs.funcs.predicates import and_, filter_all, not_, or_
from anyfuncs.funcs.values import (
    convert_to,
    deep_equal,
    deep_equal_to,
    equal_to,
    greater_than,
    greater_than_equal,
    is_greater_than,
    is_greater_than_equal,
    is_less_than,
    is_less_than_equal,
    is_lessable_kind,
    is_nil,
    is_nilable,
    less_than,
    less_than_equal,
    sample_type,
    zero_value,
)

__all__ = [
    "and_",
    "consumer",
    "convert_to",
    "deep_equal",
    "deep_equal_to",
    "equal_to",
    "filter_",
    "filter_all",
    "greater_than",
    "greater_than_equal",
    "index_of",
    "is_greater_than",
    "is_greater_than_equal",
    "is_less_than",
    "is_less_than_equal",
    "is_lessable_kind",
    "is_nil",
    "is_nilable",
    "less_than",
    "less_than_equal",
    "map_",
    "map_to",
    "not_",
    "or_",
    "panic_on_error",
    "panic_on_error2",
    "panic_on_false",
    "panic_on_false2",
    "sample_type",
    "supplier",
    "supplier_of",
    "ternary",
    "ternary_of",
    "value_of_key",
    "zero_value",
]
