from anyfuncs.conversion import default_registry
from anyfuncs.conversion.exceptions import (
    ConversionError,
    NoConverterFoundError,
    TypeMismatchError,
)
from anyfuncs.conversion.function import FunctionConverter
from anyfuncs.conversion.registry import Converter, ConverterFactory, ConverterRegistry
from anyfuncs.funcs import (
    and_,
    consumer,
    convert_to,
    deep_equal,
    deep_equal_to,
    equal_to,
    filter_,
    filter_all,
    greater_than,
    greater_than_equal,
    index_of,
    is_greater_than,
    is_greater_than_equal,
    is_less_than,
    is_less_than_equal,
    is_lessable_kind,
    is_nil,
    is_nilable,
    less_than,
    less_than_equal,
    map_,
    map_to,
    not_,
    or_,
    panic_on_error,
    panic_on_error2,
    panic_on_false,
    panic_on_false2,
    supplier,
    supplier_of,
    ternary,
    ternary_of,
    value_of_key,
)
from anyfuncs.funcs.exceptions import (
    AnyFuncsError,
    IndexOfError,
    NilSampleError,
    OrderingError,
    PanicError,
    ShapeMismatchError,
    ValueOfKeyError,
)
from anyfuncs._version import __version__

__all__ = [
    "filter_",
    "filter_all",
    "and_",
    "or_",
    "not_",
    "map_",
    "map_to",
    "supplier",
    "supplier_of",
    "consumer",
    "equal_to",
    "deep_equal_to",
    "deep_equal",
    "is_nil",
    "is_nilable",
    "convert_to",
    "is_lessable_kind",
    "is_less_than",
    "is_less_than_equal",
    "is_greater_than",
    "is_greater_than_equal",
    "less_than",
    "less_than_equal",
    "greater_than",
    "greater_than_equal",
    "index_of",
    "value_of_key",
    "ternary",
    "ternary_of",
    "panic_on_error",
    "panic_on_error2",
    "panic_on_false",
    "panic_on_false2",
    "Converter",
    "ConverterFactory",
    "ConverterRegistry",
    "FunctionConverter",
    "default_registry",
    "AnyFuncsError",
    "ShapeMismatchError",
    "NilSampleError",
    "IndexOfError",
    "ValueOfKeyError",
    "OrderingError",
    "PanicError",
    "ConversionError",
    "TypeMismatchError",
    "NoConverterFoundError",
    "__version__",
]
