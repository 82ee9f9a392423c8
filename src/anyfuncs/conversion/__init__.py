from anyfuncs.conversion.caching import CachingConverterFactory
from anyfuncs.conversion.dynamic import DynamicConverterFactory
from anyfuncs.conversion.mappings import MappingConverterFactory
from anyfuncs.conversion.noop import NoOpConverterFactory
from anyfuncs.conversion.registry import ConverterRegistry
from anyfuncs.conversion.scalars import BinaryConverterFactory, NumericConverterFactory
from anyfuncs.conversion.sequences import SequenceConverterFactory
from anyfuncs.conversion.structs import StructConverterFactory
from anyfuncs.conversion.unions import UnionConverterFactory

default_registry = ConverterRegistry(
    CachingConverterFactory(NoOpConverterFactory()),
    CachingConverterFactory(UnionConverterFactory()),
    CachingConverterFactory(SequenceConverterFactory()),
    CachingConverterFactory(MappingConverterFactory()),
    CachingConverterFactory(NumericConverterFactory()),
    CachingConverterFactory(BinaryConverterFactory()),
    CachingConverterFactory(StructConverterFactory()),
    CachingConverterFactory(DynamicConverterFactory()),
)
