"""Errors raised while converting a dynamic value to a declared type.

All of them are ``TypeError`` subclasses and happen at call time: the value
an adapted callable receives (or returns) is only known once it exists.
"""

from typing import Any

from anyfuncs.utils.types.annotations import type_name


class ConversionError(TypeError):
    """A value could not be converted to a declared type.

    Attributes:
        source: The value that failed to convert.
        target_type: The annotation it was converted to.
        message: Description of the failure, naming the target type.
    """

    def __init__(self, message: str, *, source: Any = None, target_type: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.target_type = target_type

    @property
    def source_type(self) -> type:
        return type(self.source)

    def __str__(self) -> str:
        return self.message


class TypeMismatchError(ConversionError):
    """The value is not an instance of the type it was expected to have."""

    def __init__(self, source: Any, target_type: Any, message: str | None = None) -> None:
        if message is None:
            message = (
                f"expected {type_name(target_type)}, "
                f"got {type(source).__name__} value {source!r}"
            )
        super().__init__(message, source=source, target_type=target_type)


class NoConverterFoundError(ConversionError):
    """Nothing converts values of this runtime type to the target type."""

    def __init__(self, source: Any, target_type: Any, message: str | None = None) -> None:
        if message is None:
            message = (
                f"No converter found: cannot convert {type(source).__name__} "
                f"to type {type_name(target_type)}"
            )
        super().__init__(message, source=source, target_type=target_type)
