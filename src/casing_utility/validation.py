from __future__ import annotations

import logging
from enum import Enum, unique
from typing import TYPE_CHECKING, NewType

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

ValidatedString = NewType("ValidatedString", str)

_ARRAY_TYPES = (list, tuple)
_PRIMITIVE_TYPES = (bool, int, float, complex, bytes, bytearray)


@unique
class ValueCategory(Enum):
    ARRAY = "an array"
    OBJECT = "an object"
    PRIMITIVE = "a primitive"


def categorize(value: object) -> ValueCategory:
    """Classify a non-string value for diagnostics."""
    if isinstance(value, _ARRAY_TYPES):
        return ValueCategory.ARRAY
    if isinstance(value, _PRIMITIVE_TYPES):
        return ValueCategory.PRIMITIVE
    return ValueCategory.OBJECT


class CaseConversionError(Exception):
    """Base class for every input rejected by a case conversion."""

    def __init__(
        self, message: str, *, value: object, caller: str | None = None
    ) -> None:
        super().__init__(f"{caller}: {message}" if caller else message)
        self.value = value
        self.caller = caller

    def __reduce__(
        self,
    ) -> tuple[Callable[..., object], tuple[object, ...], dict[str, object]]:
        # Subclass __init__ signatures differ from self.args; bypass them.
        return _rebuild_error, (type(self), self.args), self.__dict__


def _rebuild_error(
    cls: type[CaseConversionError], args: tuple[object, ...]
) -> CaseConversionError:
    error = cls.__new__(cls)
    error.args = args
    return error


class NullOrUndefinedError(CaseConversionError, TypeError):
    """Raised when the input is None."""

    def __init__(self, *, caller: str | None = None) -> None:
        super().__init__(
            "input is required and must be a non-empty string",
            value=None,
            caller=caller,
        )


class TypeMismatchError(CaseConversionError, TypeError):
    """Raised when the input is present but is not a string."""

    def __init__(self, value: object, *, caller: str | None = None) -> None:
        self.category = categorize(value)
        received = (
            type(value).__name__
            if self.category is ValueCategory.PRIMITIVE
            else self.category.value
        )
        super().__init__(
            f"expected a string but received {received}",
            value=value,
            caller=caller,
        )


class EmptyInputError(CaseConversionError, ValueError):
    def __init__(self, value: str, *, caller: str | None = None) -> None:
        super().__init__(
            "input is an empty string after trimming",
            value=value,
            caller=caller,
        )


class NoAlphanumericContentError(CaseConversionError, ValueError):
    def __init__(self, value: str, *, caller: str | None = None) -> None:
        super().__init__(
            "input contains no alphanumeric characters",
            value=value,
            caller=caller,
        )


def validate(value: object, *, caller: str | None = None) -> ValidatedString:
    """Return the stripped string, or raise if it can't be converted.

    Raises NullOrUndefinedError for None, TypeMismatchError for any other
    non-string, and EmptyInputError when only whitespace remains.
    """
    error: CaseConversionError
    if value is None:
        error = NullOrUndefinedError(caller=caller)
    elif not isinstance(value, str):
        error = TypeMismatchError(value, caller=caller)
    elif not (stripped := value.strip()):
        error = EmptyInputError(value, caller=caller)
    else:
        return ValidatedString(stripped)
    logger.debug("Rejected input: %s", error)
    raise error
