"""
ChronoParts - Validation Module.

This module provides the error values and the result container returned
by every fallible operation of the calendar engine. Validation failures
are values, not exceptions: callers branch on Result.is_ok and read the
offending field from Result.error.

Error Taxonomy:
    - RangeError: a field lies outside its domain for the given context
    - CoherenceError: a redundant field disagrees with the derived value
    - UnderspecifiedError: no addressing scheme can resolve a day

Classes:
    DateTimeError: Base class of all error values.
    RangeError: Field outside of its declared domain.
    CoherenceError: Field inconsistent with the other supplied fields.
    UnderspecifiedError: Not enough fields to resolve a day.
    InvalidDateTime: Exception raised by Result.unwrap on a failure.
    Result: Container for a value or an error.
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class DateTimeError:
    """
    Represents a single validation failure.

    Attributes:
        field_name: The keyword name of the field that failed validation.
        message: A human-readable error message.
    """

    field_name: str
    message: str

    def __str__(self) -> str:
        """Returns a formatted error message for display."""
        return f"Error: '{self.field_name}' - {self.message}"


@dataclass(frozen=True)
class RangeError(DateTimeError):
    """
    A supplied field lies outside its declared domain.

    Attributes:
        value: The received value.
        min_value: Smallest accepted value.
        max_value: Largest accepted value.
    """

    value: Any
    min_value: Any
    max_value: Any


@dataclass(frozen=True)
class CoherenceError(DateTimeError):
    """
    A supplied field disagrees with the value derived from the other fields.

    Attributes:
        value: The received value.
        expected: The value derived from the authoritative fields.
    """

    value: Any
    expected: Any


@dataclass(frozen=True)
class UnderspecifiedError(DateTimeError):
    """Neither the Gregorian nor the ISO field set can resolve a day."""


class InvalidDateTime(ValueError):
    """
    Raised by Result.unwrap when the result holds an error.

    Attributes:
        error: The DateTimeError carried by the failed result.
    """

    def __init__(self, error: DateTimeError):
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Container for the outcome of a fallible operation.

    Exactly one of value and error is set.

    Example:
        >>> result = DateTime.from_timestamp(0, 0)
        >>> if result.is_ok:
        ...     print(result.value.year)
        1970
    """

    value: Optional[T] = None
    error: Optional[DateTimeError] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        """Builds a successful result."""
        return cls(value=value)

    @classmethod
    def fail(cls, error: DateTimeError) -> "Result[T]":
        """Builds a failed result."""
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        """Returns True if the operation succeeded."""
        return self.error is None

    def and_then(self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        """
        Chains a fallible operation on the value of a successful result.

        A failed result is returned unchanged, so a chain stops at the
        first failure.
        """
        if self.error is not None:
            return Result.fail(self.error)
        return func(self.value)

    def unwrap(self) -> T:
        """
        Returns the value of a successful result.

        Raises:
            InvalidDateTime: If the result holds an error.
        """
        if self.error is not None:
            raise InvalidDateTime(self.error)
        return self.value


def is_integer(value: Any) -> bool:
    """Returns True for int values, excluding booleans."""
    return isinstance(value, int) and not isinstance(value, bool)


def check_integer_range(
    value: Any,
    field_name: str,
    min_value: int,
    max_value: int
) -> Optional[RangeError]:
    """
    Checks that value is an integer in [min_value, max_value].

    Args:
        value: Value to check.
        field_name: Name of the field for error messages.
        min_value: Smallest accepted value.
        max_value: Largest accepted value.

    Returns:
        None if the value is valid, a RangeError otherwise.
    """
    if not is_integer(value):
        return RangeError(
            field_name=field_name,
            message=f"must be an integer in [{min_value}, {max_value}] "
                    f"(received: {value!r})",
            value=value,
            min_value=min_value,
            max_value=max_value
        )

    if not min_value <= value <= max_value:
        return RangeError(
            field_name=field_name,
            message=f"must be between {min_value} and {max_value} "
                    f"(received: {value})",
            value=value,
            min_value=min_value,
            max_value=max_value
        )

    return None


def check_real_range(
    value: Any,
    field_name: str,
    min_value: float,
    max_value: float
) -> Optional[RangeError]:
    """
    Checks that value is a finite real number in [min_value, max_value].

    Args:
        value: Value to check.
        field_name: Name of the field for error messages.
        min_value: Smallest accepted value.
        max_value: Largest accepted value.

    Returns:
        None if the value is valid, a RangeError otherwise.
    """
    if (
        not isinstance(value, Real)
        or isinstance(value, bool)
        or not math.isfinite(value)
        or not min_value <= value <= max_value
    ):
        return RangeError(
            field_name=field_name,
            message=f"must be a number between {min_value} and {max_value} "
                    f"(received: {value!r})",
            value=value,
            min_value=min_value,
            max_value=max_value
        )

    return None


def check_value(
    value: Any,
    field_name: str,
    expected: Any
) -> Optional[CoherenceError]:
    """
    Checks that a redundant field equals the value derived from the others.

    Args:
        value: The supplied value.
        field_name: Name of the field for error messages.
        expected: The canonical value.

    Returns:
        None if both agree, a CoherenceError otherwise.
    """
    if value != expected or (is_integer(expected) and not is_integer(value)):
        return CoherenceError(
            field_name=field_name,
            message=f"expected {expected} (received: {value!r})",
            value=value,
            expected=expected
        )

    return None


def first_error(*errors: Optional[DateTimeError]) -> Optional[DateTimeError]:
    """Returns the first error that is set, or None."""
    for error in errors:
        if error is not None:
            return error
    return None
