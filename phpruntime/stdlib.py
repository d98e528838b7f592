"""Library functions that work on PHP values alone."""

from __future__ import annotations

from phpruntime.conversions import get_debug_type, is_scalar
from phpruntime.values import (
    ArrayValue,
    BooleanValue,
    FloatingValue,
    IntegerValue,
    NullValue,
    PhpError,
    PhpValue,
    StringValue,
)

_ALLOWED_KEY_TYPES = (StringValue, IntegerValue, FloatingValue, BooleanValue, NullValue)


def to_array(value: PhpValue) -> ArrayValue:
    """Convert a value to an array.

    NULL becomes an empty array; a scalar becomes an array with that
    scalar stored under the key 0.
    """
    if isinstance(value, NullValue):
        return ArrayValue()
    if is_scalar(value):
        return ArrayValue([(IntegerValue(0), value)])
    raise PhpError(f"lib_arrayval: Unsupported type {value.type}")


def array_key_exists(key: PhpValue, array: ArrayValue) -> bool:
    """Whether array holds an element under key."""
    if not isinstance(key, _ALLOWED_KEY_TYPES):
        raise PhpError(f"Values of type {key.type} are not allowed as array key")
    return key in array


def strlen(string: PhpValue) -> int:
    """The length of a string in bytes."""
    if not isinstance(string, StringValue):
        raise PhpError(
            "Uncaught TypeError: strlen(): Argument #1 ($string) must be of type string, "
            f"{get_debug_type(string)} given"
        )
    return len(string.value.encode("utf-8"))