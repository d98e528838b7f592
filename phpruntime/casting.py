"""Conversion of values to a target type, copying and parameter type checks."""

from __future__ import annotations

from typing import Iterable

from phpruntime.conversions import to_bool, to_float, to_int, to_string
from phpruntime.values import (
    ArrayValue,
    BooleanValue,
    FloatingValue,
    IntegerValue,
    PhpError,
    PhpValue,
    StringValue,
    ValueType,
)

_PARAMETER_TYPE_NAMES = {
    ValueType.ARRAY: "array",
    ValueType.BOOLEAN: "bool",
    ValueType.FLOATING: "float",
    ValueType.INTEGER: "int",
    ValueType.NULL: "NULL",
    ValueType.STRING: "string",
    ValueType.VOID: "void",
}


def convert(value_type: ValueType, value: PhpValue) -> PhpValue:
    """Convert value to the scalar type value_type."""
    if value_type is ValueType.BOOLEAN:
        return BooleanValue(to_bool(value))
    if value_type is ValueType.FLOATING:
        return FloatingValue(to_float(value))
    if value_type is ValueType.INTEGER:
        return IntegerValue(to_int(value))
    if value_type is ValueType.STRING:
        return StringValue(to_string(value))
    raise PhpError(f"runtimeValueToValueType: Unsupported runtime value: {value_type}")


def deep_copy(value: PhpValue) -> PhpValue:
    """Copy arrays recursively; other values are immutable and returned as is."""
    if not isinstance(value, ArrayValue):
        return value
    return ArrayValue((key, deep_copy(element)) for key, element in value.items())


def check_parameter_types(value: PhpValue, expected_types: Iterable[str]) -> None:
    """Raise PhpError unless value matches one of expected_types."""
    type_name = _PARAMETER_TYPE_NAMES.get(value.type)
    if type_name is None:
        raise PhpError(f"checkParameterTypes: No mapping for type {value.type}")
    for expected in expected_types:
        if expected == "mixed" or expected == type_name:
            return
    raise PhpError("Types do not match")