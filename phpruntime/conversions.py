"""Conversions between PHP value types and type inspection."""

from __future__ import annotations

import math
import re

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

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_INTEGER_LITERAL = re.compile(
    r"[+-]?(?:0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+|0[0-7]*|[1-9][0-9]*)"
)
_FLOATING_LITERAL = re.compile(
    r"[+-]?(?:(?:[0-9]*\.[0-9]+|[0-9]+\.)(?:[eE][+-]?[0-9]+)?|[0-9]+[eE][+-]?[0-9]+)"
)


def is_integer_literal(text: str) -> bool:
    """Whether text is an integer literal with an optional sign."""
    return _INTEGER_LITERAL.fullmatch(text) is not None


def is_floating_literal(text: str) -> bool:
    """Whether text is a floating-point literal with an optional sign."""
    return _FLOATING_LITERAL.fullmatch(text) is not None


def _parse_integer_literal(text: str) -> int:
    sign = -1 if text.startswith("-") else 1
    body = text.lstrip("+-")
    prefix = body[:2].lower()
    if prefix == "0x":
        number = int(body[2:], 16)
    elif prefix == "0b":
        number = int(body[2:], 2)
    elif prefix == "0o":
        number = int(body[2:], 8)
    elif len(body) > 1 and body.startswith("0"):
        number = int(body[1:], 8)
    else:
        number = int(body)
    number *= sign
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise PhpError(f"Integer literal out of range: {text}")
    return number


def to_bool(value: PhpValue) -> bool:
    if isinstance(value, ArrayValue):
        return len(value) != 0
    if isinstance(value, (BooleanValue, IntegerValue, FloatingValue)):
        return value.value != 0
    if isinstance(value, NullValue):
        return False
    if isinstance(value, StringValue):
        return value.value not in ("", "0")
    raise PhpError(f"boolval: Unsupported runtime value {value.type}")


def to_int(value: PhpValue) -> int:
    if isinstance(value, ArrayValue):
        return 0 if len(value) == 0 else 1
    if isinstance(value, BooleanValue):
        return 1 if value.value else 0
    if isinstance(value, FloatingValue):
        if math.isnan(value.value) or math.isinf(value.value):
            return 0
        return int(value.value)
    if isinstance(value, IntegerValue):
        return value.value
    if isinstance(value, NullValue):
        return 0
    if isinstance(value, StringValue):
        text = value.value
        if is_floating_literal(text):
            return to_int(FloatingValue(float(text)))
        if is_integer_literal(text):
            return _parse_integer_literal(text)
        return 0
    raise PhpError(f"lib_intval: Unsupported runtime value {value.type}")


def to_float(value: PhpValue) -> float:
    if isinstance(value, FloatingValue):
        return value.value
    if isinstance(value, IntegerValue):
        return float(value.value)
    if isinstance(value, StringValue):
        text = value.value
        if is_floating_literal(text):
            return float(text)
        if is_integer_literal(text):
            return float(_parse_integer_literal(text))
        return 0.0
    return float(to_int(value))


def to_string(value: PhpValue) -> str:
    if isinstance(value, ArrayValue):
        return "Array"
    if isinstance(value, BooleanValue):
        return "1" if value.value else ""
    if isinstance(value, FloatingValue):
        return value.to_php_string()
    if isinstance(value, IntegerValue):
        return str(value.value)
    if isinstance(value, NullValue):
        return ""
    if isinstance(value, StringValue):
        return value.value
    raise PhpError(f"lib_strval: Unsupported runtime value {value.type}")


_GETTYPE_NAMES = {
    ArrayValue: "array",
    BooleanValue: "boolean",
    FloatingValue: "double",
    IntegerValue: "integer",
    NullValue: "NULL",
    StringValue: "string",
}

_DEBUG_TYPE_NAMES = {
    ArrayValue: "array",
    BooleanValue: "bool",
    FloatingValue: "float",
    IntegerValue: "int",
    NullValue: "null",
    StringValue: "string",
}


def gettype(value: PhpValue) -> str:
    return _GETTYPE_NAMES.get(type(value), "unknown type")


def get_debug_type(value: PhpValue) -> str:
    return _DEBUG_TYPE_NAMES.get(type(value), "unknown type")


def is_array(value: PhpValue) -> bool:
    return isinstance(value, ArrayValue)


def is_bool(value: PhpValue) -> bool:
    return isinstance(value, BooleanValue)


def is_float(value: PhpValue) -> bool:
    return isinstance(value, FloatingValue)


def is_int(value: PhpValue) -> bool:
    return isinstance(value, IntegerValue)


def is_null(value: PhpValue) -> bool:
    return isinstance(value, NullValue)


def is_scalar(value: PhpValue) -> bool:
    return isinstance(value, (BooleanValue, IntegerValue, FloatingValue, StringValue))


def is_string(value: PhpValue) -> bool:
    return isinstance(value, StringValue)