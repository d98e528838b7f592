"""Human-readable renderings of PHP values: print_r, var_dump and var_export."""

from __future__ import annotations

from phpruntime.conversions import to_string
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

_EOL = "\n"


def _print_r_var(value: PhpValue, depth: int) -> str:
    if isinstance(value, ArrayValue):
        outer = " " * (depth - 4)
        inner = " " * depth
        lines = [f"Array{_EOL}{outer}({_EOL}"]
        for key, element in value.items():
            key_text = _print_r_var(key, depth + 4)
            value_text = _print_r_var(element, depth + 8)
            lines.append(f"{inner}[{key_text}] => {value_text}{_EOL}")
        lines.append(f"{outer})")
        return "".join(lines)
    if isinstance(value, BooleanValue):
        return "1" if value.value else ""
    if isinstance(value, (FloatingValue, IntegerValue)):
        return to_string(value)
    if isinstance(value, NullValue):
        return ""
    if isinstance(value, StringValue):
        return value.value
    raise PhpError(f"lib_print_r_var: Unsupported runtime value {value.type}")


def print_r(value: PhpValue) -> str:
    """Return the print_r rendering of value."""
    return _print_r_var(value, 4)


def _var_dump_var(value: PhpValue, depth: int) -> str:
    if isinstance(value, ArrayValue):
        indent = " " * depth
        parts = [f"array({len(value)}) {{{_EOL}"]
        for key, element in value.items():
            if isinstance(key, IntegerValue):
                parts.append(f"{indent}[{key.value}]=>{_EOL}")
            elif isinstance(key, StringValue):
                parts.append(f'{indent}["{key.value}"]=>{_EOL}')
            else:
                raise PhpError(f"lib_var_dump_var: Unsupported array key type {key.type}")
            parts.append(indent)
            parts.append(_var_dump_var(element, depth + 2))
        parts.append(" " * (depth - 2) + "}" + _EOL)
        return "".join(parts)
    if isinstance(value, BooleanValue):
        return ("bool(true)" if value.value else "bool(false)") + _EOL
    if isinstance(value, FloatingValue):
        return f"float({to_string(value)}){_EOL}"
    if isinstance(value, IntegerValue):
        return f"int({to_string(value)}){_EOL}"
    if isinstance(value, NullValue):
        return "NULL" + _EOL
    if isinstance(value, StringValue):
        text = value.value
        return f'string({len(text.encode("utf-8"))}) "{text}"{_EOL}'
    raise PhpError(f"lib_var_dump_var: Unsupported runtime value {value.type}")


def var_dump(*args: PhpValue) -> str:
    """Return the var_dump rendering of every argument, in order."""
    if not args:
        raise PhpError(
            "Uncaught ArgumentCountError: var_dump() expects at least 1 argument, 0 given"
        )
    return "".join(_var_dump_var(value, 2) for value in args)


def _var_export_var(value: PhpValue, depth: int) -> str:
    if isinstance(value, ArrayValue):
        outer = " " * (depth - 2)
        inner = " " * depth
        parts = [f"{outer}array ({_EOL}"]
        for key, element in value.items():
            key_text = _var_export_var(key, depth + 2)
            value_text = _var_export_var(element, depth + 2)
            if isinstance(element, ArrayValue):
                parts.append(f"{inner}{key_text} => {_EOL}{outer}{value_text},{_EOL}")
            else:
                parts.append(f"{inner}{key_text} => {value_text},{_EOL}")
        parts.append(f"{outer})")
        return "".join(parts)
    if isinstance(value, BooleanValue):
        return "true" if value.value else "false"
    if isinstance(value, (FloatingValue, IntegerValue)):
        return to_string(value)
    if isinstance(value, NullValue):
        return "NULL"
    if isinstance(value, StringValue):
        return f"'{value.value}'"
    raise PhpError(f"lib_var_export: Unsupported runtime value {value.type}")


def var_export(value: PhpValue) -> str:
    """Return the var_export rendering of value."""
    return _var_export_var(value, 2)