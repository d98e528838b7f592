"""Relational comparison (<, <=, >, >=, <=>) of PHP values."""

from __future__ import annotations

from phpruntime.casting import convert
from phpruntime.conversions import (
    is_floating_literal,
    is_integer_literal,
    to_bool,
    to_float,
    to_int,
    to_string,
)
from phpruntime.stdlib import to_array
from phpruntime.values import (
    ArrayValue,
    BooleanValue,
    FloatingValue,
    IntegerValue,
    NullValue,
    PhpError,
    PhpValue,
    StringValue,
    ValueType,
    identical,
)


def _is_numeric(text: str) -> bool:
    return is_integer_literal(text) or is_floating_literal(text)


def _is_blank(text: str) -> bool:
    return text.strip(" \t") == ""


def _fixed(operator: str, less: bool, where: str) -> PhpValue:
    """Result of a comparison whose outcome is decided by the operand types alone."""
    if operator in ("<", "<="):
        return BooleanValue(less)
    if operator == "<=>":
        return IntegerValue(-1 if less else 1)
    raise PhpError(f'{where}: Operator "{operator}" not implemented')


def _from_order(operator: str, order: int, where: str) -> PhpValue:
    """Result of a comparison from an ordering of -1, 0 or 1."""
    if operator == "<":
        return BooleanValue(order == -1)
    if operator == "<=":
        return BooleanValue(order < 1)
    if operator == "<=>":
        return IntegerValue(order)
    raise PhpError(f'{where}: Operator "{operator}" not implemented')


def _ordered(operator: str, lhs: int | float, rhs: int | float, where: str) -> PhpValue:
    if operator == "<":
        return BooleanValue(lhs < rhs)
    if operator == "<=":
        return BooleanValue(lhs <= rhs)
    if operator == "<=>":
        if lhs > rhs:
            return IntegerValue(1)
        if lhs == rhs:
            return IntegerValue(0)
        return IntegerValue(-1)
    raise PhpError(f'{where}: Operator "{operator}" not implemented')


def _compare_array(lhs: ArrayValue, operator: str, rhs: PhpValue) -> PhpValue:
    where = "compareRelationArray"
    if isinstance(rhs, NullValue):
        rhs = to_array(rhs)

    if isinstance(rhs, ArrayValue):
        result = 0
        if len(lhs) != len(rhs):
            result = -1 if len(lhs) < len(rhs) else 1
        else:
            for key, lhs_value in lhs.items():
                rhs_value = rhs.get(key)
                if rhs_value is None:
                    continue
                if identical(lhs_value, rhs_value):
                    continue
                outcome = compare_relation(lhs_value, operator, rhs_value)
                if isinstance(outcome, BooleanValue):
                    result = -1 if outcome.value else 1
                elif isinstance(outcome, IntegerValue):
                    result = outcome.value
        return _from_order(operator, result, where)

    if isinstance(rhs, BooleanValue):
        return _compare_boolean(BooleanValue(to_bool(lhs)), operator, rhs)
    if isinstance(rhs, (FloatingValue, IntegerValue, StringValue)):
        return _fixed(operator, False, where)
    raise PhpError(f'{where}: Type "{rhs.type}" not implemented')


def _compare_boolean(lhs: BooleanValue, operator: str, rhs: PhpValue) -> PhpValue:
    rhs_int = 1 if to_bool(rhs) else 0
    lhs_int = to_int(lhs)
    return _ordered(operator, lhs_int, rhs_int, "compareRelationBoolean")


def _compare_floating(lhs: FloatingValue, operator: str, rhs: PhpValue) -> PhpValue:
    where = "compareRelationFloating"
    if isinstance(rhs, StringValue):
        if _is_blank(rhs.value):
            return _fixed(operator, False, where)
        if not _is_numeric(rhs.value):
            return _fixed(operator, True, where)

    if isinstance(rhs, (NullValue, IntegerValue, StringValue)):
        rhs = convert(ValueType.FLOATING, rhs)

    if isinstance(rhs, ArrayValue):
        return _fixed(operator, True, where)
    if isinstance(rhs, BooleanValue):
        return _compare_boolean(BooleanValue(to_bool(lhs)), operator, rhs)
    if isinstance(rhs, FloatingValue):
        return _ordered(operator, lhs.value, rhs.value, where)
    raise PhpError(f'{where}: Type "{rhs.type}" not implemented')


def _compare_integer(lhs: IntegerValue, operator: str, rhs: PhpValue) -> PhpValue:
    where = "compareRelationInteger"
    if isinstance(rhs, StringValue):
        if _is_blank(rhs.value):
            return _fixed(operator, False, where)
        if not _is_numeric(rhs.value):
            return _fixed(operator, True, where)

    if isinstance(rhs, (NullValue, StringValue)):
        rhs = convert(ValueType.INTEGER, rhs)

    if isinstance(rhs, ArrayValue):
        return _fixed(operator, True, where)
    if isinstance(rhs, BooleanValue):
        return _compare_boolean(BooleanValue(to_bool(lhs)), operator, rhs)
    if isinstance(rhs, FloatingValue):
        return _compare_floating(FloatingValue(to_float(lhs)), operator, rhs)
    if isinstance(rhs, IntegerValue):
        return _ordered(operator, lhs.value, rhs.value, where)
    raise PhpError(f'{where}: Type "{rhs.type}" not implemented')


def _compare_null(operator: str, rhs: PhpValue) -> PhpValue:
    null = NullValue()
    if isinstance(rhs, ArrayValue):
        return _compare_array(to_array(null), operator, rhs)
    if isinstance(rhs, BooleanValue):
        return _compare_boolean(BooleanValue(to_bool(null)), operator, rhs)
    if isinstance(rhs, FloatingValue):
        return _compare_floating(FloatingValue(to_float(null)), operator, rhs)
    if isinstance(rhs, IntegerValue):
        return _compare_integer(IntegerValue(to_int(null)), operator, rhs)
    if isinstance(rhs, NullValue):
        if operator == "<":
            return BooleanValue(False)
        if operator == "<=":
            return BooleanValue(True)
        if operator == "<=>":
            return IntegerValue(0)
        raise PhpError(
            f'compareRelationNull: Operator "{operator}" not implemented for type NULL'
        )
    if isinstance(rhs, StringValue):
        return _compare_string(StringValue(to_string(null)), operator, rhs)
    raise PhpError(f'compareRelationNull: Type "{rhs.type}" not implemented')


def _compare_string(lhs: StringValue, operator: str, rhs: PhpValue) -> PhpValue:
    where = "compareRelationString"
    if isinstance(rhs, (FloatingValue, IntegerValue)):
        if _is_blank(lhs.value):
            return _fixed(operator, True, where)
        if not _is_numeric(lhs.value):
            return _fixed(operator, False, where)

    if isinstance(rhs, NullValue):
        rhs = convert(ValueType.STRING, rhs)

    if isinstance(rhs, ArrayValue):
        return _fixed(operator, True, where)
    if isinstance(rhs, BooleanValue):
        return _compare_boolean(BooleanValue(to_bool(lhs)), operator, rhs)
    if isinstance(rhs, FloatingValue):
        return _compare_floating(FloatingValue(to_float(lhs)), operator, rhs)
    if isinstance(rhs, IntegerValue):
        return _compare_integer(IntegerValue(to_int(lhs)), operator, rhs)
    if isinstance(rhs, StringValue):
        if _is_numeric(rhs.value):
            if is_floating_literal(lhs.value):
                return _compare_floating(FloatingValue(to_float(lhs)), operator, rhs)
            if is_integer_literal(lhs.value):
                return _compare_integer(IntegerValue(to_int(lhs)), operator, rhs)
        left = lhs.value.encode("utf-8")
        right = rhs.value.encode("utf-8")
        order = 0 if left == right else (-1 if left < right else 1)
        return _from_order(operator, order, where)
    raise PhpError(f'{where}: Type "{rhs.type}" not implemented')


def compare_relation(lhs: PhpValue, operator: str, rhs: PhpValue) -> PhpValue:
    """Compare two values with <, <=, >, >= (bool result) or <=> (int result)."""
    if operator == ">":
        return compare_relation(rhs, "<", lhs)
    if operator == ">=":
        return compare_relation(rhs, "<=", lhs)

    if isinstance(lhs, ArrayValue):
        return _compare_array(lhs, operator, rhs)
    if isinstance(lhs, BooleanValue):
        return _compare_boolean(lhs, operator, rhs)
    if isinstance(lhs, FloatingValue):
        return _compare_floating(lhs, operator, rhs)
    if isinstance(lhs, IntegerValue):
        return _compare_integer(lhs, operator, rhs)
    if isinstance(lhs, StringValue):
        return _compare_string(lhs, operator, rhs)
    if isinstance(lhs, NullValue):
        return _compare_null(operator, rhs)
    raise PhpError(f'compareRelation: Type "{lhs.type}" not implemented')