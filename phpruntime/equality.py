"""Equality (==, !=, <>) and identity (===, !==) comparison of PHP values."""

from __future__ import annotations

from phpruntime.comparison import compare_relation
from phpruntime.values import BooleanValue, IntegerValue, PhpError, PhpValue, identical


def compare(lhs: PhpValue, operator: str, rhs: PhpValue) -> BooleanValue:
    """Compare two values for equality or identity."""
    if operator == "<>":
        operator = "!="

    if operator in ("==", "!="):
        ordering = compare_relation(lhs, "<=>", rhs)
        if not isinstance(ordering, IntegerValue):
            raise PhpError(f'compare: Unexpected result type {ordering.type} for operator "<=>"')
        equal = ordering.value == 0
        return BooleanValue(not equal if operator == "!=" else equal)

    if operator in ("===", "!=="):
        same = identical(lhs, rhs)
        return BooleanValue(not same if operator == "!==" else same)

    raise PhpError(f'compare: Operator "{operator}" not implemented')