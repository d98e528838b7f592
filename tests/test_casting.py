import pytest

from phpruntime.casting import check_parameter_types, convert, deep_copy
from phpruntime.values import (
    ArrayValue,
    BooleanValue,
    FloatingValue,
    IntegerValue,
    NullValue,
    PhpError,
    StringValue,
    ValueType,
    VoidValue,
)


def test_convert_string_to_integer():
    assert convert(ValueType.INTEGER, StringValue("42")) == IntegerValue(42)


def test_convert_float_to_string():
    assert convert(ValueType.STRING, FloatingValue(1.5)) == StringValue("1.5")


def test_convert_integer_to_float():
    assert convert(ValueType.FLOATING, IntegerValue(42)) == FloatingValue(42.0)


def test_convert_to_boolean():
    assert convert(ValueType.BOOLEAN, StringValue("0")) == BooleanValue(False)
    assert convert(ValueType.BOOLEAN, IntegerValue(42)) == BooleanValue(True)


def test_convert_null_to_string_is_empty():
    assert convert(ValueType.STRING, NullValue()) == StringValue("")


def test_convert_round_trip_integer_string():
    for number in (-2, 0, 42):
        text = convert(ValueType.STRING, IntegerValue(number))
        assert convert(ValueType.INTEGER, text) == IntegerValue(number)


@pytest.mark.parametrize("target", [ValueType.ARRAY, ValueType.NULL, ValueType.VOID])
def test_convert_unsupported_target(target):
    with pytest.raises(PhpError, match="Unsupported runtime value"):
        convert(target, IntegerValue(1))


def test_deep_copy_scalar_is_same_object():
    value = IntegerValue(7)
    assert deep_copy(value) is value


def test_deep_copy_array_is_independent():
    inner = ArrayValue([(IntegerValue(0), IntegerValue(1))])
    outer = ArrayValue([(IntegerValue(0), inner), (StringValue("k"), StringValue("v"))])
    copy = deep_copy(outer)
    assert copy is not outer
    assert copy.keys() == outer.keys()
    copied_inner = copy.get(IntegerValue(0))
    assert copied_inner is not inner
    copied_inner.set(IntegerValue(1), IntegerValue(2))
    assert len(inner) == 1
    assert len(copied_inner) == 2
    assert copy.get(StringValue("k")) == StringValue("v")


@pytest.mark.parametrize(
    "value, expected",
    [
        (IntegerValue(1), ["int"]),
        (FloatingValue(1.0), ["float"]),
        (StringValue("a"), ["string"]),
        (BooleanValue(True), ["bool"]),
        (ArrayValue(), ["array"]),
        (NullValue(), ["NULL"]),
        (VoidValue(), ["void"]),
        (IntegerValue(1), ["string", "int"]),
        (ArrayValue(), ["mixed"]),
    ],
)
def test_check_parameter_types_match(value, expected):
    assert check_parameter_types(value, expected) is None


def test_check_parameter_types_mismatch():
    with pytest.raises(PhpError, match="Types do not match"):
        check_parameter_types(StringValue("a"), ["int", "float"])


def test_check_parameter_types_empty_list():
    with pytest.raises(PhpError, match="Types do not match"):
        check_parameter_types(IntegerValue(1), [])