import pytest

from phpruntime.equality import compare
from phpruntime.values import (
    ArrayValue,
    BooleanValue,
    FloatingValue,
    IntegerValue,
    NullValue,
    PhpError,
    StringValue,
    VoidValue,
)


def _array(*elements):
    return ArrayValue((IntegerValue(index), element) for index, element in enumerate(elements))


@pytest.mark.parametrize(
    "lhs, rhs",
    [
        (IntegerValue(1), IntegerValue(1)),
        (IntegerValue(1), FloatingValue(1.0)),
        (StringValue("abc"), StringValue("abc")),
        (StringValue("42"), IntegerValue(42)),
        (NullValue(), BooleanValue(False)),
        (NullValue(), IntegerValue(0)),
        (NullValue(), NullValue()),
        (_array(IntegerValue(1)), _array(IntegerValue(1))),
    ],
)
def test_loosely_equal_values(lhs, rhs):
    assert compare(lhs, "==", rhs) == BooleanValue(True)
    assert compare(lhs, "!=", rhs) == BooleanValue(False)


@pytest.mark.parametrize(
    "lhs, rhs",
    [
        (IntegerValue(1), IntegerValue(2)),
        (StringValue("abc"), StringValue("abd")),
        (BooleanValue(True), BooleanValue(False)),
        (_array(IntegerValue(1)), _array(IntegerValue(1), IntegerValue(2))),
    ],
)
def test_loosely_unequal_values(lhs, rhs):
    assert compare(lhs, "==", rhs) == BooleanValue(False)
    assert compare(lhs, "!=", rhs) == BooleanValue(True)


@pytest.mark.parametrize(
    "lhs, rhs",
    [
        (IntegerValue(3), IntegerValue(3)),
        (IntegerValue(3), IntegerValue(4)),
        (StringValue("x"), NullValue()),
        (FloatingValue(2.5), StringValue("2.5")),
    ],
)
def test_angle_operator_matches_not_equal(lhs, rhs):
    assert compare(lhs, "<>", rhs) == compare(lhs, "!=", rhs)


@pytest.mark.parametrize(
    "lhs, rhs",
    [
        (IntegerValue(7), IntegerValue(7)),
        (StringValue("a"), StringValue("a")),
        (NullValue(), NullValue()),
        (BooleanValue(True), BooleanValue(True)),
        (FloatingValue(1.5), FloatingValue(1.5)),
    ],
)
def test_identical_values(lhs, rhs):
    assert compare(lhs, "===", rhs) == BooleanValue(True)
    assert compare(lhs, "!==", rhs) == BooleanValue(False)


@pytest.mark.parametrize(
    "lhs, rhs",
    [
        (StringValue("1"), IntegerValue(1)),
        (IntegerValue(1), FloatingValue(1.0)),
        (NullValue(), BooleanValue(False)),
        (IntegerValue(1), IntegerValue(2)),
    ],
)
def test_not_identical_values(lhs, rhs):
    assert compare(lhs, "===", rhs) == BooleanValue(False)
    assert compare(lhs, "!==", rhs) == BooleanValue(True)


def test_identity_is_symmetric():
    pairs = [
        (StringValue("1"), IntegerValue(1)),
        (IntegerValue(5), IntegerValue(5)),
        (NullValue(), StringValue("")),
    ]
    for lhs, rhs in pairs:
        assert compare(lhs, "===", rhs) == compare(rhs, "===", lhs)


def test_unknown_operator_raises():
    with pytest.raises(PhpError, match="not implemented"):
        compare(IntegerValue(1), "=~", IntegerValue(1))


def test_identity_of_void_raises():
    with pytest.raises(PhpError):
        compare(VoidValue(), "===", VoidValue())