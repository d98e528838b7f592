import pytest

from phpruntime.stdlib import array_key_exists, strlen, to_array
from phpruntime.values import (
    ArrayValue,
    BooleanValue,
    IntegerValue,
    NullValue,
    PhpError,
    StringValue,
)


def test_array_key_exists():
    array = ArrayValue()
    array.set(IntegerValue(0), IntegerValue(42))
    assert array_key_exists(IntegerValue(0), array) is True
    assert array_key_exists(IntegerValue(1), array) is False


def test_array_key_exists_string_key():
    array = ArrayValue([(StringValue("a"), IntegerValue(1))])
    assert array_key_exists(StringValue("a"), array) is True
    assert array_key_exists(StringValue("b"), array) is False


def test_array_key_exists_rejects_array_key():
    with pytest.raises(PhpError, match="not allowed as array key"):
        array_key_exists(ArrayValue(), ArrayValue())


@pytest.mark.parametrize(
    "text, expected",
    [("abcdef", 6), (" ab cd ", 7), (" äb ćd ", 9)],
)
def test_strlen(text, expected):
    assert strlen(StringValue(text)) == expected


def test_strlen_rejects_non_string():
    with pytest.raises(PhpError, match="must be of type string"):
        strlen(IntegerValue(3))


def test_to_array_null_is_empty():
    assert len(to_array(NullValue())) == 0


def test_to_array_scalar_under_key_zero():
    result = to_array(IntegerValue(5))
    assert len(result) == 1
    assert result.get(IntegerValue(0)) == IntegerValue(5)


def test_to_array_boolean():
    result = to_array(BooleanValue(True))
    assert result.keys() == [IntegerValue(0)]
    assert result.get(IntegerValue(0)) == BooleanValue(True)


def test_to_array_rejects_array():
    with pytest.raises(PhpError, match="Unsupported type"):
        to_array(ArrayValue())