# phpruntime

The value layer of a PHP interpreter, written in pure Python with no
dependencies. It models PHP's runtime values and reproduces PHP's rules for
converting, inspecting, printing and comparing them.

## What it has

- `phpruntime.values`: the runtime values `NullValue`, `BooleanValue`,
  `IntegerValue`, `FloatingValue`, `StringValue`, `VoidValue` and the ordered
  `ArrayValue` (with `set`, `get`, `keys`, `values`, `items`, `len()` and
  `in`); the `ValueType` enum; the `identical` check behind `===`; the
  `Request` record; and `PhpError`, the exception every module raises.
- `phpruntime.conversions`: PHP's type juggling (`to_bool`, `to_int`,
  `to_float`, `to_string`), literal checks (`is_integer_literal`,
  `is_floating_literal`), `gettype`, `get_debug_type` and the `is_array`,
  `is_bool`, `is_float`, `is_int`, `is_null`, `is_scalar`, `is_string` checks.
- `phpruntime.dump`: `print_r`, `var_dump` and `var_export`, each returning
  the text PHP would print.
- `phpruntime.stdlib`: `to_array`, `array_key_exists` and `strlen` (length in
  UTF-8 bytes).
- `phpruntime.casting`: `convert` to a target `ValueType`, `deep_copy` of
  arrays, and `check_parameter_types` for declared parameter types.
- `phpruntime.comparison`: `compare_relation` for `<`, `<=`, `>`, `>=`
  (boolean result) and `<=>` (integer result), following PHP's mixed-type
  comparison table.
- `phpruntime.equality`: `compare` for `==`, `!=`, `<>`, `===` and `!==`.

## Installation

```
pip install .
```

## Example

```python
from phpruntime.values import ArrayValue, IntegerValue, StringValue
from phpruntime.dump import print_r, var_dump
from phpruntime.comparison import compare_relation
from phpruntime.equality import compare

array = ArrayValue()
array.set(IntegerValue(0), IntegerValue(1))
array.set(IntegerValue(1), StringValue("two"))

print(print_r(array))
print(var_dump(IntegerValue(42)), end="")

same = compare(StringValue("42"), "==", IntegerValue(42))          # BooleanValue(True)
order = compare_relation(StringValue("abc"), "<=>", StringValue("abd"))  # IntegerValue(-1)
```

## What it does not do

- It does not parse or run PHP scripts and has no command-line program; it
  works on values you build in Python.
- It has no arithmetic, bitwise, string-concatenation, unary or
  increment/decrement operators; only conversion, printing and comparison.
- Objects and resources are not modelled; passing unsupported values raises
  `PhpError`.

## Running the tests

```
pip install .[test]
pytest
```