"""Runtime values of the PHP interpreter."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Hashable, Iterable, Iterator


class ValueType(str, Enum):
    """Kinds of runtime value."""

    VOID = "Void"
    NULL = "Null"
    ARRAY = "Array"
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    FLOATING = "Floating"
    STRING = "String"

    def __str__(self) -> str:
        return self.value


class PhpError(Exception):
    """An error raised while evaluating PHP values."""

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


class PhpValue:
    """Base class of every runtime value."""

    type: ClassVar[ValueType]


@dataclass(frozen=True)
class VoidValue(PhpValue):
    """The absence of a value."""

    type: ClassVar[ValueType] = ValueType.VOID


@dataclass(frozen=True)
class NullValue(PhpValue):
    """PHP's NULL."""

    type: ClassVar[ValueType] = ValueType.NULL


@dataclass(frozen=True)
class BooleanValue(PhpValue):
    value: bool
    type: ClassVar[ValueType] = ValueType.BOOLEAN


@dataclass(frozen=True)
class IntegerValue(PhpValue):
    value: int
    type: ClassVar[ValueType] = ValueType.INTEGER


@dataclass(frozen=True)
class FloatingValue(PhpValue):
    value: float
    type: ClassVar[ValueType] = ValueType.FLOATING

    def to_php_string(self) -> str:
        """Shortest decimal text that reads back as this float, without exponent."""
        number = self.value
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "+Inf" if number > 0 else "-Inf"
        text = format(Decimal(repr(number)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text


@dataclass(frozen=True)
class StringValue(PhpValue):
    value: str
    type: ClassVar[ValueType] = ValueType.STRING


class ArrayValue(PhpValue):
    """An ordered PHP array; keys are matched by identity (===)."""

    type: ClassVar[ValueType] = ValueType.ARRAY

    def __init__(self, items: Iterable[tuple[PhpValue, PhpValue]] = ()) -> None:
        self._entries: dict[Hashable, tuple[PhpValue, PhpValue]] = {}
        for key, value in items:
            self.set(key, value)

    def _slot(self, key: PhpValue) -> Hashable:
        if isinstance(key, (BooleanValue, IntegerValue, FloatingValue, StringValue)):
            return (key.type, key.value)
        if isinstance(key, NullValue):
            return (ValueType.NULL,)
        if isinstance(key, ArrayValue):
            for slot, (existing, _) in self._entries.items():
                if isinstance(existing, ArrayValue) and identical(key, existing):
                    return slot
            return (ValueType.ARRAY, id(key))
        # Keys that cannot be compared never match an existing one.
        return object()

    def set(self, key: PhpValue, value: PhpValue) -> None:
        """Store value under key, keeping the position of an existing key."""
        slot = self._slot(key)
        existing = self._entries.get(slot)
        if existing is None:
            self._entries[slot] = (key, value)
        else:
            self._entries[slot] = (existing[0], value)

    def get(self, key: PhpValue) -> PhpValue | None:
        """Return the element stored under key, or None if there is none."""
        entry = self._entries.get(self._slot(key))
        return None if entry is None else entry[1]

    def keys(self) -> list[PhpValue]:
        return [key for key, _ in self._entries.values()]

    def values(self) -> list[PhpValue]:
        return [value for _, value in self._entries.values()]

    def items(self) -> list[tuple[PhpValue, PhpValue]]:
        return list(self._entries.values())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, PhpValue) and self._slot(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PhpValue]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"ArrayValue({self.items()!r})"


def identical(lhs: PhpValue, rhs: PhpValue) -> bool:
    """The identity comparison (===) of two values."""
    if lhs.type != rhs.type:
        return False
    if isinstance(lhs, ArrayValue) and isinstance(rhs, ArrayValue):
        # Arrays with the same number of elements are treated as identical.
        return len(lhs) == len(rhs)
    if isinstance(lhs, NullValue):
        return True
    if isinstance(lhs, (BooleanValue, IntegerValue, FloatingValue, StringValue)):
        return lhs.value == rhs.value  # type: ignore[attr-defined]
    raise PhpError(f'compare: Runtime type {lhs.type} for operator "===" not implemented')


@dataclass
class Request:
    """Data of the request a script runs for."""

    env: dict[str, str] = field(default_factory=dict)
    get_params: list[list[str]] = field(default_factory=list)
    post_params: list[list[str]] = field(default_factory=list)