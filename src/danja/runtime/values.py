"""
Runtime value wrappers for the Danja interpreter.

Native functions receive their arguments as DynamicValue objects and read
them through typed accessors. An accessor used on the wrong kind of value
raises a TypeMismatch InterpreterError; `as_any()` always succeeds.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Union

from ..ast import Block, Function
from ..errors import error_type_mismatch


class ValueKind(Enum):
    """The kind of data a DynamicValue holds."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    BLOCK = "block"
    NONE = "none"       # a native returned None
    OBJECT = "object"   # any other host object


Number = Union[int, float]


@dataclass
class DynamicValue:
    """
    A runtime value with its kind.

    The `data` field holds the actual Python object.
    The `kind` field says which accessor may read it.
    """
    data: Any
    kind: ValueKind

    def __repr__(self) -> str:
        return f"DynamicValue({self.data!r}, {self.kind.value})"

    def _check(self, kind: ValueKind) -> None:
        if self.kind != kind:
            raise error_type_mismatch(kind.value, self.kind.value)

    def as_string(self) -> str:
        self._check(ValueKind.STRING)
        return self.data

    def as_number(self) -> Number:
        self._check(ValueKind.NUMBER)
        return self.data

    def as_boolean(self) -> bool:
        self._check(ValueKind.BOOLEAN)
        return self.data

    def as_array(self) -> List[Any]:
        self._check(ValueKind.ARRAY)
        return list(self.data)

    def as_block(self) -> Union[Block, Function]:
        self._check(ValueKind.BLOCK)
        return self.data

    def as_any(self) -> Any:
        return self.data


# Convenience constructors

def string_val(s: str) -> DynamicValue:
    """Create a string value."""
    return DynamicValue(str(s), ValueKind.STRING)


def number_val(n: Number) -> DynamicValue:
    """Create a number value."""
    return DynamicValue(n, ValueKind.NUMBER)


def bool_val(b: bool) -> DynamicValue:
    """Create a boolean value."""
    return DynamicValue(bool(b), ValueKind.BOOLEAN)


def array_val(items: List[Any]) -> DynamicValue:
    """Create an array value."""
    return DynamicValue(list(items), ValueKind.ARRAY)


def block_val(block: Union[Block, Function]) -> DynamicValue:
    """Create a block descriptor value."""
    return DynamicValue(block, ValueKind.BLOCK)


def none_val() -> DynamicValue:
    """Create the value of a native that returned nothing."""
    return DynamicValue(None, ValueKind.NONE)


def kind_of(data: Any) -> ValueKind:
    """Infer the ValueKind of a raw Python object."""
    # bool is an int subclass, so it must be checked first
    if isinstance(data, bool):
        return ValueKind.BOOLEAN
    if isinstance(data, (int, float)):
        return ValueKind.NUMBER
    if isinstance(data, str):
        return ValueKind.STRING
    if isinstance(data, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(data, (Block, Function)):
        return ValueKind.BLOCK
    if data is None:
        return ValueKind.NONE
    return ValueKind.OBJECT


def wrap_value(data: Any) -> DynamicValue:
    """Wrap raw data without coercion. DynamicValues pass through."""
    if isinstance(data, DynamicValue):
        return data
    kind = kind_of(data)
    if kind == ValueKind.ARRAY:
        return array_val(data)
    return DynamicValue(data, kind)


def unwrap_values(values: List[DynamicValue]) -> List[Any]:
    """Extract raw data from a list of DynamicValues."""
    return [v.data for v in values]


# Numeric coercion

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_INFINITY = re.compile(r"([+-]?)Infinity")
_RADIX = {"0x": 16, "0o": 8, "0b": 2}
_RADIX_DIGITS = {
    16: re.compile(r"[0-9a-fA-F]+"),
    8: re.compile(r"[0-7]+"),
    2: re.compile(r"[01]+"),
}


def to_number(text: str) -> Optional[Number]:
    """
    Parse text as a number, permissively.

    Surrounding whitespace is ignored and blank text is 0. Accepts signed
    decimals with optional fraction and exponent ('.5', '5.', '1e2'),
    'Infinity' with an optional sign, and unsigned 0x/0o/0b integers.
    Integral decimals give an int, everything else a float. Integers too
    long for int() fall back to float, which may overflow to infinity.

    Returns None when the text is not numeric.
    """
    text = text.strip()
    if not text:
        return 0
    if _INTEGER.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # past the int() digit limit
            return float(text)
    if _DECIMAL.fullmatch(text):
        return float(text)
    match = _INFINITY.fullmatch(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf
    base = _RADIX.get(text[:2].lower())
    if base and _RADIX_DIGITS[base].fullmatch(text[2:]):
        return int(text[2:], base)
    return None


def coerce_value(raw: Any) -> DynamicValue:
    """
    Apply numeric-literal coercion to a literal or a native's result.

    Numbers stay numbers, numeric-looking strings become numbers, other
    strings stay strings. Any other raw value is wrapped by its own kind.
    """
    if isinstance(raw, DynamicValue):
        raw = raw.data
    if isinstance(raw, str):
        number = to_number(raw)
        if number is None:
            return string_val(raw)
        return number_val(number)
    return wrap_value(raw)
