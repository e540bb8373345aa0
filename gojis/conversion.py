"""Type conversion operations on language values."""

from __future__ import annotations

import math
import re
from typing import Any, Optional

from .comparison import is_callable
from .operations import call, get, get_method
from .values import (
    FALSE,
    NAN,
    POS_ZERO,
    SYMBOL_TO_PRIMITIVE,
    TRUE,
    UNDEFINED,
    Boolean,
    JSTypeError,
    JSValue,
    LangType,
    Number,
    String,
)

_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
)
_DECIMAL = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_NON_DECIMAL = re.compile(r"0([xXoObB])([0-9a-zA-Z]+)")
_RADIX = {"x": 16, "o": 8, "b": 2}


def _unhandled(arg: JSValue) -> TypeError:
    return TypeError(f"Unhandled type in type conversion: '{arg.type()}'")


def to_primitive(value: JSValue, preferred_type: Optional[LangType] = None) -> JSValue:
    """Convert ``value`` to a primitive, honouring a preferred String or Number type."""
    if value.type() != LangType.OBJECT:
        return value
    if preferred_type is not None and not isinstance(preferred_type, LangType):
        raise TypeError("preferred_type is not a LangType")

    if preferred_type is None:
        hint = "default"
    elif preferred_type == LangType.STRING:
        hint = "string"
    elif preferred_type == LangType.NUMBER:
        hint = "number"
    else:
        hint = ""

    exotic = get_method(value, SYMBOL_TO_PRIMITIVE)
    if exotic is not UNDEFINED:
        result = call(exotic, value, String(hint))
        if result.type() != LangType.OBJECT:
            return result
        raise JSTypeError("Call of internal primitive conversion returned non-primitive object")

    if hint == "default":
        hint = "number"
    return ordinary_to_primitive(value, hint)


def ordinary_to_primitive(o: Any, hint: str) -> JSValue:
    """Convert an object by calling valueOf and toString in hint order."""
    names = ("toString", "valueOf") if hint == "string" else ("valueOf", "toString")
    for name in names:
        method = get(o, String(name))
        if is_callable(method):
            result = call(method, o)
            if result.type() != LangType.OBJECT:
                return result
    raise JSTypeError("Cannot convert ordinary object to primitive")


def to_boolean(arg: JSValue) -> Boolean:
    """Convert ``arg`` to a Boolean."""
    kind = arg.type()
    if kind in (LangType.UNDEFINED, LangType.NULL):
        return FALSE
    if kind in (LangType.SYMBOL, LangType.OBJECT):
        return TRUE
    if kind == LangType.BOOLEAN:
        return Boolean(arg.value())
    if kind == LangType.NUMBER:
        x = arg.value()
        return FALSE if x == 0 or math.isnan(x) else TRUE
    if kind == LangType.STRING:
        return FALSE if arg.value() == "" else TRUE
    raise _unhandled(arg)


def _string_to_number(text: str) -> Number:
    text = text.strip(_WHITESPACE)
    if not text:
        return POS_ZERO
    match = _NON_DECIMAL.fullmatch(text)
    if match:
        try:
            number = int(match.group(2), _RADIX[match.group(1).lower()])
        except ValueError:
            return NAN
        try:
            return Number(float(number))
        except OverflowError:
            return Number(math.inf)
    if _DECIMAL.fullmatch(text):
        return Number(float(text))
    return NAN


def to_number(arg: JSValue) -> Number:
    """Convert ``arg`` to a Number."""
    kind = arg.type()
    if kind == LangType.UNDEFINED:
        return NAN
    if kind == LangType.NULL:
        return POS_ZERO
    if kind == LangType.BOOLEAN:
        return Number(1) if arg.value() else POS_ZERO
    if kind == LangType.NUMBER:
        return arg  # type: ignore[return-value]
    if kind == LangType.STRING:
        return _string_to_number(arg.value())
    if kind == LangType.SYMBOL:
        raise JSTypeError("Cannot convert from Symbol to Number")
    if kind == LangType.OBJECT:
        return to_number(to_primitive(arg, LangType.NUMBER))
    raise _unhandled(arg)


def to_integer(arg: JSValue) -> Number:
    """Convert ``arg`` to an integral Number by flooring it."""
    number = to_number(arg)
    if number.is_nan():
        return POS_ZERO
    x = number.value()
    if x == 0 or math.isinf(x):
        return number
    return Number(math.floor(x))


def _to_uint(arg: JSValue, bits: int) -> Number:
    x = to_number(arg).value()
    if math.isnan(x) or math.isinf(x) or x == 0:
        return POS_ZERO
    return Number(math.trunc(x) % (1 << bits))


def _to_int(arg: JSValue, bits: int) -> Number:
    unsigned = int(_to_uint(arg, bits).value())
    if unsigned >= 1 << (bits - 1):
        return Number(unsigned - (1 << bits))
    return Number(unsigned)


def to_int32(arg: JSValue) -> Number:
    """Convert ``arg`` to a signed 32-bit integer Number."""
    return _to_int(arg, 32)


def to_uint32(arg: JSValue) -> Number:
    """Convert ``arg`` to an unsigned 32-bit integer Number."""
    return _to_uint(arg, 32)


def to_int16(arg: JSValue) -> Number:
    """Convert ``arg`` to a signed 16-bit integer Number."""
    return _to_int(arg, 16)


def to_uint16(arg: JSValue) -> Number:
    """Convert ``arg`` to an unsigned 16-bit integer Number."""
    return _to_uint(arg, 16)


def to_int8(arg: JSValue) -> Number:
    """Convert ``arg`` to a signed 8-bit integer Number."""
    return _to_int(arg, 8)


def to_uint8(arg: JSValue) -> Number:
    """Convert ``arg`` to an unsigned 8-bit integer Number."""
    return _to_uint(arg, 8)


def to_uint8_clamp(arg: JSValue) -> Number:
    """Clamp ``arg`` to 0..255, rounding halves to even; a throwing conversion yields +0."""
    try:
        number = to_number(arg)
    except JSTypeError:
        return POS_ZERO
    if number.is_nan():
        return POS_ZERO
    x = number.value()
    if x <= 0:
        return POS_ZERO
    if x >= 255:
        return Number(255)
    f = math.floor(x)
    if f + 0.5 < x:
        return Number(f + 1)
    if x < f + 0.5:
        return Number(f)
    return Number(f + 1) if f % 2 else Number(f)