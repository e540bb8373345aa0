"""Testing and comparison operations on language values."""

from __future__ import annotations

from .values import (
    JSTypeError,
    JSValue,
    LangType,
    String,
)

_COERCIBLE = (
    LangType.BOOLEAN,
    LangType.NUMBER,
    LangType.STRING,
    LangType.SYMBOL,
    LangType.OBJECT,
)


def require_object_coercible(arg: JSValue) -> JSValue:
    """Return ``arg`` unless it is Null or Undefined, which raise JSTypeError."""
    kind = arg.type()
    if kind in (LangType.NULL, LangType.UNDEFINED):
        raise JSTypeError("Object is not coercible")
    if kind in _COERCIBLE:
        return arg
    raise TypeError(f"Unhandled argument type: {kind}")


def is_callable(arg: JSValue) -> bool:
    """Return whether ``arg`` is an object with a Call internal method."""
    if arg.type() != LangType.OBJECT:
        return False
    return getattr(arg, "call", None) is not None


def is_constructor(arg: JSValue) -> bool:
    """Return whether ``arg`` is an object with a Construct internal method."""
    if arg.type() != LangType.OBJECT:
        return False
    return getattr(arg, "construct", None) is not None


def is_integer(arg: JSValue) -> bool:
    """Return whether ``arg`` is a finite Number with an integral value."""
    if arg.type() != LangType.NUMBER:
        return False
    return float(arg.value()).is_integer()


def is_property_key(arg: JSValue) -> bool:
    """Return whether ``arg`` is a String or a Symbol."""
    return arg.type() in (LangType.STRING, LangType.SYMBOL)


def is_string_prefix(p: String, q: String) -> bool:
    """Return whether ``p`` is a prefix of ``q``."""
    return q.value().startswith(p.value())


def _both_nan(x: JSValue, y: JSValue) -> bool:
    return x.is_nan() and y.is_nan()  # type: ignore[attr-defined]


def same_value(x: JSValue, y: JSValue) -> bool:
    """SameValue: NaN equals NaN, and +0 differs from -0."""
    if x.type() != y.type():
        return False
    if x.type() == LangType.NUMBER:
        # Number equality already treats NaN as equal and keeps zero signs apart.
        return x == y
    return same_value_non_number(x, y)


def same_value_zero(x: JSValue, y: JSValue) -> bool:
    """SameValueZero: like SameValue, but +0 equals -0."""
    if x.type() != y.type():
        return False
    if x.type() == LangType.NUMBER:
        if _both_nan(x, y):
            return True
        return x.value() == y.value()
    return same_value_non_number(x, y)


def same_value_non_number(x: JSValue, y: JSValue) -> bool:
    """SameValueNonNumber for two values of the same, non-Number type."""
    kind = x.type()
    if kind in (LangType.UNDEFINED, LangType.NULL):
        return True
    if kind == LangType.STRING:
        return x.value() == y.value()
    if kind in (LangType.BOOLEAN, LangType.SYMBOL):
        return x.value() == y.value()
    if kind == LangType.OBJECT:
        return x.value() is y.value()
    return x.value() == y.value()