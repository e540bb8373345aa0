"""Abstract operations on objects: property access, definition and calls."""

from __future__ import annotations

import enum
from typing import Any, Optional

from .comparison import is_callable
from .objects import JSObject, object_create
from .property import CONFIGURABLE, WRITABLE, Property, data_property
from .values import (
    FALSE,
    NULL,
    UNDEFINED,
    JSTypeError,
    JSValue,
    LangType,
    Number,
    String,
)

_PRIMITIVE_VALUE = "PrimitiveValue"


class IntegrityLevel(str, enum.Enum):
    """The integrity levels an object's own properties can be fixed at."""

    SEALED = "sealed"
    FROZEN = "frozen"


def _to_object(v: JSValue) -> JSObject:
    """Return ``v`` if it is an object, or a wrapper object for a primitive."""
    if isinstance(v, JSObject):
        return v
    kind = v.type()
    if kind in (LangType.UNDEFINED, LangType.NULL):
        raise JSTypeError("Cannot convert Undefined or Null to object")
    if kind not in (LangType.BOOLEAN, LangType.NUMBER, LangType.STRING, LangType.SYMBOL):
        raise TypeError(f"Unhandled type in object conversion: '{kind}'")
    wrapper = object_create(NULL, _PRIMITIVE_VALUE)
    wrapper.slots[_PRIMITIVE_VALUE] = v
    if isinstance(v, String):
        text = v.value()
        for index, char in enumerate(text):
            wrapper.define_own_property(
                String(str(index)), data_property(String(char), False, True, False)
            )
        wrapper.define_own_property(
            String("length"), data_property(Number(len(text)), False, False, False)
        )
    return wrapper


def get(o: JSObject, key: Any) -> JSValue:
    """Return the value of property ``key`` of ``o``."""
    return o.get(key, o)


def get_v(v: JSValue, key: Any) -> JSValue:
    """Return property ``key`` of any language value, wrapping primitives."""
    return _to_object(v).get(key, v)


def set_value(o: JSObject, key: Any, value: JSValue, throw: bool) -> bool:
    """Set property ``key`` of ``o``; raise JSTypeError on failure if ``throw``."""
    success = o.set(key, value, o)
    if not success and throw:
        raise JSTypeError(f"Cannot set '{key.value()}' of object")
    return success


def create_data_property(o: JSObject, key: Any, value: JSValue) -> bool:
    """Create a writable, enumerable, configurable own data property."""
    return o.define_own_property(key, data_property(value, True, True, True))


def create_method_property(o: JSObject, key: Any, value: JSValue) -> bool:
    """Create a writable, non-enumerable, configurable own data property."""
    return o.define_own_property(key, data_property(value, True, False, True))


def create_data_property_or_throw(o: JSObject, key: Any, value: JSValue) -> bool:
    """Like :func:`create_data_property`, raising JSTypeError on failure."""
    if not create_data_property(o, key, value):
        raise JSTypeError(f"Unable to create data property '{key.value()}'")
    return True


def define_property_or_throw(o: JSObject, key: Any, desc: Property) -> bool:
    """Define an own property, raising JSTypeError on failure."""
    if not o.define_own_property(key, desc):
        raise JSTypeError(f"Unable to define property '{key.value()}'")
    return True


def delete_property_or_throw(o: JSObject, key: Any) -> bool:
    """Delete an own property, raising JSTypeError if it is not configurable."""
    if not o.delete(key):
        raise JSTypeError(f"Unable to delete property '{key.value()}'")
    return True


def get_method(v: JSValue, key: Any) -> JSValue:
    """Return a callable property of ``v``, or Undefined if it is absent."""
    f = get_v(v, key)
    if f is UNDEFINED or f is NULL:
        return UNDEFINED
    if not is_callable(f):
        raise JSTypeError("Object is not callable")
    return f


def has_property(o: JSObject, key: Any) -> bool:
    """Return whether ``o`` or its prototype chain has property ``key``."""
    return o.has_property(key)


def has_own_property(o: JSObject, key: Any) -> bool:
    """Return whether ``o`` itself has property ``key``."""
    return o.get_own_property(key) is not None


def call(f: JSValue, this: JSValue, *args: JSValue) -> JSValue:
    """Call function object ``f`` with ``this`` and ``args``."""
    if not is_callable(f):
        raise JSTypeError("Object is not callable")
    return f.call(this, *args)  # type: ignore[attr-defined]


def construct(f: JSObject, new_target: Optional[JSObject], *args: JSValue) -> JSObject:
    """Invoke the Construct internal method of ``f``."""
    if new_target is None:
        new_target = f
    if getattr(f, "construct", None) is None:
        raise JSTypeError("Object is not a constructor")
    return f.construct(new_target, *args)


def set_integrity_level(o: JSObject, level: Any) -> bool:
    """Seal or freeze ``o``; raise ValueError for an unknown level."""
    level = IntegrityLevel(level)
    if not o.prevent_extensions():
        return False
    for key in o.own_property_keys():
        if level is IntegrityLevel.SEALED:
            desc = Property()
            desc.set_field(CONFIGURABLE, FALSE)
            define_property_or_throw(o, key, desc)
            continue
        current = o.get_own_property(key)
        if current is None:
            continue
        desc = Property()
        desc.set_field(CONFIGURABLE, FALSE)
        if not current.is_accessor_descriptor():
            desc.set_field(WRITABLE, FALSE)
        define_property_or_throw(o, key, desc)
    return True


def test_integrity_level(o: JSObject, level: Any) -> bool:
    """Return whether the own properties of ``o`` are fixed at ``level``."""
    level = IntegrityLevel(level)
    if o.is_extensible():
        return False
    for key in o.own_property_keys():
        desc = o.get_own_property(key)
        if desc is None:
            continue
        if desc.configurable():
            return False
        if level is IntegrityLevel.FROZEN and desc.is_data_descriptor() and desc.writable():
            return False
    return True


def invoke(v: JSValue, key: Any, *args: JSValue) -> JSValue:
    """Call the method property ``key`` of ``v`` with ``v`` as ``this``."""
    f = get_v(v, key)
    return call(f, v, *args)