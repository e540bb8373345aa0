"""Ordinary objects and their internal methods."""

from __future__ import annotations

import enum
from typing import Any, Callable, Optional

from .comparison import is_callable, same_value
from .property import (
    ENUMERABLE,
    GET,
    SET,
    VALUE,
    Property,
    accessor_property,
    data_property,
)
from .values import (
    NULL,
    UNDEFINED,
    JSTypeError,
    JSValue,
    LangType,
    String,
    Symbol,
    ensure_type_one_of,
)


class FunctionMode(enum.IntEnum):
    """How ``this`` references are interpreted inside a function."""

    UNKNOWN = 0
    LEXICAL = 1
    STRICT = 2
    GLOBAL = 3


class FunctionKind(enum.IntEnum):
    """The kind of a function object."""

    UNKNOWN = 0
    NORMAL = 1
    CLASS_GENERATOR = 2
    GENERATOR = 3
    ASYNC = 4


class ConstructorKind(enum.IntEnum):
    """The kind of a constructor function."""

    UNKNOWN = 0
    BASE = 1
    DERIVED = 2


def _invoke(fn: Any, this: JSValue, *args: JSValue) -> JSValue:
    if fn is None or not is_callable(fn):
        raise JSTypeError("Object is not callable")
    return fn.call(this, *args)


def _is_array_index(text: str) -> bool:
    return text.isascii() and text.isdigit()


class JSObject(JSValue):
    """An ordinary ECMAScript object.

    ``call`` and ``construct`` are set only on function and constructor
    objects; ``call`` is invoked as ``call(this, *args)`` and ``construct``
    as ``construct(new_target, *args)``.
    """

    def __init__(self, prototype: JSValue = NULL, extensible: bool = True) -> None:
        self._properties: dict[Any, Property] = {}
        self.slots: dict[Any, JSValue] = {}
        self.prototype: JSValue = prototype
        self.extensible = extensible

        self.environment: Any = None
        self.formal_parameters: Any = None
        self.function_kind = FunctionKind.UNKNOWN
        self.constructor_kind = ConstructorKind.UNKNOWN
        self.realm: Any = None
        self.script_or_module: Any = None
        self.this_mode = FunctionMode.UNKNOWN
        self.strict = False
        self.home_object: Optional["JSObject"] = None

        self.call: Optional[Callable[..., JSValue]] = None
        self.construct: Optional[Callable[..., "JSObject"]] = None

    def type(self) -> LangType:
        return LangType.OBJECT

    def value(self) -> "JSObject":
        return self

    def __repr__(self) -> str:
        return f"JSObject(keys={self.own_property_keys()!r})"

    def get_prototype_of(self) -> JSValue:
        """Return the prototype, an object or Null."""
        return self.prototype

    def set_prototype_of(self, proto: JSValue) -> bool:
        """Set the prototype; return False if not extensible or a cycle would form."""
        ensure_type_one_of(proto, LangType.OBJECT, LangType.NULL)
        if same_value(proto, self.prototype):
            return True
        if not self.extensible:
            return False
        p = proto
        while p is not NULL:
            if p is self:
                return False
            p = p.prototype  # type: ignore[attr-defined]
        self.prototype = proto
        return True

    def is_extensible(self) -> bool:
        """Return whether new properties may be added."""
        return self.extensible

    def prevent_extensions(self) -> bool:
        """Make the object non-extensible; always succeeds."""
        self.extensible = False
        return True

    def get_own_property(self, key: Any) -> Optional[Property]:
        """Return a copy of the own property's descriptor, or None."""
        prop = self._properties.get(key)
        if prop is None:
            return None
        return prop.copy()

    def define_own_property(self, key: Any, desc: Property) -> bool:
        """Define or update an own property; return whether it succeeded."""
        current = self.get_own_property(key)
        return validate_and_apply_property_descriptor(self, key, self.extensible, desc, current)

    def has_property(self, key: Any) -> bool:
        """Return whether this object or its prototype chain has the property."""
        if self.get_own_property(key) is not None:
            return True
        parent = self.get_prototype_of()
        if parent is not NULL:
            return parent.has_property(key)  # type: ignore[attr-defined]
        return False

    def get(self, key: Any, receiver: Optional[JSValue] = None) -> JSValue:
        """Return the property's value, looking along the prototype chain."""
        if receiver is None:
            receiver = self
        desc = self.get_own_property(key)
        if desc is None:
            parent = self.get_prototype_of()
            if parent is NULL:
                return UNDEFINED
            return parent.get(key, receiver)  # type: ignore[attr-defined]
        if desc.is_data_descriptor():
            return desc.value()
        getter = desc.getter()
        if getter is UNDEFINED or getter is None:
            return UNDEFINED
        return _invoke(getter, receiver)

    def set(self, key: Any, value: JSValue, receiver: Optional[JSValue] = None) -> bool:
        """Set the property's value; return whether it succeeded."""
        if receiver is None:
            receiver = self
        own_desc = self.get_own_property(key)
        if own_desc is None:
            parent = self.get_prototype_of()
            if parent is not NULL:
                return parent.set(key, value, receiver)  # type: ignore[attr-defined]
            own_desc = data_property(UNDEFINED, True, True, True)

        if own_desc.is_data_descriptor():
            if not own_desc.writable():
                return False
            if not isinstance(receiver, JSObject):
                return False
            existing = receiver.get_own_property(key)
            if existing is not None:
                if existing.is_accessor_descriptor() or not existing.writable():
                    return False
                value_desc = Property()
                value_desc.set_field(VALUE, value)
                return receiver.define_own_property(key, value_desc)
            return receiver.define_own_property(key, data_property(value, True, True, True))

        setter = own_desc.setter()
        if setter is UNDEFINED or setter is None:
            return False
        _invoke(setter, receiver, value)
        return True

    def delete(self, key: Any) -> bool:
        """Remove an own property; return False if it is not configurable."""
        desc = self.get_own_property(key)
        if desc is None:
            return True
        if desc.configurable():
            del self._properties[key]
            return True
        return False

    def own_property_keys(self) -> list:
        """Return own keys: array indices ascending, then strings, then symbols."""
        strings = [k for k in self._properties if isinstance(k, String)]
        indices = sorted(
            (k for k in strings if _is_array_index(k.value())),
            key=lambda k: int(k.value()),
        )
        names = [k for k in strings if not _is_array_index(k.value())]
        symbols = [k for k in self._properties if isinstance(k, Symbol)]
        return indices + names + symbols


def object_create(proto: JSValue, *internal_slots: Any) -> JSObject:
    """Create an ordinary object with the given prototype and internal slots."""
    ensure_type_one_of(proto, LangType.OBJECT, LangType.NULL)
    obj = JSObject(proto, True)
    for slot in internal_slots:
        obj.slots[slot] = UNDEFINED
    return obj


def _new_property(desc: Property) -> Property:
    if desc.is_generic_descriptor() or desc.is_data_descriptor():
        return data_property(desc.value(), desc.writable(), desc.enumerable(), desc.configurable())
    return accessor_property(desc.getter(), desc.setter(), desc.enumerable(), desc.configurable())


def _converted(current: Property) -> Property:
    if current.is_data_descriptor():
        return accessor_property(UNDEFINED, UNDEFINED, current.enumerable(), current.configurable())
    return data_property(UNDEFINED, False, current.enumerable(), current.configurable())


def validate_and_apply_property_descriptor(
    obj: Optional[JSObject],
    key: Any,
    extensible: bool,
    desc: Property,
    current: Optional[Property],
) -> bool:
    """Check ``desc`` against ``current`` and, if ``obj`` is given, apply it."""
    if current is None:
        if not extensible:
            return False
        if obj is not None:
            obj._properties[key] = _new_property(desc)
        return True

    if len(desc) == 0:
        return True

    if not current.configurable():
        if desc.configurable():
            return False
        if ENUMERABLE in desc and desc.enumerable() != current.enumerable():
            return False

    if desc.is_generic_descriptor():
        pass
    elif current.is_data_descriptor() != desc.is_data_descriptor():
        if not current.configurable():
            return False
        if obj is not None:
            obj._properties[key] = _converted(current)
    elif current.is_data_descriptor() and desc.is_data_descriptor():
        if not current.configurable() and not current.writable():
            if desc.writable():
                return False
            if VALUE in desc and not same_value(desc.value(), current.value()):
                return False
            return True
    elif current.is_accessor_descriptor() and desc.is_accessor_descriptor():
        if not current.configurable():
            if SET in desc and desc.setter() is not current.setter():
                return False
            if GET in desc and desc.getter() is not current.getter():
                return False
            return True

    if obj is not None:
        prop = obj._properties[key]
        for name in desc:
            prop.set_field(name, desc.get_field(name))
    return True


def is_compatible_property_descriptor(extensible: bool, desc: Property, current: Optional[Property]) -> bool:
    """Check a descriptor against a current one without applying it."""
    return validate_and_apply_property_descriptor(None, None, extensible, desc, current)