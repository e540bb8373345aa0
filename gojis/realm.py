"""Realms: the intrinsic objects that code is evaluated against."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass, field
from typing import Any, Optional

from .objects import JSObject, object_create
from .operations import get
from .property import accessor_property
from .values import NULL, UNDEFINED, JSValue, LangType, NativeFunction, Record, String

INTRINSIC_OBJECT_PROTOTYPE = "ObjectPrototype"
INTRINSIC_FUNCTION_PROTOTYPE = "FunctionPrototype"
INTRINSIC_THROW_TYPE_ERROR = "ThrowTypeError"

_current_realm: contextvars.ContextVar["Realm"] = contextvars.ContextVar("current_realm")


@dataclass(eq=False)
class Realm(JSValue):
    """A realm record: intrinsics, global object and global environment."""

    intrinsics: Record = field(default_factory=Record)
    global_obj: JSValue = UNDEFINED
    global_env: Any = UNDEFINED
    template_map: dict = field(default_factory=dict)
    host_defined: Any = UNDEFINED

    def type(self) -> LangType:
        return LangType.INTERNAL

    def value(self) -> "Realm":
        return self

    def add_restricted_function_properties(self, f: JSObject) -> None:
        """Give ``f`` non-enumerable, configurable 'caller' and 'arguments' accessors."""
        for name in ("caller", "arguments"):
            f.define_own_property(
                String(name), accessor_property(UNDEFINED, UNDEFINED, False, True)
            )

    def get_intrinsic_object(self, name: str) -> JSValue:
        """Return the intrinsic object called ``name``, or Undefined."""
        if not self.intrinsics.has_field(name):
            return UNDEFINED
        return self.intrinsics.get_field(name)


def current_realm() -> Realm:
    """Return the current realm; raise RuntimeError if none has been set."""
    realm = _current_realm.get(None)
    if realm is None:
        raise RuntimeError("no current realm")
    return realm


def set_current_realm(realm: Realm) -> None:
    """Make ``realm`` the current realm."""
    _current_realm.set(realm)


def _empty_function(this: JSValue, *args: JSValue) -> JSValue:
    return UNDEFINED


def create_realm() -> Realm:
    """Create a realm with its intrinsics and an Undefined global object and environment."""
    realm = Realm()
    create_intrinsics(realm)
    return realm


def create_intrinsics(realm: Realm) -> Record:
    """Create the intrinsic objects of ``realm`` and return its intrinsics record."""
    realm.intrinsics = Record()
    obj_proto = object_create(NULL)
    realm.intrinsics.set_field(INTRINSIC_OBJECT_PROTOTYPE, obj_proto)

    func_proto = create_builtin_function(_empty_function, realm, NULL)
    realm.intrinsics.set_field(INTRINSIC_FUNCTION_PROTOTYPE, func_proto)
    realm.add_restricted_function_properties(func_proto)
    return realm.intrinsics


def create_builtin_function(
    fn: NativeFunction,
    realm: Optional[Realm] = None,
    proto: Optional[JSValue] = None,
    *internal_slots: Any,
) -> JSObject:
    """Create a function object whose Call internal method is ``fn``."""
    if realm is None:
        realm = current_realm()
    if proto is None:
        proto = realm.get_intrinsic_object(INTRINSIC_FUNCTION_PROTOTYPE)
    fobj = object_create(proto, *internal_slots)
    fobj.call = fn
    fobj.realm = realm
    fobj.extensible = True
    fobj.script_or_module = NULL
    return fobj


def get_function_realm(obj: JSObject) -> Realm:
    """Return the realm of ``obj``, or the current realm if it has none."""
    realm = getattr(obj, "realm", None)
    if isinstance(realm, Realm):
        return realm
    return current_realm()


def _name_of(intrinsic: Any) -> str:
    if isinstance(intrinsic, String):
        return intrinsic.value()
    return str(intrinsic)


def get_prototype_from_constructor(constructor: JSObject, intrinsic_default_proto: Any) -> JSObject:
    """Return the constructor's 'prototype' object, or the realm's named intrinsic."""
    proto = get(constructor, String("prototype"))
    if proto.type() != LangType.OBJECT:
        name = _name_of(intrinsic_default_proto)
        proto = get_function_realm(constructor).get_intrinsic_object(name)
        if not isinstance(proto, JSObject):
            raise LookupError(f"no intrinsic object named '{name}'")
    return proto  # type: ignore[return-value]


def ordinary_create_from_constructor(
    constructor: JSObject, intrinsic_default_proto: Any, *internal_slots: Any
) -> JSObject:
    """Create an object whose prototype is taken from ``constructor``."""
    proto = get_prototype_from_constructor(constructor, intrinsic_default_proto)
    return object_create(proto, *internal_slots)