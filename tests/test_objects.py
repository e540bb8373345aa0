import pytest

from gojis.objects import (
    JSObject,
    is_compatible_property_descriptor,
    object_create,
    validate_and_apply_property_descriptor,
)
from gojis.property import (
    CONFIGURABLE,
    VALUE,
    Property,
    accessor_property,
    data_property,
)
from gojis.values import (
    NULL,
    UNDEFINED,
    JSTypeError,
    LangType,
    Number,
    String,
    Symbol,
)


def _define(obj, name, value, writable=True, enumerable=True, configurable=True):
    return obj.define_own_property(
        String(name), data_property(value, writable, enumerable, configurable)
    )


def _function(fn):
    f = object_create(NULL)
    f.call = fn
    return f


def test_object_create_sets_prototype_and_slots():
    proto = object_create(NULL)
    slot = String("slot")
    obj = object_create(proto, slot)
    assert obj.get_prototype_of() is proto
    assert obj.slots == {slot: UNDEFINED}
    assert obj.is_extensible() is True
    assert obj.type() == LangType.OBJECT
    assert obj.value() is obj


def test_object_create_rejects_bad_prototype():
    with pytest.raises(TypeError):
        object_create(Number(1))


def test_define_and_get():
    obj = object_create(NULL)
    assert _define(obj, "x", Number(7)) is True
    assert obj.get(String("x"), obj) == Number(7)
    assert obj.get(String("missing"), obj) is UNDEFINED


def test_new_property_defaults_missing_fields():
    obj = object_create(NULL)
    desc = Property()
    desc.set_field(VALUE, String("v"))
    assert obj.define_own_property(String("k"), desc) is True
    stored = obj.get_own_property(String("k"))
    assert stored.value() == String("v")
    assert stored.writable() is False
    assert stored.enumerable() is False
    assert stored.configurable() is False


def test_get_own_property_returns_copy():
    obj = object_create(NULL)
    _define(obj, "x", Number(1))
    copy = obj.get_own_property(String("x"))
    copy.set_field(VALUE, Number(2))
    assert obj.get(String("x")) == Number(1)


def test_get_through_prototype_chain():
    proto = object_create(NULL)
    _define(proto, "inherited", String("yes"))
    obj = object_create(proto)
    assert obj.get(String("inherited"), obj) == String("yes")
    assert obj.has_property(String("inherited")) is True
    assert obj.get_own_property(String("inherited")) is None
    assert obj.has_property(String("nope")) is False


def test_set_creates_data_property():
    obj = object_create(NULL)
    assert obj.set(String("x"), Number(3), obj) is True
    desc = obj.get_own_property(String("x"))
    assert desc.value() == Number(3)
    assert desc.writable() and desc.enumerable() and desc.configurable()


def test_set_updates_writable_property():
    obj = object_create(NULL)
    _define(obj, "x", Number(1))
    assert obj.set(String("x"), Number(2), obj) is True
    assert obj.get(String("x")) == Number(2)


def test_set_non_writable_fails():
    obj = object_create(NULL)
    _define(obj, "x", Number(1), writable=False)
    assert obj.set(String("x"), Number(2), obj) is False
    assert obj.get(String("x")) == Number(1)


def test_set_on_prototype_creates_own_property_on_receiver():
    proto = object_create(NULL)
    _define(proto, "x", Number(1))
    obj = object_create(proto)
    assert obj.set(String("x"), Number(5), obj) is True
    assert obj.get_own_property(String("x")).value() == Number(5)
    assert proto.get(String("x")) == Number(1)


def test_set_with_primitive_receiver_fails():
    obj = object_create(NULL)
    assert obj.set(String("x"), Number(1), Number(0)) is False


def test_accessor_getter_and_setter_are_called():
    seen = []
    getter = _function(lambda this, *args: Number(42))
    setter = _function(lambda this, *args: seen.append((this, args)) or UNDEFINED)
    obj = object_create(NULL)
    obj.define_own_property(String("a"), accessor_property(getter, setter, True, True))
    assert obj.get(String("a"), obj) == Number(42)
    assert obj.set(String("a"), String("v"), obj) is True
    assert seen == [(obj, (String("v"),))]


def test_accessor_without_setter_fails_to_set():
    getter = _function(lambda this, *args: Number(1))
    obj = object_create(NULL)
    obj.define_own_property(String("a"), accessor_property(getter, UNDEFINED, True, True))
    assert obj.set(String("a"), Number(2), obj) is False


def test_non_callable_getter_raises():
    obj = object_create(NULL)
    obj.define_own_property(String("a"), accessor_property(object_create(NULL), UNDEFINED, True, True))
    with pytest.raises(JSTypeError):
        obj.get(String("a"), obj)


def test_delete():
    obj = object_create(NULL)
    _define(obj, "soft", Number(1), configurable=True)
    _define(obj, "hard", Number(1), configurable=False)
    assert obj.delete(String("soft")) is True
    assert obj.get_own_property(String("soft")) is None
    assert obj.delete(String("hard")) is False
    assert obj.get_own_property(String("hard")) is not None
    assert obj.delete(String("absent")) is True


def test_prevent_extensions_blocks_new_properties():
    obj = object_create(NULL)
    assert obj.prevent_extensions() is True
    assert obj.is_extensible() is False
    assert _define(obj, "x", Number(1)) is False
    assert obj.get_own_property(String("x")) is None


def test_set_prototype_of():
    a = object_create(NULL)
    b = object_create(a)
    assert a.set_prototype_of(b) is False
    assert a.get_prototype_of() is NULL
    c = object_create(NULL)
    assert b.set_prototype_of(c) is True
    assert b.get_prototype_of() is c


def test_set_prototype_of_non_extensible():
    proto = object_create(NULL)
    obj = object_create(proto)
    obj.prevent_extensions()
    assert obj.set_prototype_of(proto) is True
    assert obj.set_prototype_of(NULL) is False
    assert obj.get_prototype_of() is proto


def test_set_prototype_of_rejects_bad_type():
    obj = object_create(NULL)
    with pytest.raises(TypeError):
        obj.set_prototype_of(String("x"))


def test_own_property_keys_order():
    obj = object_create(NULL)
    sym = Symbol(String("s"))
    for name in ("b", "10", "a", "2"):
        _define(obj, name, NULL)
    obj.define_own_property(sym, data_property(NULL, True, True, True))
    assert obj.own_property_keys() == [String("2"), String("10"), String("b"), String("a"), sym]


def test_non_configurable_rejects_becoming_configurable():
    obj = object_create(NULL)
    _define(obj, "x", Number(1), configurable=False)
    desc = Property()
    desc.set_field(CONFIGURABLE, True)
    assert obj.define_own_property(String("x"), desc) is False


def test_frozen_value_cannot_change():
    obj = object_create(NULL)
    _define(obj, "x", Number(1), writable=False, configurable=False)
    change = Property()
    change.set_field(VALUE, Number(2))
    assert obj.define_own_property(String("x"), change) is False
    same = Property()
    same.set_field(VALUE, Number(1))
    assert obj.define_own_property(String("x"), same) is True


def test_data_to_accessor_conversion():
    obj = object_create(NULL)
    _define(obj, "x", Number(1), enumerable=True, configurable=True)
    getter = _function(lambda this, *args: String("got"))
    desc = Property()
    desc.set_field("Get", getter)
    assert obj.define_own_property(String("x"), desc) is True
    stored = obj.get_own_property(String("x"))
    assert stored.is_accessor_descriptor()
    assert stored.enumerable() is True
    assert obj.get(String("x")) == String("got")


def test_empty_descriptor_is_accepted():
    current = data_property(Number(1), False, False, False)
    assert is_compatible_property_descriptor(True, Property(), current) is True


def test_is_compatible_without_current():
    desc = data_property(Number(1), True, True, True)
    assert is_compatible_property_descriptor(True, desc, None) is True
    assert is_compatible_property_descriptor(False, desc, None) is False


def test_validate_without_object_does_not_mutate():
    current = data_property(Number(1), True, True, True)
    desc = data_property(Number(2), True, True, True)
    assert validate_and_apply_property_descriptor(None, None, True, desc, current) is True
    assert current.value() == Number(1)


def test_accessor_non_configurable_setter_change_rejected():
    getter, setter = JSObject(), JSObject()
    current = accessor_property(getter, setter, False, False)
    desc = Property()
    desc.set_field("Set", JSObject())
    assert is_compatible_property_descriptor(True, desc, current) is False
    keep = Property()
    keep.set_field("Set", setter)
    assert is_compatible_property_descriptor(True, keep, current) is True