"""Property descriptors: records holding the attributes of an object property."""

from __future__ import annotations

from typing import Any

from .values import FALSE, UNDEFINED, Boolean, JSValue, Record

VALUE = "Value"
WRITABLE = "Writable"
GET = "Get"
SET = "Set"
ENUMERABLE = "Enumerable"
CONFIGURABLE = "Configurable"


class Property(Record):
    """A property descriptor.

    A data descriptor holds the fields Value and Writable, an accessor
    descriptor holds Get and Set; a descriptor with neither is generic.
    Enumerable and Configurable belong to both kinds.
    """

    __slots__ = ()

    def _field_or(self, name: str, default: Any) -> Any:
        return self.get_field(name) if self.has_field(name) else default

    def value(self) -> JSValue:
        """Return the Value field, or Undefined if it is absent."""
        return self._field_or(VALUE, UNDEFINED)

    def writable(self) -> bool:
        """Return the Writable field, or False if it is absent."""
        return bool(self._field_or(WRITABLE, FALSE))

    def getter(self) -> Any:
        """Return the Get field, or Undefined if it is absent."""
        return self._field_or(GET, UNDEFINED)

    def setter(self) -> Any:
        """Return the Set field, or Undefined if it is absent."""
        return self._field_or(SET, UNDEFINED)

    def enumerable(self) -> bool:
        """Return the Enumerable field, or False if it is absent."""
        return bool(self._field_or(ENUMERABLE, FALSE))

    def configurable(self) -> bool:
        """Return the Configurable field, or False if it is absent."""
        return bool(self._field_or(CONFIGURABLE, FALSE))

    def is_accessor_descriptor(self) -> bool:
        """Return whether the Get or the Set field is present."""
        return GET in self or SET in self

    def is_data_descriptor(self) -> bool:
        """Return whether the Value or the Writable field is present."""
        return VALUE in self or WRITABLE in self

    def is_generic_descriptor(self) -> bool:
        """Return whether this is neither a data nor an accessor descriptor."""
        return not self.is_accessor_descriptor() and not self.is_data_descriptor()

    def copy(self) -> "Property":
        """Return a fully populated copy of this descriptor's attributes."""
        result = Property()
        if self.is_data_descriptor():
            result.set_field(VALUE, self.value())
            result.set_field(WRITABLE, Boolean(self.writable()))
        elif self.is_accessor_descriptor():
            result.set_field(GET, self.getter())
            result.set_field(SET, self.setter())
        result.set_field(ENUMERABLE, Boolean(self.enumerable()))
        result.set_field(CONFIGURABLE, Boolean(self.configurable()))
        return result


def property_base(enumerable: Any, configurable: Any) -> Property:
    """Return a descriptor holding only Enumerable and Configurable."""
    prop = Property()
    prop.set_field(ENUMERABLE, Boolean(enumerable))
    prop.set_field(CONFIGURABLE, Boolean(configurable))
    return prop


def data_property(value: JSValue, writable: Any, enumerable: Any, configurable: Any) -> Property:
    """Return a data descriptor with all four of its fields set."""
    prop = property_base(enumerable, configurable)
    prop.set_field(VALUE, value)
    prop.set_field(WRITABLE, Boolean(writable))
    return prop


def accessor_property(get: Any, set: Any, enumerable: Any, configurable: Any) -> Property:
    """Return an accessor descriptor with all four of its fields set."""
    prop = property_base(enumerable, configurable)
    prop.set_field(GET, get)
    prop.set_field(SET, set)
    return prop