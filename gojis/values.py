"""ECMAScript language values and the records used alongside them.

Every language value implements :class:`JSValue`, offering ``type()`` and
``value()``. ``Undefined``, ``Null``, ``true`` and ``false`` are singletons
(:data:`UNDEFINED`, :data:`NULL`, :data:`TRUE`, :data:`FALSE`). Property keys
are plain :class:`String` or :class:`Symbol` instances.
"""

from __future__ import annotations

import abc
import enum
import math
from typing import Any, Callable, Iterator


class LangType(enum.IntEnum):
    """The ECMAScript language types, plus a marker for internal values."""

    INTERNAL = 0
    UNDEFINED = 1
    NULL = 2
    BOOLEAN = 3
    STRING = 4
    SYMBOL = 5
    NUMBER = 6
    OBJECT = 7

    def __str__(self) -> str:
        if self is LangType.INTERNAL:
            return "Unknown"
        return self.name.capitalize()


class JSTypeError(Exception):
    """An ECMAScript TypeError thrown by an abstract operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class JSValue(abc.ABC):
    """Any value used by the specification."""

    __slots__ = ()

    @abc.abstractmethod
    def type(self) -> LangType:
        """Return the language type of this value."""

    @abc.abstractmethod
    def value(self) -> Any:
        """Return the Python representation of this value."""


# A native function receives a ``this`` value and any number of arguments.
# Raising JSTypeError (or another exception) is an abrupt completion.
NativeFunction = Callable[..., JSValue]


class UndefinedType(JSValue):
    """The Undefined value; use :data:`UNDEFINED`."""

    __slots__ = ()
    _instance: "UndefinedType | None" = None

    def __new__(cls) -> "UndefinedType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def type(self) -> LangType:
        return LangType.UNDEFINED

    def value(self) -> "UndefinedType":
        return self

    def __repr__(self) -> str:
        return "Undefined"


class NullType(JSValue):
    """The Null value; use :data:`NULL`."""

    __slots__ = ()
    _instance: "NullType | None" = None

    def __new__(cls) -> "NullType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def type(self) -> LangType:
        return LangType.NULL

    def value(self) -> None:
        return None

    def __repr__(self) -> str:
        return "Null"


UNDEFINED = UndefinedType()
NULL = NullType()


class Boolean(JSValue):
    """A Boolean value; ``Boolean(x)`` always yields :data:`TRUE` or :data:`FALSE`."""

    __slots__ = ("_flag",)
    _instances: dict = {}

    def __new__(cls, flag: Any = False) -> "Boolean":
        flag = bool(flag)
        instance = cls._instances.get(flag)
        if instance is None:
            instance = super().__new__(cls)
            instance._flag = flag
            cls._instances[flag] = instance
        return instance

    def type(self) -> LangType:
        return LangType.BOOLEAN

    def value(self) -> bool:
        return self._flag

    def __bool__(self) -> bool:
        return self._flag

    def __repr__(self) -> str:
        return "true" if self._flag else "false"


TRUE = Boolean(True)
FALSE = Boolean(False)


class Number(JSValue):
    """A Number value backed by a float.

    Two Numbers compare equal when they hold the same float, where NaN equals
    NaN and +0 differs from -0.
    """

    __slots__ = ("_x",)

    def __init__(self, x: float = 0.0) -> None:
        self._x = float(x)

    def type(self) -> LangType:
        return LangType.NUMBER

    def value(self) -> float:
        return self._x

    def is_nan(self) -> bool:
        """Return whether this Number is NaN."""
        return math.isnan(self._x)

    def __float__(self) -> float:
        return self._x

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        if self.is_nan() or other.is_nan():
            return self.is_nan() and other.is_nan()
        if self._x == 0 and other._x == 0:
            return math.copysign(1.0, self._x) == math.copysign(1.0, other._x)
        return self._x == other._x

    def __hash__(self) -> int:
        if self.is_nan():
            return hash("NaN")
        if self._x == 0:
            return hash((0.0, math.copysign(1.0, self._x)))
        return hash(self._x)

    def __str__(self) -> str:
        if self.is_nan():
            return "NaN"
        if math.isinf(self._x):
            return "+Inf" if self._x > 0 else "-Inf"
        return format(self._x, ".10g")

    def __repr__(self) -> str:
        return f"Number({self})"


NAN = Number(math.nan)
POS_INFINITY = Number(math.inf)
NEG_INFINITY = Number(-math.inf)
INFINITY = POS_INFINITY
POS_ZERO = Number(0.0)
NEG_ZERO = Number(-0.0)
ZERO = POS_ZERO


class String(JSValue):
    """A String value."""

    __slots__ = ("_text",)

    def __init__(self, text: str = "") -> None:
        self._text = str(text)

    def type(self) -> LangType:
        return LangType.STRING

    def value(self) -> str:
        return self._text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, String):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(("String", self._text))

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"String({self._text!r})"


class Symbol(JSValue):
    """A Symbol value. Each Symbol is a distinct property key."""

    __slots__ = ("description",)

    def __init__(self, description: JSValue = UNDEFINED) -> None:
        self.description = description

    def type(self) -> LangType:
        return LangType.SYMBOL

    def value(self) -> Any:
        return self.description.value()

    def description_string(self) -> String:
        """Return the description as a String; raise TypeError if it is not one."""
        if not isinstance(self.description, String):
            raise TypeError("symbol description is not a String")
        return self.description

    def __repr__(self) -> str:
        return f"Symbol({self.description!r})"


SYMBOL_ASYNC_ITERATOR = Symbol(String("Symbol.asyncIterator"))
SYMBOL_HAS_INSTANCE = Symbol(String("Symbol.hasInstance"))
SYMBOL_IS_CONCAT_SPREADABLE = Symbol(String("Symbol.isConcatSpreadable"))
SYMBOL_ITERATOR = Symbol(String("Symbol.iterator"))
SYMBOL_MATCH = Symbol(String("Symbol.match"))
SYMBOL_REPLACE = Symbol(String("Symbol.replace"))
SYMBOL_SEARCH = Symbol(String("Symbol.search"))
SYMBOL_SPECIES = Symbol(String("Symbol.species"))
SYMBOL_SPLIT = Symbol(String("Symbol.split"))
SYMBOL_TO_PRIMITIVE = Symbol(String("Symbol.toPrimitive"))
SYMBOL_TO_STRING_TAG = Symbol(String("Symbol.toStringTag"))
SYMBOL_UNSCOPABLES = Symbol(String("Symbol.unscopables"))


def string_or_symbol(arg: JSValue) -> "String | Symbol":
    """Return ``arg`` as a property key; raise TypeError unless it is a String or Symbol."""
    if arg.type() not in (LangType.STRING, LangType.SYMBOL):
        raise TypeError("Type of argument must be String or Symbol")
    return arg  # type: ignore[return-value]


def key_string(key: JSValue) -> String:
    """Return a property key as a String, using a Symbol's description."""
    if isinstance(key, String):
        return key
    if isinstance(key, Symbol):
        return key.description_string()
    raise TypeError("Type of argument must be String or Symbol")


class Record(JSValue):
    """A specification record: a set of named fields."""

    __slots__ = ("_fields",)

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}

    def get_field(self, name: str) -> Any:
        """Return the field's value, or None if the record has no such field."""
        return self._fields.get(name)

    def set_field(self, name: str, value: Any) -> None:
        """Set a field, replacing any existing value."""
        self._fields[name] = value

    def has_field(self, name: str) -> bool:
        """Return whether the record holds a field with this name."""
        return name in self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._fields))

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def type(self) -> LangType:
        return LangType.INTERNAL

    def value(self) -> "Record":
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fields!r})"


def type_is_one_of(arg: JSValue, *types: LangType) -> bool:
    """Return whether the type of ``arg`` is one of ``types``."""
    return arg.type() in types


def ensure_type_one_of(arg: JSValue, *types: LangType) -> None:
    """Raise TypeError unless the type of ``arg`` is one of ``types``."""
    if not type_is_one_of(arg, *types):
        names = ", ".join(str(t) for t in types)
        raise TypeError(f"Value's type must be one of [{names}], but was {arg.type()}")