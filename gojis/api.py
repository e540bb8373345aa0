"""The embedding interface: API objects and the virtual machine."""

from __future__ import annotations

import enum
from typing import Any, BinaryIO, Callable, ClassVar, TextIO, Union


class ValueType(enum.IntEnum):
    """ECMAScript language types as seen through the embedding interface."""

    UNKNOWN = 0
    UNDEFINED = 1
    NULL = 2
    BOOLEAN = 3
    STRING = 4
    SYMBOL = 5
    NUMBER = 6
    OBJECT = 7


class NotCallableError(TypeError):
    """Raised when an object without a callable 'Call' property is invoked."""


def _check_name(name: Any) -> str:
    if not isinstance(name, str):
        raise TypeError(f"property name must be a str, not {type(name).__name__}")
    return name


def _check_function(fn: Any) -> Callable[..., Any]:
    if not callable(fn):
        raise TypeError(f"function must be callable, not {type(fn).__name__}")
    return fn


def _not_callable(obj: Any, args: tuple) -> NotCallableError:
    return NotCallableError(f"{obj!r} is not callable (called with {len(args)} argument(s))")


class UndefinedObject:
    """The Undefined value; use :data:`UNDEFINED`."""

    __slots__ = ()
    _instance: ClassVar["UndefinedObject | None"] = None
    _native_value: ClassVar[Any] = None

    def __new__(cls) -> "UndefinedObject":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def lookup(self, name: str) -> "UndefinedObject":
        """Return Undefined for any valid name; Undefined has no properties."""
        _check_name(name)
        return UNDEFINED

    def set_function(self, name: str, fn: Callable[..., Any]) -> None:
        """Validate the arguments and discard them; Undefined holds no properties."""
        _check_name(name)
        _check_function(fn)

    def call_with_args(self, *args: Any) -> Any:
        """Raise NotCallableError; Undefined cannot be called."""
        raise _not_callable(self, args)

    def set_object(self, name: str, obj: Any) -> None:
        """Validate the name and discard the object; Undefined holds no properties."""
        _check_name(name)

    def is_undefined(self) -> bool:
        return True

    def is_null(self) -> bool:
        return False

    def is_function(self) -> bool:
        return False

    def type(self) -> ValueType:
        return ValueType.UNDEFINED

    def value(self) -> Any:
        """Return the native value, which is None."""
        return self._native_value

    def __repr__(self) -> str:
        return "Undefined"


class NullObject:
    """The Null value; use :data:`NULL`."""

    __slots__ = ()
    _instance: ClassVar["NullObject | None"] = None
    _native_value: ClassVar[Any] = None

    def __new__(cls) -> "NullObject":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def lookup(self, name: str) -> UndefinedObject:
        """Return Undefined for any valid name; Null has no properties."""
        _check_name(name)
        return UNDEFINED

    def set_function(self, name: str, fn: Callable[..., Any]) -> None:
        """Validate the arguments and discard them; Null holds no properties."""
        _check_name(name)
        _check_function(fn)

    def call_with_args(self, *args: Any) -> Any:
        """Raise NotCallableError; Null cannot be called."""
        raise _not_callable(self, args)

    def set_object(self, name: str, obj: Any) -> None:
        """Validate the name and discard the object; Null holds no properties."""
        _check_name(name)

    def is_undefined(self) -> bool:
        return False

    def is_null(self) -> bool:
        return True

    def is_function(self) -> bool:
        return False

    def type(self) -> ValueType:
        return ValueType.NULL

    def value(self) -> Any:
        """Return the native value, which is None."""
        return self._native_value

    def __repr__(self) -> str:
        return "Null"


UNDEFINED = UndefinedObject()
NULL = NullObject()


class VM:
    """A virtual machine that evaluates scripts against its global object."""

    def __init__(self, global_object: Any) -> None:
        self.global_object = global_object

    def lookup(self, name: str) -> Any:
        """Return the global property ``name``, or Undefined."""
        return self.global_object.lookup(name)

    def eval(self, script: str) -> Any:
        """Evaluate ``script`` by calling the global 'eval' function."""
        return self.lookup("eval").call_with_args(script)

    def eval_readers(self, *readers: Union[TextIO, BinaryIO]) -> Any:
        """Read every reader to its end, concatenate the contents and evaluate them."""
        data = bytearray()
        for reader in readers:
            chunk = reader.read()
            data += chunk.encode("utf-8") if isinstance(chunk, str) else chunk
        return self.eval(data.decode("utf-8", errors="replace"))

    def set_console(self, console: Any) -> None:
        """Make ``console`` the target of calls such as 'console.log'."""
        self.global_object.set_object("console", console)