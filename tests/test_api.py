import io

import pytest

from gojis.api import (
    NULL,
    UNDEFINED,
    VM,
    NotCallableError,
    NullObject,
    UndefinedObject,
    ValueType,
)


class FakeFunction:
    def __init__(self, fn):
        self.fn = fn

    def call_with_args(self, *args):
        return self.fn(*args)

    def is_function(self):
        return True


class FakeGlobal:
    def __init__(self):
        self.props = {}

    def lookup(self, name):
        return self.props.get(name, UNDEFINED)

    def set_object(self, name, obj):
        self.props[name] = obj


@pytest.mark.parametrize("name", ["", "foo"])
def test_null_lookup(name):
    assert NULL.lookup(name) is UNDEFINED


def test_null_set_function_and_object_are_noops():
    NULL.set_function("some_func", lambda args: UNDEFINED)
    NULL.set_function("nothing", lambda args: UNDEFINED)
    NULL.set_object("some_obj", UNDEFINED)
    NULL.set_object("nothing", UNDEFINED)
    assert NULL.lookup("some_func") is UNDEFINED
    assert NULL.lookup("some_obj") is UNDEFINED


def test_null_is_xxx():
    assert NULL.is_undefined() is False
    assert NULL.is_null() is True
    assert NULL.is_function() is False


def test_null_type_and_value():
    assert NULL.type() == ValueType.NULL
    assert NULL.value() is None


def test_null_call_raises():
    with pytest.raises(NotCallableError):
        NULL.call_with_args(1, 2)


def test_null_singleton():
    assert NullObject() is NULL


@pytest.mark.parametrize("name", ["", "foo"])
def test_undefined_lookup(name):
    assert UNDEFINED.lookup(name) is UNDEFINED


def test_undefined_set_function_and_object_are_noops():
    UNDEFINED.set_function("some_func", lambda args: NULL)
    UNDEFINED.set_function("nothing", lambda args: NULL)
    UNDEFINED.set_object("some_obj", NULL)
    UNDEFINED.set_object("nothing", NULL)
    assert UNDEFINED.lookup("some_func") is UNDEFINED
    assert UNDEFINED.lookup("some_obj") is UNDEFINED


def test_undefined_is_xxx():
    assert UNDEFINED.is_undefined() is True
    assert UNDEFINED.is_null() is False
    assert UNDEFINED.is_function() is False


def test_undefined_type_and_value():
    assert UNDEFINED.type() == ValueType.UNDEFINED
    assert UNDEFINED.value() is None


def test_undefined_call_raises():
    with pytest.raises(NotCallableError):
        UNDEFINED.call_with_args()


def test_undefined_singleton():
    assert UndefinedObject() is UNDEFINED


def test_not_callable_is_type_error():
    with pytest.raises(TypeError):
        NULL.call_with_args()


def test_vm_eval_delegates_to_global_eval():
    glob = FakeGlobal()
    received = []

    def fake_eval(script):
        received.append(script)
        return NULL

    glob.props["eval"] = FakeFunction(fake_eval)
    vm = VM(glob)
    assert vm.eval("1 + 1") is NULL
    assert received == ["1 + 1"]


def test_vm_eval_without_eval_raises():
    vm = VM(FakeGlobal())
    with pytest.raises(NotCallableError):
        vm.eval("x")


def test_vm_eval_readers_concatenates():
    glob = FakeGlobal()
    received = []
    glob.props["eval"] = FakeFunction(lambda script: received.append(script) or UNDEFINED)
    vm = VM(glob)
    vm.eval_readers(io.StringIO("var a = "), io.BytesIO(b"1;"))
    assert received == ["var a = 1;"]


def test_vm_eval_readers_joins_split_characters():
    glob = FakeGlobal()
    received = []
    glob.props["eval"] = FakeFunction(lambda script: received.append(script) or UNDEFINED)
    vm = VM(glob)
    text = "\u00e9"
    encoded = text.encode("utf-8")
    vm.eval_readers(io.BytesIO(encoded[:1]), io.BytesIO(encoded[1:]))
    assert received == [text]


def test_vm_set_console_and_lookup():
    glob = FakeGlobal()
    vm = VM(glob)
    console = object()
    vm.set_console(console)
    assert vm.lookup("console") is console
    assert vm.lookup("missing") is UNDEFINED


def test_vm_over_null_global():
    vm = VM(NULL)
    vm.set_console(object())
    assert vm.lookup("console") is UNDEFINED