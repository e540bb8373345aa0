import pytest
from hypothesis import given, strategies as st

from gojis.comparison import (
    is_callable,
    is_constructor,
    is_integer,
    is_property_key,
    is_string_prefix,
    require_object_coercible,
    same_value,
    same_value_non_number,
    same_value_zero,
)
from gojis.values import (
    FALSE,
    NAN,
    NEG_INFINITY,
    NEG_ZERO,
    NULL,
    POS_INFINITY,
    POS_ZERO,
    SYMBOL_TO_PRIMITIVE,
    TRUE,
    UNDEFINED,
    JSTypeError,
    JSValue,
    LangType,
    Number,
    String,
    Symbol,
)


class FakeObject(JSValue):
    def __init__(self, call=None, construct=None):
        self.call = call
        self.construct = construct

    def type(self):
        return LangType.OBJECT

    def value(self):
        return self


class UnknownValue(JSValue):
    def type(self):
        return 255

    def value(self):
        return None


def test_require_object_coercible_rejects_null_and_undefined():
    with pytest.raises(JSTypeError):
        require_object_coercible(NULL)
    with pytest.raises(JSTypeError):
        require_object_coercible(UNDEFINED)


@pytest.mark.parametrize("arg", [TRUE, Number(3), String("x"), SYMBOL_TO_PRIMITIVE, FakeObject()])
def test_require_object_coercible_passes_through(arg):
    assert require_object_coercible(arg) is arg


def test_require_object_coercible_unknown_type():
    with pytest.raises(TypeError):
        require_object_coercible(UnknownValue())


def test_is_callable():
    assert is_callable(FakeObject(call=lambda this, *a: UNDEFINED))
    assert not is_callable(FakeObject())
    assert not is_callable(String("f"))


def test_is_constructor():
    assert is_constructor(FakeObject(construct=lambda target, *a: target))
    assert not is_constructor(FakeObject(call=lambda this, *a: UNDEFINED))
    assert not is_constructor(NULL)


def test_is_integer():
    assert is_integer(Number(3.0))
    assert not is_integer(Number(3.5))
    assert not is_integer(NAN)
    assert not is_integer(POS_INFINITY)
    assert not is_integer(NEG_INFINITY)
    assert not is_integer(String("3"))


@given(st.integers(min_value=-(2**52), max_value=2**52))
def test_is_integer_for_whole_numbers(n):
    assert is_integer(Number(float(n)))


def test_is_property_key():
    assert is_property_key(String("a"))
    assert is_property_key(SYMBOL_TO_PRIMITIVE)
    assert not is_property_key(Number(1))
    assert not is_property_key(NULL)


def test_is_string_prefix():
    assert is_string_prefix(String("foo"), String("foobar"))
    assert is_string_prefix(String(""), String("foobar"))
    assert not is_string_prefix(String("foobar"), String("foo"))


def test_same_value_numbers():
    assert same_value(NAN, NAN)
    assert not same_value(POS_ZERO, NEG_ZERO)
    assert not same_value(NEG_ZERO, POS_ZERO)
    assert same_value(Number(1.5), Number(1.5))
    assert not same_value(Number(1.5), Number(2.5))


def test_same_value_zero_numbers():
    assert same_value_zero(NAN, NAN)
    assert same_value_zero(POS_ZERO, NEG_ZERO)
    assert same_value_zero(NEG_ZERO, POS_ZERO)
    assert not same_value_zero(Number(1), NAN)


def test_same_value_different_types():
    assert not same_value(NULL, UNDEFINED)
    assert not same_value_zero(String("1"), Number(1))


def test_same_value_non_number():
    assert same_value_non_number(NULL, NULL)
    assert same_value_non_number(UNDEFINED, UNDEFINED)
    assert same_value_non_number(String("a"), String("a"))
    assert not same_value_non_number(String("a"), String("b"))
    assert same_value_non_number(TRUE, TRUE)
    assert not same_value_non_number(TRUE, FALSE)


def test_same_value_objects_by_identity():
    a = FakeObject()
    b = FakeObject()
    assert same_value(a, a)
    assert not same_value(a, b)


def test_same_value_symbols_compare_descriptions():
    assert same_value(Symbol(String("s")), Symbol(String("s")))
    assert not same_value(Symbol(String("s")), Symbol(String("t")))


@given(st.floats(allow_nan=True, allow_infinity=True))
def test_same_value_is_reflexive(x):
    assert same_value(Number(x), Number(x))
    assert same_value_zero(Number(x), Number(x))