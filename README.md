# gojis

Building blocks of an ECMAScript virtual machine, in plain Python.

## What is in the package

- `gojis.values`: the language values `Undefined`, `Null` (`UNDEFINED`,
  `NULL`), `Boolean` (`TRUE`, `FALSE`), `Number` (with `NAN`, `POS_ZERO`,
  `NEG_ZERO`, `POS_INFINITY`, ...), `String` and `Symbol` (with the
  well-known symbols such as `SYMBOL_TO_PRIMITIVE`), plus `Record`,
  `LangType` and `JSTypeError`, which abstract operations raise where the
  specification throws a TypeError.
- `gojis.comparison`: `require_object_coercible`, `is_callable`,
  `is_constructor`, `is_integer`, `is_property_key`, `is_string_prefix`,
  `same_value`, `same_value_zero`, `same_value_non_number`.
- `gojis.conversion`: `to_primitive`, `ordinary_to_primitive`,
  `to_boolean`, `to_number`, `to_integer`, `to_int32`, `to_uint32`,
  `to_int16`, `to_uint16`, `to_int8`, `to_uint8`, `to_uint8_clamp`.
- `gojis.property`: the `Property` descriptor and the helpers
  `property_base`, `data_property` and `accessor_property`.
- `gojis.objects`: `JSObject`, an ordinary object with the internal
  methods `get_prototype_of`, `set_prototype_of`, `is_extensible`,
  `prevent_extensions`, `get_own_property`, `define_own_property`,
  `has_property`, `get`, `set`, `delete` and `own_property_keys`, plus
  `object_create` and `validate_and_apply_property_descriptor`.
- `gojis.operations`: `get`, `get_v`, `set_value`, `create_data_property`,
  `create_method_property`, `define_property_or_throw`,
  `delete_property_or_throw`, `get_method`, `has_property`,
  `has_own_property`, `call`, `construct`, `invoke`,
  `set_integrity_level` and `test_integrity_level` (levels from
  `IntegrityLevel`: `"sealed"` or `"frozen"`).
- `gojis.realm`: `Realm`, `create_realm`, `create_intrinsics`,
  `current_realm`, `set_current_realm`, `create_builtin_function`,
  `get_function_realm`, `get_prototype_from_constructor` and
  `ordinary_create_from_constructor`.
- `gojis.api`: the embedding interface: `NullObject`, `UndefinedObject`
  (singletons `NULL`, `UNDEFINED`), `ValueType`, `NotCallableError` and
  `VM`.
- `gojis.test262`: `parse_header` reads the YAML metadata header of a
  Test262 file into `Requirements`, with `Negative`, `Phase` and `Flag`.
- `gojis.golden`: `assert_golden` compares output with a recorded file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Comparing and converting values:

```python
from gojis.values import Number, String
from gojis.comparison import same_value, same_value_zero
from gojis.conversion import to_boolean, to_number

same_value(Number(0.0), Number(-0.0))        # False
same_value_zero(Number(0.0), Number(-0.0))   # True
to_boolean(String(""))                       # FALSE
to_number(String("0x10"))                    # Number(16)
```

Objects and integrity levels:

```python
from gojis.objects import object_create
from gojis.operations import create_data_property, get, set_integrity_level, test_integrity_level
from gojis.values import NULL, Number, String

o = object_create(NULL)
create_data_property(o, String("x"), Number(1))
get(o, String("x"))                       # Number(1)
set_integrity_level(o, "frozen")
o.set(String("x"), Number(2))             # False
test_integrity_level(o, "frozen")         # True
```

Built-in functions in a realm:

```python
from gojis.realm import create_realm, set_current_realm, create_builtin_function
from gojis.operations import call
from gojis.values import UNDEFINED, Number

set_current_realm(create_realm())
answer = create_builtin_function(lambda this, *args: Number(42))
call(answer, UNDEFINED)                   # Number(42)
```

Reading the metadata header of a Test262 file:

```python
from gojis.test262 import parse_header, Flag, Phase

with open("test.js", "rb") as stream:
    requirements = parse_header(stream)

requirements.negative.phase is Phase.RUNTIME
requirements.flags.is_set(Flag.MODULE)
```

A file without a `/*--- ... ---*/` header raises `NoTest262MetadataError`;
a header that is not a valid YAML mapping raises `ValueError`.

Checking output against a recorded golden file:

```python
from gojis.golden import assert_golden

assert_golden("hello", b"Hello World!\n", update=False, folder="testdata")
```

With `update=True` the file `testdata/hello.golden` is written instead of
compared; a mismatch raises `GoldenMismatchError`, and a missing file
raises `FileNotFoundError`.

## What the package does not do

There is no parser and no evaluator for ECMAScript source, and no command
to run scripts. `VM` is built around a global object that you supply:
`VM.eval` calls the `call_with_args` of the global object's `eval` entry,
`VM.eval_readers` reads and joins its readers before doing the same, and
`VM.set_console` stores the console on the global object. Without a global
object that provides `lookup`, `set_object` and an `eval` function, nothing
is evaluated. Conversions to String, ToObject for general use, arrays and
regular expressions are not provided either.