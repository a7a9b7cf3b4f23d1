# simian

Runtime building blocks for a small Monkey-style programming language.
The package provides token types with keyword lookup, the runtime object
model, scoped environments, built-in functions and JSON logging setup.
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Tokens

`simian.token_type` defines the `TokenType` enum and two lookups:

```python
from simian.token_type import TokenType, lookup_ident, lookup_char

lookup_ident("fn")      # TokenType.FUNCTION
lookup_ident("foobar")  # TokenType.IDENT
lookup_char("+")        # TokenType.PLUS
lookup_char("@")        # TokenType.ILLEGAL
str(TokenType.NOTEQ)    # "!="
```

`lookup_char` raises `ValueError` when it is given anything other than a
single character.

## Objects

`simian.objects` holds the values the interpreter works with: `Integer`,
`Boolean`, `Null` (with the shared instance `NULL`), `StringObj`, `Array`,
`Hash`, `ReturnValue`, `Function` and `Quote`. They share the
`MonkeyObject` interface: `object_type()` returns an `ObjectType`,
`inspect()` returns the text shown for the value and `token_literal()`
returns the literal naming it. Values are immutable, hashable and ordered,
so they can be used as `Hash` keys; a `Hash` shows its pairs in key order.

`to_object` wraps plain Python values, recursing into lists, tuples and
mappings:

```python
from simian.objects import to_object, ObjectType

arr = to_object([1, 2, 3])
str(arr)                               # "[1,2,3]"
arr.object_type() is ObjectType.ARRAY  # True
str(to_object({"a": 1}))               # '{"a": "1"}'
to_object(None)                        # NULL
```

## Environments

`simian.environment.Environment` stores bindings and looks names up
through enclosing scopes; `get` returns `None` for an unbound name:

```python
from simian.environment import Environment
from simian.objects import to_object

outer = Environment()
outer.store("x", to_object(5))
inner = Environment.new_enclosed_environment(outer)
inner.get("x")  # Integer(value=5)
inner.get("y")  # None
```

## Built-in functions

`simian.builtins` provides `process_len`, `array_first_element`,
`array_last_element`, `array_rest_element`, `array_push_element` and
`puts`, each taking a sequence of argument objects. The array functions
return new arrays rather than changing their input, and return `NULL` for
an empty array. `process_len` counts a string's UTF-8 bytes.

`Builtin` wraps any of them as a callable runtime object:

```python
from simian.builtins import Builtin, process_len
from simian.objects import to_object

length = Builtin(process_len)
length([to_object("hello")])  # Integer(value=5)
str(length)                   # "builtin function"
```

Misuse raises a subclass of `BuiltinError`: `WrongNumberOfArguments`,
`ArgumentNotSupported` or `ArgumentFirstMustArray`.

## Logging

`simian.telemetry` builds a logging handler that writes one Bunyan-style
JSON object per record:

```python
import sys
from simian.telemetry import get_subscriber, init_subscriber

handler = get_subscriber("simian", "info", sys.stdout)
init_subscriber(handler)
```

The level is read from the `SIMIAN_LOG` environment variable when it holds
a usable filter (such as `debug` or `info,simian=trace`), otherwise from
the filter passed in, and is `error` if neither gives one.
`init_subscriber` installs the handler on the root logger and raises
`RuntimeError` if a JSON handler is already installed.

## What is not included

This package holds the runtime pieces only. It has no lexer, parser or
evaluator, and no interactive prompt or command to run programs with:
`Function` and `Quote` keep whatever body or node they are given without
interpreting it.