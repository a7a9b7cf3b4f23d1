"""Functions built into the language and the value that wraps them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from simian.objects import NULL, Array, MonkeyObject, ObjectType, StringObj, Integer

BUILTIN_NAME = "builtin function"


class BuiltinError(Exception):
    """Raised when a built-in function is called incorrectly."""


class WrongNumberOfArguments(BuiltinError):
    """A built-in received the wrong number of arguments."""

    def __init__(self, got: int, want: int) -> None:
        super().__init__(f"wrong number of arguments. got={got}, want={want}")
        self.got = got
        self.want = want


class ArgumentNotSupported(BuiltinError):
    """A built-in received an argument of a kind it cannot handle."""

    def __init__(self, got: str) -> None:
        super().__init__(f"argument to `len` not supported, got {got}")
        self.got = got


class ArgumentFirstMustArray(BuiltinError):
    """A built-in that works on arrays received something else first."""

    def __init__(self, got: str) -> None:
        super().__init__(f"argument to builtin must be ARRAY, got {got}")
        self.got = got


@dataclass(frozen=True, eq=False)
class Builtin(MonkeyObject):
    """A native function exposed to programs as a value."""

    func: Callable[[list], MonkeyObject]

    def __call__(self, args: Iterable[MonkeyObject]) -> MonkeyObject:
        return self.func(list(args))

    def object_type(self) -> ObjectType:
        # Builtins report the array kind, so array checks let them through.
        return ObjectType.ARRAY

    def inspect(self) -> str:
        return BUILTIN_NAME

    def token_literal(self) -> str:
        return BUILTIN_NAME

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Builtin):
            return NotImplemented
        return self.func is other.func

    def __hash__(self) -> int:
        return hash(self.func)

    def __str__(self) -> str:
        return BUILTIN_NAME


def _expect_count(args: list, want: int) -> None:
    if len(args) != want:
        raise WrongNumberOfArguments(len(args), want)


def _expect_array_first(args: list) -> Any:
    first = args[0]
    if first.object_type() != ObjectType.ARRAY:
        raise ArgumentFirstMustArray(str(first.object_type()))
    return first


def process_len(args: Iterable[MonkeyObject]) -> MonkeyObject:
    """Return the byte length of a string or the element count of an array."""
    args = list(args)
    _expect_count(args, 1)
    value = args[0]
    if isinstance(value, StringObj):
        return Integer(len(value.value.encode("utf-8")))
    if isinstance(value, Array):
        return Integer(len(value))
    raise ArgumentNotSupported(str(value.object_type()))


def array_first_element(args: Iterable[MonkeyObject]) -> MonkeyObject:
    """Return the first element of an array, or null if there is none."""
    args = list(args)
    _expect_count(args, 1)
    array = _expect_array_first(args)
    if isinstance(array, Array) and len(array):
        return array[0]
    return NULL


def array_last_element(args: Iterable[MonkeyObject]) -> MonkeyObject:
    """Return the last element of an array, or null if there is none."""
    args = list(args)
    _expect_count(args, 1)
    array = _expect_array_first(args)
    if isinstance(array, Array) and len(array):
        return array.elements[-1]
    return NULL


def array_rest_element(args: Iterable[MonkeyObject]) -> MonkeyObject:
    """Return a new array without the first element, or null if empty."""
    args = list(args)
    _expect_count(args, 1)
    array = _expect_array_first(args)
    if isinstance(array, Array) and len(array):
        return Array(array.elements[1:])
    return NULL


def array_push_element(args: Iterable[MonkeyObject]) -> MonkeyObject:
    """Return a new array with the second argument appended to the first."""
    args = list(args)
    _expect_count(args, 2)
    array = _expect_array_first(args)
    if isinstance(array, Array):
        return Array(array.elements + (args[1],))
    return NULL


def puts(args: Iterable[MonkeyObject]) -> MonkeyObject:
    """Print each argument on its own line and return null."""
    for arg in args:
        print(arg)
    return NULL