"""Runtime values produced by evaluating programs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Iterable, Mapping

from simian.environment import Environment


class ObjectType(Enum):
    """Kind of a runtime value, valued by its display name."""

    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    RETURN = "RETURN"
    FUNCTION = "FUNCTION"
    STRING = "STRING"
    BUILTIN = "BUILTIN"
    ARRAY = "ARRAY"
    HASH = "HASH"
    QUOTE = "QUOTE"

    def __str__(self) -> str:
        return self.value


class MonkeyObject(ABC):
    """Common behaviour of every runtime value.

    Values are ordered first by kind (booleans, integers, return values,
    functions, strings, builtins, arrays, null, hashes, quotes) and then by
    content, which fixes the order in which hash pairs are shown.
    """

    # Position of the kind in the total order; builtins sit at slot 5.
    _rank: ClassVar[int] = 5

    @abstractmethod
    def object_type(self) -> ObjectType:
        """Return the kind of this value."""

    def inspect(self) -> str:
        """Return the text shown for this value."""
        return str(self)

    @abstractmethod
    def token_literal(self) -> str:
        """Return the literal text that names this value."""

    def _content_key(self) -> Any:
        return str(self)

    def _order_key(self) -> tuple:
        return (self._rank, self._content_key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MonkeyObject):
            return NotImplemented
        return self._order_key() < other._order_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, MonkeyObject):
            return NotImplemented
        return self._order_key() <= other._order_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, MonkeyObject):
            return NotImplemented
        return self._order_key() > other._order_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, MonkeyObject):
            return NotImplemented
        return self._order_key() >= other._order_key()


@dataclass(frozen=True)
class Boolean(MonkeyObject):
    """A boolean value."""

    value: bool
    _rank: ClassVar[int] = 0

    def object_type(self) -> ObjectType:
        return ObjectType.BOOLEAN

    def token_literal(self) -> str:
        return "true" if self.value else "false"

    def _content_key(self) -> Any:
        return self.value

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Integer(MonkeyObject):
    """A signed integer value."""

    value: int
    _rank: ClassVar[int] = 1

    def object_type(self) -> ObjectType:
        return ObjectType.INTEGER

    def token_literal(self) -> str:
        return "integer"

    def _content_key(self) -> Any:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ReturnValue(MonkeyObject):
    """A value being returned out of a block."""

    value: MonkeyObject
    _rank: ClassVar[int] = 2

    def object_type(self) -> ObjectType:
        return ObjectType.RETURN

    def token_literal(self) -> str:
        return self.value.token_literal()

    def _content_key(self) -> Any:
        return self.value._order_key()

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Function(MonkeyObject):
    """A user-defined function closing over its defining environment."""

    parameters: tuple
    body: Any
    env: Environment = field(default_factory=Environment)
    _rank: ClassVar[int] = 3

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))

    def object_type(self) -> ObjectType:
        return ObjectType.FUNCTION

    def token_literal(self) -> str:
        return "function"

    def __hash__(self) -> int:
        return hash((tuple(str(p) for p in self.parameters), str(self.body)))

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"fn({params}) {{\n{self.body}\n}}"


@dataclass(frozen=True)
class StringObj(MonkeyObject):
    """A string value."""

    value: str
    _rank: ClassVar[int] = 4

    def object_type(self) -> ObjectType:
        return ObjectType.STRING

    def inspect(self) -> str:
        return self.value

    def token_literal(self) -> str:
        return self.value

    def _content_key(self) -> Any:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Array(MonkeyObject):
    """An immutable ordered sequence of values."""

    elements: tuple = ()
    _rank: ClassVar[int] = 6

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def object_type(self) -> ObjectType:
        return ObjectType.ARRAY

    def token_literal(self) -> str:
        return "array"

    def _content_key(self) -> Any:
        return tuple(e._order_key() for e in self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> MonkeyObject:
        if index < 0:
            raise IndexError(f"array index out of range: {index}")
        return self.elements[index]

    def __iter__(self):
        return iter(self.elements)

    def __str__(self) -> str:
        return "[" + ",".join(str(e) for e in self.elements) + "]"


@dataclass(frozen=True)
class Null(MonkeyObject):
    """The absence of a value."""

    _rank: ClassVar[int] = 7

    def object_type(self) -> ObjectType:
        return ObjectType.NULL

    def token_literal(self) -> str:
        return "null"

    def _content_key(self) -> Any:
        return ()

    def __str__(self) -> str:
        return "null"


NULL = Null()


@dataclass(frozen=True)
class Hash(MonkeyObject):
    """A mapping from values to values, shown in key order."""

    pairs: Mapping[MonkeyObject, MonkeyObject] = field(default_factory=dict)
    _rank: ClassVar[int] = 8

    def __post_init__(self) -> None:
        object.__setattr__(self, "pairs", dict(self.pairs))

    def object_type(self) -> ObjectType:
        return ObjectType.HASH

    def token_literal(self) -> str:
        return "hash"

    def _sorted_pairs(self) -> list:
        return sorted(self.pairs.items(), key=lambda kv: kv[0]._order_key())

    def _content_key(self) -> Any:
        return tuple((k._order_key(), v._order_key()) for k, v in self._sorted_pairs())

    def __hash__(self) -> int:
        return hash(frozenset(self.pairs.items()))

    def __len__(self) -> int:
        return len(self.pairs)

    def __str__(self) -> str:
        body = ", ".join(f'"{k}": "{v}"' for k, v in self._sorted_pairs())
        return "{" + body + "}"


@dataclass(frozen=True)
class Quote(MonkeyObject):
    """An unevaluated syntax node."""

    node: Any
    _rank: ClassVar[int] = 9

    def object_type(self) -> ObjectType:
        return ObjectType.QUOTE

    def token_literal(self) -> str:
        return "quote"

    def __hash__(self) -> int:
        return hash(str(self.node))

    def __str__(self) -> str:
        return f"QUOTE({self.node})"


def to_object(value: Any) -> MonkeyObject:
    """Wrap a plain Python value as a runtime value."""
    if isinstance(value, MonkeyObject):
        return value
    if value is None:
        return NULL
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, str):
        return StringObj(value)
    if isinstance(value, Mapping):
        return Hash({to_object(k): to_object(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return Array(to_object(v) for v in value)
    raise TypeError(f"cannot convert {type(value).__name__} to an object")


def _as_iterable(values: Iterable[Any]) -> tuple:
    return tuple(to_object(v) for v in values)