import pytest

from simian.environment import Environment
from simian.objects import (
    NULL,
    Array,
    Boolean,
    Function,
    Hash,
    Integer,
    Null,
    ObjectType,
    Quote,
    ReturnValue,
    StringObj,
    to_object,
)


def test_object_type_display():
    assert str(Integer(1).object_type()) == "INTEGER"
    assert str(ReturnValue(Integer(1)).object_type()) == "RETURN"
    assert str(Quote("x").object_type()) == "QUOTE"


def test_integer():
    five = Integer(5)
    assert str(five) == "5"
    assert five.inspect() == "5"
    assert five.object_type() is ObjectType.INTEGER
    assert five.token_literal() == "integer"
    assert Integer(-3).inspect() == "-3"


def test_boolean():
    assert str(Boolean(True)) == "true"
    assert Boolean(False).inspect() == "false"
    assert Boolean(True).token_literal() == "true"
    assert Boolean(False).token_literal() == "false"
    assert Boolean(True).object_type() is ObjectType.BOOLEAN


def test_null():
    assert str(NULL) == "null"
    assert NULL.inspect() == "null"
    assert NULL.token_literal() == "null"
    assert NULL.object_type() is ObjectType.NULL
    assert Null() == NULL


def test_string():
    s = StringObj("hello world")
    assert s.inspect() == "hello world"
    assert str(s) == "hello world"
    assert s.token_literal() == "hello world"
    assert s.object_type() is ObjectType.STRING


def test_array():
    arr = Array([Integer(1), Integer(2), StringObj("a")])
    assert str(arr) == "[1,2,a]"
    assert len(arr) == 3
    assert arr[1] == Integer(2)
    assert arr.token_literal() == "array"
    assert arr.object_type() is ObjectType.ARRAY
    assert str(Array()) == "[]"
    with pytest.raises(IndexError):
        arr[3]
    with pytest.raises(IndexError):
        arr[-1]


def test_return_value():
    rv = ReturnValue(Integer(10))
    assert str(rv) == "10"
    assert rv.object_type() is ObjectType.RETURN
    assert rv.token_literal() == "integer"
    assert ReturnValue(Boolean(True)).token_literal() == "true"


def test_hash_display_sorted_by_key():
    h = Hash({Integer(2): StringObj("b"), Integer(1): StringObj("a")})
    assert str(h) == '{"1": "a", "2": "b"}'
    assert len(h) == 2
    assert h.token_literal() == "hash"
    assert h.object_type() is ObjectType.HASH


def test_hash_booleans_before_integers_before_strings():
    h = Hash({StringObj("s"): Integer(3), Integer(1): Integer(2), Boolean(True): Integer(1)})
    assert str(h) == '{"true": "1", "1": "2", "s": "3"}'


def test_hash_lookup_by_equal_key():
    pairs = {StringObj("name"): StringObj("Monkey")}
    h = Hash(pairs)
    assert str(h) == '{"name": "Monkey"}'
    assert h.pairs[StringObj("name")] == StringObj("Monkey")


def test_ordering_between_kinds():
    assert Boolean(True) < Integer(0)
    assert Integer(1) < Integer(2)
    assert StringObj("a") < StringObj("b")
    assert Integer(100) < StringObj("a")
    assert Array([Integer(1)]) < Array([Integer(2)])


def test_function_display():
    fn = Function(["x", "y"], "x + y", Environment())
    assert str(fn) == "fn(x, y) {\nx + y\n}"
    assert fn.object_type() is ObjectType.FUNCTION
    assert fn.token_literal() == "function"
    assert str(Function([], "", Environment())) == "fn() {\n\n}"


def test_create_quote():
    quote = Quote("foobar")
    assert str(quote) == "QUOTE(foobar)"
    assert quote.object_type() is ObjectType.QUOTE
    assert quote.token_literal() == "quote"
    assert quote.inspect() == "QUOTE(foobar)"


def test_to_object():
    assert to_object(True) == Boolean(True)
    assert to_object(7) == Integer(7)
    assert to_object("x") == StringObj("x")
    assert to_object(None) == NULL
    assert to_object([1, "a"]) == Array([Integer(1), StringObj("a")])
    assert to_object({"k": 1}) == Hash({StringObj("k"): Integer(1)})
    same = Integer(3)
    assert to_object(same) is same
    with pytest.raises(TypeError):
        to_object(1.5)


def test_different_kinds_not_equal():
    assert (Integer(1) == Boolean(True)) is False
    assert {Integer(1): "a"}.get(StringObj("1")) is None