"""
Value model glue for valuematch.

Values are plain decoded JSON data (pydantic's JsonValue). This module pairs
them with a type discriminant and a strict structural equality.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

from pydantic import JsonValue
from pydantic_core import PydanticSerializationError, to_jsonable_python

Value = JsonValue


class TypeId(Enum):
    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()

    def __str__(self) -> str:
        return self.name.lower()


def type_id(value: Any) -> TypeId:
    """
    Return the discriminant for a JSON value.

    Raises:
        TypeError: If value is not a JSON value (e.g. a tuple or a set)
    """
    if value is None:
        return TypeId.NULL
    # bool before int: True is an int in Python but never a number here
    if isinstance(value, bool):
        return TypeId.BOOL
    if isinstance(value, (int, float)):
        return TypeId.NUMBER
    if isinstance(value, str):
        return TypeId.STRING
    if isinstance(value, list):
        return TypeId.ARRAY
    if isinstance(value, dict):
        return TypeId.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


def values_equal(left: Any, right: Any) -> bool:
    """
    Structural equality over JSON values.

    Unlike ``==``, a bool never equals a number (``True != 1``) and an int
    never equals a float (``4 != 4.0``). Arrays are order-sensitive, objects
    compare by key.
    """
    kind = type_id(left)
    if kind is not type_id(right):
        return False

    if kind is TypeId.ARRAY:
        return len(left) == len(right) and all(
            values_equal(a, b) for a, b in zip(left, right)
        )

    if kind is TypeId.OBJECT:
        return left.keys() == right.keys() and all(
            values_equal(item, right[key]) for key, item in left.items()
        )

    if kind is TypeId.NUMBER:
        return isinstance(left, float) is isinstance(right, float) and left == right

    return left == right


def to_value(obj: Any) -> Value:
    """
    Convert a Python object into a JSON value.

    JSON data passes through; tuples and sets become lists, enums their value,
    pydantic models and dataclasses become dicts.

    Raises:
        TypeError: If obj has no JSON representation
    """
    try:
        return to_jsonable_python(obj)
    except PydanticSerializationError as e:
        raise TypeError(f"Cannot convert {type(obj).__name__} to a value") from e
