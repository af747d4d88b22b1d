"""
Built-in matchers for valuematch.

Provides factory functions that return Validator instances.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .core import (
    AnyValidator,
    ArrayValidator,
    EqValidator,
    ObjectValidator,
    TypeValidator,
    Validator,
    to_validator,
)
from .value import TypeId, to_value


def any_() -> Validator:
    """
    Match any value. Never returns an error.

    Usage:
        array(1, any_(), 3)     # middle element unchecked
    """
    return AnyValidator()


def eq(expected: Any) -> Validator:
    """
    Match a value equal to ``expected``.

    ``expected`` may be anything convertible to a JSON value: primitives,
    lists, dicts, tuples, enums, pydantic models, dataclasses.

    Usage:
        eq("test")
        eq(4)                   # 4 and 4.0 match, "4" is a type error
        eq({"id": 1})           # exact object, no extra keys

    Raises:
        TypeError: If expected has no JSON representation
    """
    to_value(expected)
    return EqValidator(expected)


def of_type(expected: TypeId | type) -> Validator:
    """
    Match any value of a type.

    Usage:
        of_type(TypeId.STRING)
        of_type(str)            # same as above
    """
    if isinstance(expected, TypeId):
        return TypeValidator(expected)
    inner = to_validator(expected)
    if not isinstance(inner, TypeValidator):
        raise TypeError(f"Expected a TypeId or a type, got {expected!r}")
    return inner


def array(*items: Any) -> Validator:
    """
    Match an array with exactly one element per item, in order.

    Items are lifted with to_validator, so literals work in place of eq().

    Usage:
        array(1, "two", any_())
        array()                 # empty array only
    """
    return ArrayValidator(items=tuple(to_validator(item) for item in items))


def obj(
    fields: Mapping[str, Any] | None = None,
    /,
    *,
    strict: bool | None = None,
    **kwargs: Any,
) -> Validator:
    """
    Match an object containing the given fields.

    Field values are lifted with to_validator. Keys that are not valid Python
    identifiers (or are named "strict") go through the ``fields`` mapping.

    Usage:
        obj(name="Alice", age=of_type(int))
        obj({"first-name": "Alice"}, strict=True)
    """
    merged: dict[str, Any] = dict(fields or {})
    merged.update(kwargs)

    lifted = to_validator(merged)
    assert isinstance(lifted, ObjectValidator)
    return ObjectValidator(fields=lifted.fields, strict=strict)
