"""
Core validator classes for valuematch.

Every matcher implements the single-method Validator interface, so primitive
and composite matchers nest freely.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .context import is_strict
from .types import Err, InvalidType, InvalidValue, MatchResult, Ok
from .value import TypeId, to_value, type_id, values_equal


class Validator(ABC):
    """
    Inspect one value and report a match or a mismatch.

    Implementations must be immutable and must not mutate the inspected value.
    Errors hold the inspected value (or a sub-value of it) by reference.
    """

    __slots__ = ()

    @abstractmethod
    def validate(self, value: Any) -> MatchResult:
        """
        Validate a value.

        Returns:
            Ok(None) if the value matches
            Err(InvalidType | InvalidValue) if it does not
        """

    def __call__(self, value: Any) -> MatchResult:
        return self.validate(value)


@dataclass(frozen=True, slots=True)
class AnyValidator(Validator):
    """Matches every value, None included."""

    def validate(self, value: Any) -> MatchResult:
        return Ok(None)


@dataclass(frozen=True, slots=True)
class EqValidator(Validator):
    """
    Matches values equal to ``expected``.

    ``expected`` is kept as given and converted on every call, so error
    messages render the caller's object rather than its JSON form. Build it
    with eq(), which checks up front that ``expected`` converts; constructed
    directly, an unconvertible ``expected`` raises TypeError from validate().
    """

    expected: Any

    def validate(self, value: Any) -> MatchResult:
        expected_val = to_value(self.expected)
        expected_type = type_id(expected_val)

        if type_id(value) is not expected_type:
            return Err(InvalidType(value, expected_type))

        if values_equal(value, expected_val):
            return Ok(None)

        return Err(InvalidValue(value, repr(self.expected)))


@dataclass(frozen=True, slots=True)
class TypeValidator(Validator):
    """
    Matches any value of the given type.

    With ``integral`` set, numbers must also be ints (``2.5`` and ``2.0`` fail).
    """

    expected: TypeId
    integral: bool = False

    def validate(self, value: Any) -> MatchResult:
        if type_id(value) is not self.expected:
            return Err(InvalidType(value, self.expected))
        if self.integral and isinstance(value, float):
            return Err(InvalidValue(value, "int"))
        return Ok(None)


@dataclass(frozen=True, slots=True)
class ArrayValidator(Validator):
    """Matches arrays element by element, one validator per position."""

    items: tuple[Validator, ...]

    def validate(self, value: Any) -> MatchResult:
        if type_id(value) is not TypeId.ARRAY:
            return Err(InvalidType(value, TypeId.ARRAY))

        if len(value) != len(self.items):
            return Err(InvalidValue(value, f"array of length {len(self.items)}"))

        for item, validator in zip(value, self.items):
            result = validator.validate(item)
            if isinstance(result, Err):
                return result

        return Ok(None)


@dataclass(frozen=True, slots=True)
class ObjectValidator(Validator):
    """
    Matches objects field by field.

    Keys not named in ``fields`` are ignored unless strict. ``strict=None``
    defers to the active matching_context.
    """

    fields: Mapping[str, Validator] = field(default_factory=dict)
    strict: bool | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def validate(self, value: Any) -> MatchResult:
        if type_id(value) is not TypeId.OBJECT:
            return Err(InvalidType(value, TypeId.OBJECT))

        for key, validator in self.fields.items():
            if key not in value:
                return Err(InvalidValue(value, f"object with key {key!r}"))
            result = validator.validate(value[key])
            if isinstance(result, Err):
                return result

        strict = is_strict() if self.strict is None else self.strict
        if strict:
            for key in value:
                if key not in self.fields:
                    return Err(InvalidValue(value, f"object without key {key!r}"))

        return Ok(None)


_TYPE_VALIDATORS: dict[type, TypeValidator] = {
    type(None): TypeValidator(TypeId.NULL),
    bool: TypeValidator(TypeId.BOOL),
    int: TypeValidator(TypeId.NUMBER, integral=True),
    float: TypeValidator(TypeId.NUMBER),
    str: TypeValidator(TypeId.STRING),
    list: TypeValidator(TypeId.ARRAY),
    dict: TypeValidator(TypeId.OBJECT),
}


def to_validator(v: Any) -> Validator:
    """
    Coerce a value to a validator.

    Conversion rules:
        Validator -> pass through
        None | bool | int | float | str -> EqValidator
        type -> TypeValidator for the matching TypeId (int rejects floats)
        dict -> ObjectValidator with recursive conversion
        list | tuple -> ArrayValidator with recursive conversion

    Raises:
        TypeError: If v has no validator form
    """
    if isinstance(v, Validator):
        return v

    if isinstance(v, type):
        if v not in _TYPE_VALIDATORS:
            raise TypeError(f"No JSON type corresponds to {v.__name__}")
        return _TYPE_VALIDATORS[v]

    if v is None or isinstance(v, (bool, int, float, str)):
        return EqValidator(v)

    if isinstance(v, dict):
        fields = {}
        for key, val in v.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be str, got {type(key).__name__}")
            fields[key] = to_validator(val)
        return ObjectValidator(fields=fields)

    if isinstance(v, (list, tuple)):
        return ArrayValidator(items=tuple(to_validator(item) for item in v))

    raise TypeError(f"Cannot convert {type(v).__name__} to validator")
