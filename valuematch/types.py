"""
Type definitions for valuematch.

Provides a minimal Result type (Ok/Err) and the two match error kinds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .value import TypeId, type_id

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class InvalidType:
    """
    The inspected value has the wrong type.

    Holds the inspected value itself (not a copy) and the type that was
    expected. The actual type is recoverable with ``type_id(value)``.
    """

    value: Any
    expected: TypeId

    @property
    def message(self) -> str:
        return f"Expected {self.expected}, got {type_id(self.value)}: {self.value!r}"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class InvalidValue:
    """
    The inspected value has the right type but the wrong content.

    ``expected`` is a rendering of what was expected, not a value.
    """

    value: Any
    expected: str

    @property
    def message(self) -> str:
        return f"Expected {self.expected}, got {self.value!r}"

    def __str__(self) -> str:
        return self.message


# Type aliases
MatchError = InvalidType | InvalidValue
MatchResult = Ok[None] | Err[MatchError]
