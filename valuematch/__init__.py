"""
valuematch - Match decoded JSON values against declarative expectations.

Usage:
    from valuematch import any_, array, eq, obj, validate

    expected = obj(
        id=int,
        name="Alice",
        tags=array("admin", any_()),
    )

    result = validate(data, expected)
    if result.is_err():
        print(result.error)
"""

from .context import is_strict, matching_context
from .core import (
    AnyValidator,
    ArrayValidator,
    EqValidator,
    ObjectValidator,
    TypeValidator,
    Validator,
    to_validator,
)
from .schema import matches, validate
from .types import Err, InvalidType, InvalidValue, MatchError, MatchResult, Ok
from .validators import any_, array, eq, obj, of_type
from .value import TypeId, Value, to_value, type_id, values_equal

__all__ = [
    # Result types
    "Ok",
    "Err",
    "InvalidType",
    "InvalidValue",
    "MatchError",
    "MatchResult",
    # Value model
    "Value",
    "TypeId",
    "type_id",
    "values_equal",
    "to_value",
    # Core
    "Validator",
    "AnyValidator",
    "EqValidator",
    "TypeValidator",
    "ArrayValidator",
    "ObjectValidator",
    "to_validator",
    # Matchers
    "any_",
    "eq",
    "of_type",
    "array",
    "obj",
    # Top-level
    "validate",
    "matches",
    # Configuration
    "matching_context",
    "is_strict",
]
