"""
Top-level matching operations for valuematch.

Provides validate() and matches() functions.
"""

from __future__ import annotations

import logging
from typing import Any

from .core import to_validator
from .types import Err, MatchResult

logger = logging.getLogger(__name__)


def validate(value: Any, expected: Any) -> MatchResult:
    """
    Validate a value against an expectation.

    Args:
        value: The decoded JSON value to inspect
        expected: A Validator, or anything to_validator accepts

    Returns:
        Ok(None) if the value matches
        Err(InvalidType | InvalidValue) for the first mismatch found

    Usage:
        validate({"name": "Alice", "age": 30}, {"name": "Alice", "age": int})
        validate([1, 2, 3], array(1, any_(), 3))
    """
    validator = to_validator(expected)
    result = validator.validate(value)

    if isinstance(result, Err):
        logger.debug("Value did not match: %s", result.error)

    return result


def matches(value: Any, expected: Any) -> bool:
    """Check whether a value matches an expectation."""
    return validate(value, expected).is_ok()
