"""
Context manager for matching configuration (e.g., strict objects).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for strict object matching
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)


def is_strict() -> bool:
    """Check if strict mode is currently enabled."""
    return _strict_mode.get()


@contextmanager
def matching_context(*, strict: bool = False):
    """
    Context manager for matching configuration.

    Args:
        strict: If True, object matchers built without an explicit ``strict``
               reject keys they do not name.

    Example:
        from valuematch import matching_context, validate

        expected = {"id": 1}

        validate({"id": 1, "extra": True}, expected)  # Ok

        with matching_context(strict=True):
            validate({"id": 1, "extra": True}, expected)  # Err(InvalidValue)
    """
    token = _strict_mode.set(strict)
    try:
        yield
    finally:
        _strict_mode.reset(token)
