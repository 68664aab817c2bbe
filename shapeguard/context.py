"""
Context manager for validation configuration (e.g., fail-fast mode).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for fail-fast mode
_fail_fast: ContextVar[bool] = ContextVar("fail_fast", default=False)


def is_fail_fast() -> bool:
    """Check if fail-fast mode is currently enabled."""
    return _fail_fast.get()


@contextmanager
def validation_context(*, fail_fast: bool = False):
    """
    Context manager for validation configuration.

    Args:
        fail_fast: If True, composite schemas (arrays, shapes, records) stop at
                   the first failing child instead of collecting an error for
                   every failing field or item. The reported error still
                   carries the child's path.

    Example:
        from shapeguard import shape, string, number, validation_context

        user = shape({"name": string(), "age": number()})

        # Default: both field errors are reported
        user.validate({"name": 1, "age": "x"}).error.sub_errors  # 2 errors

        # Fail-fast: only the first one
        with validation_context(fail_fast=True):
            user.validate({"name": 1, "age": "x"}).error.sub_errors  # 1 error
    """
    token = _fail_fast.set(fail_fast)
    try:
        yield
    finally:
        _fail_fast.reset(token)
