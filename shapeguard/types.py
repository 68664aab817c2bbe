"""
Type definitions for shapeguard.

Provides the Result type (Ok/Err) with its smart constructors, the MISSING
sentinel for absent values, and shared type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Literal, TypeVar, Union

from .errors import ValidationError

T = TypeVar("T")
E = TypeVar("E")


class Missing(Enum):
    """
    Sentinel for a value that was not provided at all.

    Distinct from None: `optional()` schemas accept MISSING, `nullable()`
    schemas accept None. Shape schemas pass MISSING for absent keys.
    """

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = Missing.MISSING


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    @property
    def ok(self) -> Literal[True]:
        return True

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    @property
    def ok(self) -> Literal[False]:
        return False

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


def valid(value: T) -> Ok[T]:
    """Build a successful result."""
    return Ok(value)


def invalid(error: ValidationError) -> Err[ValidationError]:
    """Build a failed result. Only ValidationError payloads are accepted."""
    if not isinstance(error, ValidationError):
        raise TypeError(
            f"invalid() expects a ValidationError, got {type(error).__name__}"
        )
    return Err(error)


# Type aliases
Result = Union[Ok[T], Err[ValidationError]]
Path = tuple[Union[str, int], ...]
MessageFormatter = Callable[[Any], str]
Message = Union[str, MessageFormatter]
Rule = Callable[[Any], None]
