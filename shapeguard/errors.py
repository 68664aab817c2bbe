"""
Error model for shapeguard.

Every validation failure is a ValidationError carrying one code from the
closed ErrorCode set, a rendered message, the path of the failing sub-value,
the parameters used to render the message, and nested errors for composite
schemas.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterable, Sequence

if TYPE_CHECKING:
    from .types import Path


class ErrorCode(str, Enum):
    """The closed set of validation error codes."""

    REQUIRED = "required"
    INVALID_TYPE = "invalid_type"
    INVALID_ENUM = "invalid_enum"
    INVALID_ARRAY_ITEMS = "invalid_array_items"
    INVALID_OBJECT = "invalid_object"
    INVALID_OBJECT_SHAPE = "invalid_object_shape"
    INVALID_UNION = "invalid_union"
    STRING_PATTERN = "string_pattern"

    def __str__(self) -> str:
        return self.value


class ValidationError(ValueError):
    """
    Structured validation failure.

    Attributes:
        message: Human-readable explanation
        code: One of ErrorCode, for programmatic handling
        path: Keys/indexes leading from the validated root to the failing value
        details: Parameters the message was rendered from (a *Details dataclass)
        sub_errors: Nested errors of fields/items/alternatives
        cause: Original exception or data behind the failure, if any
    """

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode | str,
        path: Iterable[str | int] = (),
        details: Any = None,
        sub_errors: Iterable[ValidationError] = (),
        cause: Any = None,
    ):
        super().__init__(message)
        try:
            self.code = ErrorCode(code)
        except ValueError:
            raise ValueError(f"Unknown validation error code: {code!r}") from None
        self.message = message
        self.path: Path = tuple(path)
        self.details = details
        self.sub_errors: tuple[ValidationError, ...] = tuple(sub_errors)
        self.cause = cause

    def __str__(self) -> str:
        if self.path:
            location = ".".join(str(p) for p in self.path)
            return f"{location}: [{self.code}] {self.message}"
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"ValidationError(code={self.code.value!r}, message={self.message!r}, "
            f"path={self.path!r})"
        )

    def __reduce__(self):
        # BaseException rebuilds from self.args alone, which lacks the keyword fields
        return (
            _rebuild_validation_error,
            (
                self.__class__,
                self.message,
                {
                    "code": self.code,
                    "path": self.path,
                    "details": self.details,
                    "sub_errors": self.sub_errors,
                    "cause": self.cause,
                },
            ),
        )

    def with_path(self, *prefix: str | int) -> ValidationError:
        """Return a copy located under `prefix` (e.g. a field name or index)."""
        return ValidationError(
            self.message,
            code=self.code,
            path=(*prefix, *self.path),
            details=self.details,
            sub_errors=self.sub_errors,
            cause=self.cause,
        )

    def flatten(self) -> list[ValidationError]:
        """
        List this error and all nested errors, each with its absolute path.

        The returned errors carry no sub_errors of their own.
        """
        errors = [
            ValidationError(
                self.message,
                code=self.code,
                path=self.path,
                details=self.details,
                cause=self.cause,
            )
        ]
        for sub_error in self.sub_errors:
            for error in sub_error.flatten():
                errors.append(error.with_path(*self.path))
        return errors

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly representation (nested errors included)."""
        return {
            "code": self.code.value,
            "message": self.message,
            "path": list(self.path),
            "details": _details_to_dict(self.details),
            "sub_errors": [e.to_dict() for e in self.sub_errors],
        }


def _rebuild_validation_error(
    cls: type[ValidationError], message: str, kwargs: dict[str, Any]
) -> ValidationError:
    return cls(message, **kwargs)


def _details_to_dict(details: Any) -> Any:
    # Imported here to avoid circular dependency
    from .types import MISSING

    if is_dataclass(details) and not isinstance(details, type):
        values = {f.name: getattr(details, f.name) for f in fields(details)}
        # MISSING has no JSON form; it serializes like an absent value
        return {name: None if v is MISSING else v for name, v in values.items()}
    return details


@dataclass(frozen=True, slots=True)
class TypeErrorDetails:
    value: Any
    expected_type: str
    received_type: str


@dataclass(frozen=True, slots=True)
class RequiredErrorDetails:
    value: Any


@dataclass(frozen=True, slots=True)
class EnumErrorDetails:
    value: Any
    expected_values: Sequence[Any]


@dataclass(frozen=True, slots=True)
class UnionErrorDetails:
    value: Any
    allowed_types: Sequence[str]


@dataclass(frozen=True, slots=True)
class PatternErrorDetails:
    value: str
    pattern: str
