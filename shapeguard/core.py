"""
Core schema classes for shapeguard.

Defines the two calling conventions every schema supports (Validator), the
composable schema contract (Schema), the optional/nullable/nullish/required
modifiers, and the TypeSchema base that concrete kinds build on.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, TypeVar, Union

from .errors import ErrorCode, RequiredErrorDetails, TypeErrorDetails, ValidationError
from .lib.type_helpers import determine_type
from .messages import default_required_message, default_type_message, format_message
from .types import MISSING, Err, Message, Missing, Ok, Result, Rule, invalid, valid

logger = logging.getLogger(__name__)

InT = TypeVar("InT")
OutT = TypeVar("OutT")
U = TypeVar("U")


class Validator(ABC, Generic[OutT]):
    """
    Two calling conventions over the same check.

    `validate` never raises for invalid input and always returns a Result.
    `parse` unwraps that Result: it returns the value on success and raises
    the carried ValidationError on failure. Subclasses only implement
    `validate`, so both conventions always agree.
    """

    __slots__ = ()

    @abstractmethod
    def validate(self, value: Any) -> Result[OutT]:
        """Check a value, returning Ok(normalized value) or Err(ValidationError)."""

    def parse(self, value: Any) -> OutT:
        """
        Check a value, returning the normalized value.

        Raises:
            ValidationError: If the value is invalid
        """
        result = self.validate(value)
        if isinstance(result, Ok):
            return result.value
        logger.debug("Parse failed: %s", result.error)
        raise result.error


class Schema(Validator[OutT], Generic[InT, OutT]):
    """
    Immutable, composable descriptor of an expected value shape.

    InT is the type the schema is declared over, OutT the type `parse`
    produces. Modifiers never mutate the schema; each returns a new schema
    wrapping this one, and the most recently applied modifier decides how
    None/MISSING are handled for the dimension it touches:

        string().optional()              # str | MISSING
        string().nullable()              # str | None
        string().nullish()               # str | None | MISSING
        string().nullish().required()    # str
        string().required().optional()   # str | MISSING
    """

    __slots__ = ()

    def optional(self) -> OptionalSchema[InT, OutT]:
        """Also accept MISSING (returned as-is)."""
        return OptionalSchema(self)

    def nullable(self) -> NullableSchema[InT, OutT]:
        """Also accept None (returned as-is)."""
        return NullableSchema(self)

    def nullish(self) -> NullishSchema[InT, OutT]:
        """Also accept None and MISSING (returned as-is)."""
        return NullishSchema(self)

    def required(self, message: Message | None = None) -> RequiredSchema[InT, OutT]:
        """
        Reject None and MISSING with the `required` error code.

        Args:
            message: Custom message (string or callable of RequiredErrorDetails)
        """
        return RequiredSchema(self, message)

    def transform(self, fn: Callable[[OutT], U]) -> TransformedSchema[InT, U]:
        """Map the validated value through `fn`."""
        return TransformedSchema(self, fn)

    def __or__(self, other: Any) -> Schema[Any, Any]:
        """
        Combine into a union: the first matching alternative wins.

        Usage:
            string() | number()
            string() | int
        """
        # Imported here to avoid circular dependency
        from .schemas import UnionSchema
        from .validators import to_schema

        return UnionSchema((self, to_schema(other)))

    def __ror__(self, other: Any) -> Schema[Any, Any]:
        """Support `str | number()` where the plain type comes first."""
        from .schemas import UnionSchema
        from .validators import to_schema

        return UnionSchema((to_schema(other), self))


def build_required_error(value: Any, message: Message) -> ValidationError:
    details = RequiredErrorDetails(value=value)
    return ValidationError(
        format_message(message, details),
        code=ErrorCode.REQUIRED,
        details=details,
    )


@dataclass(frozen=True, slots=True)
class OptionalSchema(Schema[Union[InT, Missing], Union[OutT, Missing]]):
    """Accepts MISSING, delegates everything else to the wrapped schema."""

    schema: Schema[InT, OutT]

    def unwrap(self) -> Schema[InT, OutT]:
        return self.schema

    def validate(self, value: Any) -> Result[Union[OutT, Missing]]:
        if value is MISSING:
            return valid(MISSING)
        return self.schema.validate(value)


@dataclass(frozen=True, slots=True)
class NullableSchema(Schema[Union[InT, None], Union[OutT, None]]):
    """Accepts None, delegates everything else to the wrapped schema."""

    schema: Schema[InT, OutT]

    def unwrap(self) -> Schema[InT, OutT]:
        return self.schema

    def validate(self, value: Any) -> Result[Union[OutT, None]]:
        if value is None:
            return valid(None)
        return self.schema.validate(value)


@dataclass(frozen=True, slots=True)
class NullishSchema(
    Schema[Union[InT, None, Missing], Union[OutT, None, Missing]]
):
    """Accepts None and MISSING, delegates everything else to the wrapped schema."""

    schema: Schema[InT, OutT]

    def unwrap(self) -> Schema[InT, OutT]:
        return self.schema

    def validate(self, value: Any) -> Result[Union[OutT, None, Missing]]:
        if value is None or value is MISSING:
            return valid(value)
        return self.schema.validate(value)


@dataclass(frozen=True, slots=True)
class RequiredSchema(Schema[InT, OutT]):
    """
    Rejects None and MISSING before the wrapped schema sees them.

    Python cannot subtract None from a type variable, so the static output
    type stays OutT; at runtime None/MISSING never get through.
    """

    schema: Schema[Any, Any]
    message: Message | None = None

    def unwrap(self) -> Schema[Any, Any]:
        return self.schema

    def validate(self, value: Any) -> Result[OutT]:
        if value is None or value is MISSING:
            message = default_required_message if self.message is None else self.message
            return invalid(build_required_error(value, message))
        return self.schema.validate(value)


@dataclass(frozen=True, slots=True)
class TransformedSchema(Schema[InT, U]):
    """Validates with the wrapped schema, then maps the value through `fn`."""

    schema: Schema[InT, Any]
    fn: Callable[[Any], U]

    def unwrap(self) -> Schema[InT, Any]:
        return self.schema

    def validate(self, value: Any) -> Result[U]:
        result = self.schema.validate(value)
        if isinstance(result, Err):
            return result
        return valid(self.fn(result.value))


@dataclass(frozen=True, slots=True, kw_only=True)
class TypeSchema(Schema[OutT, OutT]):
    """
    Base for concrete schema kinds.

    Validation runs in four steps:
        1. `_prepare_value` (coercion hook, identity by default)
        2. None/MISSING are rejected with the `required` code
        3. `_validate` performs the kind-specific check
        4. each rule in `rules` runs on the checked value; a rule signals
           failure by raising ValidationError
    """

    rules: tuple[Rule, ...] = ()
    type_error: Message = default_type_message
    required_error: Message = default_required_message

    type_name: ClassVar[str] = "unknown"

    def _prepare_value(self, value: Any) -> Any:
        return value

    @abstractmethod
    def _validate(self, value: Any) -> Result[OutT]:
        """Kind-specific check of a non-None, non-MISSING value."""

    def validate(self, value: Any) -> Result[OutT]:
        value = self._prepare_value(value)

        if value is None or value is MISSING:
            return invalid(build_required_error(value, self.required_error))

        result = self._validate(value)
        if isinstance(result, Err):
            return result

        for rule in self.rules:
            try:
                rule(result.value)
            except ValidationError as e:
                return invalid(e)

        return result

    def _type_error(self, value: Any, expected_type: str | None = None) -> Err[ValidationError]:
        details = TypeErrorDetails(
            value=value,
            expected_type=expected_type or self.type_name,
            received_type=determine_type(value),
        )
        return invalid(
            ValidationError(
                format_message(self.type_error, details),
                code=ErrorCode.INVALID_TYPE,
                details=details,
            )
        )
