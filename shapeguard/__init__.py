"""
shapeguard - composable runtime schemas with structured validation errors.

Usage:
    from shapeguard import array, number, shape, string

    user = shape({
        "name": string(trim=True),
        "email": string(pattern=r"^[^@]+@[^@]+$").optional(),
        "age": number().nullable(),
        "tags": array(string()),
    })

    result = user.validate(data)    # Ok(value) | Err(ValidationError)
    value = user.parse(data)        # value, or raises ValidationError
"""

from .context import is_fail_fast, validation_context
from .core import (
    NullableSchema,
    NullishSchema,
    OptionalSchema,
    RequiredSchema,
    Schema,
    TransformedSchema,
    TypeSchema,
    Validator,
)
from .errors import (
    EnumErrorDetails,
    ErrorCode,
    PatternErrorDetails,
    RequiredErrorDetails,
    TypeErrorDetails,
    UnionErrorDetails,
    ValidationError,
)
from .lib.regex_helpers import regex
from .lib.text_helpers import format_list, pluralize
from .lib.type_helpers import determine_type, is_plain_object
from .messages import format_message
from .rules import PatternRule, pattern
from .schema import parse, to_pydantic, validate
from .schemas import (
    ArraySchema,
    BooleanSchema,
    EnumSchema,
    InstanceSchema,
    NumberSchema,
    RecordSchema,
    ShapeSchema,
    StringSchema,
    UnionSchema,
)
from .types import MISSING, Err, Missing, Ok, Result, invalid, valid
from .validators import (
    array,
    boolean,
    enum_of,
    instance,
    number,
    record,
    shape,
    string,
    to_schema,
    union,
)

__all__ = [
    # Result types
    "Ok",
    "Err",
    "Result",
    "valid",
    "invalid",
    "MISSING",
    "Missing",
    # Errors
    "ErrorCode",
    "ValidationError",
    "TypeErrorDetails",
    "RequiredErrorDetails",
    "EnumErrorDetails",
    "UnionErrorDetails",
    "PatternErrorDetails",
    "format_message",
    # Core
    "Validator",
    "Schema",
    "TypeSchema",
    "OptionalSchema",
    "NullableSchema",
    "NullishSchema",
    "RequiredSchema",
    "TransformedSchema",
    # Schema kinds
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "EnumSchema",
    "ArraySchema",
    "ShapeSchema",
    "RecordSchema",
    "UnionSchema",
    "InstanceSchema",
    # Factories
    "string",
    "number",
    "boolean",
    "enum_of",
    "array",
    "shape",
    "record",
    "union",
    "instance",
    "to_schema",
    # Rules
    "pattern",
    "PatternRule",
    # Schema operations
    "validate",
    "parse",
    "to_pydantic",
    # Configuration
    "validation_context",
    "is_fail_fast",
    # Helpers
    "pluralize",
    "format_list",
    "is_plain_object",
    "determine_type",
    "regex",
]
