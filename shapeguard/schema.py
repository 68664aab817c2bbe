"""
Schema operations for shapeguard.

Provides validate(), parse() and to_pydantic() functions.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Literal
from typing import Optional as TypingOptional
from typing import Union

from pydantic import BaseModel, ConfigDict, StringConstraints, create_model

from .core import (
    NullableSchema,
    NullishSchema,
    OptionalSchema,
    RequiredSchema,
    Schema,
    TransformedSchema,
)
from .rules import PatternRule
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
from .types import Result
from .validators import to_schema

logger = logging.getLogger(__name__)


def validate(data: Any, spec: Any) -> Result[Any]:
    """
    Validate data against a schema or a plain spec.

    Args:
        data: The value to validate
        spec: A schema, or a spec accepted by to_schema()

    Returns:
        Ok(normalized data) if validation passes
        Err(ValidationError) if validation fails

    Usage:
        spec = {
            "name": str,
            "email": string().optional(),
            "age": number(),
        }
        result = validate({"name": "Alice", "age": 30}, spec)
    """
    return to_schema(spec).validate(data)


def parse(data: Any, spec: Any) -> Any:
    """
    Like validate(), but returns the normalized data directly.

    Raises:
        ValidationError: If the data is invalid
    """
    return to_schema(spec).parse(data)


def to_pydantic(name: str, spec: Any) -> type[BaseModel]:
    """
    Compile a shape schema to a Pydantic model.

    Args:
        name: Name of the generated model class
        spec: A ShapeSchema, or a dict spec accepted by to_schema()

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", {
            "name": string(),
            "email": string().optional(),
        })
        user = User(name="Alice")
    """
    schema = to_schema(spec)
    if not isinstance(schema, ShapeSchema):
        raise TypeError("Schema must be a shape")
    return _build_model(name, schema)


def _build_model(name: str, schema: ShapeSchema) -> type[BaseModel]:
    fields: dict[str, Any] = {}
    for key, field_schema in schema.fields.items():
        fields[key] = _extract_pydantic_field(field_schema, f"{name}_{key}")

    logger.debug("Creating Pydantic model %s with fields %s", name, list(fields))
    return create_model(
        name,
        __config__=ConfigDict(arbitrary_types_allowed=True, regex_engine="python-re"),
        **fields,
    )


def _extract_pydantic_field(schema: Schema[Any, Any], name: str) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a field schema."""
    annotation = _annotation(schema, name)
    if _accepts_missing(schema):
        return (annotation, None)
    return (annotation, ...)


def _accepts_missing(schema: Schema[Any, Any]) -> bool:
    match schema:
        case OptionalSchema() | NullishSchema():
            return True
        case NullableSchema() | TransformedSchema():
            return _accepts_missing(schema.unwrap())
    return False


def _strip_nullability(schema: Schema[Any, Any]) -> Schema[Any, Any]:
    match schema:
        case OptionalSchema() | NullableSchema() | NullishSchema() | RequiredSchema():
            return _strip_nullability(schema.unwrap())
    return schema


def _annotation(schema: Schema[Any, Any], name: str) -> Any:
    """Map a schema to the Python type Pydantic should validate against."""
    match schema:
        case OptionalSchema() | NullableSchema() | NullishSchema():
            return TypingOptional[_annotation(schema.unwrap(), name)]
        case RequiredSchema():
            return _annotation(_strip_nullability(schema.unwrap()), name)
        case StringSchema(rules=rules):
            patterns = [r.regex.pattern for r in rules if isinstance(r, PatternRule)]
            if patterns:
                return Annotated[str, StringConstraints(pattern=patterns[0])]
            return str
        case NumberSchema():
            return Union[int, float]
        case BooleanSchema():
            return bool
        case EnumSchema(values=values):
            return Literal[values]  # type: ignore[valid-type]
        case ArraySchema(item=None):
            return list[Any]
        case ArraySchema(item=item):
            return list[_annotation(item, name)]  # type: ignore[misc]
        case ShapeSchema():
            return _build_model(name, schema)
        case RecordSchema(key_schema=key_schema, value_schema=value_schema):
            key_type = Any if key_schema is None else _annotation(key_schema, name)
            value_type = Any if value_schema is None else _annotation(value_schema, name)
            return dict[key_type, value_type]  # type: ignore[valid-type]
        case UnionSchema(schemas=schemas):
            return Union[tuple(_annotation(s, name) for s in schemas)]
        case InstanceSchema(cls=cls):
            return cls

    return Any
