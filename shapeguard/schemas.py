"""
Concrete schema kinds for shapeguard.

Scalar kinds (str, number, bool, enum, instance) check a single value;
composite kinds (list, shape, record, union) validate children with their own
schemas and aggregate the child errors, each located by key or index.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .context import is_fail_fast
from .core import (
    NullableSchema,
    NullishSchema,
    OptionalSchema,
    RequiredSchema,
    Schema,
    TransformedSchema,
    TypeSchema,
)
from .errors import EnumErrorDetails, ErrorCode, UnionErrorDetails, ValidationError
from .lib.text_helpers import format_list, pluralize
from .lib.type_helpers import is_plain_object
from .messages import default_enum_message, default_union_message, format_message
from .types import MISSING, Err, Message, Result, invalid, valid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StringSchema(TypeSchema[str]):
    """
    Accepts `str`.

    With `coerce`, numbers are converted with `str()`, booleans become
    "true"/"false" and None/MISSING become "". With `trim`, surrounding
    whitespace is stripped before the rules run.
    """

    coerce: bool = False
    trim: bool = False

    type_name = "str"

    def _prepare_value(self, value: Any) -> Any:
        if self.coerce:
            if value is None or value is MISSING:
                value = ""
            elif isinstance(value, bool):
                value = "true" if value else "false"
            elif isinstance(value, (int, float)):
                value = str(value)
        if self.trim and isinstance(value, str):
            value = value.strip()
        return value

    def _validate(self, value: Any) -> Result[str]:
        if not isinstance(value, str):
            return self._type_error(value)
        return valid(value)


@dataclass(frozen=True, slots=True)
class NumberSchema(TypeSchema[float]):
    """
    Accepts finite `int`/`float` values; `bool` is rejected.

    With `coerce`, True becomes 1, False/None/MISSING become 0, blank
    strings become 0 and numeric strings are parsed.
    """

    coerce: bool = False

    type_name = "number"

    def _prepare_value(self, value: Any) -> Any:
        if not self.coerce:
            return value
        if value is True:
            return 1
        if value is False or value is None or value is MISSING:
            return 0
        if isinstance(value, str):
            if not value.strip():
                return 0
            for convert in (int, float):
                try:
                    return convert(value)
                except ValueError:
                    continue
        return value

    def _validate(self, value: Any) -> Result[float]:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return self._type_error(value)
        if isinstance(value, float) and not math.isfinite(value):
            return self._type_error(value)
        return valid(value)


@dataclass(frozen=True, slots=True)
class BooleanSchema(TypeSchema[bool]):
    """
    Accepts `bool`.

    With `coerce`, "true"/1 become True and "false"/0/None/MISSING become False.
    """

    coerce: bool = False

    type_name = "bool"

    def _prepare_value(self, value: Any) -> Any:
        if not self.coerce:
            return value
        if value == "true" or (type(value) is int and value == 1):
            return True
        if value == "false" or (type(value) is int and value == 0):
            return False
        if value is None or value is MISSING:
            return False
        return value

    def _validate(self, value: Any) -> Result[bool]:
        if not isinstance(value, bool):
            return self._type_error(value)
        return valid(value)


@dataclass(frozen=True, slots=True)
class EnumSchema(TypeSchema[Any]):
    """
    Accepts one of a fixed set of values.

    Matching is type-strict, so True does not match 1. An `enum.Enum`
    subclass may be given instead of a sequence; its members become the values.
    """

    values: tuple[Any, ...]
    enum_error: Message = default_enum_message

    type_name = "enum"

    def __post_init__(self) -> None:
        values = self.values
        if isinstance(values, type) and issubclass(values, Enum):
            values = tuple(values)
        object.__setattr__(self, "values", tuple(values))

    def _validate(self, value: Any) -> Result[Any]:
        for expected in self.values:
            if expected is value or (type(expected) is type(value) and expected == value):
                return valid(value)

        details = EnumErrorDetails(value=value, expected_values=self.values)
        return invalid(
            ValidationError(
                format_message(self.enum_error, details),
                code=ErrorCode.INVALID_ENUM,
                details=details,
            )
        )


@dataclass(frozen=True, slots=True)
class ArraySchema(TypeSchema[list]):
    """Accepts a `list` or `tuple`; each item is checked with `item` when given."""

    item: Schema[Any, Any] | None = None

    type_name = "list"

    def _validate(self, value: Any) -> Result[list]:
        if not isinstance(value, (list, tuple)):
            return self._type_error(value)

        if self.item is None:
            return valid(list(value))

        items: list[Any] = []
        errors: list[ValidationError] = []
        for index, item in enumerate(value):
            result = self.item.validate(item)
            if isinstance(result, Err):
                errors.append(result.error.with_path(index))
                if is_fail_fast():
                    break
            else:
                items.append(result.value)

        if errors:
            if len(errors) > 1:
                count = pluralize(len(errors), "invalid item", "invalid items")
                message = f"The list contains {count}."
            else:
                message = f"The list contains an invalid item at index {errors[0].path[0]}."
            return invalid(
                ValidationError(
                    message,
                    code=ErrorCode.INVALID_ARRAY_ITEMS,
                    sub_errors=errors,
                )
            )

        return valid(items)


@dataclass(frozen=True, slots=True)
class ShapeSchema(TypeSchema[dict]):
    """
    Accepts any mapping and validates the named fields.

    Absent keys are passed to the field schema as MISSING; fields that resolve
    to MISSING (optional and absent) are left out of the output. Keys without
    a field schema are dropped.
    """

    fields: Mapping[str, Schema[Any, Any]]

    type_name = "dict"

    def _validate(self, maybe_object: Any) -> Result[dict]:
        if not isinstance(maybe_object, Mapping):
            return self._type_error(maybe_object)

        output: dict[str, Any] = {}
        errors: dict[str, ValidationError] = {}
        for key, schema in self.fields.items():
            result = schema.validate(maybe_object.get(key, MISSING))
            if isinstance(result, Err):
                errors[key] = result.error.with_path(key)
                if is_fail_fast():
                    break
            elif result.value is not MISSING:
                output[key] = result.value

        if errors:
            return invalid(
                ValidationError(
                    _invalid_properties_message(list(errors)),
                    code=ErrorCode.INVALID_OBJECT_SHAPE,
                    sub_errors=errors.values(),
                )
            )

        return valid(output)

    def get(self, name: str) -> Schema[Any, Any]:
        """Return the schema of a field."""
        if name not in self.fields:
            raise KeyError(f"A property '{name}' does not exist.")
        return self.fields[name]


@dataclass(frozen=True, slots=True)
class RecordSchema(TypeSchema[dict]):
    """
    Accepts a plain `dict` with arbitrary keys.

    Every key is checked with `key_schema` and every value with
    `value_schema` when those are given.
    """

    key_schema: Schema[Any, Any] | None = None
    value_schema: Schema[Any, Any] | None = None

    type_name = "dict"

    def _validate(self, maybe_object: Any) -> Result[dict]:
        if not is_plain_object(maybe_object):
            return self._type_error(maybe_object)

        output: dict[Any, Any] = {}
        errors: dict[Any, list[ValidationError]] = {}
        for key, value in maybe_object.items():
            checked_key, checked_value = key, value
            entry_errors: list[ValidationError] = []

            if self.key_schema is not None:
                result = self.key_schema.validate(key)
                if isinstance(result, Err):
                    entry_errors.append(result.error.with_path(key))
                else:
                    checked_key = result.value

            if self.value_schema is not None:
                result = self.value_schema.validate(value)
                if isinstance(result, Err):
                    entry_errors.append(result.error.with_path(key))
                else:
                    checked_value = result.value

            if entry_errors:
                errors[key] = entry_errors
                if is_fail_fast():
                    break
            else:
                output[checked_key] = checked_value

        if errors:
            return invalid(
                ValidationError(
                    _invalid_properties_message(list(errors)),
                    code=ErrorCode.INVALID_OBJECT,
                    sub_errors=[e for entry in errors.values() for e in entry],
                )
            )

        return valid(output)


@dataclass(frozen=True, slots=True)
class UnionSchema(TypeSchema[Any]):
    """
    Accepts a value matching any of `schemas`; the first match wins.

    When nothing matches, the error of every alternative is kept in
    `sub_errors`, in the order the alternatives were tried.
    """

    schemas: tuple[Schema[Any, Any], ...]
    union_error: Message = default_union_message

    type_name = "union"

    def __post_init__(self) -> None:
        if not self.schemas:
            raise ValueError("A union needs at least one schema")
        object.__setattr__(self, "schemas", tuple(self.schemas))

    @property
    def type(self) -> str:
        """The alternatives' type names, e.g. "str | number"."""
        return " | ".join(schema_type_name(s) for s in self.schemas)

    def _validate(self, value: Any) -> Result[Any]:
        errors: list[ValidationError] = []
        for schema in self.schemas:
            result = schema.validate(value)
            if not isinstance(result, Err):
                return result
            errors.append(result.error)

        allowed_types = [schema_type_name(s) for s in self.schemas]
        logger.debug("No union alternative matched %r (tried %s)", value, allowed_types)
        details = UnionErrorDetails(value=value, allowed_types=allowed_types)
        return invalid(
            ValidationError(
                format_message(self.union_error, details),
                code=ErrorCode.INVALID_UNION,
                details=details,
                sub_errors=errors,
            )
        )


@dataclass(frozen=True, slots=True)
class InstanceSchema(TypeSchema[Any]):
    """Accepts instances of `cls` (subclasses included)."""

    cls: type

    def _validate(self, value: Any) -> Result[Any]:
        if not isinstance(value, self.cls):
            return self._type_error(value, self.cls.__name__)
        return valid(value)


def schema_type_name(schema: Schema[Any, Any]) -> str:
    """Name the type a schema accepts, looking through modifiers."""
    match schema:
        case UnionSchema():
            return schema.type
        case InstanceSchema(cls=cls):
            return cls.__name__
        case TypeSchema():
            return schema.type_name
        case (
            OptionalSchema()
            | NullableSchema()
            | NullishSchema()
            | RequiredSchema()
            | TransformedSchema()
        ):
            return schema_type_name(schema.unwrap())
    return "unknown"


def _invalid_properties_message(keys: list[Any]) -> str:
    quoted = [f"'{key}'" for key in keys]
    if len(quoted) > 1:
        return f"The object has invalid properties {format_list(quoted)}."
    return f"The object has invalid property {quoted[0]}."
