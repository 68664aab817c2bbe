"""
Schema factories for shapeguard.

Provides factory functions that return schema instances, and `to_schema`
for building schemas from plain Python type specs.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Iterable, Mapping

from .core import Schema
from .rules import pattern as pattern_rule
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
from .types import Message, Rule


def _messages(**messages: Message | None) -> dict[str, Message]:
    """Drop unset message options so schema defaults apply."""
    return {name: msg for name, msg in messages.items() if msg is not None}


def string(
    *,
    coerce: bool = False,
    trim: bool = False,
    pattern: str | re.Pattern[str] | None = None,
    rules: Iterable[Rule] = (),
    type_error: Message | None = None,
    required_error: Message | None = None,
) -> StringSchema:
    """
    String schema.

    Usage:
        string()
        string(trim=True, pattern=r"^[a-z]+$")
        string(coerce=True).optional()
    """
    all_rules = tuple(rules)
    if pattern is not None:
        all_rules = (pattern_rule(pattern), *all_rules)
    return StringSchema(
        coerce=coerce,
        trim=trim,
        rules=all_rules,
        **_messages(type_error=type_error, required_error=required_error),
    )


def number(
    *,
    coerce: bool = False,
    rules: Iterable[Rule] = (),
    type_error: Message | None = None,
    required_error: Message | None = None,
) -> NumberSchema:
    """Number schema (finite int or float)."""
    return NumberSchema(
        coerce=coerce,
        rules=tuple(rules),
        **_messages(type_error=type_error, required_error=required_error),
    )


def boolean(
    *,
    coerce: bool = False,
    rules: Iterable[Rule] = (),
    type_error: Message | None = None,
    required_error: Message | None = None,
) -> BooleanSchema:
    """Boolean schema."""
    return BooleanSchema(
        coerce=coerce,
        rules=tuple(rules),
        **_messages(type_error=type_error, required_error=required_error),
    )


def enum_of(
    values: Iterable[Any] | type[Enum],
    *,
    rules: Iterable[Rule] = (),
    enum_error: Message | None = None,
    required_error: Message | None = None,
) -> EnumSchema:
    """
    Enumeration schema.

    Usage:
        enum_of(["active", "inactive", "pending"])
        enum_of(Color)   # members of an enum.Enum subclass
    """
    if not (isinstance(values, type) and issubclass(values, Enum)):
        values = tuple(values)
    return EnumSchema(
        values,  # type: ignore[arg-type]
        rules=tuple(rules),
        **_messages(enum_error=enum_error, required_error=required_error),
    )


def array(
    item: Any = None,
    *,
    rules: Iterable[Rule] = (),
    type_error: Message | None = None,
    required_error: Message | None = None,
) -> ArraySchema:
    """
    List schema.

    Usage:
        array()              # any list
        array(string())      # list of strings
        array(int)           # plain types are converted with to_schema()
    """
    return ArraySchema(
        item=None if item is None else to_schema(item),
        rules=tuple(rules),
        **_messages(type_error=type_error, required_error=required_error),
    )


def shape(
    fields: Mapping[str, Any],
    *,
    rules: Iterable[Rule] = (),
    type_error: Message | None = None,
    required_error: Message | None = None,
) -> ShapeSchema:
    """
    Object schema with named fields.

    Usage:
        shape({
            "name": string(),
            "email": string().optional(),
            "tags": [str],
        })
    """
    return ShapeSchema(
        {key: to_schema(spec) for key, spec in fields.items()},
        rules=tuple(rules),
        **_messages(type_error=type_error, required_error=required_error),
    )


def record(
    key: Any = None,
    value: Any = None,
    *,
    rules: Iterable[Rule] = (),
    type_error: Message | None = None,
    required_error: Message | None = None,
) -> RecordSchema:
    """
    Plain-dict schema with arbitrary keys.

    Usage:
        record()                         # any plain dict
        record(string(), number())       # dict[str, number]
    """
    return RecordSchema(
        key_schema=None if key is None else to_schema(key),
        value_schema=None if value is None else to_schema(value),
        rules=tuple(rules),
        **_messages(type_error=type_error, required_error=required_error),
    )


def union(
    *schemas: Any,
    rules: Iterable[Rule] = (),
    union_error: Message | None = None,
    required_error: Message | None = None,
) -> UnionSchema:
    """
    Union schema: the first matching alternative wins.

    Usage:
        union(string(), number())
        union(str, int)
    """
    return UnionSchema(
        tuple(to_schema(s) for s in schemas),
        rules=tuple(rules),
        **_messages(union_error=union_error, required_error=required_error),
    )


def instance(
    cls: type,
    *,
    rules: Iterable[Rule] = (),
    type_error: Message | None = None,
    required_error: Message | None = None,
) -> InstanceSchema:
    """Schema accepting instances of `cls`."""
    return InstanceSchema(
        cls,
        rules=tuple(rules),
        **_messages(type_error=type_error, required_error=required_error),
    )


def to_schema(spec: Any) -> Schema[Any, Any]:
    """
    Coerce a spec to a schema.

    Conversion rules:
        Schema -> pass through
        str -> StringSchema
        int | float -> NumberSchema
        bool -> BooleanSchema
        dict -> ShapeSchema with recursive conversion
        [x] -> ArraySchema with item schema from x
        [x, y, ...] -> ArraySchema with a union of the item schemas
        re.Pattern -> StringSchema with a pattern rule
        Enum subclass -> EnumSchema of its members
        any other class -> InstanceSchema
    """
    if isinstance(spec, Schema):
        return spec

    if isinstance(spec, type):
        if spec is bool:
            return boolean()
        if spec is str:
            return string()
        if spec is int or spec is float:
            return number()
        if issubclass(spec, Enum):
            return enum_of(spec)
        return instance(spec)

    if isinstance(spec, dict):
        return shape(spec)

    if isinstance(spec, list):
        if len(spec) == 0:
            raise ValueError("Empty list cannot be converted to schema")
        if len(spec) == 1:
            return array(spec[0])
        return array(union(*spec))

    if isinstance(spec, re.Pattern):
        return string(pattern=spec)

    raise TypeError(f"Cannot convert {type(spec).__name__} to schema")
