"""
Message formatting for shapeguard.

A message is either a literal string or a callable that renders the failure
details into a string. Every schema option that customizes an error message
accepts either form.
"""

from __future__ import annotations

from typing import TypeVar

from .errors import (
    EnumErrorDetails,
    PatternErrorDetails,
    RequiredErrorDetails,
    TypeErrorDetails,
    UnionErrorDetails,
)
from .lib.text_helpers import format_list
from .types import MISSING, Message

P = TypeVar("P")


def format_message(message: Message, params: P) -> str:
    """
    Resolve a message against its parameters.

    Callables are invoked with `params`; literal strings are returned
    unchanged (no templating, `params` ignored).

    Usage:
        format_message("unknown error", details)               # "unknown error"
        format_message(lambda d: f"{d.value} is invalid", d)   # "foo is invalid"
    """
    if callable(message):
        return message(params)
    return message


def default_type_message(details: TypeErrorDetails) -> str:
    return (
        f"The value must be '{details.expected_type}', "
        f"but received '{details.received_type}'."
    )


def default_required_message(details: RequiredErrorDetails) -> str:
    if details.value is MISSING:
        return "The value is required."
    return f"The value cannot be {details.value}."


def default_enum_message(details: EnumErrorDetails) -> str:
    values = format_list(details.expected_values, type="or", quote_items=True)
    return f"The value must be one of {values}, but received '{details.value}'."


def default_union_message(details: UnionErrorDetails) -> str:
    types = format_list(
        details.allowed_types, type="or", quote_items=True, quote_style="`"
    )
    return f"The value does not match any of the allowed types: {types}."


def default_pattern_message(details: PatternErrorDetails) -> str:
    return f"The string does not match '{details.pattern}' pattern."
