"""
Helper functions for inspecting the runtime type of unknown values.
"""

from typing import Any

from ..types import MISSING


def is_plain_object(value: Any) -> bool:
    """
    Check if a value is a plain mapping.

    Walks the class chain of the value: it is plain only when its own class is
    `dict` and the next link is the chain's root (`object`). Dict subclasses
    (OrderedDict, defaultdict, custom classes) and instances of any other class
    are not plain.
    """
    if not isinstance(value, dict):
        return False
    chain = type(value).__mro__
    return chain[0] is dict and chain[1:] == (object,)


def determine_type(value: Any) -> str:
    """Name the type of a value for error messages."""
    if value is MISSING:
        return "missing"
    if value is None:
        return "None"
    return type(value).__name__
