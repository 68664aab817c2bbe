"""
Helper functions for rendering human-readable validation messages.
"""

from typing import Any, Iterable


def pluralize(count: int, singular: str, plural: str) -> str:
    """Render a count with the matching word form, e.g. "1 item" / "2 items"."""
    word = singular if count == 1 else plural
    return f"{count} {word}"


def format_list(
    items: Iterable[Any],
    type: str = "and",
    max_items: int | None = None,
    quote_items: bool = False,
    quote_style: str = "'",
) -> str:
    """
    Join items into an English list.

    Examples:
        format_list(["a"])                     # "a"
        format_list(["a", "b"])                # "a and b"
        format_list(["a", "b", "c"], "or")     # "a, b, or c"
        format_list(["a", "b", "c", "d"], max_items=2)  # "a, b, and 2 more"
    """
    if type not in ("and", "or"):
        raise ValueError("Parameter `type` must be 'and' or 'or'.")

    values = list(items)
    if max_items is None:
        max_items = len(values)
    elif max_items < 1:
        raise ValueError("Parameter `max_items` must be positive integer.")

    if quote_items:
        strings = [f"{quote_style}{item}{quote_style}" for item in values]
    else:
        strings = [str(item) for item in values]

    if len(strings) > max_items + 1:
        strings = strings[:max_items]
        strings.append(f"{len(values) - max_items} more")

    if len(strings) <= 2:
        return f" {type} ".join(strings)

    strings[-1] = f"{type} {strings[-1]}"
    return ", ".join(strings)
