"""
Rules run by TypeSchema after the type check succeeds.

A rule is any callable taking the checked value; it signals failure by
raising ValidationError with one of the ErrorCode values.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import ErrorCode, PatternErrorDetails, ValidationError
from .messages import default_pattern_message, format_message
from .types import Message


@dataclass(frozen=True, slots=True)
class PatternRule:
    """String rule: the value must contain a match for `regex`."""

    regex: re.Pattern[str]
    message: Message = default_pattern_message

    def __call__(self, value: str) -> None:
        if self.regex.search(value) is None:
            details = PatternErrorDetails(value=value, pattern=self.regex.pattern)
            raise ValidationError(
                format_message(self.message, details),
                code=ErrorCode.STRING_PATTERN,
                details=details,
            )


def pattern(regex: str | re.Pattern[str], message: Message | None = None) -> PatternRule:
    """
    Require a string to match a regular expression.

    Like `re.search`, the pattern may match anywhere; anchor it with ^...$
    to match the whole string.

    Usage:
        string(rules=[pattern(r"^[a-z]+$")])
        string(rules=[pattern(re.compile("^abc", re.I), "Must start with abc")])
    """
    compiled = re.compile(regex) if isinstance(regex, str) else regex
    if message is None:
        return PatternRule(compiled)
    return PatternRule(compiled, message)
