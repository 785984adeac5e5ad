"""Shared validation helpers for configuration models."""

import re
from typing import List


def validate_patterns(patterns: List[str]) -> List[str]:
    """Ensure every ignore pattern compiles as a regular expression

    Args:
        patterns: Regular expressions matched against bare entry names

    Returns:
        The unchanged list of patterns

    Raises:
        ValueError: If a pattern is not a valid regular expression
    """
    for pattern in patterns:
        try:
            re.compile(pattern)
        except re.error as e:
            raise ValueError(f"invalid ignore pattern {pattern!r}: {e}") from e
    return patterns
