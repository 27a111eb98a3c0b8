"""Filename filter backed by a single case-insensitive regular expression."""

import re

from flatzip.errors import InvalidPatternError


class PatternFilter:
    """Decides whether a file qualifies for inclusion by its base name."""

    def __init__(self, pattern: str) -> None:
        """Compile the pattern, failing fast if it is not a valid regex."""
        try:
            self.regex = re.compile(pattern, re.IGNORECASE)
        except re.error as exc:
            msg = f"Invalid pattern {pattern!r}: {exc}"
            raise InvalidPatternError(msg) from exc
        self.pattern = pattern

    def matches(self, filename: str) -> bool:
        """Return True if the pattern occurs anywhere in the base name."""
        return self.regex.search(filename) is not None
