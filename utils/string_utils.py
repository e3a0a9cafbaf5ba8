"""String utility functions for TEXTOPS.

This module provides the null-safe predicates and small helpers the text
operations rely on as guards. All functions are total: they accept ``None``
wherever a string is expected and never raise.
"""

from typing import Optional


EMPTY = ""
INDEX_NOT_FOUND = -1

# Unicode whitespace that does not separate words
NON_BREAKING_WHITESPACE = frozenset("\u00a0\u2007\u202f\u0085")


def length(text: Optional[str]) -> int:
    """Return the length of a string, or 0 if it is None.

    Args:
        text: The string to measure, may be None.

    Returns:
        Number of code points in the string.
    """
    return 0 if text is None else len(text)


def is_whitespace(char: str) -> bool:
    """Check whether a code point is word-separating whitespace.

    Unicode whitespace counts, except the no-break spaces (U+00A0, U+2007,
    U+202F) and NEXT LINE (U+0085).

    Args:
        char: A one code point string.

    Returns:
        True if the code point is whitespace.
    """
    return char.isspace() and char not in NON_BREAKING_WHITESPACE


def is_empty(text: Optional[str]) -> bool:
    """Check whether a string is None or has zero length.

    Args:
        text: The string to check, may be None.

    Returns:
        True if the string is None or empty.
    """
    return text is None or len(text) == 0


def is_blank(text: Optional[str]) -> bool:
    """Check whether a string is empty or contains only whitespace.

    Whitespace is decided by is_whitespace.

    Args:
        text: The string to check, may be None.

    Returns:
        True if the string is None, empty or whitespace-only.
    """
    if length(text) == 0:
        return True
    return all(is_whitespace(char) for char in text)


def default_string(text: Optional[str], default: str = EMPTY) -> str:
    """Return the string itself, or a default if it is None."""
    return default if text is None else text


def index_of(text: Optional[str], search: Optional[str], start: int = 0) -> int:
    """Find the first occurrence of a substring at or after a position.

    Args:
        text: The string to search in, may be None.
        search: The substring to look for, may be None.
        start: Position to start the search from. Negative values search
            from the beginning.

    Returns:
        Index of the first occurrence, or INDEX_NOT_FOUND if either
        argument is None or the substring does not occur.
    """
    if text is None or search is None:
        return INDEX_NOT_FOUND
    return text.find(search, max(start, 0))
