"""Initials extraction over configurable delimiters.

A delimiter is decided by a DelimiterPredicate. Two variants exist:

    - ExplicitDelimiters: membership in a set of code points given by the
      caller.
    - WhitespaceDelimiters: used when no delimiters are given at all. It
      checks a materialized set holding only the ASCII space and, separately,
      whether the code point is whitespace (no-break spaces excluded).

An explicitly empty delimiter sequence is different from no delimiters: it
accepts nothing and makes ``initials`` return an empty string.
"""

from abc import ABC, abstractmethod
from typing import FrozenSet, Iterable, Optional

from utils.string_utils import EMPTY, is_empty, is_whitespace


def generate_delimiter_set(delimiters: Optional[Iterable[str]]) -> FrozenSet[str]:
    """Build the set of delimiter code points.

    Examples:
        generate_delimiter_set("ab") -> {'a', 'b'}
        generate_delimiter_set(None) -> {' '}
        generate_delimiter_set([]) -> set()

    Args:
        delimiters: Delimiter characters, or None when none were given.

    Returns:
        A frozenset of single code point strings.
    """
    if delimiters is None:
        return frozenset(" ")
    return frozenset(delimiters)


class DelimiterPredicate(ABC):
    """Decides whether a code point separates words."""

    @abstractmethod
    def is_delimiter(self, char: str) -> bool:
        """Check whether a single code point is a delimiter.

        Args:
            char: A one code point string.

        Returns:
            True if the code point is a delimiter.
        """
        pass


class ExplicitDelimiters(DelimiterPredicate):
    """Delimiters given as an explicit set of code points."""

    def __init__(self, delimiters: Iterable[str]):
        self.delimiters = generate_delimiter_set(delimiters)

    def is_delimiter(self, char: str) -> bool:
        return char in self.delimiters


class WhitespaceDelimiters(DelimiterPredicate):
    """Default delimiters when the caller supplies none.

    The materialized set only holds the ASCII space; any other Unicode
    whitespace is accepted through the direct whitespace check. Both paths
    are consulted.
    """

    def __init__(self):
        self.delimiters = generate_delimiter_set(None)

    def is_delimiter(self, char: str) -> bool:
        return char in self.delimiters or is_whitespace(char)


def create_predicate(delimiters: Optional[Iterable[str]]) -> DelimiterPredicate:
    """Factory function to create the predicate for a delimiter argument.

    Args:
        delimiters: Delimiter characters, or None for whitespace.

    Returns:
        A DelimiterPredicate instance.
    """
    if delimiters is None:
        return WhitespaceDelimiters()
    return ExplicitDelimiters(delimiters)


def initials(
    text: Optional[str],
    delimiters: Optional[Iterable[str]] = None,
) -> Optional[str]:
    """Extract the first code point after each run of delimiters.

    Examples:
        initials("John Doe", " ") -> "JD"
        initials("Hello-World", "-") -> "HW"
        initials("Multiple delimiters", " i") -> "Md"
        initials("NoDelimitersHere") -> "N"
        initials("NoDelimitersHere", []) -> ""
        initials(None, " ") -> None

    Args:
        text: The string to extract initials from, may be None.
        delimiters: Delimiter characters, e.g. a string such as " -" or a
            list of one character strings. None means any whitespace.

    Returns:
        The initials, the input unchanged if it is None or empty, or an empty
        string if an empty delimiter sequence was given.
    """
    if is_empty(text):
        return text
    if delimiters is not None:
        delimiters = list(delimiters)
        if not delimiters:
            return EMPTY

    predicate = create_predicate(delimiters)
    result = []
    last_was_gap = True
    for char in text:
        if predicate.is_delimiter(char):
            last_was_gap = True
        elif last_was_gap:
            result.append(char)
            last_was_gap = False

    return "".join(result)
