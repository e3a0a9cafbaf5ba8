"""Bounded abbreviation of text at word boundaries."""

from typing import Optional

from textops.exceptions import InvalidArgumentError
from utils.string_utils import INDEX_NOT_FOUND, default_string, index_of, is_empty


def _require(expression: bool, message: str) -> None:
    """Raise InvalidArgumentError with the message if expression is false."""
    if not expression:
        raise InvalidArgumentError(message)


def abbreviate(
    text: Optional[str],
    lower: int,
    upper: int,
    append_to_end: Optional[str] = None,
) -> Optional[str]:
    """Abbreviate a string at the first space after a lower bound.

    The cut falls on the first space at or after ``lower``, but never past
    ``upper``. Cutting at a space always appends ``append_to_end``; cutting
    at ``upper`` with no space found only appends it when characters were
    actually dropped.

    Examples:
        abbreviate("Hello World", 0, 5, "...") -> "Hello..."
        abbreviate("This is a longer sentence", 0, 15, "...") -> "This..."
        abbreviate("Short", 0, 10, "...") -> "Short"
        abbreviate("Boundary", 0, -1, "!!") -> "Boundary"

    Args:
        text: The string to abbreviate, may be None.
        lower: Position from which to look for a space. Clamped to the
            length of the string.
        upper: Maximum number of characters to keep, or -1 for no limit.
        append_to_end: Suffix added when the string is abbreviated. None is
            treated as an empty suffix.

    Returns:
        The abbreviated string, or the input unchanged if it is None or empty.

    Raises:
        InvalidArgumentError: If upper is less than -1, or less than lower
            while not -1.
    """
    _require(upper >= -1, "upper value cannot be less than -1")
    _require(upper >= lower or upper == -1, "upper value is less than lower value")
    if is_empty(text):
        return text

    text_length = len(text)
    if lower > text_length:
        lower = text_length
    if upper == -1 or upper > text_length:
        upper = text_length

    index = index_of(text, " ", lower)
    if index == INDEX_NOT_FOUND:
        result = text[:upper]
        if upper != text_length:
            result += default_string(append_to_end)
        return result

    return text[:min(index, upper)] + default_string(append_to_end)
