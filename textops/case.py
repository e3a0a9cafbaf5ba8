"""Case swapping with title-case handling."""

from typing import Optional

from utils.string_utils import is_empty, is_whitespace


# Single code point lowercase mappings where Python's full mapping expands
SIMPLE_LOWERCASE = {
    '\u0130': 'i',
}


def _to_lower(char: str) -> str:
    mapped = char.lower()
    if len(mapped) == 1:
        return mapped
    return SIMPLE_LOWERCASE.get(char, char)


def _to_upper(char: str) -> str:
    """Uppercase a code point without expanding it.

    Where the full uppercase mapping expands (``"ß".upper() == "SS"``), the
    title-case mapping is used if it is a single code point, which covers
    letters such as U+1FB3 whose simple uppercase is their title-case form.
    Otherwise the code point is kept.
    """
    mapped = char.upper()
    if len(mapped) == 1:
        return mapped
    return _to_title(char)


def _to_title(char: str) -> str:
    mapped = char.title()
    return mapped if len(mapped) == 1 else char


def swap_case(text: Optional[str]) -> Optional[str]:
    """Swap the case of every letter in a string.

    Uppercase and title-case letters become lowercase. Lowercase letters
    become uppercase, except directly after whitespace (or at the start of
    the string) where they become title-case. Other code points are kept.
    Letters are recognized by their Unicode case properties, so symbols such
    as U+24B6 (circled A) swap as well.

    Every code point maps to exactly one code point: a case mapping that
    would expand (``"ß"``, ``"ﬁ"``) leaves the code point unchanged, and
    U+0130 lowercases to a plain ``"i"``.

    Examples:
        swap_case(None) -> None
        swap_case("The Quick Brown FOX") -> "tHE qUICK bROWN fox"
        swap_case("12345") -> "12345"
        swap_case("HELLO world 123") -> "hello WORLD 123"

    Args:
        text: The string to swap, may be None.

    Returns:
        The swapped string, or the input unchanged if it is None or empty.
    """
    if is_empty(text):
        return text

    result = []
    whitespace = True
    for char in text:
        if char.isupper() or char.istitle():
            result.append(_to_lower(char))
            whitespace = False
        elif char.islower():
            if whitespace:
                result.append(_to_title(char))
                whitespace = False
            else:
                result.append(_to_upper(char))
        else:
            whitespace = is_whitespace(char)
            result.append(char)

    return "".join(result)
