"""Greedy line wrapping with regex-defined break points.

The wrapper scans the text with a look-ahead window of ``wrap_length + 1``
code points and breaks at the rightmost match of the wrap-on pattern inside
the window. When the window holds no match, a long word is either cut at
exactly ``wrap_length`` code points or, when long words are not wrapped,
kept whole up to the next match after the window.

Each call runs its own WrapScan. The scan moves through explicit states:

    SCANNING                    looking for break points in the next window
    CONSUMED_LEADING_DELIMITER  a delimiter at the window start was skipped
    EMITTING                    a line is being written to the output
    DONE                        the remainder has been appended

Zero-width matches need care. A zero-width match at the window start moves
the cursor one code point forward so the scan cannot stall, and the cursor
is moved back one code point before the next hard cut or final slice.
"""

from dataclasses import dataclass, field
from enum import Enum
import logging
import os
import re
from typing import List, Optional

from utils.string_utils import is_blank


logger = logging.getLogger(__name__)

DEFAULT_WRAP_ON = " "
NO_MATCH = -1


class WrapState(Enum):
    """States of a line wrapping scan."""
    SCANNING = "scanning"
    CONSUMED_LEADING_DELIMITER = "consumed_leading_delimiter"
    EMITTING = "emitting"
    DONE = "done"


@dataclass
class WrapScan:
    """Mutable state of a single wrap call.

    Attributes:
        text: The text being wrapped.
        offset: Cursor into the text.
        matcher_size: Length of the most recent match, NO_MATCH if none.
        state: Current scan state.
        history: Every state the scan has entered, in order.
        parts: Output fragments written so far.
    """
    text: str
    offset: int = 0
    matcher_size: int = NO_MATCH
    state: WrapState = WrapState.SCANNING
    history: List[WrapState] = field(default_factory=list)
    parts: List[str] = field(default_factory=list)

    def transition(self, state: WrapState) -> None:
        """Enter a new state and record it."""
        self.state = state
        self.history.append(state)

    @property
    def remaining(self) -> int:
        """Number of code points after the cursor."""
        return len(self.text) - self.offset

    @property
    def result(self) -> str:
        """The wrapped text written so far."""
        return "".join(self.parts)


class LineWrapper:
    """Wraps text to a maximum line length.

    The wrapper holds only its configuration and the compiled wrap-on
    pattern; every call to ``wrap`` or ``scan`` works on fresh state, so a
    single instance can be shared.

    Examples:
        LineWrapper(3, "\\n", True).wrap("abcdefghij") -> "abc\\ndef\\nghi\\nj"
        LineWrapper(8, "\\n").wrap("hello world") -> "hello\\nworld"
        LineWrapper(5, "\\n").wrap("The quick brown fox")
            -> "The\\nquick\\nbrown\\nfox"

    Args:
        wrap_length: Maximum line length. Values below 1 are treated as 1.
        new_line: Line separator to insert. Defaults to os.linesep.
        wrap_long_words: Cut words longer than wrap_length if True, keep
            them whole up to the next break point otherwise.
        wrap_on: Regular expression for break points. Defaults to a single
            space when None or blank.

    Raises:
        re.error: If wrap_on is not a valid regular expression.
    """

    def __init__(
        self,
        wrap_length: int = 1,
        new_line: Optional[str] = None,
        wrap_long_words: bool = False,
        wrap_on: Optional[str] = None,
    ):
        if wrap_length < 1:
            logger.debug(f"Clamping wrap length {wrap_length} to 1")
            wrap_length = 1
        if new_line is None:
            new_line = os.linesep
        if is_blank(wrap_on):
            wrap_on = DEFAULT_WRAP_ON

        self.wrap_length = wrap_length
        self.new_line = new_line
        self.wrap_long_words = wrap_long_words
        self.wrap_on = wrap_on
        self.pattern: re.Pattern = re.compile(wrap_on)

    def wrap(self, text: Optional[str]) -> Optional[str]:
        """Wrap a string.

        Args:
            text: The string to wrap, may be None.

        Returns:
            The wrapped string, or None if text is None.
        """
        if text is None:
            return None
        return self.scan(text).result

    def scan(self, text: str) -> WrapScan:
        """Run the wrapping scan over a string.

        Args:
            text: The string to wrap.

        Returns:
            The finished WrapScan, holding the result and state history.
        """
        scan = WrapScan(text=text)
        text_length = len(text)

        while scan.offset < text_length:
            scan.transition(WrapState.SCANNING)
            wrap_at = NO_MATCH
            window_end = min(scan.offset + self.wrap_length + 1, text_length)
            matches = self.pattern.finditer(text[scan.offset:window_end])

            match = next(matches, None)
            if match is not None:
                if match.start() == 0:
                    scan.matcher_size = match.end()
                    if scan.matcher_size != 0:
                        scan.offset += match.end()
                        scan.transition(WrapState.CONSUMED_LEADING_DELIMITER)
                        continue
                    scan.offset += 1
                wrap_at = match.start() + scan.offset

            if scan.remaining <= self.wrap_length:
                break

            # Rightmost match in the window wins
            for match in matches:
                wrap_at = match.start() + scan.offset

            scan.transition(WrapState.EMITTING)
            if wrap_at >= scan.offset:
                self._emit_line(scan, wrap_at)
            elif self.wrap_long_words:
                self._split_long_word(scan)
            else:
                self._extend_to_next_break(scan)

        if scan.matcher_size == 0 and scan.offset < text_length:
            scan.offset -= 1

        scan.parts.append(text[scan.offset:])
        scan.transition(WrapState.DONE)
        return scan

    def _emit_line(self, scan: WrapScan, wrap_at: int) -> None:
        """Write the text up to a break point and skip the break character."""
        scan.parts.append(scan.text[scan.offset:wrap_at])
        scan.parts.append(self.new_line)
        scan.offset = wrap_at + 1

    def _split_long_word(self, scan: WrapScan) -> None:
        """Cut exactly wrap_length code points from the cursor."""
        if scan.matcher_size == 0:
            scan.offset -= 1
        end = scan.offset + self.wrap_length
        scan.parts.append(scan.text[scan.offset:end])
        scan.parts.append(self.new_line)
        scan.offset = end
        scan.matcher_size = NO_MATCH

    def _extend_to_next_break(self, scan: WrapScan) -> None:
        """Keep a long word whole and break at the next match after it.

        Without a further match the rest of the text becomes the last line.
        """
        search_start = scan.offset + self.wrap_length
        wrap_at = NO_MATCH
        match = self.pattern.search(scan.text[search_start:])
        if match is not None:
            scan.matcher_size = match.end() - match.start()
            wrap_at = match.start() + search_start

        if scan.matcher_size == 0 and scan.offset != 0:
            scan.offset -= 1

        if wrap_at >= 0:
            self._emit_line(scan, wrap_at)
        else:
            scan.parts.append(scan.text[scan.offset:])
            scan.offset = len(scan.text)
            scan.matcher_size = NO_MATCH


def wrap(
    text: Optional[str],
    wrap_length: int,
    new_line: Optional[str] = None,
    wrap_long_words: bool = False,
    wrap_on: Optional[str] = None,
) -> Optional[str]:
    """Wrap a string to a maximum line length.

    Examples:
        wrap("abcdefghij", 3, "\\n", True, " ") -> "abc\\ndef\\nghi\\nj"
        wrap("abcdefgh ij", 3, "\\n", False, " ") -> "abcdefgh\\nij"
        wrap("The quick brown fox", 20, "\\n", True, " ")
            -> "The quick brown fox"

    Args:
        text: The string to wrap, may be None.
        wrap_length: Maximum line length. Values below 1 are treated as 1.
        new_line: Line separator to insert. Defaults to os.linesep.
        wrap_long_words: Cut words longer than wrap_length if True.
        wrap_on: Regular expression for break points. Defaults to a space.

    Returns:
        The wrapped string, or None if text is None.

    Raises:
        re.error: If wrap_on is not a valid regular expression.
    """
    if text is None:
        return None
    wrapper = LineWrapper(
        wrap_length=wrap_length,
        new_line=new_line,
        wrap_long_words=wrap_long_words,
        wrap_on=wrap_on,
    )
    return wrapper.wrap(text)
