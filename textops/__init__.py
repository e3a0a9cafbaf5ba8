"""Unicode text primitives: abbreviation, initials, case swapping and wrapping.

Example:
    from textops import abbreviate, initials, swap_case, wrap

    abbreviate("Hello World", 0, 5, "...")      # "Hello..."
    initials("John A. Doe", " .")               # "JAD"
    swap_case("Hello World")                    # "hELLO wORLD"
    wrap("hello world", 8, "\\n", True, " ")     # "hello\\nworld"
"""

from textops.exceptions import TextOpsError, InvalidArgumentError
from textops.abbreviator import abbreviate
from textops.initials import (
    DelimiterPredicate,
    ExplicitDelimiters,
    WhitespaceDelimiters,
    create_predicate,
    generate_delimiter_set,
    initials,
)
from textops.case import swap_case
from textops.wrapper import LineWrapper, WrapScan, WrapState, wrap

__all__ = [
    # Errors
    'TextOpsError',
    'InvalidArgumentError',
    # Abbreviator
    'abbreviate',
    # Initials
    'DelimiterPredicate',
    'ExplicitDelimiters',
    'WhitespaceDelimiters',
    'create_predicate',
    'generate_delimiter_set',
    'initials',
    # Case
    'swap_case',
    # Wrapper
    'LineWrapper',
    'WrapScan',
    'WrapState',
    'wrap',
]
