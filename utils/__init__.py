"""Utility modules for TEXTOPS."""

from utils.string_utils import (
    EMPTY,
    INDEX_NOT_FOUND,
    NON_BREAKING_WHITESPACE,
    length,
    is_whitespace,
    is_empty,
    is_blank,
    default_string,
    index_of,
)

__all__ = [
    'EMPTY',
    'INDEX_NOT_FOUND',
    'NON_BREAKING_WHITESPACE',
    'length',
    'is_whitespace',
    'is_empty',
    'is_blank',
    'default_string',
    'index_of',
]
