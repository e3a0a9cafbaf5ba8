"""Exceptions raised by the text operations."""


class TextOpsError(Exception):
    """Base exception for text operation failures."""
    pass


class InvalidArgumentError(TextOpsError, ValueError):
    """Exception raised when an operation is called with invalid arguments."""
    pass
