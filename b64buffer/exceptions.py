"""Exception classes for b64buffer.

This module defines custom exception types used throughout the b64buffer library.
"""

from __future__ import annotations


class Base64Error(Exception):
    """Base exception class for all b64buffer errors."""

    pass


class AlphabetError(Base64Error):
    """Exception raised when an alphabet source is malformed."""

    pass


class BufferOverflowError(Base64Error):
    """Exception raised when a destination buffer is too small.

    Attributes:
        required: The destination length the operation needs.
        available: The destination length the caller supplied.
    """

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"destination holds {available} bytes, {required} required"
        )
        self.required = required
        self.available = available

    def __reduce__(self) -> tuple[type, tuple[int, int]]:
        return (type(self), (self.required, self.available))


class InvalidInputError(Base64Error):
    """Exception raised when encoded input cannot be decoded."""

    pass
