"""Encoding interfaces for b64buffer.

This module defines protocols for alphabet lookups and for whole-value binary
to text encoders.
"""

from __future__ import annotations

from typing import Optional, Protocol, Union


class IAlphabet(Protocol):
    """Interface for a 64-symbol alphabet."""

    @property
    def encode_map(self) -> bytes:
        """The 64 symbols, indexed by six-bit value."""
        ...

    @property
    def decode_map(self) -> tuple[Optional[int], ...]:
        """Six-bit value of every byte, or None for non-members."""
        ...

    def contains(self, symbol: Union[int, str, bytes]) -> bool:
        """Check whether a symbol is a member of the alphabet.

        Args:
            symbol: The symbol to check.

        Returns:
            True if the symbol maps to a six-bit value.
        """
        ...

    def to_value(self, symbol: Union[int, str, bytes]) -> Optional[int]:
        """Map a symbol to its six-bit value.

        Args:
            symbol: The symbol to look up.

        Returns:
            The six-bit value, or None for symbols outside the alphabet.
        """
        ...

    def to_symbol(self, value: int) -> int:
        """Map a six-bit value to its symbol.

        Args:
            value: A value in the range 0-63.

        Returns:
            The byte value of the symbol.
        """
        ...


class IBinaryEncoder(Protocol):
    """Interface for binary to text encoding operations."""

    def encode(self, data: bytes) -> str:
        """Encode bytes into text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, text: str) -> bytes:
        """Decode text back into bytes.

        Args:
            text: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            Exception: When the text is not a valid encoding.
        """
        ...
