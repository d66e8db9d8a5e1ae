"""Base64 alphabet tables.

This module provides the AlphabetTable class, which maps the 64 six-bit values
to their printable symbols and back, together with the pre-built RFC 4648
tables shared by every codec call.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from b64buffer.exceptions import AlphabetError
from b64buffer.interfaces import IAlphabet

logger = logging.getLogger(__name__)

#: The standard alphabet, RFC 4648 section 4.
RFC4648_SYMBOLS = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

#: The URL and filename safe alphabet, RFC 4648 section 5.
URLSAFE_SYMBOLS = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

#: Byte value of the padding symbol "=".
PADDING = ord("=")

Symbol = Union[int, str, bytes]


def symbol_ordinal(symbol: Symbol) -> int:
    """Normalize a symbol to its byte value.

    Args:
        symbol: A byte value, or a one-character str or bytes.

    Returns:
        The byte value of the symbol.

    Raises:
        ValueError: If the symbol is not a single byte.
    """
    if isinstance(symbol, int):
        value = symbol
    elif isinstance(symbol, (str, bytes)) and len(symbol) == 1:
        value = ord(symbol)
    else:
        raise ValueError(f"expected a single symbol, got {symbol!r}")

    if not 0 <= value <= 0xFF:
        raise ValueError(f"symbol {symbol!r} is not a single byte")
    return value


class AlphabetTable(IAlphabet):
    """Immutable bidirectional mapping between six-bit values and symbols.

    The decode map is derived entirely from the encode map: for every index i,
    ``decode_map[encode_map[i]] == i`` and every other entry is None. Tables
    are built once and only read afterwards, so one instance can be shared by
    any number of concurrent encode and decode calls.

    Attributes:
        encode_map: The 64 symbols, indexed by six-bit value.
        decode_map: 256 entries indexed by byte value, each a six-bit value or
            None for bytes that are not members of the alphabet.
    """

    __slots__ = ("_encode_map", "_decode_map")

    def __init__(self, symbols: Union[str, bytes]) -> None:
        """Build a table from 64 distinct symbols.

        Args:
            symbols: The alphabet in six-bit value order, as latin-1 str or bytes.

        Raises:
            AlphabetError: If the source is not 64 distinct single-byte symbols,
                or if it contains the padding symbol.
        """
        if isinstance(symbols, str):
            try:
                symbols = symbols.encode("latin-1")
            except UnicodeEncodeError as e:
                raise AlphabetError("alphabet symbols must be single bytes") from e
        else:
            symbols = bytes(symbols)

        if len(symbols) != 64:
            raise AlphabetError(
                f"alphabet must contain 64 symbols, got {len(symbols)}"
            )
        if len(set(symbols)) != 64:
            raise AlphabetError("alphabet must not contain duplicate symbols")
        if PADDING in symbols:
            raise AlphabetError("alphabet must not contain the padding symbol")

        decode_map: list[Optional[int]] = [None] * 256
        for value, symbol in enumerate(symbols):
            decode_map[symbol] = value

        self._encode_map = symbols
        self._decode_map = tuple(decode_map)

        logger.debug("built base64 alphabet %r", symbols)

    @property
    def encode_map(self) -> bytes:
        return self._encode_map

    @property
    def decode_map(self) -> tuple[Optional[int], ...]:
        return self._decode_map

    def contains(self, symbol: Symbol) -> bool:
        """Check whether a symbol is a member of this alphabet.

        The padding symbol is never a member.
        """
        return self.to_value(symbol) is not None

    def to_value(self, symbol: Symbol) -> Optional[int]:
        """Map a symbol to its six-bit value.

        Args:
            symbol: The symbol to look up.

        Returns:
            The six-bit value, or None if the symbol is not in the alphabet.
        """
        return self._decode_map[symbol_ordinal(symbol)]

    def to_symbol(self, value: int) -> int:
        """Map a six-bit value to its symbol.

        Args:
            value: A value in the range 0-63.

        Returns:
            The byte value of the symbol.

        Raises:
            ValueError: If value is outside the six-bit range.
        """
        if not 0 <= value < 64:
            raise ValueError(f"{value} is not a six-bit value")
        return self._encode_map[value]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlphabetTable):
            return NotImplemented
        return self._encode_map == other._encode_map

    def __hash__(self) -> int:
        return hash(self._encode_map)

    def __repr__(self) -> str:
        return f"AlphabetTable({self._encode_map!r})"


def build_alphabet(symbols: Union[str, bytes]) -> AlphabetTable:
    """Build an alphabet table from 64 distinct symbols.

    Args:
        symbols: The alphabet in six-bit value order.

    Returns:
        A new, read-only AlphabetTable.

    Raises:
        AlphabetError: If the symbols do not form a valid alphabet.

    Example:
        >>> table = build_alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_")
        >>> char_in_alphabet(table, "-")
        True
    """
    return AlphabetTable(symbols)


def char_in_alphabet(alphabet: AlphabetTable, symbol: Symbol) -> bool:
    """Return True if the symbol can be part of a string encoded with alphabet."""
    return alphabet.contains(symbol)


RFC4648 = AlphabetTable(RFC4648_SYMBOLS)
URLSAFE = AlphabetTable(URLSAFE_SYMBOLS)
