"""Single group encoding and decoding.

This module converts one 3-byte triplet into a 4-symbol quartet and back.
Bits are taken most-significant first across the group, as RFC 4648 requires.
"""

from __future__ import annotations

from b64buffer.exceptions import InvalidInputError
from b64buffer.interfaces import IAlphabet


def encode_triplet(alphabet: IAlphabet, src: bytes) -> bytes:
    """Encode 3 source bytes into 4 symbols.

    Args:
        alphabet: The alphabet to encode with.
        src: Exactly 3 bytes.

    Returns:
        The 4 encoded symbols.
    """
    a, b, c = src[0], src[1], src[2]
    to_symbol = alphabet.to_symbol

    return bytes(
        (
            to_symbol(a >> 2),
            to_symbol(((a & 0x03) << 4) | (b >> 4)),
            to_symbol(((b & 0x0F) << 2) | (c >> 6)),
            to_symbol(c & 0x3F),
        )
    )


def decode_quartet(alphabet: IAlphabet, src: bytes) -> bytes:
    """Decode 4 symbols into 3 bytes.

    Args:
        alphabet: The alphabet the symbols were encoded with.
        src: Exactly 4 symbols.

    Returns:
        The 3 decoded bytes.

    Raises:
        InvalidInputError: If any of the symbols is not in the alphabet.
    """
    decode_map = alphabet.decode_map
    values = []
    for symbol in src[:4]:
        value = decode_map[symbol]
        if value is None:
            raise InvalidInputError(f"symbol {chr(symbol)!r} is not in the alphabet")
        values.append(value)

    a, b, c, d = values
    return bytes(
        (
            (a << 2) | (b >> 4),
            ((b & 0x0F) << 4) | (c >> 2),
            ((c & 0x03) << 6) | d,
        )
    )
