"""Final group encoding and decoding.

This module handles the last, possibly partial, group of a buffer: padding a
short triplet on the way out, and stripping and validating padding on the way
back in.
"""

from __future__ import annotations

import logging

from b64buffer.alphabet import PADDING
from b64buffer.exceptions import InvalidInputError
from b64buffer.interfaces import IAlphabet

from .unit import decode_quartet, encode_triplet

logger = logging.getLogger(__name__)


def encode_tail(alphabet: IAlphabet, src: bytes) -> bytes:
    """Encode the final 1 or 2 source bytes into a padded quartet.

    The bytes are zero-extended to a full triplet and encoded, then the
    positions standing for absent bytes are replaced with "=".

    Args:
        alphabet: The alphabet to encode with.
        src: The remaining 1 or 2 source bytes.

    Returns:
        The 4 encoded symbols, ending in one or two padding symbols.

    Raises:
        ValueError: If src is not 1 or 2 bytes long.
    """
    srclen = len(src)
    if not 1 <= srclen <= 2:
        raise ValueError(f"tail must be 1 or 2 bytes, got {srclen}")

    quartet = bytearray(encode_triplet(alphabet, bytes(src) + bytes(3 - srclen)))
    quartet[1 + srclen :] = bytes((PADDING,)) * (3 - srclen)
    return bytes(quartet)


def decode_tail(alphabet: IAlphabet, src: bytes) -> bytes:
    """Decode the final 1 to 4 symbols of an encoded buffer.

    Trailing padding is stripped, the remaining symbols are filled up to a
    quartet with the alphabet's zero-value symbol and decoded. Two symbols
    carry one byte, three carry two and four carry three.

    Args:
        alphabet: The alphabet the symbols were encoded with.
        src: Up to 4 trailing symbols, possibly ending in padding.

    Returns:
        The decoded bytes. Empty if src is empty.

    Raises:
        InvalidInputError: If a single symbol or nothing but padding remains,
            or if a symbol is not in the alphabet.
    """
    if len(src) > 4:
        raise ValueError(f"tail must be at most 4 symbols, got {len(src)}")

    insize = len(src)
    if insize == 0:
        return b""

    while insize and src[insize - 1] == PADDING:
        insize -= 1

    # a lone symbol holds only six bits, not enough for a byte
    if insize <= 1:
        logger.debug("rejecting malformed tail %r", bytes(src))
        raise InvalidInputError(f"malformed final group {bytes(src)!r}")

    zero = alphabet.to_symbol(0)
    quartet = bytes(src[:insize]) + bytes((zero,)) * (4 - insize)
    return decode_quartet(alphabet, quartet)[: insize - 1]
