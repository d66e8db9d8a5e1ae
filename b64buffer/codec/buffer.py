"""Buffer-to-buffer base64 encoding and decoding.

This module provides the public codec operations. Callers own and size the
destination buffer; the codec checks its capacity up front, walks the source
in fixed strides (3 bytes to encode, 4 symbols to decode), hands the remainder
to the tail codec and finally fills the unused end of the destination.

A failure aborts the whole call. Groups written before a decode failure are
left in the destination, which must then be discarded.

Example:
    >>> dest = bytearray(encoded_length(6))
    >>> encode(dest, b"foobar")
    8
    >>> bytes(dest)
    b'Zm9vYmFy'
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from b64buffer.alphabet import RFC4648
from b64buffer.exceptions import BufferOverflowError, InvalidInputError
from b64buffer.interfaces import IAlphabet

from .config import DEFAULT_CONFIG, CodecConfig
from .tail import decode_tail, encode_tail
from .unit import decode_quartet, encode_triplet

logger = logging.getLogger(__name__)

Source = Union[bytes, bytearray, memoryview]


def encoded_length(srclen: int) -> int:
    """Calculate the destination length required to encode srclen bytes.

    Args:
        srclen: The number of source bytes.

    Returns:
        The exact number of symbols encode will write.
    """
    return ((srclen + 2) // 3) * 4


def decoded_length(srclen: int) -> int:
    """Calculate the destination length required to decode srclen symbols.

    This is an upper bound, not the decoded size: padding makes the actual
    output up to two bytes shorter.

    Args:
        srclen: The number of encoded symbols.

    Returns:
        The minimum destination length for a safe decode.
    """
    return ((srclen + 3) // 4) * 3


decoded_length_upper_bound = decoded_length


def _bounds(buffer_length: int, requested: Optional[int], name: str) -> int:
    if requested is None:
        return buffer_length
    if not 0 <= requested <= buffer_length:
        raise ValueError(
            f"{name} {requested} outside the buffer of length {buffer_length}"
        )
    return requested


def _fill(dest: memoryview, start: int, end: int, config: CodecConfig) -> None:
    if config.fill_byte is not None and end > start:
        dest[start:end] = bytes((config.fill_byte,)) * (end - start)


def _symbols(src: Union[Source, str]) -> memoryview:
    if isinstance(src, str):
        try:
            return memoryview(src.encode("latin-1"))
        except UnicodeEncodeError as e:
            raise InvalidInputError("encoded input must be latin-1 text") from e
    return memoryview(src).cast("B")


def encode_using_alphabet(
    alphabet: IAlphabet,
    dest: Union[bytearray, memoryview],
    src: Source,
    *,
    destlen: Optional[int] = None,
    srclen: Optional[int] = None,
    config: Optional[CodecConfig] = None,
) -> int:
    """Encode a buffer into base64 using a specific alphabet.

    Args:
        alphabet: The alphabet to encode with.
        dest: Writable buffer receiving the encoded symbols.
        src: The bytes to encode.
        destlen: Usable length of dest. Defaults to len(dest).
        srclen: Number of bytes of src to encode. Defaults to len(src).
        config: Codec options. Defaults to DEFAULT_CONFIG.

    Returns:
        The number of symbols written to dest.

    Raises:
        BufferOverflowError: If destlen is smaller than encoded_length(srclen).
    """
    config = config or DEFAULT_CONFIG
    out = memoryview(dest).cast("B")
    data = memoryview(src).cast("B")
    destlen = _bounds(len(out), destlen, "destlen")
    srclen = _bounds(len(data), srclen, "srclen")

    required = encoded_length(srclen)
    if destlen < required:
        logger.debug("encode needs %d bytes, destination holds %d", required, destlen)
        raise BufferOverflowError(required, destlen)

    src_offset = 0
    dest_offset = 0

    while srclen - src_offset >= 3:
        out[dest_offset : dest_offset + 4] = encode_triplet(
            alphabet, data[src_offset : src_offset + 3]
        )
        src_offset += 3
        dest_offset += 4

    if srclen - src_offset:
        out[dest_offset : dest_offset + 4] = encode_tail(
            alphabet, data[src_offset:srclen]
        )
        dest_offset += 4

    _fill(out, dest_offset, destlen, config)

    return dest_offset


def decode_using_alphabet(
    alphabet: IAlphabet,
    dest: Union[bytearray, memoryview],
    src: Union[Source, str],
    *,
    destlen: Optional[int] = None,
    srclen: Optional[int] = None,
    config: Optional[CodecConfig] = None,
) -> int:
    """Decode a base64 buffer using a specific alphabet.

    Every group but the last must be a full quartet. The last 1 to 4 symbols
    are decoded by the tail codec, which accepts an unpadded final group
    unless config.require_padding is set.

    Args:
        alphabet: The alphabet the input was encoded with.
        dest: Writable buffer receiving the decoded bytes.
        src: The encoded symbols, as bytes or a latin-1 str.
        destlen: Usable length of dest. Defaults to len(dest).
        srclen: Number of symbols of src to decode. Defaults to len(src).
        config: Codec options. Defaults to DEFAULT_CONFIG.

    Returns:
        The number of bytes written to dest.

    Raises:
        BufferOverflowError: If destlen is smaller than decoded_length(srclen).
        InvalidInputError: If the input contains a symbol outside the alphabet
            or ends in a malformed group.
    """
    config = config or DEFAULT_CONFIG
    out = memoryview(dest).cast("B")
    data = _symbols(src)
    destlen = _bounds(len(out), destlen, "destlen")
    srclen = _bounds(len(data), srclen, "srclen")

    required = decoded_length(srclen)
    if destlen < required:
        logger.debug("decode needs %d bytes, destination holds %d", required, destlen)
        raise BufferOverflowError(required, destlen)

    if config.require_padding and srclen % 4:
        logger.debug("rejecting unpadded input of length %d", srclen)
        raise InvalidInputError(
            f"encoded length {srclen} is not a multiple of 4"
        )

    dest_offset = 0
    i = 0

    try:
        while srclen - i > 4:
            out[dest_offset : dest_offset + 3] = decode_quartet(
                alphabet, data[i : i + 4]
            )
            i += 4
            dest_offset += 3

        more = decode_tail(alphabet, data[i:srclen])
    except InvalidInputError:
        logger.debug("decode failed in the group at offset %d", i)
        raise

    out[dest_offset : dest_offset + len(more)] = more
    dest_offset += len(more)

    _fill(out, dest_offset, destlen, config)

    return dest_offset


def encode(
    dest: Union[bytearray, memoryview],
    src: Source,
    *,
    destlen: Optional[int] = None,
    srclen: Optional[int] = None,
    config: Optional[CodecConfig] = None,
) -> int:
    """Encode a buffer into base64 according to RFC 4648.

    See encode_using_alphabet for the arguments.
    """
    return encode_using_alphabet(
        RFC4648, dest, src, destlen=destlen, srclen=srclen, config=config
    )


def decode(
    dest: Union[bytearray, memoryview],
    src: Union[Source, str],
    *,
    destlen: Optional[int] = None,
    srclen: Optional[int] = None,
    config: Optional[CodecConfig] = None,
) -> int:
    """Decode an RFC 4648 base64 buffer.

    See decode_using_alphabet for the arguments.
    """
    return decode_using_alphabet(
        RFC4648, dest, src, destlen=destlen, srclen=srclen, config=config
    )
