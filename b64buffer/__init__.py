"""b64buffer: buffer-to-buffer base64 encoding.

This package transcodes between raw bytes and a 64-symbol printable alphabet,
writing into destination buffers that the caller allocates and sizes. It
supports the RFC 4648 alphabet and any caller-supplied alphabet of 64 distinct
symbols.

Main Components:
    - AlphabetTable: Bidirectional symbol mapping (RFC4648, URLSAFE or custom)
    - encode/decode: Buffer codec using the RFC 4648 alphabet
    - encode_using_alphabet/decode_using_alphabet: Buffer codec for any alphabet
    - encoded_length/decoded_length: Destination sizing
    - CodecConfig: Trailing fill and padding options

Example:
    >>> from b64buffer import decode, decoded_length
    >>> dest = bytearray(decoded_length(4))
    >>> decode(dest, b"Zm8=")
    2
    >>> bytes(dest)
    b'fo\\x00'
"""

import logging

from b64buffer.alphabet import (
    PADDING,
    RFC4648,
    URLSAFE,
    AlphabetTable,
    build_alphabet,
    char_in_alphabet,
)
from b64buffer.codec import (
    DEFAULT_CONFIG,
    CodecConfig,
    decode,
    decode_quartet,
    decode_tail,
    decode_using_alphabet,
    decoded_length,
    decoded_length_upper_bound,
    encode,
    encode_tail,
    encode_triplet,
    encode_using_alphabet,
    encoded_length,
)
from b64buffer.exceptions import (
    AlphabetError,
    Base64Error,
    BufferOverflowError,
    InvalidInputError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Alphabets
    "AlphabetTable",
    "PADDING",
    "RFC4648",
    "URLSAFE",
    "build_alphabet",
    "char_in_alphabet",
    # Codec
    "CodecConfig",
    "DEFAULT_CONFIG",
    "decode",
    "decode_quartet",
    "decode_tail",
    "decode_using_alphabet",
    "decoded_length",
    "decoded_length_upper_bound",
    "encode",
    "encode_tail",
    "encode_triplet",
    "encode_using_alphabet",
    "encoded_length",
    # Exceptions
    "Base64Error",
    "AlphabetError",
    "BufferOverflowError",
    "InvalidInputError",
]
