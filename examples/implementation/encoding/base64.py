"""Base64 encoding utilities.

This module provides an allocating base64 encoder built on the b64buffer
buffer codec, for callers that want whole values rather than buffers.
"""

from __future__ import annotations

from b64buffer import (
    PADDING,
    RFC4648,
    URLSAFE,
    AlphabetTable,
    decode_using_alphabet,
    decoded_length,
    encode_using_alphabet,
    encoded_length,
)
from b64buffer.codec import CodecConfig
from b64buffer.interfaces import IBinaryEncoder

_PAD = chr(PADDING)


class Base64(IBinaryEncoder):
    """Base64 encoder over a fixed alphabet.

    This class sizes destination buffers with encoded_length and
    decoded_length, runs the buffer codec and returns only the logical output.
    When padding is disabled the trailing "=" symbols are removed after
    encoding and restored before decoding.

    Attributes:
        alphabet: The alphabet used for both directions.
        padded: Whether encoded strings keep their padding symbols.
    """

    _config = CodecConfig(fill_byte=None)

    def __init__(self, alphabet: AlphabetTable = RFC4648, padded: bool = True) -> None:
        self.alphabet = alphabet
        self.padded = padded

    @classmethod
    def url_safe(cls) -> Base64:
        """Create an unpadded encoder for the URL and filename safe alphabet.

        Returns:
            A Base64 instance using "-" and "_" in place of "+" and "/".
        """
        return cls(URLSAFE, padded=False)

    def encode(self, data: bytes) -> str:
        """Encode bytes to a base64 string.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded string, padded if this encoder is padded.

        Example:
            >>> Base64().encode(b"fo")
            'Zm8='
            >>> Base64.url_safe().encode(b"\\xfb\\xff")
            '-_8'
        """
        dest = bytearray(encoded_length(len(data)))
        written = encode_using_alphabet(self.alphabet, dest, data, config=self._config)
        encoded = dest[:written].decode("latin-1")

        if not self.padded:
            encoded = encoded.rstrip(_PAD)

        return encoded

    def decode(self, text: str) -> bytes:
        """Decode a base64 string to bytes.

        Args:
            text: The base64 string to decode.

        Returns:
            The decoded bytes.

        Raises:
            InvalidInputError: If the string is not valid for this alphabet.
        """
        # Restore padding (base64 strings must have length divisible by 4)
        if not self.padded:
            text = text + _PAD * (-len(text) % 4)

        dest = bytearray(decoded_length(len(text)))
        written = decode_using_alphabet(self.alphabet, dest, text, config=self._config)
        return bytes(dest[:written])
