"""Base64 codec package.

This package provides the group-level codecs (single triplets and quartets,
and the padded final group) and the buffer-level driver built on top of them.
"""

from .buffer import (
    decode,
    decode_using_alphabet,
    decoded_length,
    decoded_length_upper_bound,
    encode,
    encode_using_alphabet,
    encoded_length,
)
from .config import DEFAULT_CONFIG, CodecConfig
from .tail import decode_tail, encode_tail
from .unit import decode_quartet, encode_triplet

__all__ = [
    # buffer
    "decode",
    "decode_using_alphabet",
    "decoded_length",
    "decoded_length_upper_bound",
    "encode",
    "encode_using_alphabet",
    "encoded_length",
    # config
    "CodecConfig",
    "DEFAULT_CONFIG",
    # groups
    "decode_quartet",
    "decode_tail",
    "encode_tail",
    "encode_triplet",
]
