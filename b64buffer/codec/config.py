"""Configuration for the buffer codec.

This module provides the CodecConfig dataclass, which selects the optional
behaviours of encode and decode calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for buffer encode and decode operations.

    Attributes:
        fill_byte: Value written to the destination bytes past the logical
            output, so the destination can be used as a bounded string.
            None leaves those bytes untouched.
        require_padding: Reject encoded input whose length is not a multiple
            of 4 instead of decoding an unpadded final group.
    """

    fill_byte: Optional[int] = 0
    require_padding: bool = False

    def __post_init__(self) -> None:
        if self.fill_byte is not None and not 0 <= self.fill_byte <= 0xFF:
            raise ValueError(f"fill_byte must be a byte value, got {self.fill_byte}")


DEFAULT_CONFIG = CodecConfig()
