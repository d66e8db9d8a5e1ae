"""Encoding reference implementation package.

This package provides reference implementations built on the b64buffer codec,
showing how callers size and own their buffers.
"""

from .base64 import Base64

__all__ = [
    "Base64",
]
