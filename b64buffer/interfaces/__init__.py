"""b64buffer interfaces package.

This package provides protocol definitions for alphabets and for encoders
that turn whole byte strings into text and back.
"""

from .encoding import IAlphabet, IBinaryEncoder

__all__ = [
    "IAlphabet",
    "IBinaryEncoder",
]
