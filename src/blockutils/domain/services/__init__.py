"""Domain services for blockutils.

Random string and token generators. They depend only on a random source
and hold no state between calls.
"""

from blockutils.domain.services.randomness import (
    ALPHANUMERIC,
    ALPHANUMERIC_SPECIAL_CHARACTERS,
    ALPHANUMERIC_WITHOUT_SIMILARLY_LOOKING_CHARACTERS,
    CHARSETS,
    NUMERIC,
    Randomness,
)
from blockutils.domain.services.token import Token

__all__ = [
    "ALPHANUMERIC",
    "ALPHANUMERIC_SPECIAL_CHARACTERS",
    "ALPHANUMERIC_WITHOUT_SIMILARLY_LOOKING_CHARACTERS",
    "CHARSETS",
    "NUMERIC",
    "Randomness",
    "Token",
]
