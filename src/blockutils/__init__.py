"""blockutils - Small static helper utilities.

Cryptographically secure random strings and hexadecimal tokens, plus
helpers that coerce loosely-typed parameters into strict forms.
"""

__version__ = "0.1.0"

from blockutils.core.exceptions import (
    BlockUtilsError,
    EntropySourceError,
    InvalidInputError,
)
from blockutils.core.params import coerce_file_reference, coerce_string_list
from blockutils.domain.services import Randomness, Token

__all__ = [
    "BlockUtilsError",
    "EntropySourceError",
    "InvalidInputError",
    "Randomness",
    "Token",
    "coerce_file_reference",
    "coerce_string_list",
    "__version__",
]
