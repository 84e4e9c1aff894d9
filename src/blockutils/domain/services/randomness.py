"""Random string generation service.

Generates strings of a requested length from a character set, drawing
each position independently from a cryptographically secure source.
"""

from types import MappingProxyType

from blockutils.core.exceptions import InvalidInputError
from blockutils.core.logging import get_logger
from blockutils.infrastructure.security.secure_random import RandomSource, secure_random

logger = get_logger(__name__)

NUMERIC = "0123456789"

ALPHANUMERIC = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

# Human-readable subset: drops I, O, S, Z, 0, 1, 2, 5 and all lowercase.
ALPHANUMERIC_WITHOUT_SIMILARLY_LOOKING_CHARACTERS = "ABCDEFGHJKLMNPQRTUVWXY346789"

ALPHANUMERIC_SPECIAL_CHARACTERS = ALPHANUMERIC + "~!@#$%^&*()_-+={}[]\\|:;,./"

CHARSETS = MappingProxyType(
    {
        "numeric": NUMERIC,
        "alphanumeric": ALPHANUMERIC,
        "human": ALPHANUMERIC_WITHOUT_SIMILARLY_LOOKING_CHARACTERS,
        "special": ALPHANUMERIC_SPECIAL_CHARACTERS,
    }
)


def validate_length(length: int) -> int:
    """Validate a requested output length.

    Raises:
        InvalidInputError: If length is not a positive integer.
    """
    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidInputError("Length must be a positive integer")
    return length


def validate_charset(charset: str) -> str:
    """Validate a character set for byte-offset selection.

    Every character must encode to a single byte, which for UTF-8 means
    the charset has to be pure ASCII.

    Raises:
        InvalidInputError: If the charset is not a string, is empty, or
            contains multi-byte characters.
    """
    if not isinstance(charset, str):
        raise InvalidInputError("Character set must be a string")

    if not charset:
        raise InvalidInputError("Character set cannot be empty")

    if not charset.isascii():
        raise InvalidInputError("Character set must contain only single-byte characters")

    return charset


class Randomness:
    """Cryptographically secure random string generator.

    Example:
        >>> len(Randomness.generate_string(12))
        12
        >>> Randomness.generate_string(3, "A")
        'AAA'
    """

    NUMERIC = NUMERIC
    ALPHANUMERIC = ALPHANUMERIC
    ALPHANUMERIC_WITHOUT_SIMILARLY_LOOKING_CHARACTERS = (
        ALPHANUMERIC_WITHOUT_SIMILARLY_LOOKING_CHARACTERS
    )
    ALPHANUMERIC_SPECIAL_CHARACTERS = ALPHANUMERIC_SPECIAL_CHARACTERS

    @staticmethod
    def generate_string(
        length: int,
        charset: str | None = None,
        source: RandomSource | None = None,
    ) -> str:
        """Generate a random string of the given length.

        Args:
            length: Number of characters to generate. Must be positive.
            charset: Characters to draw from. Defaults to
                ALPHANUMERIC_SPECIAL_CHARACTERS.
            source: Random source to draw from. Defaults to the OS CSPRNG.

        Returns:
            A string of exactly `length` characters from `charset`.

        Raises:
            InvalidInputError: If length or charset is invalid.
            EntropySourceError: If the random source fails.
        """
        validate_length(length)
        chars = validate_charset(
            ALPHANUMERIC_SPECIAL_CHARACTERS if charset is None else charset
        )
        if source is None:
            source = secure_random

        upper = len(chars) - 1
        result = "".join(chars[source.uniform_int(0, upper)] for _ in range(length))

        logger.debug("Random string generated", length=length, charset_size=len(chars))
        return result
