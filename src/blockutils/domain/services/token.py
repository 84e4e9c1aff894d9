"""Hexadecimal token generation service."""

from blockutils.core.logging import get_logger
from blockutils.domain.services.randomness import validate_length
from blockutils.infrastructure.security.secure_random import RandomSource, secure_random

logger = get_logger(__name__)


class Token:
    """Cryptographically secure hexadecimal token generator.

    Cheaper than Randomness.generate_string() when the alphabet is exactly
    0-9a-f: each random byte yields two hex characters without a bounded
    integer draw per character.
    """

    @staticmethod
    def generate(length: int, source: RandomSource | None = None) -> str:
        """Generate a lowercase hexadecimal token.

        Args:
            length: Number of hex characters. Must be positive.
            source: Random source to draw from. Defaults to the OS CSPRNG.

        Returns:
            A string matching [0-9a-f]{length}.

        Raises:
            InvalidInputError: If length is not a positive integer.
            EntropySourceError: If the random source fails.

        Examples:
            >>> len(Token.generate(15))
            15
        """
        validate_length(length)
        if source is None:
            source = secure_random

        # Two hex characters per byte; an odd length drops the last nibble
        bytes_needed = (length + 1) // 2
        token = source.random_bytes(bytes_needed).hex()

        logger.debug("Token generated", length=length, bytes_drawn=bytes_needed)
        return token[:length]
