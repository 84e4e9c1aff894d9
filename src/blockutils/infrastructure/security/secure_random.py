"""Secure random source backed by the secrets module.

Exposes the two primitives the generators need: an unbiased bounded
integer and a buffer of random bytes. Platform failures are surfaced as
EntropySourceError; there is no fallback to a non-secure generator.
"""

import secrets
from typing import Protocol

from blockutils.core.exceptions import EntropySourceError, InvalidInputError
from blockutils.core.logging import get_logger

logger = get_logger(__name__)


class RandomSource(Protocol):
    """Protocol for random sources accepted by the generators."""

    def uniform_int(self, low: int, high: int) -> int: ...

    def random_bytes(self, count: int) -> bytes: ...


class SecureRandomSource:
    """Cryptographically secure random source using the OS CSPRNG."""

    def uniform_int(self, low: int, high: int) -> int:
        """Return a uniformly distributed integer in [low, high].

        Args:
            low: Lower bound, inclusive.
            high: Upper bound, inclusive.

        Returns:
            Random integer between low and high.

        Raises:
            InvalidInputError: If low is greater than high.
            EntropySourceError: If the platform random source fails.
        """
        if low > high:
            raise InvalidInputError("Lower bound must not exceed upper bound")

        try:
            return low + secrets.randbelow(high - low + 1)
        except (OSError, NotImplementedError) as e:
            logger.error("Secure random source failed", primitive="uniform_int", error=str(e))
            raise EntropySourceError("Secure random source failed") from e

    def random_bytes(self, count: int) -> bytes:
        """Return count cryptographically secure random bytes.

        Raises:
            InvalidInputError: If count is negative.
            EntropySourceError: If the platform random source fails.
        """
        if count < 0:
            raise InvalidInputError("Byte count must not be negative")

        try:
            return secrets.token_bytes(count)
        except (OSError, NotImplementedError) as e:
            logger.error("Secure random source failed", primitive="random_bytes", error=str(e))
            raise EntropySourceError("Secure random source failed") from e


# Global source instance
secure_random = SecureRandomSource()
