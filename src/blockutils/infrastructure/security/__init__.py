"""Security infrastructure: access to the platform CSPRNG."""

from blockutils.infrastructure.security.secure_random import (
    RandomSource,
    SecureRandomSource,
    secure_random,
)

__all__ = ["RandomSource", "SecureRandomSource", "secure_random"]
