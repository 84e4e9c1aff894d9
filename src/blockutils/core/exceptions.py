"""Exceptions raised by blockutils.

All errors derive from BlockUtilsError so callers can catch the whole
family in one place. Neither error type is ever retried internally.
"""


class BlockUtilsError(Exception):
    """Base exception for blockutils errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidInputError(BlockUtilsError, ValueError):
    """Raised when a caller passes an out-of-contract value.

    Examples are a non-positive length, an empty or multi-byte character
    set, or a parameter of the wrong type. Always raised before any
    entropy is consumed.
    """

    pass


class EntropySourceError(BlockUtilsError):
    """Raised when the platform's secure random source fails."""

    pass
