"""Infrastructure layer - External dependencies and implementations.

This layer wraps platform facilities, currently the operating system's
cryptographically secure random number generator.
"""
