"""Parameter coercion helpers.

Narrow loosely-typed arguments into the strict forms the rest of a
caller's code expects.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from blockutils.core.exceptions import InvalidInputError


def coerce_file_reference(value: str | Path) -> Path:
    """Convert a path string or Path into a Path.

    Args:
        value: A filesystem path as a string, or an existing Path.

    Returns:
        The Path instance. A Path argument is returned unchanged.

    Raises:
        InvalidInputError: If value is neither a string nor a Path.

    Examples:
        >>> coerce_file_reference("/tmp/data.csv")
        PosixPath('/tmp/data.csv')
    """
    if isinstance(value, str):
        return Path(value)
    if isinstance(value, Path):
        return value

    raise InvalidInputError("The passed argument is neither string nor Path")


def coerce_string_list(value: str | Sequence[Any]) -> list[str]:
    """Convert a string or a sequence of strings into a list of strings.

    Args:
        value: A single string, or a list/tuple of strings.

    Returns:
        A new list. A single string becomes a one-element list.

    Raises:
        InvalidInputError: If value is neither a string nor a sequence, or
            if any item of the sequence is not a string.

    Examples:
        >>> coerce_string_list("a")
        ['a']
        >>> coerce_string_list(("a", "b"))
        ['a', 'b']
    """
    if isinstance(value, str):
        return [value]

    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        results: list[str] = []
        for item in value:
            if not isinstance(item, str):
                raise InvalidInputError("A single item of the passed sequence is not a string")
            results.append(item)
        return results

    raise InvalidInputError(
        "The passed argument is neither a sequence of strings, nor a string"
    )
