"""Path specification normalisation."""

from __future__ import annotations

from typing import Iterable, List, Union

from .errors import InvalidPathError

PathSpec = Union[str, Iterable[str]]


def resolve(path: PathSpec) -> List[str]:
    """Normalise a path specification into a list of segments.

    A string is split on dots. Any other iterable is first joined with dots,
    so ``["server.ssl", "on"]`` and ``"server.ssl.on"`` resolve the same way.
    Segments are not validated here.

    Args:
        path: Dotted string or iterable of dotted strings.

    Returns:
        The list of segments.

    Raises:
        InvalidPathError: If ``path`` is not a string or iterable of strings.
    """
    if isinstance(path, str):
        return path.split(".")
    if isinstance(path, (bytes, bytearray)):
        raise InvalidPathError(path)
    try:
        fragments = list(path)
    except TypeError:
        raise InvalidPathError(path) from None
    if not all(isinstance(f, str) for f in fragments):
        raise InvalidPathError(path)
    return ".".join(fragments).split(".")


def is_index(segment: str) -> bool:
    """Return True when a segment addresses a list position."""
    return segment.isascii() and segment.isdigit()
