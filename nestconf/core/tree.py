"""Path-based primitives over nested dicts, lists and scalars.

These functions operate on an arbitrary root container and a list of
segments produced by :func:`nestconf.core.path.resolve`. ``None`` stands for
an undefined value throughout.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any, List, Optional

from .errors import NotAppendableError, PathIndexError
from .path import is_index

_MISSING = object()


def _child(node: Any, segment: str) -> Any:
    """Return the child of ``node`` at ``segment`` or ``_MISSING``."""
    if isinstance(node, Mapping):
        return node.get(segment, _MISSING)
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes, bytearray)):
        if not is_index(segment):
            return _MISSING
        index = int(segment)
        if index >= len(node):
            return _MISSING
        return node[index]
    return _MISSING


def get_path(root: Any, segments: List[str], default: Optional[Any] = None) -> Any:
    """Read the value at ``segments``, never raising on a missing step.

    Args:
        root: Root container.
        segments: Resolved path segments.
        default: Returned when the walk stops early or ends on ``None``.

    Returns:
        The stored value, or ``default``. Falsy values such as ``0`` or
        ``""`` are returned as stored.
    """
    node = root
    for segment in segments:
        node = _child(node, segment)
        if node is _MISSING or node is None:
            return default
    return node


def has_path(root: Any, segments: List[str]) -> bool:
    """Truthiness check on the value at ``segments``.

    ``0``, ``False``, ``""`` and empty containers count as absent, even when
    explicitly stored. Use :func:`is_defined_path` for a presence check.
    """
    return bool(get_path(root, segments))


def is_defined_path(root: Any, segments: List[str]) -> bool:
    return get_path(root, segments) is not None


def _write(node: Any, segment: str, value: Any) -> Any:
    if isinstance(node, list):
        index = int(segment)
        if index < len(node):
            node[index] = value
        elif index == len(node):
            node.append(value)
        else:
            raise PathIndexError(segment, len(node))
    else:
        node[segment] = value
    return value


def _descend(node: Any, segment: str, keep_list: bool) -> Any:
    """Return the container below ``node`` at ``segment``.

    Missing children, scalars, and lists that the next segment would address
    by key are replaced with a fresh dict.
    """
    child = _child(node, segment)
    if isinstance(child, MutableMapping) or (keep_list and isinstance(child, list)):
        return child
    return _write(node, segment, {})


def set_path(root: MutableMapping, segments: List[str], value: Any) -> Any:
    """Write ``value`` at ``segments`` and return it.

    Missing intermediates become dicts; existing dicts and lists are reused
    in place. A list index equal to the list length appends, a larger one
    raises :class:`PathIndexError`.
    """
    node: Any = root
    for position, segment in enumerate(segments[:-1]):
        node = _descend(node, segment, is_index(segments[position + 1]))
    return _write(node, segments[-1], value)


def push_path(root: MutableMapping, segments: List[str], value: Any, path: Any = None) -> Any:
    """Append ``value`` to the list at ``segments`` and return ``value``.

    A missing value becomes a new one-element list.

    Raises:
        NotAppendableError: If a non-list value is already stored there.
    """
    existing = get_path(root, segments)
    if existing is None:
        set_path(root, segments, [value])
    elif isinstance(existing, list):
        existing.append(value)
    else:
        raise NotAppendableError(segments if path is None else path, existing)
    return value
